"""Keyword chatbot with sentiment reactions, plus a world population projection job."""

__version__ = "1.0.0"
