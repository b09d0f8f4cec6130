"""
Sentiment scoring and labeling.
"""

from textblob import TextBlob
from loguru import logger

from sentibot.models.schemas import SentimentLabel, SentimentResult
from sentibot.services.text_service import normalize

REACTIONS = {
    "positive": "I'm glad to hear that!",
    "negative": "I'm sorry to hear that.",
    "neutral": "I see.",
}


def score(text: str) -> float:
    """Signed polarity of the normalized text (-1.0 … 1.0)."""
    normalized = normalize(text)
    if not normalized:
        return 0.0
    return TextBlob(normalized).sentiment.polarity


def label_for(value: float) -> SentimentLabel:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return "neutral"


def classify(text: str) -> SentimentResult:
    """
    Return the sentiment score of the text and its positive / neutral / negative label.
    """
    value = score(text)
    result = SentimentResult(score=value, label=label_for(value))
    logger.debug(f"Sentiment: {result}")
    return result


def reaction(label: SentimentLabel) -> str:
    return REACTIONS[label]
