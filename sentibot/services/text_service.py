"""
Input normalization and word tokenization.
"""

from typing import List

from nltk.tokenize import RegexpTokenizer

_word_tokenizer = RegexpTokenizer(r"\w+")


def normalize(text: str) -> str:
    """Lowercase and trim raw user input."""
    return text.lower().strip()


def tokenize(text: str) -> List[str]:
    """Split text into word tokens, in order, duplicates kept."""
    if not text:
        return []
    return _word_tokenizer.tokenize(text)
