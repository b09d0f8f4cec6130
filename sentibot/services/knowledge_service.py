"""
Static knowledge base: loading and first-match keyword lookup.
"""

import json
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from loguru import logger
from pydantic import ValidationError

from sentibot.models.schemas import KnowledgeEntry

FALLBACK_RESPONSE = "I'm sorry, I don't understand. Can you please rephrase your question?"

DEFAULT_KNOWLEDGE_BASE = Path(__file__).resolve().parent.parent / "data" / "knowledge_base.json"


class KnowledgeBaseError(ValueError):
    """Raised when the knowledge base file cannot be read or is malformed."""


def load_knowledge_base(path: Optional[Union[str, Path]] = None) -> Tuple[KnowledgeEntry, ...]:
    """
    Read a JSON array of ``{"keywords": [...], "response": "..."}`` records.

    File order is kept: earlier entries win when several match.
    """
    filepath = Path(path) if path else DEFAULT_KNOWLEDGE_BASE

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise KnowledgeBaseError(f"Knowledge base not found: {filepath}") from e
    except json.JSONDecodeError as e:
        raise KnowledgeBaseError(f"Knowledge base {filepath} is not valid JSON: {e}") from e

    if not isinstance(raw, list):
        raise KnowledgeBaseError(
            f"Knowledge base {filepath} must be a JSON array, got {type(raw).__name__}"
        )

    entries = []
    for i, record in enumerate(raw):
        try:
            entries.append(KnowledgeEntry.model_validate(record))
        except ValidationError as e:
            raise KnowledgeBaseError(f"Malformed entry #{i} in {filepath}: {e}") from e

    logger.info(f"Loaded {len(entries)} knowledge entries from {filepath}")
    return tuple(entries)


def match(tokens: Iterable[str], entries: Sequence[KnowledgeEntry]) -> str:
    """Response of the first entry sharing a keyword with the tokens, else the fallback."""
    token_set = set(tokens)
    if not token_set:
        return FALLBACK_RESPONSE

    for entry in entries:
        if not token_set.isdisjoint(entry.keywords):
            return entry.response

    return FALLBACK_RESPONSE
