"""
Pydantic models shared by the chatbot and the population pipeline.
"""

from typing import FrozenSet, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Knowledge Base ───────────────────────────────────────
class KnowledgeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: FrozenSet[str] = Field(min_length=1)
    response: str = Field(min_length=1)

    @field_validator("keywords", mode="before")
    @classmethod
    def _normalize_keywords(cls, value):
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("keywords must be a list of strings")
        return frozenset(str(k).strip().lower() for k in value if str(k).strip())

    @field_validator("response", mode="before")
    @classmethod
    def _strip_response(cls, value):
        return value.strip() if isinstance(value, str) else value


# ── Sentiment ────────────────────────────────────────────
SentimentLabel = Literal["positive", "neutral", "negative"]


class SentimentResult(BaseModel):
    score: float
    label: SentimentLabel


# ── Conversation ─────────────────────────────────────────
class UserTurn(BaseModel):
    raw_input: str
    normalized_input: str
    tokens: List[str] = []
    sentiment: SentimentResult
    response: str


# ── Analytics ────────────────────────────────────────────
class AnalyticsRecord(BaseModel):
    input: str
    response: str


class DispatchOutcome(BaseModel):
    record: AnalyticsRecord
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


# ── Population ───────────────────────────────────────────
class PopulationPoint(BaseModel):
    year: int
    population: float


class LinearFit(BaseModel):
    slope: float
    intercept: float

    def predict(self, year: float) -> float:
        return self.slope * year + self.intercept


class PopulationProjection(BaseModel):
    history: List[PopulationPoint]
    fit: LinearFit
    projected: List[PopulationPoint]
