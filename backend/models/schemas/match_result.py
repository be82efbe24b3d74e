"""Profile-to-requirements gap analysis."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MatchType(str, Enum):
    DIRECT = "direct"
    PARTIAL = "partial"  # matched through a synonym alias
    GAP = "gap"


class MatchItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    term: str
    match_type: MatchType
    evidence: str | None = None  # direct / partial only
    suggestion: str | None = None  # gap only


class MatchResult(BaseModel):
    """Snapshot of one matching run.

    direct, partial and gap are disjoint and together cover every
    requirement exactly once.
    """

    model_config = ConfigDict(frozen=True)

    match_percent: int = Field(100, ge=0, le=100)
    direct: list[MatchItem] = []
    partial: list[MatchItem] = []
    gap: list[MatchItem] = []
    recommendations: list[str] = []

    @property
    def total(self) -> int:
        return len(self.direct) + len(self.partial) + len(self.gap)
