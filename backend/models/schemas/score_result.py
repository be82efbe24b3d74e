"""Document quality scores: ATS screenability and recruiter appeal."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

Score = Annotated[int, Field(ge=0, le=100)]


class AtsBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_coverage: Score = 0
    format_score: Score = 0  # constant 100 from the scorer, kept for compatibility
    section_score: Score = 0
    length_score: Score = 0


class ReviewerBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    metrics_score: Score = 0
    action_verb_score: Score = 0
    readability_score: Score = 0


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    ats: AtsBreakdown = AtsBreakdown()
    reviewer: ReviewerBreakdown = ReviewerBreakdown()


class ScoreResult(BaseModel):
    """Immutable scoring snapshot. Re-scoring yields a new instance."""

    model_config = ConfigDict(frozen=True)

    ats_score: Score = 0
    recruiter_score: Score = 0
    breakdown: ScoreBreakdown = ScoreBreakdown()
    missing_keywords: list[str] = []  # weight desc
    recommendations: list[str] = []
    # Scoring transparency fields
    sections_found: list[str] = []
    word_count: int = Field(0, ge=0)
