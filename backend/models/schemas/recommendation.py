"""Deficiency signals consumed by the recommendation generator."""

from pydantic import BaseModel, ConfigDict


class ScoreSignals(BaseModel):
    """What a document score says is wrong with the document."""

    model_config = ConfigDict(frozen=True)

    ats_score: int = 0
    recruiter_score: int = 0
    missing_keywords: list[str] = []
    metrics_score: int = 0
    action_verb_score: int = 0
    readability_score: int = 100
    section_score: int = 100
    sections_found: list[str] = []
    word_count: int = 0
    document_excerpt: str = ""


class MatchSignals(BaseModel):
    """What a profile match says is missing from the candidate profile."""

    model_config = ConfigDict(frozen=True)

    total_requirements: int = 0
    direct_count: int = 0
    partial_terms: list[str] = []
    gap_terms: list[str] = []  # weight desc
    gap_suggestions: list[str] = []  # aligned with gap_terms
    profile_excerpt: str = ""
