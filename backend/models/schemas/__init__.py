"""Pydantic contracts shared by the extraction, matching and scoring services."""

from models.schemas.match_result import MatchItem, MatchResult, MatchType
from models.schemas.profile import CandidateProfile, ProfileExperience, ProfileProject
from models.schemas.recommendation import MatchSignals, ScoreSignals
from models.schemas.requirement import JobAnalysis, Requirement, RequirementCategory
from models.schemas.score_result import (
    AtsBreakdown,
    ReviewerBreakdown,
    ScoreBreakdown,
    ScoreResult,
)

__all__ = [
    "AtsBreakdown",
    "CandidateProfile",
    "JobAnalysis",
    "MatchItem",
    "MatchResult",
    "MatchSignals",
    "MatchType",
    "ProfileExperience",
    "ProfileProject",
    "Requirement",
    "RequirementCategory",
    "ReviewerBreakdown",
    "ScoreBreakdown",
    "ScoreResult",
    "ScoreSignals",
]
