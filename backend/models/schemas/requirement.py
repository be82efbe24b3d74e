"""Job posting requirement model produced by the requirement extractor."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RequirementCategory(str, Enum):
    REQUIRED = "required"
    PREFERRED = "preferred"
    GENERAL = "general"


class Requirement(BaseModel):
    """A weighted, categorized term extracted from a job posting.

    Frozen: the category is assigned once during extraction and the
    weight is the additive total of every context that contributed it.
    """

    model_config = ConfigDict(frozen=True)

    term: str = Field(..., min_length=1)
    weight: int = Field(..., ge=0)
    category: RequirementCategory = RequirementCategory.GENERAL


class JobAnalysis(BaseModel):
    """Structured output of a single job posting analysis."""

    model_config = ConfigDict(frozen=True)

    requirements: list[Requirement] = []  # weight desc, at most 20, unique terms
    experience_level: str | None = None  # Junior | Mid-Level | Senior
    responsibilities: list[str] = []
    required_skills: list[str] = []
    preferred_skills: list[str] = []
