from pydantic import BaseModel, Field

from models.schemas.profile import CandidateProfile
from models.schemas.requirement import Requirement


class AnalyzeJobRequest(BaseModel):
    title: str = Field("", max_length=300, description="Job title")
    description: str = Field(..., max_length=50000, description="Job posting body text")


class MatchRequest(BaseModel):
    requirements: list[Requirement] = Field(..., max_length=100)
    profile_skills: list[str] = []
    profile_text: str = Field("", description="Concatenated profile free text")
    profile: CandidateProfile | None = Field(
        None, description="Structured profile; takes precedence over skills/text"
    )


class ScoreRequest(BaseModel):
    plain_text: str = Field(..., description="Rendered document as plain text")
    bullets: list[str] | None = Field(
        None, description="Bullet lines; extracted from plain_text when omitted"
    )
    requirements: list[Requirement] = Field([], max_length=100)
