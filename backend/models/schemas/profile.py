"""Candidate profile record as assembled by the caller."""

from pydantic import BaseModel, ConfigDict


class ProfileExperience(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    company: str = ""
    description: str = ""


class ProfileProject(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    description: str = ""


class CandidateProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    skills: list[str] = []
    summary: str | None = None
    experiences: list[ProfileExperience] = []
    projects: list[ProfileProject] = []

    def profile_text(self) -> str:
        """Concatenate the free-text fields into one lowercase blob for matching."""
        parts: list[str] = []
        if self.summary:
            parts.append(self.summary)
        for exp in self.experiences:
            parts.extend((exp.title, exp.company, exp.description))
        for proj in self.projects:
            parts.extend((proj.name, proj.description))
        return " ".join(parts).lower()
