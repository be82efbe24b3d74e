"""Entry points of the job-fit pipeline.

Flow:
    title + body_text
      └─ analyze_job_posting()            → JobAnalysis (requirements model)
    requirements + profile skills/text
      └─ match_profile_to_requirements()  → MatchResult
    document text + bullets + requirements
      └─ score_document()                 → ScoreResult

The synchronous entry points are pure and use rule-based
recommendations. The async ``*_with_recommendations`` variants return a
new snapshot whose recommendations may have been rewritten by the
language model, falling back to the rule-based list on any failure.
"""

import logging
from collections.abc import Sequence

from models.schemas.match_result import MatchResult
from models.schemas.profile import CandidateProfile
from models.schemas.requirement import JobAnalysis, Requirement
from models.schemas.score_result import ScoreResult
from services import document_scorer, profile_matcher, requirement_extractor
from services.llm_client import JSONGenerator
from services.recommendations import recommend

logger = logging.getLogger(__name__)


def analyze_job_posting(title: str, body_text: str) -> JobAnalysis:
    return requirement_extractor.analyze_job_posting(title, body_text)


def match_profile_to_requirements(
    requirements: Sequence[Requirement],
    profile_skills: Sequence[str],
    profile_text: str,
) -> MatchResult:
    return profile_matcher.match_requirements(requirements, profile_skills, profile_text)


def score_document(
    plain_text: str,
    bullets: Sequence[str],
    requirements: Sequence[Requirement],
) -> ScoreResult:
    return document_scorer.score_document(plain_text, bullets, requirements)


async def match_profile_with_recommendations(
    requirements: Sequence[Requirement],
    profile_skills: Sequence[str] = (),
    profile_text: str = "",
    *,
    profile: CandidateProfile | None = None,
    llm: JSONGenerator | None = None,
) -> MatchResult:
    """Match, then let the language model phrase the recommendations if configured.

    When ``profile`` is given it takes precedence over the flat skills/text
    arguments and evidence cites the experience or project it came from.
    """
    if profile is not None:
        result = profile_matcher.match_profile(profile, requirements)
        text = profile.profile_text()
    else:
        result = profile_matcher.match_requirements(requirements, profile_skills, profile_text)
        text = (profile_text or "").lower()

    if llm is None:
        return result
    recs = await recommend(profile_matcher.match_signals(result, text), llm)
    return result.model_copy(update={"recommendations": recs})


async def score_document_with_recommendations(
    plain_text: str,
    bullets: Sequence[str],
    requirements: Sequence[Requirement],
    *,
    llm: JSONGenerator | None = None,
) -> ScoreResult:
    """Score, then let the language model phrase the recommendations if configured."""
    result = document_scorer.score_document(plain_text, bullets, requirements)
    if llm is None:
        return result
    recs = await recommend(document_scorer.score_signals(result, plain_text), llm)
    return result.model_copy(update={"recommendations": recs})
