"""Gap analysis: classify each job requirement against a candidate profile.

direct  - term appears verbatim in the skill list or profile text
partial - some synonym of the term appears (half credit)
gap     - neither; a suggestion is attached
"""

import logging
from collections.abc import Callable, Mapping, Sequence

from models.schemas.match_result import MatchItem, MatchResult, MatchType
from models.schemas.profile import CandidateProfile
from models.schemas.recommendation import MatchSignals
from models.schemas.requirement import Requirement
from services.recommendations import match_recommendations
from services.score_math import clamp_score
from services.synonyms import SynonymResolver, default_resolver

logger = logging.getLogger(__name__)

PARTIAL_CREDIT = 0.5
EXCERPT_CHARS = 300

GAP_HINTS: dict[str, str] = {
    "python": "Consider adding Python projects or courses to your profile",
    "kubernetes": "K8s experience is valuable - consider container orchestration training",
    "aws": "Cloud skills are in demand - explore AWS certifications",
    "leadership": "Highlight team lead or mentoring experiences",
}


def gap_suggestion(
    term: str,
    hints: Mapping[str, str] = GAP_HINTS,
    resolver: SynonymResolver = default_resolver,
) -> str:
    """Hint for the term or its canonical form ("k8s" gets the kubernetes hint)."""
    hint = hints.get(term.lower()) or hints.get(resolver.canonical(term))
    return hint or f"Consider gaining experience with {term}"


def _in_profile(variant: str, skills: dict[str, str], text: str) -> bool:
    return variant in skills or variant in text


def _simple_evidence(term: str, skills: dict[str, str]) -> str:
    if term in skills:
        return f"Listed in Skills: {skills[term]}"
    return "Found in profile"


def _classify(
    requirements: Sequence[Requirement],
    skills: dict[str, str],
    text: str,
    evidence_for: Callable[[str], str],
    resolver: SynonymResolver,
    hints: Mapping[str, str],
) -> tuple[list[MatchItem], list[MatchItem], list[MatchItem]]:
    direct: list[MatchItem] = []
    partial: list[MatchItem] = []
    gap: list[MatchItem] = []

    for req in requirements:
        term = req.term.lower()

        if _in_profile(term, skills, text):
            direct.append(MatchItem(
                term=req.term, match_type=MatchType.DIRECT, evidence=evidence_for(term),
            ))
            continue

        related = next(
            (v for v in resolver.variants_of(term) if _in_profile(v, skills, text)),
            None,
        )
        if related is not None:
            partial.append(MatchItem(
                term=req.term,
                match_type=MatchType.PARTIAL,
                evidence=f"Found related skill: {related}",
            ))
            continue

        gap.append(MatchItem(
            term=req.term,
            match_type=MatchType.GAP,
            suggestion=gap_suggestion(req.term, hints, resolver),
        ))

    return direct, partial, gap


def compute_match_percent(n_direct: int, n_partial: int, n_total: int) -> int:
    if n_total == 0:
        return 100
    return clamp_score(100 * (n_direct + PARTIAL_CREDIT * n_partial) / n_total)


def match_signals(result: MatchResult, profile_text: str = "") -> MatchSignals:
    """Deficiency signals of a match, for the recommendation generator."""
    return MatchSignals(
        total_requirements=result.total,
        direct_count=len(result.direct),
        partial_terms=[item.term for item in result.partial],
        gap_terms=[item.term for item in result.gap],
        gap_suggestions=[item.suggestion for item in result.gap if item.suggestion],
        profile_excerpt=profile_text[:EXCERPT_CHARS],
    )


def _build_result(
    requirements: Sequence[Requirement],
    direct: list[MatchItem],
    partial: list[MatchItem],
    gap: list[MatchItem],
    profile_text: str,
) -> MatchResult:
    assert len(direct) + len(partial) + len(gap) == len(requirements)
    result = MatchResult(
        match_percent=compute_match_percent(len(direct), len(partial), len(requirements)),
        direct=direct,
        partial=partial,
        gap=gap,
    )
    recs = match_recommendations(match_signals(result, profile_text))
    logger.info(
        "Matched %d requirements: %d direct, %d partial, %d gaps (%d%%)",
        len(requirements), len(direct), len(partial), len(gap), result.match_percent,
    )
    return result.model_copy(update={"recommendations": recs})


def match_requirements(
    requirements: Sequence[Requirement],
    profile_skills: Sequence[str],
    profile_text: str,
    *,
    resolver: SynonymResolver = default_resolver,
    gap_hints: Mapping[str, str] = GAP_HINTS,
) -> MatchResult:
    """Classify every requirement as direct, partial or gap.

    An empty requirement list matches 100% with all lists empty.
    """
    skills = {s.lower().strip(): s for s in profile_skills if s and s.strip()}
    text = (profile_text or "").lower()

    direct, partial, gap = _classify(
        requirements,
        skills,
        text,
        lambda term: _simple_evidence(term, skills),
        resolver,
        gap_hints,
    )
    return _build_result(requirements, direct, partial, gap, text)


def _profile_evidence(term: str, profile: CandidateProfile, skills: dict[str, str]) -> str:
    if term in skills:
        return f"Listed in Skills: {skills[term]}"
    for exp in profile.experiences:
        if term in exp.description.lower() or term in exp.title.lower():
            return f"Found in experience: {exp.title}"
    for proj in profile.projects:
        if term in proj.description.lower() or term in proj.name.lower():
            return f"Found in project: {proj.name}"
    return "Found in profile"


def match_profile(
    profile: CandidateProfile,
    requirements: Sequence[Requirement],
    *,
    resolver: SynonymResolver = default_resolver,
    gap_hints: Mapping[str, str] = GAP_HINTS,
) -> MatchResult:
    """Same classification as match_requirements, citing the record a term came from."""
    skills = {s.lower().strip(): s for s in profile.skills if s and s.strip()}
    text = profile.profile_text()

    direct, partial, gap = _classify(
        requirements,
        skills,
        text,
        lambda term: _profile_evidence(term, profile, skills),
        resolver,
        gap_hints,
    )
    return _build_result(requirements, direct, partial, gap, text)
