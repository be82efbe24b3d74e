"""Recommendation generation.

Two paths with the same output shape:

1. Rule-based (always runs, system of record): one templated sentence
   per deficiency signal, in fixed priority order, at most five.
2. Language model (best effort): when a client is configured, a bounded
   prompt asks for a JSON array of at most five strings. The reply
   replaces the rule-based list only if it arrives within the timeout
   and is well formed; otherwise the rule-based list is returned.
"""

import asyncio
import logging
from typing import Any

from config import settings
from models.schemas.recommendation import MatchSignals, ScoreSignals
from services.llm_client import JSONGenerator
from services.prompt_builder import (
    build_match_recommendation_prompt,
    build_score_recommendation_prompt,
)
from services.section_parser import EXPECTED_SECTIONS

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

METRICS_THRESHOLD = 50
ACTION_VERB_THRESHOLD = 70
READABILITY_THRESHOLD = 70
WELL_OPTIMIZED_THRESHOLD = 80
MIN_WORDS = 400
MAX_WORDS = 800


# ---------------------------------------------------------------------------
# Rule-based path
# ---------------------------------------------------------------------------

def score_recommendations(signals: ScoreSignals) -> list[str]:
    """Templated fixes for a scored document, highest priority first."""
    recs: list[str] = []

    if signals.missing_keywords:
        recs.append(
            "Add these keywords to improve ATS score: "
            + ", ".join(signals.missing_keywords[:5])
        )
    if signals.metrics_score < METRICS_THRESHOLD:
        recs.append("Add more quantified achievements (numbers, percentages) to your bullets")
    if signals.action_verb_score < ACTION_VERB_THRESHOLD:
        recs.append("Start more bullet points with strong action verbs (Led, Developed, Increased)")
    if "summary" not in signals.sections_found:
        recs.append("Consider adding a Professional Summary section")

    missing_sections = [s for s in EXPECTED_SECTIONS if s not in signals.sections_found]
    if missing_sections:
        recs.append(
            "Use standard section headings so screeners can parse your document: "
            + ", ".join(s.title() for s in missing_sections)
        )
    if 0 < signals.word_count < MIN_WORDS:
        recs.append(
            f"Expand your document to at least {MIN_WORDS} words "
            f"(currently {signals.word_count})"
        )
    elif signals.word_count > MAX_WORDS:
        recs.append(
            f"Trim your document to at most {MAX_WORDS} words "
            f"(currently {signals.word_count})"
        )
    if signals.readability_score < READABILITY_THRESHOLD:
        recs.append("Keep bullet points close to 15 words so they are quick to scan")
    if (
        signals.ats_score >= WELL_OPTIMIZED_THRESHOLD
        and signals.recruiter_score >= WELL_OPTIMIZED_THRESHOLD
    ):
        recs.append("Your resume is well-optimized! Consider minor tweaks for specific roles.")
    if not recs:
        recs.append("Mirror the job posting's wording in your summary to lift keyword coverage further")

    return recs[:MAX_RECOMMENDATIONS]


def match_recommendations(signals: MatchSignals) -> list[str]:
    """Templated advice for closing a profile's gaps, highest priority first."""
    if signals.total_requirements == 0:
        return []

    recs: list[str] = []
    if signals.gap_terms:
        recs.append(
            "Close the biggest gaps first: " + ", ".join(signals.gap_terms[:3])
        )
    if signals.partial_terms:
        recs.append(
            "Use the job's exact wording for related skills you already have: "
            + ", ".join(signals.partial_terms[:3])
        )
    if signals.direct_count * 2 < signals.total_requirements:
        recs.append(
            f"Only {signals.direct_count} of {signals.total_requirements} job keywords "
            "appear in your profile; tailor your summary and experience to this role"
        )
    for suggestion in signals.gap_suggestions:
        if suggestion not in recs:
            recs.append(suggestion)
    if not signals.gap_terms:
        recs.append(
            "Your profile covers every extracted requirement; lead with the strongest matches"
        )

    return recs[:MAX_RECOMMENDATIONS]


def rule_based_recommendations(signals: ScoreSignals | MatchSignals) -> list[str]:
    if isinstance(signals, ScoreSignals):
        return score_recommendations(signals)
    return match_recommendations(signals)


# ---------------------------------------------------------------------------
# Language-model path
# ---------------------------------------------------------------------------

def _clean_llm_recommendations(payload: Any) -> list[str] | None:
    """Validate the model reply: a non-empty JSON array of non-blank strings."""
    if not isinstance(payload, list) or not payload:
        return None
    if not all(isinstance(item, str) and item.strip() for item in payload):
        return None
    return [item.strip() for item in payload[:MAX_RECOMMENDATIONS]]


def _build_prompt(signals: ScoreSignals | MatchSignals) -> str:
    if isinstance(signals, ScoreSignals):
        return build_score_recommendation_prompt(signals)
    return build_match_recommendation_prompt(signals)


async def recommend(
    signals: ScoreSignals | MatchSignals,
    llm: JSONGenerator | None = None,
    *,
    timeout_seconds: float | None = None,
) -> list[str]:
    """At most five recommendations; never raises on collaborator failure."""
    fallback = rule_based_recommendations(signals)
    if llm is None:
        return fallback

    timeout = settings.llm_timeout_seconds if timeout_seconds is None else timeout_seconds
    try:
        payload = await asyncio.wait_for(
            llm.generate_json(
                _build_prompt(signals),
                temperature=settings.llm_temperature,
                max_output_tokens=settings.llm_max_output_tokens,
            ),
            timeout=timeout,
        )
    except asyncio.TimeoutError:
        logger.warning("LLM recommendations timed out after %.1fs, using rule-based", timeout)
        return fallback
    except Exception as e:
        logger.warning("LLM recommendations failed (%s), using rule-based", e)
        return fallback

    cleaned = _clean_llm_recommendations(payload)
    if cleaned is None:
        logger.warning("LLM returned no usable recommendations, using rule-based")
        return fallback
    return cleaned
