"""Document scoring: ATS screenability and recruiter appeal.

ATS composite (keyword coverage 40%, format 20%, sections 20%, length 20%)
models automated keyword/format screening. Recruiter composite
(metrics 40%, action verbs 30%, readability 30%) models the human
reviewer's impression of the bullet list. Every function here is pure.
"""

import logging
import math
import re
from collections.abc import Iterable, Sequence

from models.schemas.recommendation import ScoreSignals
from models.schemas.requirement import Requirement
from models.schemas.score_result import (
    AtsBreakdown,
    ReviewerBreakdown,
    ScoreBreakdown,
    ScoreResult,
)
from services.document_parser import count_words
from services.recommendations import score_recommendations
from services.score_math import clamp_score, round_half_up
from services.section_parser import EXPECTED_SECTIONS, detect_sections

logger = logging.getLogger(__name__)

# Strong past-tense action verbs for bullet openings
ACTION_VERBS: frozenset[str] = frozenset({
    "achieved", "administered", "analyzed", "architected", "automated",
    "built", "collaborated", "coordinated", "created", "decreased",
    "delivered", "designed", "developed", "directed", "drove",
    "enabled", "engineered", "established", "executed", "expanded",
    "facilitated", "generated", "grew", "headed", "implemented",
    "improved", "increased", "influenced", "initiated", "innovated",
    "integrated", "introduced", "launched", "led", "leveraged",
    "managed", "maximized", "mentored", "migrated", "modernized",
    "optimized", "orchestrated", "organized", "oversaw", "pioneered",
    "produced", "reduced", "refactored", "redesigned", "scaled",
    "spearheaded", "standardized", "streamlined", "strengthened",
    "supervised", "transformed", "unified", "upgraded",
})

# Composite weights
W_KEYWORDS = 0.4
W_FORMAT = 0.2
W_SECTIONS = 0.2
W_LENGTH = 0.2
W_METRICS = 0.4
W_VERBS = 0.3
W_READABILITY = 0.3

FORMAT_SCORE = 100  # layout is guaranteed by the upstream template renderer
SECTION_PENALTY = 20
MIN_WORDS = 400
MAX_WORDS = 800
METRIC_POINTS = 8
IDEAL_BULLET_WORDS = 15
EXCERPT_CHARS = 500

_DIGIT_RE = re.compile(r"\d")


def _contains(lower_text: str, term: str) -> bool:
    return term.lower() in lower_text


# ---------------------------------------------------------------------------
# ATS sub-scores
# ---------------------------------------------------------------------------

def keyword_coverage(
    plain_text: str, requirements: Sequence[Requirement]
) -> tuple[int, list[str]]:
    """Weighted share of requirement terms present verbatim, plus the missing ones.

    Vacuously 100 with no requirements (or zero total weight).
    """
    if not requirements:
        return 100, []

    lower = plain_text.lower()
    matched_weight = 0
    total_weight = 0
    missing: list[Requirement] = []
    for req in requirements:
        total_weight += req.weight
        if _contains(lower, req.term):
            matched_weight += req.weight
        else:
            missing.append(req)

    # stable sort keeps the caller's order among equal weights
    missing_terms = [r.term for r in sorted(missing, key=lambda r: r.weight, reverse=True)]
    if total_weight == 0:
        return 100, missing_terms
    return clamp_score(100 * matched_weight / total_weight), missing_terms


def section_score(sections_found: Iterable[str]) -> int:
    found = set(sections_found)
    missing = sum(1 for s in EXPECTED_SECTIONS if s not in found)
    return max(0, 100 - SECTION_PENALTY * missing)


def length_score(word_count: int) -> int:
    """100 inside [400, 800], minus a point per 10 words outside it."""
    if word_count <= 0:
        return 0
    if MIN_WORDS <= word_count <= MAX_WORDS:
        return 100
    if word_count < MIN_WORDS:
        return max(0, 100 - (MIN_WORDS - word_count) // 10)
    return max(0, 100 - (word_count - MAX_WORDS) // 10)


# ---------------------------------------------------------------------------
# Recruiter sub-scores
# ---------------------------------------------------------------------------

def metrics_score(bullets: Sequence[str]) -> int:
    """8 points per quantified bullet, saturating at 12+."""
    quantified = sum(1 for b in bullets if _DIGIT_RE.search(b))
    return min(100, METRIC_POINTS * quantified)


def _first_word(bullet: str) -> str:
    words = bullet.strip().split()
    if not words:
        return ""
    return words[0].lower().strip(".,;:!?")


def action_verb_score(
    bullets: Sequence[str], action_verbs: Iterable[str] = ACTION_VERBS
) -> int:
    if not bullets:
        return 0
    verbs = action_verbs if isinstance(action_verbs, (set, frozenset)) else frozenset(action_verbs)
    opening = sum(1 for b in bullets if _first_word(b) in verbs)
    return clamp_score(100 * opening / len(bullets))


def readability_score(bullets: Sequence[str]) -> int:
    """Penalize average bullet length drifting from 15 words."""
    if not bullets:
        return 100
    avg_words = sum(len(b.split()) for b in bullets) / len(bullets)
    return max(0, round_half_up(100 - 2 * math.fabs(avg_words - IDEAL_BULLET_WORDS)))


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def score_signals(result: ScoreResult, plain_text: str = "") -> ScoreSignals:
    """Deficiency signals of a score, for the recommendation generator."""
    return ScoreSignals(
        ats_score=result.ats_score,
        recruiter_score=result.recruiter_score,
        missing_keywords=result.missing_keywords,
        metrics_score=result.breakdown.reviewer.metrics_score,
        action_verb_score=result.breakdown.reviewer.action_verb_score,
        readability_score=result.breakdown.reviewer.readability_score,
        section_score=result.breakdown.ats.section_score,
        sections_found=result.sections_found,
        word_count=result.word_count,
        document_excerpt=plain_text[:EXCERPT_CHARS],
    )


def score_document(
    plain_text: str,
    bullets: Sequence[str],
    requirements: Sequence[Requirement],
    *,
    action_verbs: Iterable[str] = ACTION_VERBS,
) -> ScoreResult:
    """Score a rendered document's text and bullets against a requirement model."""
    plain_text = plain_text or ""
    bullets = [b for b in bullets if b and b.strip()]

    coverage, missing_keywords = keyword_coverage(plain_text, requirements)
    sections_found = detect_sections(plain_text)
    word_count = count_words(plain_text)

    ats = AtsBreakdown(
        keyword_coverage=coverage,
        format_score=FORMAT_SCORE,
        section_score=section_score(sections_found),
        length_score=length_score(word_count),
    )
    reviewer = ReviewerBreakdown(
        metrics_score=metrics_score(bullets),
        action_verb_score=action_verb_score(bullets, action_verbs),
        readability_score=readability_score(bullets),
    )

    result = ScoreResult(
        ats_score=clamp_score(
            W_KEYWORDS * ats.keyword_coverage
            + W_FORMAT * ats.format_score
            + W_SECTIONS * ats.section_score
            + W_LENGTH * ats.length_score
        ),
        recruiter_score=clamp_score(
            W_METRICS * reviewer.metrics_score
            + W_VERBS * reviewer.action_verb_score
            + W_READABILITY * reviewer.readability_score
        ),
        breakdown=ScoreBreakdown(ats=ats, reviewer=reviewer),
        missing_keywords=missing_keywords,
        sections_found=sections_found,
        word_count=word_count,
    )
    logger.debug(
        "Scored document: ats=%d recruiter=%d words=%d bullets=%d",
        result.ats_score, result.recruiter_score, word_count, len(bullets),
    )
    return result.model_copy(
        update={"recommendations": score_recommendations(score_signals(result, plain_text))}
    )
