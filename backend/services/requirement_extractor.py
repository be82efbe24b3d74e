"""Requirement extraction from free-text job postings.

Frequency-based and heuristic: tokens are weighted by where they appear
(title over opening paragraph over the rest), the top terms become
requirements, and each one is labelled required / preferred / general
from the phrasing around its first mention.
"""

import logging
import re
from collections.abc import Iterable, Sequence

from models.schemas.requirement import JobAnalysis, Requirement, RequirementCategory
from services.text_normalizer import STOPWORDS, normalize

logger = logging.getLogger(__name__)

MAX_REQUIREMENTS = 20
MAX_RESPONSIBILITIES = 8
MAX_SKILLS_PER_CATEGORY = 10
CONTEXT_WINDOW = 100  # characters either side of a term's first mention

TITLE_WEIGHT = 3
LEAD_PARAGRAPH_WEIGHT = 2
BODY_WEIGHT = 1

# Checked in this order: required indicators win over preferred ones
REQUIRED_INDICATORS: tuple[str, ...] = (
    "must", "required", "essential", "mandatory", "need", "needs",
)
PREFERRED_INDICATORS: tuple[str, ...] = (
    "nice to have", "preferred", "bonus", "plus", "ideal",
)

# Verb stems that open a responsibility sentence ("Design ...", "Leading ...")
RESPONSIBILITY_VERBS: tuple[str, ...] = (
    "lead", "develop", "design", "build", "create", "manage", "implement",
    "own", "drive", "deliver", "maintain", "collaborate", "architect",
    "mentor", "write",
)

_PARAGRAPH_SPLIT_RE = re.compile(r"\n\s*\n")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_LEADING_MARKERS_RE = re.compile(r"^[\W_]+")

# Seniority keywords, checked in order as substrings ("leadership" reads as lead)
LEVEL_KEYWORDS: list[tuple[tuple[str, ...], str]] = [
    (("senior", "lead", "principal"), "Senior"),
    (("junior", "entry", "graduate"), "Junior"),
    (("mid-level", "intermediate"), "Mid-Level"),
]
_YEARS_RE = re.compile(r"(\d+)\+?\s*years")
DEFAULT_LEVEL = "Mid-Level"


def split_paragraphs(text: str) -> list[str]:
    """Split on blank lines, dropping empty paragraphs."""
    return [p.strip() for p in _PARAGRAPH_SPLIT_RE.split(text) if p.strip()]


def weigh_terms(
    title: str,
    body_text: str,
    *,
    stopwords: Iterable[str] = STOPWORDS,
) -> dict[str, int]:
    """Accumulate positional weights for every token of the posting.

    Title tokens count 3, the first paragraph 2 and everything after 1.
    Keys keep first-seen order, which later breaks weight ties.
    """
    paragraphs = split_paragraphs(body_text)
    counts = normalize(title, TITLE_WEIGHT, stopwords=stopwords)
    for i, paragraph in enumerate(paragraphs):
        weight = LEAD_PARAGRAPH_WEIGHT if i == 0 else BODY_WEIGHT
        counts = normalize(paragraph, weight, counts, stopwords=stopwords)
    return counts


def categorize(
    term: str,
    lower_text: str,
    *,
    required_indicators: Sequence[str] = REQUIRED_INDICATORS,
    preferred_indicators: Sequence[str] = PREFERRED_INDICATORS,
) -> RequirementCategory:
    """Label a term from the indicator phrases near its first mention."""
    idx = lower_text.find(term)
    if idx < 0:
        return RequirementCategory.GENERAL
    context = lower_text[max(0, idx - CONTEXT_WINDOW): idx + len(term) + CONTEXT_WINDOW]
    if any(ind in context for ind in required_indicators):
        return RequirementCategory.REQUIRED
    if any(ind in context for ind in preferred_indicators):
        return RequirementCategory.PREFERRED
    return RequirementCategory.GENERAL


def extract_requirements(
    title: str,
    body_text: str,
    *,
    stopwords: Iterable[str] = STOPWORDS,
    required_indicators: Sequence[str] = REQUIRED_INDICATORS,
    preferred_indicators: Sequence[str] = PREFERRED_INDICATORS,
    limit: int = MAX_REQUIREMENTS,
) -> list[Requirement]:
    """Build the weighted requirement model of a posting.

    Returns at most ``limit`` requirements sorted by weight descending,
    ties broken by first-seen order. An empty body yields [].
    """
    if not body_text or not body_text.strip():
        return []

    counts = weigh_terms(title or "", body_text, stopwords=stopwords)
    # sorted() is stable, so equal weights keep insertion (first-seen) order
    top = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]

    lower_text = f"{title or ''}\n{body_text}".lower()
    return [
        Requirement(
            term=term,
            weight=weight,
            category=categorize(
                term,
                lower_text,
                required_indicators=required_indicators,
                preferred_indicators=preferred_indicators,
            ),
        )
        for term, weight in top
    ]


def extract_responsibilities(
    body_text: str,
    *,
    verbs: Sequence[str] = RESPONSIBILITY_VERBS,
    limit: int = MAX_RESPONSIBILITIES,
) -> list[str]:
    """Sentences longer than 20 characters that open with an action verb.

    The first word matches a verb by prefix, so "Leading" and "Designs"
    count for "lead" and "design".
    """
    responsibilities: list[str] = []
    for raw in _SENTENCE_SPLIT_RE.split(body_text or ""):
        sentence = _LEADING_MARKERS_RE.sub("", raw.strip()).strip()
        if len(sentence) <= 20:
            continue
        first_word = sentence.split()[0].lower()
        if any(first_word.startswith(verb) for verb in verbs):
            responsibilities.append(sentence)
            if len(responsibilities) >= limit:
                break
    return responsibilities


def detect_experience_level(text: str) -> str:
    """Seniority keywords first, then "N+ years", else Mid-Level.

    Keywords are substring matches: "leadership" and "leading" both read
    as Senior.
    """
    lower = text.lower()
    for keywords, level in LEVEL_KEYWORDS:
        if any(k in lower for k in keywords):
            return level

    match = _YEARS_RE.search(lower)
    if match:
        years = int(match.group(1))
        if years >= 7:
            return "Senior"
        if years >= 3:
            return "Mid-Level"
        return "Junior"
    return DEFAULT_LEVEL


def _skills_in(requirements: list[Requirement], category: RequirementCategory) -> list[str]:
    terms = [r.term for r in requirements if r.category == category]
    return list(dict.fromkeys(terms))[:MAX_SKILLS_PER_CATEGORY]


def analyze_job_posting(title: str, body_text: str) -> JobAnalysis:
    """Requirement model, experience level and responsibilities of a posting."""
    if not body_text or not body_text.strip():
        logger.info("Empty job description, returning empty analysis")
        return JobAnalysis()

    requirements = extract_requirements(title, body_text)
    analysis = JobAnalysis(
        requirements=requirements,
        experience_level=detect_experience_level(f"{title or ''}\n{body_text}"),
        responsibilities=extract_responsibilities(body_text),
        required_skills=_skills_in(requirements, RequirementCategory.REQUIRED),
        preferred_skills=_skills_in(requirements, RequirementCategory.PREFERRED),
    )
    logger.info(
        "Extracted %d requirements (%d required, %d preferred), level=%s",
        len(requirements),
        len(analysis.required_skills),
        len(analysis.preferred_skills),
        analysis.experience_level,
    )
    return analysis
