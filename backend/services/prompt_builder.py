"""Prompt templates for the optional recommendation rewrite."""

from models.schemas.recommendation import MatchSignals, ScoreSignals

MAX_PROMPT_KEYWORDS = 10
MAX_EXCERPT_CHARS = 500


def _excerpt(text: str) -> str:
    return text[:MAX_EXCERPT_CHARS]


def build_score_recommendation_prompt(signals: ScoreSignals) -> str:
    """Ask for 3-5 fixes to a scored document. Bounded in size."""
    missing = ", ".join(signals.missing_keywords[:MAX_PROMPT_KEYWORDS]) or "none"
    sections = ", ".join(signals.sections_found) or "none detected"

    return f"""You are an expert resume reviewer and ATS (Applicant Tracking System) specialist.

Give 3-5 specific, actionable recommendations to improve this document's ATS score and recruiter appeal.

SCORES:
- ATS score: {signals.ats_score}/100
- Recruiter score: {signals.recruiter_score}/100
- Quantified achievements: {signals.metrics_score}/100
- Action verbs: {signals.action_verb_score}/100
- Bullet readability: {signals.readability_score}/100
- Sections detected: {sections}
- Word count: {signals.word_count}
- Missing keywords: {missing}

DOCUMENT EXCERPT:
---
{_excerpt(signals.document_excerpt)}
---

Focus on:
1. How to naturally incorporate missing keywords
2. Improving quantifiable achievements
3. Strengthening action verbs
4. Overall optimization tips

Respond with ONLY a valid JSON array of at most 5 short strings (one sentence each), no markdown:
["recommendation 1", "recommendation 2"]"""


def build_match_recommendation_prompt(signals: MatchSignals) -> str:
    """Ask for 3-5 ways to close a profile's gaps. Bounded in size."""
    gaps = ", ".join(signals.gap_terms[:MAX_PROMPT_KEYWORDS]) or "none"
    related = ", ".join(signals.partial_terms[:MAX_PROMPT_KEYWORDS]) or "none"

    return f"""You are an expert career coach.

Analyze the match between a candidate profile and job requirements, then give 3-5 specific, actionable recommendations.

MATCH STATISTICS:
- Direct matches: {signals.direct_count}/{signals.total_requirements}
- Matched only through related skills: {related}
- Missing requirements: {gaps}

PROFILE EXCERPT:
---
{_excerpt(signals.profile_excerpt)}
---

Focus on:
1. How to bridge skill gaps
2. Ways to highlight transferable skills
3. Keywords to naturally incorporate
4. Experience framing strategies

Respond with ONLY a valid JSON array of at most 5 short strings (one sentence each), no markdown:
["recommendation 1", "recommendation 2"]"""
