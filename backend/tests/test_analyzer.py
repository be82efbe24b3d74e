import pytest

from models.schemas.match_result import MatchType
from models.schemas.profile import CandidateProfile, ProfileExperience
from services import analyzer

POSTING_TITLE = "Senior Backend Engineer"
POSTING_BODY = (
    "We need 7+ years building APIs. Python required for this role.\n\n"
    "Design and build scalable services for millions of users.\n\n"
    "Kubernetes is a plus."
)

DOCUMENT = """Jane Doe

Summary
Backend engineer focused on Python services.

Experience
- Built Python APIs serving 2M requests/day
- Led migration of 40 services to k8s

Education
B.S. Computer Science

Skills
Python, Docker, PostgreSQL
"""

BULLETS = [
    "Built Python APIs serving 2M requests/day",
    "Led migration of 40 services to k8s",
]


@pytest.fixture
def analysis():
    return analyzer.analyze_job_posting(POSTING_TITLE, POSTING_BODY)


def test_analysis(analysis):
    terms = [r.term for r in analysis.requirements]
    assert terms[:3] == ["senior", "backend", "engineer"]
    assert "python" in analysis.required_skills
    assert analysis.experience_level == "Senior"
    assert "Design and build scalable services for millions of users" in analysis.responsibilities


def test_match_flow(analysis):
    result = analyzer.match_profile_to_requirements(
        analysis.requirements, ["Python"], "Ran workloads on k8s"
    )
    by_term = {item.term: item for item in result.direct + result.partial + result.gap}
    assert len(by_term) == len(analysis.requirements)
    assert by_term["python"].match_type == MatchType.DIRECT
    assert by_term["kubernetes"].match_type == MatchType.PARTIAL
    assert by_term["kubernetes"].evidence == "Found related skill: k8s"
    assert 0 <= result.match_percent <= 100
    assert 0 < len(result.recommendations) <= 5


def test_score_flow(analysis):
    result = analyzer.score_document(DOCUMENT, BULLETS, analysis.requirements)
    assert result.sections_found == ["summary", "experience", "education", "skills"]
    assert result.breakdown.ats.section_score == 100
    assert result.breakdown.reviewer.metrics_score == 16
    assert result.breakdown.reviewer.action_verb_score == 100
    assert "python" not in result.missing_keywords
    assert 0 < len(result.recommendations) <= 5


@pytest.mark.asyncio
async def test_async_variants_without_llm(analysis):
    reqs = analysis.requirements
    assert await analyzer.match_profile_with_recommendations(
        reqs, ["Python"], "text"
    ) == analyzer.match_profile_to_requirements(reqs, ["Python"], "text")
    assert await analyzer.score_document_with_recommendations(
        DOCUMENT, BULLETS, reqs
    ) == analyzer.score_document(DOCUMENT, BULLETS, reqs)


@pytest.mark.asyncio
async def test_llm_rewrites_only_recommendations(analysis, static_llm):
    llm = static_llm(["Lead with your Kubernetes migration"])
    baseline = analyzer.score_document(DOCUMENT, BULLETS, analysis.requirements)
    rewritten = await analyzer.score_document_with_recommendations(
        DOCUMENT, BULLETS, analysis.requirements, llm=llm
    )
    assert rewritten.recommendations == ["Lead with your Kubernetes migration"]
    assert rewritten.model_copy(update={"recommendations": baseline.recommendations}) == baseline
    assert baseline.recommendations != rewritten.recommendations


@pytest.mark.asyncio
async def test_failing_llm_keeps_rule_based(analysis, failing_llm):
    reqs = analysis.requirements
    expected = analyzer.match_profile_to_requirements(reqs, ["Python"], "")
    result = await analyzer.match_profile_with_recommendations(
        reqs, ["Python"], "", llm=failing_llm
    )
    assert result == expected
    assert failing_llm.calls == 1


@pytest.mark.asyncio
async def test_structured_profile(analysis):
    profile = CandidateProfile(
        skills=["Docker"],
        experiences=[
            ProfileExperience(title="Backend Engineer", company="Acme", description="Python services")
        ],
    )
    result = await analyzer.match_profile_with_recommendations(analysis.requirements, profile=profile)
    evidence = {item.term: item.evidence for item in result.direct}
    assert evidence["python"] == "Found in experience: Backend Engineer"
