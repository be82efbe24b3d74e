from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_llm_client
from config import settings
from models.requests import AnalyzeJobRequest, MatchRequest, ScoreRequest
from models.schemas.match_result import MatchResult
from models.schemas.requirement import JobAnalysis
from models.schemas.score_result import ScoreResult
from services import analyzer, document_parser
from services.llm_client import GeminiClient

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "llm_configured": bool(settings.gemini_api_key),
    }


@router.post("/jobs/analyze", response_model=JobAnalysis)
@limiter.limit(settings.rate_limit)
async def analyze_job(request: Request, body: AnalyzeJobRequest):
    return analyzer.analyze_job_posting(body.title, body.description)


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
async def match_profile(
    request: Request,
    body: MatchRequest,
    llm: GeminiClient | None = Depends(get_llm_client),
):
    if len(body.profile_text) > settings.max_text_length:
        raise HTTPException(status_code=400, detail="Profile text too long")
    return await analyzer.match_profile_with_recommendations(
        body.requirements,
        body.profile_skills,
        body.profile_text,
        profile=body.profile,
        llm=llm,
    )


@router.post("/score", response_model=ScoreResult)
@limiter.limit(settings.rate_limit)
async def score_document(
    request: Request,
    body: ScoreRequest,
    llm: GeminiClient | None = Depends(get_llm_client),
):
    if len(body.plain_text) > settings.max_text_length:
        raise HTTPException(status_code=400, detail="Document too long")

    bullets = body.bullets
    if bullets is None:
        bullets = document_parser.extract_bullets(body.plain_text)
    return await analyzer.score_document_with_recommendations(
        body.plain_text, bullets, body.requirements, llm=llm
    )
