import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_gemini_client
from config import settings
from models.requests import AssessRequest
from models.responses import AssessmentResponse, DegreeOut, StatsResponse
from services import assessment_engine, degree_catalog, enhancer, score_storage, stats

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "gemini_configured": get_gemini_client(request) is not None,
    }


@router.post("/assess", response_model=AssessmentResponse)
@limiter.limit(settings.rate_limit)
async def assess(request: Request, body: AssessRequest, background_tasks: BackgroundTasks):
    result = assessment_engine.assess(body.major, body.university)
    background_tasks.add_task(
        score_storage.save_assessment, result.score, body.major, body.university, "offline"
    )
    return AssessmentResponse.from_offline(result)


@router.post("/assess/enhance", response_model=AssessmentResponse)
@limiter.limit(settings.rate_limit)
async def assess_enhance(
    request: Request,
    body: AssessRequest,
    background_tasks: BackgroundTasks,
    client=Depends(get_gemini_client),
):
    # Offline result first; enhancement may only replace it, never delay its computation
    offline = assessment_engine.assess(body.major, body.university)

    outcome = await enhancer.enhance(client, body.major, body.university)
    if isinstance(outcome, enhancer.Enhanced):
        response = AssessmentResponse.from_enhanced(outcome.assessment)
        source = "gemini"
    else:
        logger.warning(
            "Enhancement unavailable (%s), serving offline assessment", outcome.error.value
        )
        response = AssessmentResponse.from_offline(offline, degraded=True)
        source = "offline"

    background_tasks.add_task(
        score_storage.save_assessment, response.score, body.major, body.university, source
    )
    return response


@router.get("/stats", response_model=StatsResponse)
async def get_stats():
    try:
        return stats.compute_stats()
    except Exception:
        logger.exception("Error calculating statistics")
        raise HTTPException(status_code=500, detail="Failed to calculate statistics")


@router.get("/degrees", response_model=list[DegreeOut])
async def list_degrees(
    q: str = Query("", max_length=100),
    limit: int = Query(10, ge=1, le=50),
):
    return [DegreeOut(**d._asdict()) for d in degree_catalog.suggest(q, limit)]


@router.get("/degrees/lookup", response_model=DegreeOut)
async def lookup_degree(name: str = Query(..., min_length=1, max_length=200)):
    degree = degree_catalog.find_degree(name)
    if degree is None:
        raise HTTPException(status_code=404, detail="Degree not found")
    return DegreeOut(**degree._asdict())
