import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import BatchMatchRequest, MatchRequest
from models.responses import BatchMatchResponse, PairResult
from models.schemas.match_report import MatchReport
from services import matching

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.post("/match", response_model=MatchReport, response_model_by_alias=False)
@limiter.limit(settings.rate_limit)
async def match(request: Request, body: MatchRequest):
    return matching.score(body.candidate, body.job)


@router.post("/match/batch", response_model=BatchMatchResponse, response_model_by_alias=False)
@limiter.limit(settings.rate_limit)
async def match_batch(request: Request, body: BatchMatchRequest):
    n_pairs = len(body.candidates) * len(body.jobs)
    if n_pairs > settings.max_batch_pairs:
        raise HTTPException(
            status_code=400,
            detail=f"Too many pairs: {n_pairs} (max {settings.max_batch_pairs})",
        )

    scored = await run_in_threadpool(
        matching.score_matrix,
        body.candidates,
        body.jobs,
        settings.batch_workers,
    )
    logger.info("Batch scored %d pair(s)", len(scored))

    return BatchMatchResponse(
        results=[
            PairResult(candidate_index=p.candidate_index, job_index=p.job_index, report=p.report)
            for p in scored
        ],
        pairs=len(scored),
    )
