"""
Matching Routes

GET /matching/jobs/{student_id}?limit=N - Ranked jobs for a student
GET /matching/students/{job_id}?limit=N - Ranked students for a job
GET /matching/score/{student_id}/{job_id} - Stored score for a pair
POST /matching/calculate - Store a caller-supplied score

Unknown ids on the ranking endpoints give [] rather than 404.

NOTE: /matching/calculate trusts the caller's score verbatim (no recompute,
no range check, no existence check on either id).
"""

from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional

from internlink.api.deps import get_app_settings, get_matching_service
from internlink.core.config import Settings
from internlink.schemas.schemas import (
    MatchCalculateRequest, MatchScoreResponse, JobMatchResponse, StudentMatchResponse
)
from internlink.services.matching_service import MatchingService

router = APIRouter(prefix="/matching", tags=["Matching"])

MAX_MATCH_LIMIT = 100


@router.get("/jobs/{student_id}", response_model=List[JobMatchResponse])
async def matching_jobs(
    student_id: int,
    limit: Optional[int] = Query(None, ge=1, le=MAX_MATCH_LIMIT),
    settings: Settings = Depends(get_app_settings),
    service: MatchingService = Depends(get_matching_service)
):
    """
    Top active jobs for a student, best first.

    Stored scores come first; remaining slots are filled with scores
    computed on the fly (job skill count as denominator).
    """
    if limit is None:
        limit = settings.default_match_limit
    return service.top_matches_for_student(student_id, limit)


@router.get("/students/{job_id}", response_model=List[StudentMatchResponse])
async def matching_students(
    job_id: int,
    limit: Optional[int] = Query(None, ge=1, le=MAX_MATCH_LIMIT),
    settings: Settings = Depends(get_app_settings),
    service: MatchingService = Depends(get_matching_service)
):
    """
    Top students for a job, best first.

    On-the-fly scores use the student's skill count as denominator; ties go
    to the more complete profile.
    """
    if limit is None:
        limit = settings.default_match_limit
    return service.top_matches_for_job(job_id, limit)


@router.get("/score/{student_id}/{job_id}", response_model=MatchScoreResponse)
async def get_match_score(
    student_id: int,
    job_id: int,
    service: MatchingService = Depends(get_matching_service)
):
    score = service.get_score(student_id, job_id)
    if not score:
        raise HTTPException(status_code=404, detail="Match score not found")
    return score


@router.post("/calculate", response_model=MatchScoreResponse)
async def calculate_match_score(
    request: MatchCalculateRequest,
    service: MatchingService = Depends(get_matching_service)
):
    """
    Create or overwrite the stored score for (studentId, jobId).

    Ids must be non-zero; score may be 0.
    """
    if not request.student_id or not request.job_id or request.score is None:
        raise HTTPException(status_code=400, detail="Student ID, job ID, and score are required")

    return service.calculate(request.student_id, request.job_id, request.score)
