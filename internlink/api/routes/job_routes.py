"""
Job Routes

POST /jobs - Create job posting
GET /jobs - List all active jobs
GET /jobs/search - Search active jobs with filters
GET /jobs/employer/{employer_id} - Jobs posted by an employer (active or not)
GET /jobs/{job_id} - Get job details
PATCH /jobs/{job_id} - Update job (partial; is_active closes/reopens it)
DELETE /jobs/{job_id} - Delete job
"""

from fastapi import APIRouter, HTTPException, Depends, Query, Response
from typing import List, Optional

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import JobCreate, JobUpdate, JobResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(job: JobCreate, storage: MemStorage = Depends(get_storage)):
    """Create a new job posting. New jobs start active."""
    if not storage.get_employer_profile(job.employer_id):
        raise HTTPException(status_code=404, detail="Employer profile not found")

    return storage.create_job(job.model_dump())


@router.get("", response_model=List[JobResponse])
async def list_jobs(storage: MemStorage = Depends(get_storage)):
    """List all active job postings."""
    return storage.get_all_active_jobs()


@router.get("/search", response_model=List[JobResponse])
async def search_jobs(
    query: Optional[str] = Query(None, description="Search in title, description and location"),
    location: Optional[str] = Query(None),
    is_remote: Optional[bool] = Query(None),
    skills: Optional[List[str]] = Query(None, description="Keep jobs requiring any of these skills"),
    storage: MemStorage = Depends(get_storage)
):
    """Search active jobs."""
    return storage.search_jobs(query=query, location=location, is_remote=is_remote, skills=skills)


@router.get("/employer/{employer_id}", response_model=List[JobResponse])
async def list_employer_jobs(employer_id: int, storage: MemStorage = Depends(get_storage)):
    return storage.get_jobs_by_employer_id(employer_id)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, storage: MemStorage = Depends(get_storage)):
    """Get details of a specific job."""
    job = storage.get_job(job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(job_id: int, update: JobUpdate, storage: MemStorage = Depends(get_storage)):
    """
    Update a job posting. Only provided fields are updated.

    Changing skills does not touch stored match scores.
    """
    updated = storage.update_job(job_id, update.changes())
    if not updated:
        raise HTTPException(status_code=404, detail="Job not found")
    return updated


@router.delete("/{job_id}", status_code=204)
async def delete_job(job_id: int, storage: MemStorage = Depends(get_storage)):
    """Delete a job posting. Stored scores for it are skipped by rankings from then on."""
    if not storage.delete_job(job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return Response(status_code=204)
