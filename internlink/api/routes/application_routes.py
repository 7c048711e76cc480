"""
Application Routes

POST /applications - Apply to a job
GET /applications/student/{student_id} - A student's applications, each with its job
GET /applications/job/{job_id} - A job's applications, each with its student
PATCH /applications/{application_id} - Update status / cover letter
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import (
    ApplicationCreate, ApplicationUpdate, ApplicationResponse,
    ApplicationWithJobResponse, ApplicationWithStudentResponse
)

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.post("", response_model=ApplicationResponse, status_code=201)
async def create_application(application: ApplicationCreate, storage: MemStorage = Depends(get_storage)):
    """Apply to a job. Cannot apply twice to same job."""
    if not storage.get_student_profile(application.student_id):
        raise HTTPException(status_code=404, detail="Student profile not found")

    if not storage.get_job(application.job_id):
        raise HTTPException(status_code=404, detail="Job not found")

    existing = storage.get_applications_by_student_id(application.student_id)
    if any(a.job_id == application.job_id for a in existing):
        raise HTTPException(status_code=409, detail="You have already applied to this job")

    return storage.create_application(application.model_dump())


@router.get("/student/{student_id}", response_model=List[ApplicationWithJobResponse])
async def get_student_applications(student_id: int, storage: MemStorage = Depends(get_storage)):
    """Get all applications for a student. job is null if the job was deleted."""
    return [
        {**a.model_dump(), "job": storage.get_job(a.job_id)}
        for a in storage.get_applications_by_student_id(student_id)
    ]


@router.get("/job/{job_id}", response_model=List[ApplicationWithStudentResponse])
async def get_job_applications(job_id: int, storage: MemStorage = Depends(get_storage)):
    """Get all applications received for a job."""
    return [
        {**a.model_dump(), "student": storage.get_student_profile(a.student_id)}
        for a in storage.get_applications_by_job_id(job_id)
    ]


@router.patch("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: int,
    update: ApplicationUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update an application. Any status may follow any other."""
    data = update.changes()
    if update.status:
        data["status"] = update.status.value

    updated = storage.update_application(application_id, data)
    if not updated:
        raise HTTPException(status_code=404, detail="Application not found")
    return updated
