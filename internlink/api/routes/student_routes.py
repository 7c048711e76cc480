"""
Student Profile Routes

POST /student-profiles - Create student profile
GET /student-profiles - List all student profiles
GET /student-profiles/user/{user_id} - Get profile by owning user
GET /student-profiles/{profile_id} - Get profile
PATCH /student-profiles/{profile_id} - Update profile (partial)

profile_completion_percentage is recomputed on every create/update.
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import (
    StudentProfileCreate, StudentProfileUpdate, StudentProfileResponse
)

router = APIRouter(prefix="/student-profiles", tags=["Students"])


@router.post("", response_model=StudentProfileResponse, status_code=201)
async def create_profile(data: StudentProfileCreate, storage: MemStorage = Depends(get_storage)):
    """Create student profile. One profile per user."""
    if not storage.get_user(data.user_id):
        raise HTTPException(status_code=404, detail="User not found")

    if storage.get_student_profile_by_user_id(data.user_id):
        raise HTTPException(status_code=409, detail="Student profile already exists for this user")

    return storage.create_student_profile(data.model_dump())


@router.get("", response_model=List[StudentProfileResponse])
async def list_profiles(storage: MemStorage = Depends(get_storage)):
    """List every student profile."""
    return storage.get_all_student_profiles()


@router.get("/user/{user_id}", response_model=StudentProfileResponse)
async def get_profile_by_user(user_id: int, storage: MemStorage = Depends(get_storage)):
    """Get the student profile owned by a user."""
    profile = storage.get_student_profile_by_user_id(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Student profile not found")
    return profile


@router.get("/{profile_id}", response_model=StudentProfileResponse)
async def get_profile(profile_id: int, storage: MemStorage = Depends(get_storage)):
    profile = storage.get_student_profile(profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Student profile not found")
    return profile


@router.patch("/{profile_id}", response_model=StudentProfileResponse)
async def update_profile(
    profile_id: int,
    data: StudentProfileUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """
    Update student profile. Omitted fields are kept, null clears a field
    (null collections become empty).

    Changing skills does not touch stored match scores.
    """
    updated = storage.update_student_profile(profile_id, data.changes())
    if not updated:
        raise HTTPException(status_code=404, detail="Student profile not found")
    return updated
