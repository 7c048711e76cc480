"""
Employer Profile Routes

POST /employer-profiles - Create employer profile
GET /employer-profiles/user/{user_id} - Get profile by owning user
GET /employer-profiles/{profile_id} - Get profile
PATCH /employer-profiles/{profile_id} - Update profile (partial)
"""

from fastapi import APIRouter, HTTPException, Depends

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import (
    EmployerProfileCreate, EmployerProfileUpdate, EmployerProfileResponse
)

router = APIRouter(prefix="/employer-profiles", tags=["Employers"])


@router.post("", response_model=EmployerProfileResponse, status_code=201)
async def create_profile(data: EmployerProfileCreate, storage: MemStorage = Depends(get_storage)):
    """Create employer profile. One profile per user."""
    if not storage.get_user(data.user_id):
        raise HTTPException(status_code=404, detail="User not found")

    if storage.get_employer_profile_by_user_id(data.user_id):
        raise HTTPException(status_code=409, detail="Employer profile already exists for this user")

    return storage.create_employer_profile(data.model_dump())


@router.get("/user/{user_id}", response_model=EmployerProfileResponse)
async def get_profile_by_user(user_id: int, storage: MemStorage = Depends(get_storage)):
    profile = storage.get_employer_profile_by_user_id(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Employer profile not found")
    return profile


@router.get("/{profile_id}", response_model=EmployerProfileResponse)
async def get_profile(profile_id: int, storage: MemStorage = Depends(get_storage)):
    profile = storage.get_employer_profile(profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Employer profile not found")
    return profile


@router.patch("/{profile_id}", response_model=EmployerProfileResponse)
async def update_profile(
    profile_id: int,
    data: EmployerProfileUpdate,
    storage: MemStorage = Depends(get_storage)
):
    """Update employer profile. Only provided fields are updated."""
    updated = storage.update_employer_profile(profile_id, data.changes())
    if not updated:
        raise HTTPException(status_code=404, detail="Employer profile not found")
    return updated
