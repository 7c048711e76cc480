"""
Skill Gap & Learning Resource Routes

GET /skill-gap/{student_id} - Latest skill gap analysis
POST /skill-gap/{student_id} - Store a skill gap analysis ({results})
GET /learning-resources - All learning resources
GET /learning-resources/skill/{skill_tag} - Resources for one skill tag
GET /learning-resources/recommended/{student_id} - Resources for the
    student's latest analysis (results.skillGaps)
"""

from fastapi import APIRouter, HTTPException, Depends
from typing import List

from internlink.api.deps import get_storage
from internlink.db.memory import MemStorage
from internlink.schemas.schemas import SkillGapCreate, SkillGapResponse, LearningResourceResponse

router = APIRouter(tags=["Learning"])


@router.get("/skill-gap/{student_id}", response_model=SkillGapResponse)
async def get_skill_gap(student_id: int, storage: MemStorage = Depends(get_storage)):
    analysis = storage.get_skill_gap_analysis_for_student(student_id)
    if not analysis:
        raise HTTPException(status_code=404, detail="Skill gap analysis not found")
    return analysis


@router.post("/skill-gap/{student_id}", response_model=SkillGapResponse)
async def create_skill_gap(
    student_id: int,
    data: SkillGapCreate,
    storage: MemStorage = Depends(get_storage)
):
    """Store analysis results computed elsewhere (e.g. by the frontend)."""
    if not data.results:
        raise HTTPException(status_code=400, detail="Missing results")

    if not storage.get_student_profile(student_id):
        raise HTTPException(status_code=404, detail="Student profile not found")

    return storage.create_skill_gap_analysis(student_id, data.results)


@router.get("/learning-resources", response_model=List[LearningResourceResponse])
async def list_learning_resources(storage: MemStorage = Depends(get_storage)):
    return storage.get_all_learning_resources()


@router.get("/learning-resources/skill/{skill_tag}", response_model=List[LearningResourceResponse])
async def learning_resources_for_skill(skill_tag: str, storage: MemStorage = Depends(get_storage)):
    """Case-insensitive match on skill tag."""
    return storage.get_learning_resources_by_skill(skill_tag)


@router.get("/learning-resources/recommended/{student_id}", response_model=List[LearningResourceResponse])
async def recommended_learning_resources(student_id: int, storage: MemStorage = Depends(get_storage)):
    """Empty when the student has no analysis yet."""
    return storage.get_recommended_learning_resources_for_student(student_id)
