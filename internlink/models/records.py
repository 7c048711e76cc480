"""
Internal records.

Every record carries the auto-incrementing id assigned by the repository.
Skill collections are plain lists of case-sensitive strings; nothing here
normalizes them.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


def _now() -> datetime:
    return datetime.utcnow()


class User(BaseModel):
    id: int
    email: str
    password_hash: str
    name: str
    role: str = "student"
    created_at: datetime = Field(default_factory=_now)


class StudentProfile(BaseModel):
    id: int
    user_id: int
    university: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    graduation_year: Optional[int] = None
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    bio: Optional[str] = None
    phone_number: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = []
    experience: List[Any] = []
    projects: List[Any] = []
    educations: List[Any] = []
    certifications: List[Any] = []
    profile_completion_percentage: int = 0


class EmployerProfile(BaseModel):
    id: int
    user_id: int
    company_name: str
    industry: Optional[str] = None
    company_size: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None


class Job(BaseModel):
    id: int
    employer_id: int
    title: str
    description: str
    location: str
    is_remote: bool = False
    is_hybrid: bool = False
    requirements: List[str] = []
    skills: List[str] = []
    duration: Optional[str] = None
    salary: Optional[str] = None
    created_at: datetime = Field(default_factory=_now)
    expires_at: Optional[datetime] = None
    is_active: bool = True


class Application(BaseModel):
    id: int
    student_id: int
    job_id: int
    status: str = "applied"
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)


class DirectMessage(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    created_at: datetime = Field(default_factory=_now)
    is_read: bool = False


class MatchScore(BaseModel):
    """Persisted score for one (student, job) pair. Last write wins."""
    id: int
    student_id: int
    job_id: int
    score: float
    calculated_at: datetime = Field(default_factory=_now)


class SkillGapAnalysis(BaseModel):
    id: int
    student_id: int
    results: Dict[str, Any]
    created_at: datetime = Field(default_factory=_now)


class LearningResource(BaseModel):
    id: int
    title: str
    description: str
    url: str
    category: str
    skill_tag: str
    is_free: bool = True
    price: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    rating_count: Optional[int] = None
