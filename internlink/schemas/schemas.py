"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from typing import Optional, List, Any, Dict, ClassVar, Tuple, Union
from datetime import datetime
from enum import Enum


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    student = "student"
    employer = "employer"
    admin = "admin"
    college = "college"


class ApplicationStatus(str, Enum):
    applied = "applied"
    in_review = "in_review"
    interview_scheduled = "interview_scheduled"
    accepted = "accepted"
    rejected = "rejected"


# ============================================================
# PARTIAL UPDATES
# Omitted fields stay untouched; an explicit null clears the field.
# ============================================================

class PatchRequest(BaseModel):
    """
    Base for PATCH bodies.

    not_nullable: fields the record requires, null is rejected (422)
    empty_when_null: collections, null becomes []
    """
    not_nullable: ClassVar[Tuple[str, ...]] = ()
    empty_when_null: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _check_nulls(self):
        sent_null = [f for f in self.model_fields_set if getattr(self, f) is None]
        rejected = sorted(f for f in sent_null if f in self.not_nullable)
        if rejected:
            raise ValueError(f"{', '.join(rejected)} cannot be null")
        for field in sent_null:
            if field in self.empty_when_null:
                setattr(self, field, [])
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields the client sent, nulls included."""
        return self.model_dump(exclude_unset=True)


# ============================================================
# AUTH / USER SCHEMAS
# ============================================================

class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    name: str = Field(..., min_length=1, max_length=100)
    role: UserRole = UserRole.student

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: int
    role: str

class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    role: str
    created_at: datetime


# ============================================================
# STUDENT PROFILE SCHEMAS
# ============================================================

class StudentProfileCreate(BaseModel):
    user_id: int
    university: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)
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

class StudentProfileUpdate(PatchRequest):
    empty_when_null = ("skills", "experience", "projects", "educations", "certifications")

    university: Optional[str] = None
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    graduation_year: Optional[int] = Field(None, ge=1900, le=2100)
    resume_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    bio: Optional[str] = None
    phone_number: Optional[str] = None
    location: Optional[str] = None
    skills: Optional[List[str]] = None
    experience: Optional[List[Any]] = None
    projects: Optional[List[Any]] = None
    educations: Optional[List[Any]] = None
    certifications: Optional[List[Any]] = None

class StudentProfileResponse(StudentProfileCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    profile_completion_percentage: int


# ============================================================
# EMPLOYER PROFILE SCHEMAS
# ============================================================

class EmployerProfileCreate(BaseModel):
    user_id: int
    company_name: str = Field(..., min_length=1, max_length=200)
    industry: Optional[str] = None
    company_size: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None

class EmployerProfileUpdate(PatchRequest):
    not_nullable = ("company_name",)

    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    industry: Optional[str] = None
    company_size: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    logo_url: Optional[str] = None
    location: Optional[str] = None
    phone_number: Optional[str] = None

class EmployerProfileResponse(EmployerProfileCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(BaseModel):
    employer_id: int
    title: str = Field(..., min_length=1, max_length=200)
    description: str
    location: str
    is_remote: bool = False
    is_hybrid: bool = False
    requirements: List[str] = []
    skills: List[str] = []
    duration: Optional[str] = None
    salary: Optional[str] = None
    expires_at: Optional[datetime] = None

class JobUpdate(PatchRequest):
    not_nullable = ("title", "description", "location", "is_remote", "is_hybrid", "is_active")
    empty_when_null = ("requirements", "skills")

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    location: Optional[str] = None
    is_remote: Optional[bool] = None
    is_hybrid: Optional[bool] = None
    requirements: Optional[List[str]] = None
    skills: Optional[List[str]] = None
    duration: Optional[str] = None
    salary: Optional[str] = None
    expires_at: Optional[datetime] = None
    is_active: Optional[bool] = None

class JobResponse(JobCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    is_active: bool


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(BaseModel):
    student_id: int
    job_id: int
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None

class ApplicationUpdate(PatchRequest):
    not_nullable = ("status",)

    status: Optional[ApplicationStatus] = None
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None

class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    job_id: int
    status: str
    cover_letter: Optional[str] = None
    resume_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class ApplicationWithJobResponse(ApplicationResponse):
    job: Optional[JobResponse] = None

class ApplicationWithStudentResponse(ApplicationResponse):
    student: Optional[StudentProfileResponse] = None


# ============================================================
# DIRECT MESSAGE SCHEMAS
# ============================================================

class DirectMessageCreate(BaseModel):
    sender_id: int
    receiver_id: int
    content: str = Field(..., min_length=1)

class DirectMessageResponse(DirectMessageCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: datetime
    is_read: bool

class UnreadCountResponse(BaseModel):
    count: int


# ============================================================
# MATCHING SCHEMAS
# ============================================================

class MatchCalculateRequest(BaseModel):
    """Caller-supplied score; stored verbatim, not recomputed or range-checked."""
    student_id: Optional[int] = Field(None, alias="studentId")
    job_id: Optional[int] = Field(None, alias="jobId")
    score: Optional[float] = None

    model_config = ConfigDict(populate_by_name=True)

class MatchScoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    job_id: int
    score: float
    calculated_at: datetime

class JobMatchResponse(BaseModel):
    job: JobResponse
    score: Union[int, float]

class StudentMatchResponse(BaseModel):
    student: StudentProfileResponse
    score: Union[int, float]


# ============================================================
# SKILL GAP / LEARNING SCHEMAS
# ============================================================

class SkillGapCreate(BaseModel):
    results: Optional[Dict[str, Any]] = None

class SkillGapResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    results: Dict[str, Any]
    created_at: datetime

class LearningResourceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    url: str
    category: str
    skill_tag: str
    is_free: bool
    price: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    rating_count: Optional[int] = None


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

class ErrorResponse(BaseModel):
    detail: str
