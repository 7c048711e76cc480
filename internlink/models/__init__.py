"""
Models module - internal records held by the storage layer.

Difference from schemas:
- Models: what the repository stores and hands back
- Schemas: API contract (what client sends/receives)
"""
from internlink.models.records import (
    User,
    StudentProfile,
    EmployerProfile,
    Job,
    Application,
    DirectMessage,
    MatchScore,
    SkillGapAnalysis,
    LearningResource,
)

__all__ = [
    "User",
    "StudentProfile",
    "EmployerProfile",
    "Job",
    "Application",
    "DirectMessage",
    "MatchScore",
    "SkillGapAnalysis",
    "LearningResource",
]
