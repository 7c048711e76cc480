"""
In-memory repository.

Holds every marketplace entity in dicts keyed by auto-incrementing ids
(each entity type counts from 1). One instance is built per application by
build_storage() and handed to routes through a FastAPI dependency, so tests
get an isolated store simply by building a new app.

Match scores are delegated to an injected MatchScoreStore so they can live
in a database while the rest stays in memory.
"""

import logging
import threading
from datetime import datetime
from typing import Any, Dict, List, Optional

from internlink.db.match_store import InMemoryMatchScoreStore, MatchScoreStore
from internlink.models import (
    User, StudentProfile, EmployerProfile, Job, Application,
    DirectMessage, SkillGapAnalysis, LearningResource
)
from internlink.services.profile_service import calculate_profile_completion

logger = logging.getLogger(__name__)


SEED_LEARNING_RESOURCES = [
    {
        "title": "Machine Learning Fundamentals with Python",
        "description": "Learn the foundations of machine learning with practical Python examples and real-world datasets.",
        "url": "https://example.com/ml-fundamentals",
        "category": "Machine Learning",
        "skill_tag": "Machine Learning",
        "is_free": True,
        "image_url": "https://images.unsplash.com/photo-1587620962725-abab7fe55159",
        "rating": 4.5,
        "rating_count": 1245,
    },
    {
        "title": "AWS Cloud Practitioner Certification",
        "description": "Prepare for AWS Cloud Practitioner certification with comprehensive lessons and practice exams.",
        "url": "https://example.com/aws-certification",
        "category": "Cloud Computing",
        "skill_tag": "Cloud Computing",
        "is_free": False,
        "price": "$49.99",
        "image_url": "https://images.unsplash.com/photo-1516321318423-f06f85e504b3",
        "rating": 4.0,
        "rating_count": 876,
    },
    {
        "title": "Web Development Bootcamp",
        "description": "Complete web development bootcamp covering HTML, CSS, JavaScript, React, Node.js and more.",
        "url": "https://example.com/web-dev-bootcamp",
        "category": "Web Development",
        "skill_tag": "Web Development",
        "is_free": False,
        "price": "$89.99",
        "image_url": "https://images.unsplash.com/photo-1517180102446-f3ece451e9d8",
        "rating": 4.8,
        "rating_count": 3254,
    },
]


class MemStorage:
    """
    Repository for users, profiles, jobs, applications, messages,
    skill gap analyses and learning resources.

    Every public method takes the same re-entrant lock, so a read never
    observes a half-applied write even when handlers run on threads.
    """

    def __init__(self, match_scores: Optional[MatchScoreStore] = None, seed_resources: bool = True):
        self.match_scores: MatchScoreStore = match_scores or InMemoryMatchScoreStore()

        self._users: Dict[int, User] = {}
        self._student_profiles: Dict[int, StudentProfile] = {}
        self._employer_profiles: Dict[int, EmployerProfile] = {}
        self._jobs: Dict[int, Job] = {}
        self._applications: Dict[int, Application] = {}
        self._messages: Dict[int, DirectMessage] = {}
        self._skill_gap_analyses: Dict[int, SkillGapAnalysis] = {}
        self._learning_resources: Dict[int, LearningResource] = {}

        self._counters: Dict[str, int] = {}
        self._lock = threading.RLock()

        if seed_resources:
            for resource in SEED_LEARNING_RESOURCES:
                self.create_learning_resource(resource)

    def _next_id(self, entity: str) -> int:
        value = self._counters.get(entity, 1)
        self._counters[entity] = value + 1
        return value

    # ============================================================
    # USERS
    # ============================================================

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users.values() if u.email == email), None)

    def create_user(self, data: Dict[str, Any]) -> User:
        with self._lock:
            user = User(id=self._next_id("user"), **data)
            self._users[user.id] = user
        logger.info("Created user %s (%s)", user.id, user.role)
        return user

    def update_user(self, user_id: int, data: Dict[str, Any]) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            if not user:
                return None
            updated = user.model_copy(update=data)
            self._users[user_id] = updated
            return updated

    # ============================================================
    # STUDENT PROFILES
    # profile_completion_percentage is derived, never taken from input
    # ============================================================

    def get_student_profile(self, profile_id: int) -> Optional[StudentProfile]:
        with self._lock:
            return self._student_profiles.get(profile_id)

    def get_student_profile_by_user_id(self, user_id: int) -> Optional[StudentProfile]:
        with self._lock:
            return next((p for p in self._student_profiles.values() if p.user_id == user_id), None)

    def create_student_profile(self, data: Dict[str, Any]) -> StudentProfile:
        data = {k: v for k, v in data.items() if k != "profile_completion_percentage"}
        with self._lock:
            profile = StudentProfile(
                id=self._next_id("student_profile"),
                profile_completion_percentage=calculate_profile_completion(data),
                **data
            )
            self._student_profiles[profile.id] = profile
        logger.info("Created student profile %s (%s%% complete)", profile.id, profile.profile_completion_percentage)
        return profile

    def update_student_profile(self, profile_id: int, data: Dict[str, Any]) -> Optional[StudentProfile]:
        data = {k: v for k, v in data.items() if k not in ("id", "profile_completion_percentage")}
        with self._lock:
            profile = self._student_profiles.get(profile_id)
            if not profile:
                return None
            merged = {**profile.model_dump(), **data}
            merged["profile_completion_percentage"] = calculate_profile_completion(merged)
            updated = StudentProfile(**merged)
            self._student_profiles[profile_id] = updated
        logger.info("Updated student profile %s (%s%% complete)", profile_id, updated.profile_completion_percentage)
        return updated

    def get_all_student_profiles(self) -> List[StudentProfile]:
        with self._lock:
            return list(self._student_profiles.values())

    # ============================================================
    # EMPLOYER PROFILES
    # ============================================================

    def get_employer_profile(self, profile_id: int) -> Optional[EmployerProfile]:
        with self._lock:
            return self._employer_profiles.get(profile_id)

    def get_employer_profile_by_user_id(self, user_id: int) -> Optional[EmployerProfile]:
        with self._lock:
            return next((p for p in self._employer_profiles.values() if p.user_id == user_id), None)

    def create_employer_profile(self, data: Dict[str, Any]) -> EmployerProfile:
        with self._lock:
            profile = EmployerProfile(id=self._next_id("employer_profile"), **data)
            self._employer_profiles[profile.id] = profile
        logger.info("Created employer profile %s (%s)", profile.id, profile.company_name)
        return profile

    def update_employer_profile(self, profile_id: int, data: Dict[str, Any]) -> Optional[EmployerProfile]:
        with self._lock:
            profile = self._employer_profiles.get(profile_id)
            if not profile:
                return None
            updated = EmployerProfile(**{**profile.model_dump(), **data, "id": profile_id})
            self._employer_profiles[profile_id] = updated
            return updated

    def get_all_employer_profiles(self) -> List[EmployerProfile]:
        with self._lock:
            return list(self._employer_profiles.values())

    # ============================================================
    # JOBS
    # ============================================================

    def get_job(self, job_id: int) -> Optional[Job]:
        with self._lock:
            return self._jobs.get(job_id)

    def create_job(self, data: Dict[str, Any]) -> Job:
        data = {k: v for k, v in data.items() if k not in ("is_active", "created_at")}
        with self._lock:
            job = Job(id=self._next_id("job"), is_active=True, **data)
            self._jobs[job.id] = job
        logger.info("Created job %s '%s' for employer %s", job.id, job.title, job.employer_id)
        return job

    def update_job(self, job_id: int, data: Dict[str, Any]) -> Optional[Job]:
        with self._lock:
            job = self._jobs.get(job_id)
            if not job:
                return None
            updated = Job(**{**job.model_dump(), **data, "id": job_id})
            self._jobs[job_id] = updated
        logger.info("Updated job %s", job_id)
        return updated

    def delete_job(self, job_id: int) -> bool:
        with self._lock:
            removed = self._jobs.pop(job_id, None) is not None
        if removed:
            logger.info("Deleted job %s", job_id)
        return removed

    def get_jobs_by_employer_id(self, employer_id: int) -> List[Job]:
        with self._lock:
            return [j for j in self._jobs.values() if j.employer_id == employer_id]

    def get_all_jobs(self) -> List[Job]:
        with self._lock:
            return list(self._jobs.values())

    def get_all_active_jobs(self) -> List[Job]:
        with self._lock:
            return [j for j in self._jobs.values() if j.is_active]

    def search_jobs(
        self,
        query: Optional[str] = None,
        location: Optional[str] = None,
        is_remote: Optional[bool] = None,
        skills: Optional[List[str]] = None
    ) -> List[Job]:
        """
        Search active jobs.

        query matches title, description or location (case-insensitive
        substring). skills keeps jobs requiring ANY of the given skills,
        compared exactly.
        """
        jobs = self.get_all_active_jobs()

        if query:
            q = query.lower()
            jobs = [
                j for j in jobs
                if q in j.title.lower() or q in j.description.lower() or q in j.location.lower()
            ]

        if location:
            loc = location.lower()
            jobs = [j for j in jobs if loc in j.location.lower()]

        if is_remote is not None:
            jobs = [j for j in jobs if j.is_remote == is_remote]

        if skills:
            jobs = [j for j in jobs if any(s in j.skills for s in skills)]

        return jobs

    # ============================================================
    # APPLICATIONS
    # ============================================================

    def get_application(self, application_id: int) -> Optional[Application]:
        with self._lock:
            return self._applications.get(application_id)

    def create_application(self, data: Dict[str, Any]) -> Application:
        with self._lock:
            now = datetime.utcnow()
            application = Application(
                id=self._next_id("application"), created_at=now, updated_at=now, **data
            )
            self._applications[application.id] = application
        logger.info(
            "Student %s applied to job %s (application %s)",
            application.student_id, application.job_id, application.id
        )
        return application

    def update_application(self, application_id: int, data: Dict[str, Any]) -> Optional[Application]:
        with self._lock:
            application = self._applications.get(application_id)
            if not application:
                return None
            updated = Application(**{
                **application.model_dump(), **data,
                "id": application_id, "updated_at": datetime.utcnow()
            })
            self._applications[application_id] = updated
        logger.info("Application %s is now %s", application_id, updated.status)
        return updated

    def get_applications_by_student_id(self, student_id: int) -> List[Application]:
        with self._lock:
            return [a for a in self._applications.values() if a.student_id == student_id]

    def get_applications_by_job_id(self, job_id: int) -> List[Application]:
        with self._lock:
            return [a for a in self._applications.values() if a.job_id == job_id]

    # ============================================================
    # DIRECT MESSAGES
    # ============================================================

    def get_message(self, message_id: int) -> Optional[DirectMessage]:
        with self._lock:
            return self._messages.get(message_id)

    def create_message(self, data: Dict[str, Any]) -> DirectMessage:
        with self._lock:
            message = DirectMessage(id=self._next_id("message"), is_read=False, **data)
            self._messages[message.id] = message
        logger.info("Message %s from user %s to user %s", message.id, message.sender_id, message.receiver_id)
        return message

    def get_messages_between_users(self, user_id_1: int, user_id_2: int) -> List[DirectMessage]:
        """Conversation in both directions, oldest first (id breaks timestamp ties)."""
        with self._lock:
            messages = [
                m for m in self._messages.values()
                if (m.sender_id == user_id_1 and m.receiver_id == user_id_2)
                or (m.sender_id == user_id_2 and m.receiver_id == user_id_1)
            ]
        return sorted(messages, key=lambda m: (m.created_at, m.id))

    def get_unread_messages_count(self, user_id: int) -> int:
        with self._lock:
            return sum(1 for m in self._messages.values() if m.receiver_id == user_id and not m.is_read)

    def mark_message_as_read(self, message_id: int) -> bool:
        with self._lock:
            message = self._messages.get(message_id)
            if not message:
                return False
            self._messages[message_id] = message.model_copy(update={"is_read": True})
            return True

    # ============================================================
    # SKILL GAP ANALYSES
    # ============================================================

    def get_skill_gap_analysis_for_student(self, student_id: int) -> Optional[SkillGapAnalysis]:
        """Most recent analysis for the student."""
        with self._lock:
            analyses = [a for a in self._skill_gap_analyses.values() if a.student_id == student_id]
        return max(analyses, key=lambda a: a.id) if analyses else None

    def create_skill_gap_analysis(self, student_id: int, results: Dict[str, Any]) -> SkillGapAnalysis:
        with self._lock:
            analysis = SkillGapAnalysis(
                id=self._next_id("skill_gap_analysis"), student_id=student_id, results=results
            )
            self._skill_gap_analyses[analysis.id] = analysis
        logger.info("Stored skill gap analysis %s for student %s", analysis.id, student_id)
        return analysis

    # ============================================================
    # LEARNING RESOURCES
    # ============================================================

    def get_learning_resource(self, resource_id: int) -> Optional[LearningResource]:
        with self._lock:
            return self._learning_resources.get(resource_id)

    def create_learning_resource(self, data: Dict[str, Any]) -> LearningResource:
        with self._lock:
            resource = LearningResource(id=self._next_id("learning_resource"), **data)
            self._learning_resources[resource.id] = resource
        return resource

    def get_all_learning_resources(self) -> List[LearningResource]:
        with self._lock:
            return list(self._learning_resources.values())

    def get_learning_resources_by_skill(self, skill_tag: str) -> List[LearningResource]:
        tag = skill_tag.lower()
        with self._lock:
            return [r for r in self._learning_resources.values() if r.skill_tag.lower() == tag]

    def get_recommended_learning_resources_for_student(self, student_id: int) -> List[LearningResource]:
        """Resources whose tag appears in the latest analysis' skillGaps list."""
        analysis = self.get_skill_gap_analysis_for_student(student_id)
        if not analysis:
            return []

        gap_skills = analysis.results.get("skillGaps") or []
        with self._lock:
            return [r for r in self._learning_resources.values() if r.skill_tag in gap_skills]
