"""Shared fixtures: a fresh app (and repository) per test."""

import pytest
from fastapi.testclient import TestClient

from internlink.core.config import Settings
from internlink.db.memory import MemStorage
from internlink.main import create_app
from internlink.services.matching_service import MatchingService


@pytest.fixture
def settings():
    return Settings(match_store_backend="memory", log_level="WARNING", default_match_limit=10)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def storage(app) -> MemStorage:
    return app.state.storage


@pytest.fixture
def matching(storage) -> MatchingService:
    return MatchingService(storage)


@pytest.fixture
def make_student(storage):
    """Create a user + student profile; returns the profile."""
    counter = {"n": 0}

    def _make(skills=None, **fields):
        counter["n"] += 1
        user = storage.create_user({
            "email": f"student{counter['n']}@example.com",
            "password_hash": "x",
            "name": f"Student {counter['n']}",
            "role": "student",
        })
        return storage.create_student_profile({"user_id": user.id, "skills": skills or [], **fields})

    return _make


@pytest.fixture
def employer(storage):
    user = storage.create_user({
        "email": "hr@acme.example.com",
        "password_hash": "x",
        "name": "Acme HR",
        "role": "employer",
    })
    return storage.create_employer_profile({"user_id": user.id, "company_name": "Acme"})


@pytest.fixture
def make_job(storage, employer):
    """Create an active job for the shared employer; returns the job."""

    def _make(skills=None, title="Intern", **fields):
        data = {
            "employer_id": employer.id,
            "title": title,
            "description": f"{title} position",
            "location": "Remote",
            "skills": skills or [],
        }
        data.update(fields)
        return storage.create_job(data)

    return _make
