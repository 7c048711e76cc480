"""
Shared FastAPI dependencies.

The repository and settings are attached to app.state by create_app();
handlers reach them (and the services built on them) through these.
"""

from fastapi import Depends, Request

from internlink.core.config import Settings
from internlink.db.memory import MemStorage
from internlink.services.matching_service import MatchingService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_storage(request: Request) -> MemStorage:
    return request.app.state.storage


def get_matching_service(storage: MemStorage = Depends(get_storage)) -> MatchingService:
    return MatchingService(storage)
