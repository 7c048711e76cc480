"""
InternLink - Main Application

FastAPI backend with:
- In-memory repository for users, profiles, jobs, applications, messages
- Match scores in memory or in a SQL table (MATCH_STORE_BACKEND)
- Skill-based matching in both directions (students <-> jobs)
- JWT authentication

Run: uvicorn internlink.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from internlink import __version__
from internlink.api.routes import api_router
from internlink.core.config import Settings, get_settings
from internlink.core.logger import configure_logging
from internlink.db import build_storage

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application and its repository.

    Each call gets a fresh storage; pass explicit Settings to pick the
    match store backend or matching defaults.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="""
        Internship marketplace connecting students, employers and colleges.

        ## Features
        - **Authentication**: registration, login, JWT bearer tokens
        - **Profiles**: student profiles (with completion score) and employer profiles
        - **Jobs**: posting, search, activation
        - **Applications**: apply and track status
        - **Matching**: ranked jobs for a student and students for a job
        - **Messages**: direct messages between users
        - **Learning**: skill gap analyses and learning resources
        """,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.state.settings = settings
    app.state.storage = build_storage(settings)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "match_store": settings.match_store_backend,
            "match_scores": app.state.storage.match_scores.count()
        }

    logger.info("%s %s ready", settings.app_name, __version__)
    return app


app = create_app()
