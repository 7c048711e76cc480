"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internlink.api.routes.auth_routes import router as auth_router, users_router
from internlink.api.routes.student_routes import router as student_router
from internlink.api.routes.employer_routes import router as employer_router
from internlink.api.routes.job_routes import router as job_router
from internlink.api.routes.application_routes import router as application_router
from internlink.api.routes.matching_routes import router as matching_router
from internlink.api.routes.message_routes import router as message_router
from internlink.api.routes.learning_routes import router as learning_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(users_router)
api_router.include_router(student_router)
api_router.include_router(employer_router)
api_router.include_router(job_router)
api_router.include_router(application_router)
api_router.include_router(matching_router)
api_router.include_router(message_router)
api_router.include_router(learning_router)
