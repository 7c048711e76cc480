"""
Authentication Routes

POST /auth/register - Register new user
POST /auth/login - Login and get JWT token
GET /auth/me - Get current user info
GET /users/{user_id} - Get any user (no password)
"""

import logging
from fastapi import APIRouter, HTTPException, Depends

from internlink.api.deps import get_app_settings, get_storage
from internlink.core.auth import hash_password, verify_password, create_access_token, get_current_user
from internlink.core.config import Settings
from internlink.db.memory import MemStorage
from internlink.models import User
from internlink.schemas.schemas import (
    RegisterRequest, LoginRequest, TokenResponse, UserResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])
users_router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(request: RegisterRequest, storage: MemStorage = Depends(get_storage)):
    """
    Register a new user account.

    After registration, login to get access token, then create profile.
    """
    if storage.get_user_by_email(request.email):
        raise HTTPException(status_code=409, detail="User with this email already exists")

    user = storage.create_user({
        "email": request.email,
        "password_hash": hash_password(request.password),
        "name": request.name,
        "role": request.role.value
    })
    return user


@router.post("/login", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    settings: Settings = Depends(get_app_settings),
    storage: MemStorage = Depends(get_storage)
):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = storage.get_user_by_email(request.email)

    if not user or not verify_password(request.password, user.password_hash):
        logger.info("Failed login for %s", request.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user, settings)

    return TokenResponse(access_token=token, user_id=user.id, role=user.role)


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    """Get current authenticated user's info."""
    return user


@users_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, storage: MemStorage = Depends(get_storage)):
    """Get a user by id. The password hash is never returned."""
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user
