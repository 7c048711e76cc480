"""
Authentication Utility - passwords and bearer tokens.

Provides:
- bcrypt password hashing (passlib)
- JWT issue/verify (python-jose), signed with the app's own Settings
- get_current_user dependency resolving the token's user from storage

Only /auth/me is protected. Marketplace routes take identifiers in the
path and do not check ownership.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext

from internlink.api.deps import get_app_settings, get_storage
from internlink.core.config import Settings
from internlink.db.memory import MemStorage
from internlink.models import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
bearer_scheme = HTTPBearer()


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def create_access_token(user: User, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    """Token for a user: sub is the user id (as text), role rides along."""
    lifetime = expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    claims = {
        "sub": str(user.id),
        "role": user.role,
        "exp": datetime.utcnow() + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> Optional[Dict[str, Any]]:
    """Claims of a valid token, None if the signature or expiry check fails."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    settings: Settings = Depends(get_app_settings),
    storage: MemStorage = Depends(get_storage)
) -> User:
    """
    FastAPI dependency - the user named by the bearer token.

    Usage:
        @router.get("/protected")
        async def route(user: User = Depends(get_current_user)):
            return user
    """
    rejected = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    claims = decode_token(credentials.credentials, settings)
    if not claims:
        raise rejected

    subject = str(claims.get("sub") or "")
    if not subject.isdigit():
        raise rejected

    user = storage.get_user(int(subject))
    if not user:
        raise rejected

    return user
