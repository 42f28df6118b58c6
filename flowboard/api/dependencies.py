"""FastAPI dependencies for authentication and services."""

import logging
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from flowboard.config import get_settings
from flowboard.database import get_db
from flowboard.errors import InvalidToken, Unauthenticated
from flowboard.services.auth import AuthService
from flowboard.services.pages import PageService
from flowboard.services.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

# auto_error=False so a missing header goes through our 401 handler
security = HTTPBearer(auto_error=False)


@lru_cache
def get_token_service() -> TokenService:
    """Get the token service configured from settings."""
    settings = get_settings()
    return TokenService(
        settings.jwt_secret,
        ttl=timedelta(minutes=settings.jwt_expiration_minutes),
        algorithm=settings.jwt_algorithm,
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the password hasher configured from settings."""
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> int:
    """Resolve the acting user id from the bearer token."""
    if credentials is None:
        raise Unauthenticated("Authorization header required")

    try:
        return token_service.verify(credentials.credentials)
    except InvalidToken as e:
        logger.info(f"Rejected bearer token: {type(e).__name__}")
        raise


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, hasher)


def get_page_service(
    db: Annotated[Session, Depends(get_db)],
) -> PageService:
    """Get page service with dependencies."""
    return PageService(db)
