"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from flowboard.api.dependencies import get_auth_service, get_token_service
from flowboard.schemas.auth import AuthResponse, UserLogin, UserRegister
from flowboard.services.auth import AuthService
from flowboard.services.security import TokenService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserRegister,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data.name, user_data.email, user_data.password)
    return AuthResponse(user=user, token=token_service.issue(user.id))


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
):
    """Login with email and password."""
    user = auth_service.authenticate(credentials.email, credentials.password)
    return AuthResponse(user=user, token=token_service.issue(user.id))
