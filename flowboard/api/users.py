"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from flowboard.api.dependencies import get_auth_service, get_current_user_id
from flowboard.schemas.auth import ProfileResponse
from flowboard.services.auth import AuthService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("/me", response_model=ProfileResponse)
def get_me(
    user_id: Annotated[int, Depends(get_current_user_id)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Get current user information."""
    return ProfileResponse(user=auth_service.get_profile(user_id))
