"""Pydantic schemas for request/response validation."""

from flowboard.schemas.auth import AuthResponse, ProfileResponse, UserLogin, UserRegister, UserResponse
from flowboard.schemas.page import PageInput, PageResponse

__all__ = [
    "AuthResponse",
    "ProfileResponse",
    "UserLogin",
    "UserRegister",
    "UserResponse",
    "PageInput",
    "PageResponse",
]
