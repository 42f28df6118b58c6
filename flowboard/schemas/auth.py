"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


def _reject_nul(value: str) -> str:
    # bcrypt cannot hash passwords containing NUL
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, value: str) -> str:
        return _reject_nul(value)


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def password_has_no_nul(cls, value: str) -> str:
        return _reject_nul(value)


class UserResponse(BaseModel):
    """Public view of a user. Has no credential field."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    user: UserResponse
    token: str
    token_type: str = "bearer"  # noqa: S105


class ProfileResponse(BaseModel):
    """Current user response."""

    user: UserResponse
