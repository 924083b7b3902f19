"""Auth domain schemas - request/response models."""

from pydantic import BaseModel, EmailStr, Field

from finance_survey.core.config import settings


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class LoginResponse(BaseModel):
    """Login response schema."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Access token expiration in seconds")


class RefreshRequest(BaseModel):
    """Token refresh request schema."""

    refresh_token: str


class RefreshResponse(BaseModel):
    """Token refresh response schema."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class RegisterRequest(BaseModel):
    """Admin sign-up request schema."""

    email: EmailStr
    password: str = Field(..., min_length=settings.admin_password_min_length, max_length=128)
    name: str = Field(..., min_length=1, max_length=100)


class SessionResponse(BaseModel):
    """Currently signed-in admin."""

    user_id: str
    email: str
    name: str
