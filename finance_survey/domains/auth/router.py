"""Auth API router - login, token refresh, logout, session."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from finance_survey.core.config import settings
from finance_survey.dependencies.auth import BearerToken, CurrentAdmin, get_auth_service
from finance_survey.domains.auth.schemas import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    RefreshResponse,
    RegisterRequest,
    SessionResponse,
)
from finance_survey.domains.auth.service import AuthService

router = APIRouter()

AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest, service: AuthServiceDep):
    """
    Login with email and password.

    Returns access token and refresh token.
    """
    access_token, refresh_token = await service.login(
        email=request.email,
        password=request.password,
    )

    return LoginResponse(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=settings.jwt_access_token_expire_minutes * 60,
    )


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(request: RefreshRequest, service: AuthServiceDep):
    """Refresh access token using refresh token."""
    access_token = await service.refresh_tokens(refresh_token=request.refresh_token)

    return RefreshResponse(
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_minutes * 60,
    )


@router.post("/logout")
async def logout(token: BearerToken, service: AuthServiceDep):
    """
    Logout current session.

    Blacklists the access token and revokes the admin's refresh tokens.
    """
    await service.logout(access_token=token)
    return {"message": "Logged out successfully"}


@router.get("/session", response_model=SessionResponse)
async def get_session(current_admin: CurrentAdmin):
    """Return the signed-in admin, or 401 when there is no session."""
    return SessionResponse(**current_admin)


@router.post(
    "/register",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(request: RegisterRequest, service: AuthServiceDep):
    """Create an admin account (only when sign-up is enabled)."""
    admin = await service.register(
        email=request.email,
        password=request.password,
        name=request.name,
    )
    return SessionResponse(**admin.to_session())
