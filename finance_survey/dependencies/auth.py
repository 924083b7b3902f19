"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from finance_survey.core.exceptions import AuthenticationError
from finance_survey.db.postgres import get_db
from finance_survey.domains.admin.repository import AdminRepository, AdminRepositoryInterface
from finance_survey.domains.auth.service import AuthService

# JWT Bearer scheme
bearer_scheme = HTTPBearer(auto_error=False)


def get_admin_repository(db: AsyncSession = Depends(get_db)) -> AdminRepositoryInterface:
    """Admin accounts backed by PostgreSQL."""
    return AdminRepository(db)


def get_auth_service(
    repository: Annotated[AdminRepositoryInterface, Depends(get_admin_repository)],
) -> AuthService:
    return AuthService(repository=repository)


async def get_bearer_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> str:
    """Raw bearer token from the Authorization header."""
    if not credentials:
        raise AuthenticationError("Authorization header required")
    return credentials.credentials


async def get_current_admin(
    token: Annotated[str, Depends(get_bearer_token)],
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> dict:
    """
    Verify the bearer token and return the signed-in admin.

    Used by every dashboard endpoint; without a session the request is
    answered with 401 and the client goes back to the login screen.

    Returns:
        dict with user_id, email, name
    """
    return await service.get_session(token)


# Type aliases for cleaner dependency injection
BearerToken = Annotated[str, Depends(get_bearer_token)]
CurrentAdmin = Annotated[dict, Depends(get_current_admin)]
