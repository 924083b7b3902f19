"""Auth domain service - admin sign-in and sessions."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from finance_survey.core.config import settings
from finance_survey.core.exceptions import (
    AuthenticationError,
    DuplicateError,
    InvalidCredentialsError,
    InvalidTokenError,
    SignupDisabledError,
)
from finance_survey.core.security import (
    create_access_token,
    create_refresh_token,
    hash_password,
    hash_token,
    token_ttl_seconds,
    verify_access_token,
    verify_password,
    verify_refresh_token,
)
from finance_survey.db.redis import RedisCache, jwt_blacklist
from finance_survey.domains.admin.models import Admin, RefreshToken
from finance_survey.domains.admin.repository import AdminRepositoryInterface

logger = logging.getLogger(__name__)


def _claims(admin: Admin) -> dict[str, Any]:
    return {"sub": str(admin.id), "email": admin.email, "name": admin.name}


def _parse_subject(payload: dict[str, Any]) -> UUID:
    try:
        return UUID(str(payload["sub"]))
    except (KeyError, ValueError):
        raise InvalidTokenError("Invalid token payload")


class AuthService:
    """Authentication service."""

    def __init__(
        self,
        repository: AdminRepositoryInterface,
        blacklist: RedisCache = jwt_blacklist,
    ):
        self._repo = repository
        self._blacklist = blacklist

    async def login(self, email: str, password: str) -> tuple[str, str]:
        """
        Authenticate an admin and return tokens.

        Returns:
            Tuple of (access_token, refresh_token)

        Raises:
            InvalidCredentialsError: For any failure; the reason is not disclosed
        """
        admin = await self._repo.get_by_email(email.lower())

        if not admin or not admin.is_active or not verify_password(password, admin.password_hash):
            logger.info("Rejected admin sign-in attempt")
            raise InvalidCredentialsError()

        await self._repo.record_login(admin)

        claims = _claims(admin)
        access_token = create_access_token(claims)
        refresh_token = create_refresh_token(claims)

        await self._repo.add_refresh_token(
            RefreshToken(
                admin_id=admin.id,
                token_hash=hash_token(refresh_token),
                expires_at=datetime.now(timezone.utc)
                + timedelta(days=settings.jwt_refresh_token_expire_days),
            )
        )
        logger.info("Admin %s signed in", admin.id)
        return access_token, refresh_token

    async def refresh_tokens(self, refresh_token: str) -> str:
        """
        Issue a new access token from a refresh token.

        Raises:
            InvalidTokenError: If the refresh token is invalid, revoked or expired
        """
        payload = verify_refresh_token(refresh_token)

        record = await self._repo.get_refresh_token(hash_token(refresh_token))
        if not record or record.is_revoked or record.is_expired:
            raise InvalidTokenError("Refresh token is no longer valid")

        admin = await self._repo.get_by_id(_parse_subject(payload))
        if not admin or not admin.is_active:
            raise InvalidTokenError("Admin not found or inactive")

        return create_access_token(_claims(admin))

    async def get_session(self, access_token: str) -> dict:
        """
        Resolve the admin behind an access token.

        Raises:
            InvalidTokenError: If the token is invalid or revoked
            TokenExpiredError: If the token has expired
            AuthenticationError: If the admin no longer exists or is inactive
        """
        payload = verify_access_token(access_token)

        jti = payload.get("jti")
        if jti and await self._blacklist.exists(jti):
            raise InvalidTokenError("Token has been revoked")

        admin = await self._repo.get_by_id(_parse_subject(payload))
        if not admin or not admin.is_active:
            raise AuthenticationError("Admin not found or inactive")

        return admin.to_session()

    async def logout(self, access_token: str) -> None:
        """Revoke the access token and every refresh token of its admin."""
        payload = verify_access_token(access_token)

        jti = payload.get("jti")
        if jti:
            await self._blacklist.set(jti, "1", ttl=token_ttl_seconds(payload))

        revoked = await self._repo.revoke_refresh_tokens(_parse_subject(payload))
        logger.info("Admin %s signed out, %s refresh tokens revoked", payload["sub"], revoked)

    async def register(self, email: str, password: str, name: str) -> Admin:
        """
        Create an admin account.

        Raises:
            SignupDisabledError: If self sign-up is switched off
            DuplicateError: If the email is taken
        """
        if not settings.allow_admin_signup:
            raise SignupDisabledError()

        email = email.lower()
        if await self._repo.get_by_email(email):
            raise DuplicateError("email", email)

        admin = await self._repo.create(
            Admin(email=email, password_hash=hash_password(password), name=name)
        )
        logger.info("Admin account %s created", admin.id)
        return admin
