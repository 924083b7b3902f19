"""Security utilities - password hashing and admin session tokens."""

import hashlib
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from finance_survey.core.config import settings
from finance_survey.core.exceptions import InvalidTokenError, TokenExpiredError

ACCESS_TOKEN = "access"
REFRESH_TOKEN = "refresh"


def _prepare_password(password: str) -> bytes:
    """Prepare password for bcrypt (handle >72 bytes)."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > 72:
        return hashlib.sha256(password_bytes).hexdigest().encode("utf-8")
    return password_bytes


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(_prepare_password(password), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return bcrypt.checkpw(
        _prepare_password(plain_password),
        hashed_password.encode("utf-8"),
    )


def hash_token(token: str) -> str:
    """Deterministic digest used to look refresh tokens up in the database."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _encode(claims: dict[str, Any], token_type: str, lifetime: timedelta) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        **claims,
        "exp": now + lifetime,
        "iat": now,
        "jti": str(uuid.uuid4()),
        "type": token_type,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a JWT access token for an admin session.

    Args:
        data: Claims (sub, email, name)
        expires_delta: Custom expiration time

    Returns:
        Encoded JWT token string
    """
    lifetime = expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    return _encode(dict(data), ACCESS_TOKEN, lifetime)


def create_refresh_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """Create a JWT refresh token. Only the subject is carried over."""
    lifetime = expires_delta or timedelta(days=settings.jwt_refresh_token_expire_days)
    return _encode({"sub": data.get("sub")}, REFRESH_TOKEN, lifetime)


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and verify a JWT token.

    Raises:
        TokenExpiredError: If token has expired
        InvalidTokenError: If token is invalid
    """
    try:
        return jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(message=str(e))


def _verify(token: str, token_type: str) -> dict[str, Any]:
    payload = decode_token(token)
    if payload.get("type") != token_type:
        raise InvalidTokenError(message="Invalid token type")
    if not payload.get("sub"):
        raise InvalidTokenError(message="Invalid token payload")
    return payload


def verify_access_token(token: str) -> dict[str, Any]:
    """Verify an access token and return its payload."""
    return _verify(token, ACCESS_TOKEN)


def verify_refresh_token(token: str) -> dict[str, Any]:
    """Verify a refresh token and return its payload."""
    return _verify(token, REFRESH_TOKEN)


def token_ttl_seconds(payload: dict[str, Any]) -> int:
    """Seconds left before the token in ``payload`` expires (never below 1)."""
    exp = payload.get("exp")
    if exp is None:
        return settings.jwt_access_token_expire_minutes * 60
    remaining = int(exp - datetime.now(timezone.utc).timestamp())
    return max(1, remaining)
