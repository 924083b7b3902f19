"""Security middleware - response headers and rate limiting."""

import logging
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from finance_survey.core.config import settings
from finance_survey.core.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

UNLIMITED_PATHS = frozenset({"/health", "/", "/docs", "/redoc", "/openapi.json"})


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """
    Add security headers to all responses.

    The dashboard serves personal data (names, record numbers, phone
    numbers), so responses are never framed, sniffed or cached by proxies.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if request.url.path.startswith(f"{settings.api_prefix}/dashboard"):
            response.headers["Cache-Control"] = "no-store"

        if "server" in response.headers:
            del response.headers["server"]

        if settings.is_production:
            response.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"

        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Fixed-window rate limiting per client IP and path, counted in Redis.

    Protects the public submission endpoint from form flooding. When Redis
    is unavailable requests are let through.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in UNLIMITED_PATHS:
            return await call_next(request)

        key = f"rate_limit:{self._get_client_ip(request)}:{request.url.path}"
        current = 0

        try:
            from finance_survey.db.redis import get_redis

            redis = get_redis()
            current = int(await redis.get(key) or 0)

            if current >= settings.rate_limit_requests:
                error = RateLimitExceededError(retry_after=settings.rate_limit_window_seconds)
                return JSONResponse(
                    status_code=error.status_code,
                    content={
                        "error": {
                            "code": error.error_code,
                            "message": error.message,
                            "details": error.details,
                        }
                    },
                    headers={
                        "Retry-After": str(settings.rate_limit_window_seconds),
                        "X-RateLimit-Limit": str(settings.rate_limit_requests),
                        "X-RateLimit-Remaining": "0",
                    },
                )

            pipe = redis.pipeline()
            pipe.incr(key)
            pipe.expire(key, settings.rate_limit_window_seconds)
            await pipe.execute()
        except Exception as e:
            logger.warning("Rate limiting skipped: %s", e)

        response = await call_next(request)

        remaining = max(0, settings.rate_limit_requests - current - 1)
        response.headers["X-RateLimit-Limit"] = str(settings.rate_limit_requests)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        return response

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP from request, handling proxies."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()

        real_ip = request.headers.get("X-Real-IP")
        if real_ip:
            return real_ip

        if request.client:
            return request.client.host

        return "unknown"
