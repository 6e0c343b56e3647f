"""
Form submission throttling.

Limits how often a client can submit create/update/delete forms, using
slowapi.

- IP-based keys (proxy headers honoured)
- In-memory storage by default; point RATE_LIMIT_STORAGE_URI at Redis for
  several workers
- Disabled entirely with RATE_LIMIT_ENABLED=false (tests do this)
"""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from catalog.config import get_settings
from catalog.templating import templates

logger = logging.getLogger(__name__)
settings = get_settings()


def get_client_ip(request: Request) -> str:
    """Key for the limiter: the client address, looking through reverse proxies."""
    # The left-most X-Forwarded-For entry is the original client
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


def create_limiter() -> Limiter:
    """Build the limiter shared by every catalog router."""
    limiter = Limiter(
        key_func=get_client_ip,
        storage_uri=settings.rate_limit_storage_uri,
        strategy="fixed-window",
        enabled=settings.rate_limit_enabled,
    )

    logger.info(
        f"Form posts limited to {settings.rate_limit_write} per client "
        f"(enabled={settings.rate_limit_enabled})"
    )

    return limiter


limiter = create_limiter()


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """
    Render the error page with 429 Too Many Requests.

    Adds Retry-After so browsers and proxies know when to try again.
    """
    limit_detail = str(exc.detail)

    logger.warning(f"{get_client_ip(request)} throttled on {request.url.path} ({limit_detail})")

    response = templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": "Too many requests",
            "message": "Too many submissions. Please slow down.",
            "status_code": 429,
        },
        status_code=429,
    )
    response.headers["Retry-After"] = str(60)
    response.headers["X-RateLimit-Limit"] = limit_detail
    return response
