import logging
from typing import Any

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

logger = logging.getLogger("string_analyzer.limiter")


def default_limit() -> str:
    return f"{settings.RATE_LIMIT} per {settings.RATE_LIMIT_WINDOW} seconds"


def create_limiter() -> Limiter:
    try:
        return Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
    except Exception:
        logger.exception("Failed to create slowapi Limiter")
        raise


limiter = create_limiter()


def get_rate_limit_decorator(limit: str | None = None, error_message: str | None = None) -> Any:
    """Per-route limit; without ``limit`` the configured default is read on every request."""
    if limit:
        return limiter.limit(limit, error_message=error_message)
    return limiter.limit(default_limit, error_message=error_message)
