import importlib.util
import logging
import time
from logging.config import dictConfig

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from string_analyzer.config import settings

# ---------------------------------------------------
# Colorlog Availability Check
# ---------------------------------------------------
COLORLOG_AVAILABLE = importlib.util.find_spec("colorlog") is not None

LOG_LEVEL = settings.LOG_LEVEL.upper()

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] in %(module)s: %(message)s"

# ---------------------------------------------------
# Logging Configuration
# ---------------------------------------------------
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": LOG_FORMAT,
        },
        "color": (
            {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s" + LOG_FORMAT,
                "log_colors": {
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                },
            }
            if COLORLOG_AVAILABLE
            else {"format": LOG_FORMAT}
        ),
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "color" if COLORLOG_AVAILABLE else "default",
            "level": settings.CONSOLE_LOG_LEVEL.upper(),
        },
    },
    "loggers": {
        # Request lines come from our own middleware
        "uvicorn.access": {"level": "WARNING"},
        "string_analyzer": {
            "level": LOG_LEVEL,
            "handlers": ["console"],
            "propagate": False,
        },
        "string_analyzer.request": {
            "level": "INFO",
            "handlers": ["console"],
            "propagate": False,
        },
    },
    "root": {
        "level": LOG_LEVEL,
        "handlers": ["console"],
    },
}


def init_logging() -> None:
    dictConfig(LOGGING_CONFIG)


# ---------------------------------------------------
# Request Logging Middleware
# ---------------------------------------------------
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        logger = logging.getLogger("string_analyzer.request")
        start_time = time.perf_counter()

        response = await call_next(request)

        duration = (time.perf_counter() - start_time) * 1000
        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            duration,
        )
        return response
