import logging
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from string_analyzer import limiter as limiter_module
from string_analyzer.config import settings
from string_analyzer.logging import RequestLoggingMiddleware, init_logging
from string_analyzer.routes import router

init_logging()
logger = logging.getLogger("string_analyzer")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "%s %s starting (rate limiting %s)",
        settings.APP_NAME,
        settings.APP_VERSION,
        "enabled" if settings.RATE_LIMIT_ENABLED else "disabled",
    )
    yield
    logger.info("%s shutting down", settings.APP_NAME)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=(
        "Analyze and store strings, then query them by their computed properties.\n\n"
        "Filters can be given as explicit query parameters or as a natural language phrase."
    ),
    lifespan=lifespan,
)
app.state.limiter = limiter_module.limiter

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


def _error_body(status_code: int, message: Any) -> dict:
    return {"error": HTTPStatus(status_code).phrase, "message": message}


def _jsonable_errors(errors: Any) -> list:
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in errors
    ]


# -------------------------------
# Unified error response handlers
# -------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    log = logger.warning if exc.status_code < 500 else logger.error
    log(
        "HTTPException: %s %s -> %s | detail=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.detail,
    )
    message = exc.detail
    if exc.status_code == 404 and message == HTTPStatus.NOT_FOUND.phrase:
        message = "Endpoint not found"
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.status_code, message))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    path = request.url.path
    errors = exc.errors()
    is_post_strings = request.method == "POST" and path.endswith("/strings")
    is_get_strings = request.method == "GET" and path.endswith("/strings")

    if is_post_strings:
        # Missing field or invalid JSON -> 400, wrong type -> 422
        missing = any(err.get("type") in {"missing", "model_attributes_type"} for err in errors)
        json_invalid = any(err.get("type") == "json_invalid" for err in errors)
        status = 400 if (missing or json_invalid) else 422
    elif is_get_strings:
        status = 400
    else:
        status = 422

    details = _jsonable_errors(errors)
    logger.warning("ValidationError: %s %s -> %s | errors=%s", request.method, path, status, details)
    return JSONResponse(
        status_code=status,
        content=_error_body(status, details),
    )


@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("Rate limit exceeded: %s %s | limit=%s", request.method, request.url.path, exc.detail)
    return JSONResponse(
        status_code=429,
        content=_error_body(429, f"Rate limit exceeded: {exc.detail}"),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=_error_body(500, "An unexpected error occurred"),
    )


def run() -> None:
    import uvicorn

    uvicorn.run("string_analyzer.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
