from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from .config import settings
from .db import db
from .errors import (
    ConflictingFiltersError,
    InvalidFilterError,
    QueryParseError,
    StringAlreadyExistsError,
    StringNotFoundError,
)
from .limiter import get_rate_limit_decorator
from .schemas import (
    FilterResponse,
    HealthResponse,
    InterpretedQuery,
    NaturalLanguageResponse,
    StringRequest,
    StringResponse,
)
from .services import (
    create_string,
    delete_string_by_value,
    filter_by_natural_language,
    get_string_by_value,
    list_strings,
    validate_query_filters,
)

router = APIRouter()


@router.get("/")
@get_rate_limit_decorator()
def root(request: Request) -> dict:
    """Service banner with the available endpoints."""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "endpoints": {
            "create": "POST /strings",
            "get_one": "GET /strings/{string_value}",
            "get_all": "GET /strings",
            "natural_language": "GET /strings/filter-by-natural-language",
            "delete": "DELETE /strings/{string_value}",
            "health": "GET /health",
        },
    }


@router.get("/health", response_model=HealthResponse)
@get_rate_limit_decorator()
def health(request: Request) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(timestamp=datetime.now(timezone.utc), strings_count=len(db))


@router.post("/strings", response_model=StringResponse, status_code=status.HTTP_201_CREATED)
@get_rate_limit_decorator()
def create_string_endpoint(request: Request, payload: StringRequest) -> StringResponse:
    """Create and analyze a string."""
    try:
        record = create_string(payload.value, db)
    except StringAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return StringResponse.from_record(record)


@router.get("/strings/filter-by-natural-language", response_model=NaturalLanguageResponse)
@get_rate_limit_decorator()
def filter_by_natural_language_endpoint(request: Request, query: Optional[str] = Query(None)) -> NaturalLanguageResponse:
    """Filter strings using a natural language query."""
    try:
        result = filter_by_natural_language(db, query or "")
    except QueryParseError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ConflictingFiltersError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return NaturalLanguageResponse(
        data=[StringResponse.from_record(r) for r in result.records],
        count=result.count,
        interpreted_query=InterpretedQuery(
            original=result.original_query or "",
            parsed_filters=result.criteria.as_dict(),
        ),
    )


@router.get("/strings/{string_value}", response_model=StringResponse)
@get_rate_limit_decorator()
def get_string_endpoint(request: Request, string_value: str) -> StringResponse:
    """Get a specific string by its raw value."""
    try:
        record = get_string_by_value(string_value, db)
    except StringNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return StringResponse.from_record(record)


@router.get("/strings", response_model=FilterResponse)
@get_rate_limit_decorator()
def get_all_strings(
    request: Request,
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None),
    max_length: Optional[int] = Query(None),
    word_count: Optional[int] = Query(None),
    contains_character: Optional[str] = Query(None),
) -> FilterResponse:
    """Get all strings with optional filtering."""
    try:
        criteria = validate_query_filters(is_palindrome, min_length, max_length, word_count, contains_character)
    except InvalidFilterError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    result = list_strings(db, criteria)
    return FilterResponse(
        data=[StringResponse.from_record(r) for r in result.records],
        count=result.count,
        filters_applied=criteria.as_dict(),
    )


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
@get_rate_limit_decorator()
def delete_string_endpoint(request: Request, string_value: str) -> Response:
    """Delete a string by its raw value."""
    try:
        delete_string_by_value(string_value, db)
    except StringNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
