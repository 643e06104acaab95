import logging
from dataclasses import dataclass
from typing import List, Optional

from .analyzer import compute_fingerprint
from .db import StringStore
from .errors import (
    ConflictingFiltersError,
    InvalidFilterError,
    QueryParseError,
    StringNotFoundError,
)
from .filters import apply_filters
from .models import FilterCriteria, TextRecord
from .nlp import interpret

logger = logging.getLogger("string_analyzer.services")


@dataclass(frozen=True)
class FilterResult:
    records: List[TextRecord]
    criteria: FilterCriteria
    original_query: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.records)


def create_string(value: str, store: StringStore) -> TextRecord:
    record = store.add(TextRecord.create(value))
    logger.info("Created string %s (length=%d)", record.fingerprint, record.properties.length)
    return record


def get_string_by_value(string_value: str, store: StringStore) -> TextRecord:
    """Lookup record by hashing the exact provided string value."""
    record = store.get(compute_fingerprint(string_value))
    if record is None:
        raise StringNotFoundError("String does not exist in the system")
    return record


def delete_string_by_value(string_value: str, store: StringStore) -> None:
    fingerprint = compute_fingerprint(string_value)
    if not store.remove(fingerprint):
        raise StringNotFoundError("String does not exist in the system")
    logger.info("Deleted string %s", fingerprint)


def validate_query_filters(
    is_palindrome: Optional[bool] = None,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
    word_count: Optional[int] = None,
    contains_character: Optional[str] = None,
) -> FilterCriteria:
    """Build criteria from explicit parameters, rejecting invalid values."""
    if min_length is not None and min_length < 0:
        raise InvalidFilterError("min_length must be a non-negative integer")

    if max_length is not None and max_length < 0:
        raise InvalidFilterError("max_length must be a non-negative integer")

    if word_count is not None and word_count < 0:
        raise InvalidFilterError("word_count must be a non-negative integer")

    if contains_character is not None and len(contains_character) != 1:
        raise InvalidFilterError("contains_character must be a single character")

    if min_length is not None and max_length is not None and min_length > max_length:
        raise InvalidFilterError("min_length cannot be greater than max_length")

    return FilterCriteria(
        is_palindrome=is_palindrome,
        min_length=min_length,
        max_length=max_length,
        word_count=word_count,
        contains_character=contains_character,
    )


def list_strings(store: StringStore, criteria: FilterCriteria) -> FilterResult:
    return FilterResult(records=apply_filters(store.all(), criteria), criteria=criteria)


def filter_by_natural_language(store: StringStore, query: str) -> FilterResult:
    if not query or not query.strip():
        raise QueryParseError("Missing \"query\" parameter")

    criteria = interpret(query)
    if criteria.is_empty():
        logger.warning("Unable to parse natural language query: %r", query)
        raise QueryParseError("Unable to parse natural language query")

    if (
        criteria.min_length is not None
        and criteria.max_length is not None
        and criteria.min_length > criteria.max_length
    ):
        raise ConflictingFiltersError("Query parsed but resulted in conflicting filters")

    logger.debug("Interpreted %r as %s", query, criteria.as_dict())
    return FilterResult(
        records=apply_filters(store.all(), criteria),
        criteria=criteria,
        original_query=query,
    )
