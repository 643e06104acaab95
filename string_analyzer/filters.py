from typing import Iterable, List

from .models import FilterCriteria, TextRecord


def matches(record: TextRecord, criteria: FilterCriteria) -> bool:
    """Return True when ``record`` satisfies every present criterion."""
    props = record.properties

    if criteria.is_palindrome is not None and props.is_palindrome != criteria.is_palindrome:
        return False

    if criteria.min_length is not None and props.length < criteria.min_length:
        return False

    if criteria.max_length is not None and props.length > criteria.max_length:
        return False

    if criteria.word_count is not None and props.word_count != criteria.word_count:
        return False

    if criteria.contains_character is not None:
        # Case-insensitive, against the raw content rather than the frequency map
        if criteria.contains_character.lower() not in record.content.lower():
            return False

    return True


def apply_filters(records: Iterable[TextRecord], criteria: FilterCriteria) -> List[TextRecord]:
    """Order-preserving subset of ``records`` matching ``criteria`` (logical AND)."""
    return [r for r in records if matches(r, criteria)]
