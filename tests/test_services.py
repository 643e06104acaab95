from datetime import datetime, timezone

import pytest

from string_analyzer.db import StringStore
from string_analyzer.errors import (
    ConflictingFiltersError,
    InvalidFilterError,
    QueryParseError,
    StringAlreadyExistsError,
    StringNotFoundError,
)
from string_analyzer.models import FilterCriteria
from string_analyzer.services import (
    create_string,
    delete_string_by_value,
    filter_by_natural_language,
    get_string_by_value,
    list_strings,
    validate_query_filters,
)


@pytest.fixture
def store():
    return StringStore()


class TestCreateString:
    def test_create_new_string(self, store):
        record = create_string("test string", store)
        assert record.content == "test string"
        assert record.fingerprint == record.properties.fingerprint
        assert isinstance(record.created_at, datetime)
        assert record.created_at.tzinfo == timezone.utc
        assert len(store) == 1

    def test_duplicate_raises_error(self, store):
        create_string("test string", store)
        with pytest.raises(StringAlreadyExistsError, match="already exists"):
            create_string("test string", store)

    def test_empty_string_allowed(self, store):
        record = create_string("", store)
        assert record.properties.length == 0


class TestLookupAndDelete:
    def test_get_by_value(self, store):
        created = create_string("find me", store)
        assert get_string_by_value("find me", store) is created

    def test_get_missing(self, store):
        with pytest.raises(StringNotFoundError):
            get_string_by_value("nope", store)

    def test_delete(self, store):
        create_string("to delete", store)
        delete_string_by_value("to delete", store)
        assert len(store) == 0

    def test_delete_missing(self, store):
        with pytest.raises(StringNotFoundError):
            delete_string_by_value("nope", store)


class TestValidateQueryFilters:
    def test_no_parameters(self):
        assert validate_query_filters().is_empty()

    def test_valid_parameters(self):
        criteria = validate_query_filters(True, 1, 10, 2, "a")
        assert criteria == FilterCriteria(
            is_palindrome=True, min_length=1, max_length=10, word_count=2, contains_character="a"
        )

    def test_contains_character_kept_as_given(self):
        assert validate_query_filters(contains_character="A").contains_character == "A"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_length": -1},
            {"max_length": -1},
            {"word_count": -1},
            {"contains_character": "ab"},
            {"contains_character": ""},
            {"min_length": 10, "max_length": 5},
        ],
    )
    def test_invalid_parameters(self, kwargs):
        with pytest.raises(InvalidFilterError):
            validate_query_filters(**kwargs)


class TestFiltering:
    @pytest.fixture
    def populated(self, store):
        for v in ["a", "racecar", "hello world", "level"]:
            create_string(v, store)
        return store

    def test_list_with_empty_criteria(self, populated):
        result = list_strings(populated, FilterCriteria())
        assert result.count == 4
        assert result.original_query is None

    def test_list_with_criteria(self, populated):
        result = list_strings(populated, FilterCriteria(is_palindrome=True))
        assert [r.content for r in result.records] == ["a", "racecar", "level"]

    def test_natural_language(self, populated):
        result = filter_by_natural_language(populated, "all single word palindromic strings")
        assert result.count == 3
        assert result.original_query == "all single word palindromic strings"
        assert result.criteria.as_dict() == {"is_palindrome": True, "word_count": 1}

    def test_natural_language_unparseable(self, populated):
        with pytest.raises(QueryParseError):
            filter_by_natural_language(populated, "bananas are yellow")

    @pytest.mark.parametrize("query", ["", "   "])
    def test_natural_language_blank(self, populated, query):
        with pytest.raises(QueryParseError):
            filter_by_natural_language(populated, query)

    def test_natural_language_conflict(self, populated):
        with pytest.raises(ConflictingFiltersError):
            filter_by_natural_language(populated, "strings longer than 10 and shorter than 5")
