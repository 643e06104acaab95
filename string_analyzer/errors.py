class StringAnalyzerError(Exception):
    """Base class for service-level failures."""


class StringAlreadyExistsError(StringAnalyzerError):
    pass


class StringNotFoundError(StringAnalyzerError):
    pass


class InvalidFilterError(StringAnalyzerError):
    """Explicit filter parameters failed validation."""


class QueryParseError(StringAnalyzerError):
    """A natural language query produced no recognizable filters."""


class ConflictingFiltersError(StringAnalyzerError):
    """A natural language query produced filters that cannot all hold."""
