from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import Dict, Any, List

from .models import TextRecord


class StringRequest(BaseModel):
    """Request schema for creating/analyzing a string."""
    value: str = Field(..., description="String to analyze")

    @field_validator("value")
    @classmethod
    def value_must_be_valid_unicode(cls, v: str) -> str:
        try:
            v.encode("utf-8")
        except UnicodeEncodeError:
            raise ValueError("value must contain only valid Unicode characters")
        return v


class StringProperties(BaseModel):
    """Computed properties of an analyzed string."""
    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    sha256_hash: str
    character_frequency_map: Dict[str, int]


class StringResponse(BaseModel):
    """Response schema for string records."""
    id: str
    value: str
    properties: StringProperties
    created_at: datetime

    @classmethod
    def from_record(cls, record: TextRecord) -> "StringResponse":
        props = record.properties
        return cls(
            id=record.fingerprint,
            value=record.content,
            properties=StringProperties(
                length=props.length,
                is_palindrome=props.is_palindrome,
                unique_characters=props.unique_characters,
                word_count=props.word_count,
                sha256_hash=props.fingerprint,
                character_frequency_map=props.character_frequency,
            ),
            created_at=record.created_at,
        )


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class FilterResponse(BaseModel):
    """Response schema for GET /strings."""
    data: List[StringResponse]
    count: int
    filters_applied: Dict[str, Any] = Field(default_factory=dict)


class NaturalLanguageResponse(BaseModel):
    """Response schema for natural language filtering."""
    data: List[StringResponse]
    count: int
    interpreted_query: InterpretedQuery


class HealthResponse(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    strings_count: int
