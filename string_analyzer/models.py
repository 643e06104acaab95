"""Value types shared by the analyzer, the filter evaluator and the query interpreter.

All of them are immutable: a record is produced whole and never edited afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class PropertyRecord:
    """Properties derived from a single analyzed string."""

    length: int
    is_palindrome: bool
    unique_characters: int
    word_count: int
    fingerprint: str
    character_frequency: Dict[str, int]


@dataclass(frozen=True, slots=True)
class TextRecord:
    """A stored string together with its properties.

    ``fingerprint`` doubles as the storage key. ``created_at`` is assigned by the
    store when the record is inserted.
    """

    content: str
    fingerprint: str
    properties: PropertyRecord
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, content: str) -> "TextRecord":
        from .analyzer import analyze

        props = analyze(content)
        return cls(content=content, fingerprint=props.fingerprint, properties=props)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Optional constraints on analyzed strings. ``None`` means unconstrained."""

    is_palindrome: Optional[bool] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    word_count: Optional[int] = None
    contains_character: Optional[str] = None

    def is_empty(self) -> bool:
        return not self.as_dict()

    def as_dict(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
