import re
from collections import Counter
from hashlib import sha256
from typing import Dict

from .models import PropertyRecord

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def compute_fingerprint(content: str) -> str:
    """SHA-256 of the exact content, lowercase hex."""
    return sha256(content.encode("utf-8")).hexdigest()


def is_palindrome(content: str) -> bool:
    """Case-insensitive palindrome check over ASCII letters and digits only."""
    cleaned = _NON_ALNUM.sub("", content.lower())
    return cleaned == cleaned[::-1]


def count_unique_characters(content: str) -> int:
    return len(set(content))


def count_words(content: str) -> int:
    return len(content.split())


def character_frequency(content: str) -> Dict[str, int]:
    return dict(Counter(content))


def analyze(content: str) -> PropertyRecord:
    """Compute every derived property of ``content``. Never fails."""
    return PropertyRecord(
        length=len(content),
        is_palindrome=is_palindrome(content),
        unique_characters=count_unique_characters(content),
        word_count=count_words(content),
        fingerprint=compute_fingerprint(content),
        character_frequency=character_frequency(content),
    )
