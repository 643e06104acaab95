"""Natural language query interpretation.

Phrases are lowercased and run through ``RULES`` in order. Every rule is
evaluated; a rule that fires writes one or more criteria fields, and a later
rule writing the same field overwrites the earlier value (e.g. "first vowel"
replaces a letter captured by the "contains the letter X" rule).

Rule order:

1. palindrome / palindromic         -> is_palindrome = True
2. single / two / 2 / three / 3 word -> word_count (first listed phrase wins)
3. longer than N                    -> min_length = N + 1
4. shorter than N                   -> max_length = N - 1
5. contain(s|ing) [the letter|the character] X -> contains_character = X
6. first vowel / second vowel       -> contains_character = 'a' / 'e'
"""
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from .models import FilterCriteria

Rule = Callable[[str], Optional[Dict[str, Any]]]

_WORD_COUNT_PHRASES: Tuple[Tuple[Tuple[str, ...], int], ...] = (
    (("single word",), 1),
    (("two word", "2 word"), 2),
    (("three word", "3 word"), 3),
)

# Fixed lookup, not a positional vowel search over candidate strings
_VOWEL_PHRASES: Tuple[Tuple[str, str], ...] = (
    ("first vowel", "a"),
    ("second vowel", "e"),
)

_LONGER_THAN = re.compile(r"longer than (\d+)")
_SHORTER_THAN = re.compile(r"shorter than (\d+)")
_CONTAINS_LETTER = re.compile(r"contain(?:s|ing)? (?:the letter |the character )?([a-z])\b")


def _palindrome(q: str) -> Optional[Dict[str, Any]]:
    if "palindrome" in q or "palindromic" in q:
        return {"is_palindrome": True}
    return None


def _word_count(q: str) -> Optional[Dict[str, Any]]:
    for phrases, count in _WORD_COUNT_PHRASES:
        if any(p in q for p in phrases):
            return {"word_count": count}
    return None


def _longer_than(q: str) -> Optional[Dict[str, Any]]:
    m = _LONGER_THAN.search(q)
    if m:
        return {"min_length": int(m.group(1)) + 1}
    return None


def _shorter_than(q: str) -> Optional[Dict[str, Any]]:
    m = _SHORTER_THAN.search(q)
    if m:
        return {"max_length": int(m.group(1)) - 1}
    return None


def _contains_letter(q: str) -> Optional[Dict[str, Any]]:
    m = _CONTAINS_LETTER.search(q)
    if m:
        return {"contains_character": m.group(1)}
    return None


def _vowel(q: str) -> Optional[Dict[str, Any]]:
    for phrase, letter in _VOWEL_PHRASES:
        if phrase in q:
            return {"contains_character": letter}
    return None


RULES: List[Tuple[str, Rule]] = [
    ("palindrome", _palindrome),
    ("word_count", _word_count),
    ("longer_than", _longer_than),
    ("shorter_than", _shorter_than),
    ("contains_letter", _contains_letter),
    ("vowel", _vowel),
]


def interpret(phrase: str) -> FilterCriteria:
    """Translate a free-text phrase into filter criteria.

    Returns an empty ``FilterCriteria`` when nothing is recognized; callers
    decide how to report that.
    """
    q = phrase.lower()
    filters: Dict[str, Any] = {}
    for _name, rule in RULES:
        found = rule(q)
        if found:
            filters.update(found)
    return FilterCriteria(**filters)
