"""
String analysis core: property computation, filtering and natural language queries
"""
from .analyzer import analyze, compute_fingerprint
from .filters import apply_filters
from .models import FilterCriteria, PropertyRecord, TextRecord
from .nlp import interpret

__all__ = [
    "analyze",
    "compute_fingerprint",
    "apply_filters",
    "interpret",
    "FilterCriteria",
    "PropertyRecord",
    "TextRecord",
]
