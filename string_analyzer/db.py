import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from .errors import StringAlreadyExistsError
from .models import TextRecord


class StringStore:
    """In-memory record store keyed by fingerprint, one record per fingerprint."""

    def __init__(self) -> None:
        self._records: Dict[str, TextRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: TextRecord) -> TextRecord:
        """Insert ``record`` stamped with its creation time; returns the stored record."""
        with self._lock:
            if record.fingerprint in self._records:
                raise StringAlreadyExistsError("String already exists in the system")
            stored = replace(record, created_at=datetime.now(timezone.utc))
            self._records[record.fingerprint] = stored
        return stored

    def get(self, fingerprint: str) -> Optional[TextRecord]:
        with self._lock:
            return self._records.get(fingerprint)

    def remove(self, fingerprint: str) -> bool:
        with self._lock:
            return self._records.pop(fingerprint, None) is not None

    def all(self) -> List[TextRecord]:
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, fingerprint: object) -> bool:
        with self._lock:
            return fingerprint in self._records


db = StringStore()
