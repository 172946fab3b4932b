"""Process-lifetime cache of extracted field records."""

from threading import Lock
from typing import Dict, Optional

from filament_mcp.remote.models import FieldRecord


class FieldCache:
    """Unbounded subject -> FieldRecord map. No eviction and no TTL.

    Concurrent misses for the same subject may both fetch; the last
    write wins and both values are equivalent.
    """

    def __init__(self) -> None:
        self._records: Dict[str, FieldRecord] = {}
        self._lock = Lock()

    def get(self, subject: str) -> Optional[FieldRecord]:
        with self._lock:
            return self._records.get(subject)

    def put(self, subject: str, record: FieldRecord) -> None:
        with self._lock:
            self._records[subject] = record

    def __contains__(self, subject: object) -> bool:
        with self._lock:
            return subject in self._records

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
