import copy
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from resource_ai.models.resource_ai import ArtifactRecord, merge_record


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryArtifactStore:
    """
    Process-local artifact store for development and tests.
    Same merge semantics as the Postgres store.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self._records: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def get(self, resource_id: str) -> Optional[ArtifactRecord]:
        with self._lock:
            stored = self._records.get(resource_id)
            if stored is None:
                return None
            return ArtifactRecord.model_validate(copy.deepcopy(stored))

    def merge(self, resource_id: str, fields: Dict[str, Any]) -> ArtifactRecord:
        with self._lock:
            merged = merge_record(
                self._records.get(resource_id),
                resource_id,
                copy.deepcopy(fields),
                self._clock(),
            )
            self._records[resource_id] = merged
            return ArtifactRecord.model_validate(copy.deepcopy(merged))
