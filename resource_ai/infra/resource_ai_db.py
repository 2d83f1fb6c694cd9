import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from psycopg.types.json import Jsonb

from resource_ai.db import get_conn
from resource_ai.models.resource_ai import ArtifactRecord

RESOURCE_AI_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS resource_ai_metadata (
    resource_id TEXT PRIMARY KEY,
    data JSONB NOT NULL DEFAULT '{}',
    created_at TIMESTAMP WITH TIME ZONE NOT NULL,
    updated_at TIMESTAMP WITH TIME ZONE NOT NULL
);
"""

# JSONB `||` replaces top-level keys present on the right and keeps the rest.
MERGE_SQL = """
INSERT INTO resource_ai_metadata (resource_id, data, created_at, updated_at)
VALUES (%s, %s, %s, %s)
ON CONFLICT (resource_id) DO UPDATE SET
    data = resource_ai_metadata.data || EXCLUDED.data,
    updated_at = EXCLUDED.updated_at
RETURNING resource_id, data, created_at, updated_at;
"""


class PostgresArtifactStore:
    """
    Artifact store backed by one JSONB document per resource.
    Uses resource_ai.db.get_conn() for connection parameters.
    """

    def ensure_schema(self) -> None:
        """Ensures the resource_ai_metadata table exists."""
        with get_conn() as conn:
            with conn.cursor() as cur:
                cur.execute(RESOURCE_AI_SCHEMA_SQL)
            conn.commit()

    def get(self, resource_id: str) -> Optional[ArtifactRecord]:
        query = """
        SELECT resource_id, data, created_at, updated_at
        FROM resource_ai_metadata
        WHERE resource_id = %s;
        """
        with get_conn() as conn:
            with conn.cursor() as cur:
                cur.execute(query, (resource_id,))
                row = cur.fetchone()

        if not row:
            return None
        return self._row_to_record(row)

    def merge(self, resource_id: str, fields: Dict[str, Any]) -> ArtifactRecord:
        now = datetime.now(timezone.utc)
        # Timestamps live in their own columns
        payload = {k: v for k, v in fields.items() if k not in ("resourceId", "createdAt", "updatedAt")}

        with get_conn() as conn:
            with conn.cursor() as cur:
                cur.execute(MERGE_SQL, (resource_id, Jsonb(_json_ready(payload)), now, now))
                row = cur.fetchone()
            conn.commit()

        return self._row_to_record(row)

    def _row_to_record(self, row) -> ArtifactRecord:
        data = row[1] or {}
        if isinstance(data, str):
            data = json.loads(data)
        return ArtifactRecord.model_validate({
            **data,
            "resourceId": row[0],
            "createdAt": row[2],
            "updatedAt": row[3],
        })


def _json_ready(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Convert datetimes so the dict can be stored as JSONB."""
    return {k: v.isoformat() if isinstance(v, datetime) else v for k, v in fields.items()}
