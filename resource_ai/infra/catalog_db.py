import json
from typing import Optional

from psycopg.rows import dict_row

from resource_ai.db import get_conn
from resource_ai.models.resource import ResourceDescriptor


class PostgresResourceCatalog:
    """
    Read-only view of the classified_resources table owned by the library catalog.
    """

    def get(self, resource_id: str) -> Optional[ResourceDescriptor]:
        query = """
        SELECT id, title, description, file, placement, college, department, year, semester, course
        FROM classified_resources
        WHERE id = %s;
        """
        with get_conn() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(query, (resource_id,))
                row = cur.fetchone()

        if not row:
            return None

        file_info = row.get("file") or {}
        # JSONB can come back as a string depending on driver config
        if isinstance(file_info, str):
            file_info = json.loads(file_info)

        return ResourceDescriptor(
            id=str(row["id"]),
            title=row.get("title") or "",
            description=row.get("description"),
            file=file_info,
            placement=row.get("placement"),
            college=row.get("college"),
            department=row.get("department"),
            year=row.get("year"),
            semester=row.get("semester"),
            course=row.get("course"),
        )
