from __future__ import annotations

import psycopg

from .config import get_settings
from .exceptions import StoreUnavailableError


def get_conn() -> psycopg.Connection:
    settings = get_settings()
    try:
        return psycopg.connect(settings.pg_dsn)
    except psycopg.OperationalError as e:
        raise StoreUnavailableError(f"Cannot connect to Postgres: {e}") from e
