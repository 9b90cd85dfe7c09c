from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg_pool import ConnectionPool

from doc_intake.config.settings import Settings
from doc_intake.intake.exceptions import IntakeConfigurationError

_pool: ConnectionPool | None = None


def init_pool(settings: Settings) -> None:
    """Initialize the global connection pool from settings.

    Raises:
        IntakeConfigurationError: if host, database or user are not configured.
    """
    global _pool  # noqa: PLW0603
    missing = [
        name
        for name, value in (
            ("DB_HOST", settings.db_host),
            ("DB_DATABASE", settings.db_database),
            ("DB_USERNAME", settings.db_username),
        )
        if not value
    ]
    if missing:
        raise IntakeConfigurationError(
            f"Server configuration error: Missing database credentials ({', '.join(missing)})."
        )
    conninfo = (
        f"host={settings.db_host} "
        f"port={settings.db_port} "
        f"dbname={settings.db_database} "
        f"user={settings.db_username} "
        f"password={settings.db_password}"
    )
    _pool = ConnectionPool(
        conninfo,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        timeout=settings.db_pool_timeout_seconds,
        open=True,
    )


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a connection from the pool. Reads only, nothing to commit."""
    if _pool is None:
        raise IntakeConfigurationError(
            "Server configuration error: database pool not initialized."
        )
    with _pool.connection() as conn:
        yield conn
