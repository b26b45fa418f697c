from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

import psycopg
from psycopg.conninfo import make_conninfo
from psycopg_pool import ConnectionPool

from app.config.settings import Settings

_pool: ConnectionPool | None = None


def _conninfo(settings: Settings) -> str:
    return make_conninfo(
        host=settings.db_host,
        port=settings.db_port,
        dbname=settings.db_database,
        user=settings.db_username,
        password=settings.db_password,
        connect_timeout=max(1, int(settings.db_pool_timeout_seconds)),
        application_name="resumesite",
    )


def init_pool(settings: Settings) -> None:
    """Open the global tracking pool. Connections are checked before each checkout."""
    global _pool  # noqa: PLW0603
    _pool = ConnectionPool(
        _conninfo(settings),
        min_size=1,
        max_size=10,
        timeout=settings.db_pool_timeout_seconds,
        check=ConnectionPool.check_connection,
        open=True,
    )


def close_pool() -> None:
    """Close the global connection pool."""
    global _pool  # noqa: PLW0603
    if _pool is not None:
        _pool.close()
        _pool = None


def is_pool_ready() -> bool:
    return _pool is not None


@contextmanager
def get_connection() -> Generator[psycopg.Connection[Any], None, None]:
    """Yield a pooled connection. Caller commits; errors roll back."""
    if _pool is None:
        raise RuntimeError("Connection pool not initialized. Call init_pool() first.")
    with _pool.connection() as conn:
        yield conn
