import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import psycopg
import pytest

from app.config.settings import Settings
from app.database.connection import close_pool, get_connection, init_pool

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "app" / "database" / "schema.sql"


def _test_settings() -> Settings:
    os.environ.setdefault("DB_HOST", "localhost")
    os.environ.setdefault("DB_DATABASE", "resumesite_test")
    return Settings(supabase_url="", gemini_api_key="", anthropic_api_key="")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(SCHEMA_PATH.read_text(encoding="utf-8"))
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_HOST/DB_DATABASE/DB_USERNAME/DB_PASSWORD for a test database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    """Collects resume_uploads ids; their generation_results go with them by cascade."""
    upload_ids: list[str] = []
    yield upload_ids
    if not upload_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for upload_id in upload_ids:
                cur.execute("DELETE FROM resume_uploads WHERE id = %s", (upload_id,))
        conn.commit()
