import os
import uuid
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from doc_intake.config.settings import Settings
from doc_intake.database.connection import close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "academic_records_test")
    os.environ.setdefault("DB_POOL_TIMEOUT_SECONDS", "3")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1 FROM documenttypes_fs LIMIT 1")
            conn.execute("SELECT 1 FROM systemsettings_fs LIMIT 1")
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB with rule tables not available: {e}. "
            "Set DB_* env to point at a database with the intake schema"
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
def seed_document_type(db_conn: psycopg.Connection[Any]) -> Generator[str, None, None]:
    doc_type_id = f"it-{uuid.uuid4().hex[:12]}"
    with db_conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO documenttypes_fs
            (doc_type_id, required_keywords, forbidden_keywords,
             allowed_extensions, max_file_size_mb)
            VALUES (%s, %s, %s, %s, %s)
            """,
            (doc_type_id, ["abstract", "conclusion"], ["plagiarism"], [".PDF", "txt"], 5),
        )
    db_conn.commit()
    try:
        yield doc_type_id
    finally:
        with db_conn.cursor() as cur:
            cur.execute("DELETE FROM systemsettings_fs WHERE setting_key = %s",
                        (f"min_word_count_{doc_type_id}",))
            cur.execute("DELETE FROM documenttypes_fs WHERE doc_type_id = %s", (doc_type_id,))
        db_conn.commit()
