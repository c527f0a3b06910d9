import os
import uuid
from collections.abc import Generator
from importlib import resources
from typing import Any

import psycopg
import pytest

from docextract.config.settings import Settings
from docextract.database.connection import close_pool, get_connection, init_pool
from docextract.database.models import DocumentRecord
from docextract.database.repositories.document_repository import DocumentRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "docextract_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute(
                resources.files("docextract.database").joinpath("schema.sql").read_text()
            )
            conn.commit()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
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
    cleanup: list[str] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for document_id in cleanup:
                cur.execute("DELETE FROM documents WHERE id = %s::uuid", (document_id,))
        conn.commit()


@pytest.fixture
def seed_document(integration_cleanup: list[str]) -> DocumentRecord:
    document_id = str(uuid.uuid4())
    record = DocumentRepository().create(
        DocumentRecord(
            id=document_id,
            file_name=f"{document_id}.txt",
            original_name="notes.txt",
            file_path=f"/tmp/{document_id}.txt",
            file_type="txt",
            file_size=1024,
        )
    )
    integration_cleanup.append(document_id)
    return record
