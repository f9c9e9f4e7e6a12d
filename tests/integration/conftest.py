import os
from collections.abc import Generator
from importlib import resources
from typing import Any

import psycopg
import pytest

from medingest.config.settings import Settings
from medingest.database.connection import build_conninfo, close_pool, get_connection, init_pool


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "medingest_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    schema = resources.files("medingest.database").joinpath("schema.sql").read_text()
    try:
        with psycopg.connect(build_conninfo(test_settings)) as conn:
            conn.execute(schema)
    except psycopg.Error as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run these tests")
    init_pool(test_settings)
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
    document_ids: list[str] = []
    yield document_ids
    if not document_ids:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            for document_id in document_ids:
                cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))
        conn.commit()
