import os
from collections.abc import Generator

import pytest

from refinder.config.settings import Settings
from refinder.database.connection import close_pool, get_connection, init_pool
from refinder.database.schema import ensure_schema


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "refinder_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        ensure_schema()
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def clean_tables(integration_pool: None) -> Generator[None, None, None]:
    """Empty the service tables before and after each test."""

    def _truncate() -> None:
        with get_connection() as conn:
            conn.execute("TRUNCATE refinder_storage, refinder_messages RESTART IDENTITY")
            conn.commit()

    _truncate()
    yield
    _truncate()
