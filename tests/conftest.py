"""Pytest configuration: env loading, opt-in E2E suite, and fake pool clients.

.qp_env is loaded FIRST with override=True so database settings used by the
E2E suite never come from the ambient shell environment by accident.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv

_QP_ENV_FILE = Path(__file__).parent.parent / ".qp_env"
if _QP_ENV_FILE.exists():
    load_dotenv(_QP_ENV_FILE, override=True)

import os
import re
from typing import Any, Callable, List, Optional
from urllib.parse import urlparse

import pytest

from query_pool.config import get_settings
from query_pool.io.executor.registry import reset_client

E2E_OPTION = "run_e2e_tests"
E2E_MARK = "e2e_suite"
E2E_ENV = "RUN_E2E_TESTS"


def _env_enabled(name: str) -> bool:
    """Return True when the opt-in environment flag is set to '1'."""
    return os.getenv(name) == "1"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the CLI flag that mirrors RUN_E2E_TESTS."""
    parser.addoption(
        "--run-e2e-tests",
        action="store_true",
        dest=E2E_OPTION,
        default=_env_enabled(E2E_ENV),
        help="Run the live PostgreSQL suite "
        "(set RUN_E2E_TESTS=1 or pass --run-e2e-tests).",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip the opt-in suite unless its flag is enabled."""
    if config.getoption(E2E_OPTION):
        return

    skip_e2e = pytest.mark.skip(
        reason="Set RUN_E2E_TESTS=1 or pass --run-e2e-tests to run the E2E suite."
    )
    for item in items:
        if E2E_MARK in item.keywords:
            item.add_marker(skip_e2e)


def _validate_test_database(dsn: str) -> bool:
    """Refuse to run destructive tests against a non-test database name."""
    if os.getenv("QP_SKIP_DB_VALIDATION") == "1":
        return True

    db_name = urlparse(dsn).path.lstrip("/")
    if not db_name or not re.search(
        r"(test|tmp|dev|local|sandbox)", db_name, re.IGNORECASE
    ):
        raise RuntimeError(
            f"Refusing to run tests against non-test database: {db_name!r}. "
            f"Test databases must contain one of: test, tmp, dev, local, sandbox. "
            f"Override with QP_SKIP_DB_VALIDATION=1 (DANGEROUS)."
        )
    return True


@pytest.fixture
def postgres_dsn() -> str:
    """DSN of a disposable PostgreSQL database for the E2E suite."""
    dsn = os.environ.get("QP_TEST_DATABASE_URI")
    if not dsn or not dsn.startswith("postgres"):
        pytest.skip("QP_TEST_DATABASE_URI must point at PostgreSQL for E2E tests")
    _validate_test_database(dsn)
    return dsn


@pytest.fixture(autouse=True)
def _isolate_registry_and_settings():
    """Every test starts with no default client and fresh settings."""
    reset_client()
    get_settings.cache_clear()
    yield
    reset_client()
    get_settings.cache_clear()


class FakeConnection:
    """Connection double that records every statement it runs."""

    def __init__(self, client: "FakeClient"):
        self._client = client

    async def fetch(self, query: str, *args: Any) -> Optional[List[Any]]:
        self._client.events.append("query")
        self._client.queries.append((query, args))
        if self._client.query_error is not None:
            raise self._client.query_error
        return self._client.rows


class FakeClient:
    """Pool double: hands out FakeConnection leases and logs call order."""

    def __init__(
        self,
        rows: Optional[List[Any]] = None,
        connect_error: Optional[Exception] = None,
        query_error: Optional[Exception] = None,
    ):
        self.rows = rows
        self.connect_error = connect_error
        self.query_error = query_error
        self.events: List[str] = []
        self.queries: List[tuple] = []
        self.released: List[FakeConnection] = []

    async def acquire(self) -> FakeConnection:
        self.events.append("acquire")
        if self.connect_error is not None:
            raise self.connect_error
        return FakeConnection(self)

    async def release(self, connection: FakeConnection) -> None:
        self.events.append("release")
        self.released.append(connection)


@pytest.fixture
def make_client() -> Callable[..., FakeClient]:
    """Factory for FakeClient instances."""
    return FakeClient


@pytest.fixture
def fake_client() -> FakeClient:
    """FakeClient returning a single ``{"id": 42}`` row."""
    return FakeClient(rows=[{"id": 42}])
