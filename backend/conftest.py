"""Shared test setup: environment, structlog routed to caplog, and storage fixtures."""

from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from scorekeeper.tests.mocks.repositories import InMemoryGameRepository, InMemoryPlayerRepository
from shared.storage import LocalKeyValueStorage

load_dotenv(Path(__file__).resolve().parent.parent / ".env.tests")

# Route structlog events through stdlib logging so caplog sees them.
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=False,
)


@pytest.fixture(autouse=True)
def _clear_log_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def game_repo():
    """Empty in-memory games collection."""
    return InMemoryGameRepository()


@pytest.fixture
def player_repo():
    """Empty in-memory player registry."""
    return InMemoryPlayerRepository()


@pytest.fixture
def storage(tmp_path):
    """Key-value storage backed by a per-test data directory."""
    return LocalKeyValueStorage(tmp_path)
