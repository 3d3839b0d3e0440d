"""Shared fixtures for the ledger test suite."""

from datetime import datetime

import pytest

from ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger.infrastructure.entry_repository import SqlAlchemyEntryRepository
from ledger.infrastructure.settings import LedgerSettings


class FixedClock:
    """Clock returning a settable instant, used to place entries in months."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def set(self, *args: int) -> None:
        self.now = datetime(*args)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True, scope="session")
def _isolated_log_dir(tmp_path_factory):
    """Keep log files written during tests out of the project tree."""
    patcher = pytest.MonkeyPatch()
    patcher.setenv("LEDGER_LOG_DIR", str(tmp_path_factory.mktemp("logs")))
    yield
    patcher.undo()


@pytest.fixture
def ledger_settings(tmp_path) -> LedgerSettings:
    return LedgerSettings.from_path(tmp_path / "ledger.db")


@pytest.fixture
def db_adapter(ledger_settings):
    adapter = SqlAlchemyDatabaseEngineAdapter(ledger_settings)
    yield adapter
    adapter.dispose()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 2, 15, 12, 0, 0))


@pytest.fixture
def repository(db_adapter, clock) -> SqlAlchemyEntryRepository:
    repo = SqlAlchemyEntryRepository(db_adapter, clock=clock)
    repo.initialize()
    return repo
