"""Database infrastructure for the ledger.

This module creates the SQLAlchemy engine bound to the SQLite ledger file.
It belongs to the infrastructure layer because it deals with the external
storage engine. The store location always comes from a ``LedgerSettings``
value handed to the adapter.
"""

from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from ledger.application.ports.database import DatabaseEnginePort
from ledger.infrastructure.settings import LedgerSettings


def _create_engine(
    db_url: str,
    busy_timeout: float,
    echo: bool = False,
) -> Engine:
    """Create a configured SQLAlchemy engine for a SQLite database.

    Args:
        db_url: SQLite database URL.
        busy_timeout: Seconds to wait for another process's write lock.
        echo: Whether to log emitted SQL.

    Returns:
        Engine: A SQLAlchemy engine instance.
    """
    return create_engine(
        db_url,
        connect_args={"timeout": busy_timeout},
        echo=echo,
        future=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    The engine is created lazily on first use and reused for the lifetime
    of the adapter.
    """

    def __init__(self, settings: LedgerSettings) -> None:
        """Initialize the adapter.

        Args:
            settings: Ledger settings naming the store location.
        """
        self._settings = settings
        self._engine: Optional[Engine] = None

    @property
    def settings(self) -> LedgerSettings:
        return self._settings

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger file.
        """
        if self._engine is None:
            self._settings.database_path.parent.mkdir(
                parents=True,
                exist_ok=True,
            )
            self._engine = _create_engine(
                self._settings.database_url,
                busy_timeout=self._settings.busy_timeout,
                echo=self._settings.echo_sql,
            )
        return self._engine

    def dispose(self) -> None:
        """Release pooled connections held by the engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


__all__ = ["SqlAlchemyDatabaseEngineAdapter"]
