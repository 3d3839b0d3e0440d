"""Database ports for the ledger.

This module defines the application-layer protocol for reaching the ledger
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine bound to the configured ledger store."""

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger store.
        """

    def dispose(self) -> None:
        """Release connections held by the engine."""


__all__ = ["DatabaseEnginePort"]
