"""SQLAlchemy-backed store for ledger entries."""

from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ledger.application.ports.database import DatabaseEnginePort
from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.constants import CREATED_AT_FORMAT, MAX_STORED_INTEGER
from ledger.domain.errors import StorageError
from ledger.domain.models import CategoryTotal, Entry, EntryKind, KindTotals
from ledger.domain.services import (
    validate_amount,
    validate_category,
    validate_month_range,
    validate_year_month,
)
from ledger.infrastructure.logging.logger import get_app_logger
from ledger.utils.int_utils import coerce_int


CREATE_ENTRIES_SQL = """
CREATE TABLE IF NOT EXISTS entries (
    id         INTEGER PRIMARY KEY AUTOINCREMENT,
    kind       INTEGER NOT NULL CHECK (kind IN (0, 1)),
    amount     INTEGER NOT NULL CHECK (amount > 0),
    category   TEXT NOT NULL CHECK (length(trim(category)) > 0),
    note       TEXT,
    created_at TEXT NOT NULL DEFAULT (datetime('now', 'localtime'))
)
"""

CREATE_ENTRIES_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_entries_created_at ON entries (created_at)
"""

INSERT_ENTRY_SQL = text(
    """
    INSERT INTO entries (kind, amount, category, note, created_at)
    VALUES (:kind, :amount, :category, :note, :created_at)
    """
)

SELECT_ENTRY_SQL = text(
    """
    SELECT id, kind, amount, category, note, created_at
    FROM entries
    WHERE id = :id
    """
)

SELECT_ENTRIES_SQL = text(
    """
    SELECT id, kind, amount, category, note, created_at
    FROM entries
    ORDER BY created_at DESC, id DESC
    """
)

SELECT_ENTRIES_IN_RANGE_SQL = text(
    """
    SELECT id, kind, amount, category, note, created_at
    FROM entries
    WHERE substr(created_at, 1, 7) BETWEEN :start_month AND :end_month
    ORDER BY created_at DESC, id DESC
    """
)

DELETE_ENTRY_SQL = text("DELETE FROM entries WHERE id = :id")

SELECT_KIND_TOTALS_SQL = text(
    """
    SELECT
        SUM(CASE WHEN kind = 1 THEN amount ELSE 0 END) AS income,
        SUM(CASE WHEN kind = 0 THEN amount ELSE 0 END) AS expense
    FROM entries
    WHERE substr(created_at, 1, 7) BETWEEN :start_month AND :end_month
    """
)

SELECT_CATEGORY_TOTALS_SQL = text(
    """
    SELECT category, SUM(amount) AS total
    FROM entries
    WHERE kind = :kind
      AND substr(created_at, 1, 7) BETWEEN :start_month AND :end_month
    GROUP BY category
    ORDER BY total DESC, category ASC
    """
)


class SqlAlchemyEntryRepository(EntryRepositoryPort):
    """Entry store backed by a SQLite table reached through SQLAlchemy.

    Ids come from SQLite ``AUTOINCREMENT`` so they are never reused after a
    delete. ``created_at`` is taken from the repository clock at insert time
    and stored as ``YYYY-MM-DD HH:MM:SS`` local time.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional source of the current local time.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def initialize(self) -> None:
        """Create the entries table and its index when missing."""
        with self._storage_errors("initialize the ledger store"):
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_ENTRIES_SQL)
                conn.exec_driver_sql(CREATE_ENTRIES_INDEX_SQL)

    def add(
        self,
        kind: EntryKind,
        amount: int,
        category: str,
        note: str | None = None,
    ) -> Entry:
        """Insert a new entry.

        Args:
            kind: Expense or income.
            amount: Strictly positive amount in the smallest currency unit.
            category: Non-empty category label.
            note: Optional free-text note.

        Returns:
            Entry: The stored entry with its assigned id and timestamp.

        Raises:
            InvalidAmountError: If the amount is not positive.
            InvalidCategoryError: If the category is empty.
            StorageError: If the insert fails.
        """
        validate_amount(amount)
        validate_category(category)
        params = {
            "kind": kind.to_code(),
            "amount": amount,
            "category": category,
            "note": note,
            "created_at": self._clock().strftime(CREATED_AT_FORMAT),
        }
        with self._storage_errors("add entry"):
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                result = conn.execute(INSERT_ENTRY_SQL, params)
                row = conn.execute(
                    SELECT_ENTRY_SQL,
                    {"id": result.lastrowid},
                ).one()
        entry = self._to_entry(row)
        self._logger.info(
            f"Added entry id={entry.id} kind={entry.kind.label} "
            f"amount={entry.amount} category={entry.category}"
        )
        return entry

    def list_entries(self) -> list[Entry]:
        """Return all entries, most recent first (ties by id descending)."""
        with self._storage_errors("list entries"):
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_ENTRIES_SQL).all()
        return [self._to_entry(row) for row in rows]

    def delete(self, entry_id: int) -> int:
        """Delete an entry by id.

        Returns:
            int: 1 when the entry existed, 0 otherwise. Ids outside the
                64-bit range the store can hold never match.
        """
        if not -MAX_STORED_INTEGER <= entry_id <= MAX_STORED_INTEGER:
            self._logger.info(f"No entry to delete for id={entry_id}")
            return 0
        with self._storage_errors("delete entry"):
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                result = conn.execute(DELETE_ENTRY_SQL, {"id": entry_id})
        removed = result.rowcount
        if removed:
            self._logger.info(f"Deleted entry id={entry_id}")
        else:
            self._logger.info(f"No entry to delete for id={entry_id}")
        return removed

    def entries_in_month(self, year_month: str) -> list[Entry]:
        month = validate_year_month(year_month)
        return self._select_range(month, month)

    def entries_in_range(
        self,
        start_month: str,
        end_month: str,
    ) -> list[Entry]:
        start, end = validate_month_range(start_month, end_month)
        return self._select_range(start, end)

    def fetch_kind_totals(
        self,
        start_month: str,
        end_month: str,
    ) -> KindTotals:
        """Return income and expense sums, 0 when nothing matches."""
        start, end = validate_month_range(start_month, end_month)
        with self._storage_errors("compute totals"):
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_KIND_TOTALS_SQL,
                    {"start_month": start, "end_month": end},
                ).one()
        return KindTotals(
            income=coerce_int(row.income),
            expense=coerce_int(row.expense),
        )

    def fetch_category_totals(
        self,
        start_month: str,
        end_month: str,
        kind: EntryKind,
    ) -> list[CategoryTotal]:
        """Return per-category sums ordered by total desc, category asc."""
        start, end = validate_month_range(start_month, end_month)
        params = {
            "kind": kind.to_code(),
            "start_month": start,
            "end_month": end,
        }
        with self._storage_errors("compute category totals"):
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_CATEGORY_TOTALS_SQL, params).all()
        return [
            CategoryTotal(category=row.category, total=coerce_int(row.total))
            for row in rows
        ]

    def _select_range(self, start: str, end: str) -> list[Entry]:
        with self._storage_errors("list entries"):
            engine = self._db_port.get_ledger_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ENTRIES_IN_RANGE_SQL,
                    {"start_month": start, "end_month": end},
                ).all()
        return [self._to_entry(row) for row in rows]

    @contextmanager
    def _storage_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OSError) as exc:
            self._logger.error(f"Failed to {action}: {exc}")
            raise StorageError(f"Failed to {action}: {exc}") from exc

    @staticmethod
    def _to_entry(row) -> Entry:
        return Entry(
            id=row.id,
            kind=EntryKind.from_code(row.kind),
            amount=row.amount,
            category=row.category,
            note=row.note,
            created_at=row.created_at,
        )


__all__ = [
    "SqlAlchemyEntryRepository",
    "CREATE_ENTRIES_SQL",
    "CREATE_ENTRIES_INDEX_SQL",
    "INSERT_ENTRY_SQL",
    "SELECT_ENTRIES_SQL",
    "SELECT_ENTRIES_IN_RANGE_SQL",
    "DELETE_ENTRY_SQL",
    "SELECT_KIND_TOTALS_SQL",
    "SELECT_CATEGORY_TOTALS_SQL",
]
