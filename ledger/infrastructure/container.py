"""Composition root for wiring infrastructure adapters."""

from ledger.application.ports.database import DatabaseEnginePort
from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.application.use_cases import (
    AddEntryUseCase,
    DeleteEntryUseCase,
    ExportEntriesUseCase,
    GetCategoryTotalsUseCase,
    GetMonthSummaryUseCase,
    GetRangeSummaryUseCase,
    InitializeStoreUseCase,
    ListEntriesUseCase,
)
from ledger.infrastructure.csv_export import write_entries_csv
from ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger.infrastructure.entry_repository import SqlAlchemyEntryRepository
from ledger.infrastructure.logging.logger import get_app_logger
from ledger.infrastructure.settings import LedgerSettings


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured store."""
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved_settings)


def build_entry_repository(
    db_port: DatabaseEnginePort | None = None,
) -> EntryRepositoryPort:
    """Return the SQL-backed entry store."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyEntryRepository(resolved_db, logger=get_app_logger())


def build_initialize_store_use_case(
    repository: EntryRepositoryPort,
) -> InitializeStoreUseCase:
    return InitializeStoreUseCase(repository, logger=get_app_logger())


def build_add_entry_use_case(
    repository: EntryRepositoryPort,
) -> AddEntryUseCase:
    return AddEntryUseCase(repository, logger=get_app_logger())


def build_list_entries_use_case(
    repository: EntryRepositoryPort,
) -> ListEntriesUseCase:
    return ListEntriesUseCase(repository, logger=get_app_logger())


def build_delete_entry_use_case(
    repository: EntryRepositoryPort,
) -> DeleteEntryUseCase:
    return DeleteEntryUseCase(repository)


def build_month_summary_use_case(
    repository: EntryRepositoryPort,
) -> GetMonthSummaryUseCase:
    return GetMonthSummaryUseCase(repository, logger=get_app_logger())


def build_range_summary_use_case(
    repository: EntryRepositoryPort,
) -> GetRangeSummaryUseCase:
    return GetRangeSummaryUseCase(repository, logger=get_app_logger())


def build_category_totals_use_case(
    repository: EntryRepositoryPort,
) -> GetCategoryTotalsUseCase:
    return GetCategoryTotalsUseCase(repository, logger=get_app_logger())


def build_export_entries_use_case(
    repository: EntryRepositoryPort,
) -> ExportEntriesUseCase:
    return ExportEntriesUseCase(
        repository,
        writer=write_entries_csv,
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_entry_repository",
    "build_initialize_store_use_case",
    "build_add_entry_use_case",
    "build_list_entries_use_case",
    "build_delete_entry_use_case",
    "build_month_summary_use_case",
    "build_range_summary_use_case",
    "build_category_totals_use_case",
    "build_export_entries_use_case",
]
