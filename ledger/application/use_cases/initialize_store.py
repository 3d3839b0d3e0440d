"""Use case preparing the ledger store for a process invocation."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.infrastructure.logging.logger import get_app_logger


class InitializeStoreUseCase:
    """Ensure the persistent entry schema exists.

    Safe to run on every start: existing entries are never touched.
    """

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self) -> None:
        self._repository.initialize()
        self._logger.info("Ledger store initialized")


__all__ = ["InitializeStoreUseCase"]
