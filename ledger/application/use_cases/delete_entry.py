"""Use case removing an entry by id."""

from ledger.application.ports.entry_repository import EntryRepositoryPort


class DeleteEntryUseCase:
    """Delete one entry; a missing id yields 0 rather than an error."""

    def __init__(self, repository: EntryRepositoryPort) -> None:
        self._repository = repository

    def execute(self, entry_id: int) -> int:
        """Return the number of removed rows (0 or 1)."""
        return self._repository.delete(entry_id)


__all__ = ["DeleteEntryUseCase"]
