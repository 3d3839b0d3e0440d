"""Use case recording a new expense or income."""

from ledger.application.ports.entry_repository import EntryRepositoryPort
from ledger.domain.models import Entry, EntryKind
from ledger.domain.services import (
    normalize_note,
    validate_amount,
    validate_category,
)
from ledger.infrastructure.logging.logger import get_app_logger


class AddEntryUseCase:
    """Validate caller input and append one entry to the store."""

    def __init__(self, repository: EntryRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing entry storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: EntryKind | str,
        amount: int,
        category: str,
        note: str | None = None,
    ) -> Entry:
        """Record an entry.

        Every field is validated before the store is called, so a rejected
        entry never leaves a partial write behind.

        Args:
            kind: ``EntryKind`` or its text label (``expense``/``income``).
            amount: Strictly positive amount in the smallest currency unit.
            category: Non-empty category label.
            note: Optional note; blank notes are stored as absent.

        Returns:
            Entry: The persisted entry with its id and timestamp.

        Raises:
            InvalidKindError: If the kind is not recognized.
            InvalidAmountError: If the amount is not a positive integer.
            InvalidCategoryError: If the category is empty.
            StorageError: If the store rejects the write.
        """
        parsed_kind = EntryKind.parse(kind)
        validate_amount(amount)
        validate_category(category)
        return self._repository.add(
            parsed_kind,
            amount,
            category,
            normalize_note(note),
        )


__all__ = ["AddEntryUseCase"]
