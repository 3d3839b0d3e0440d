"""Domain models for ledger entries."""

from dataclasses import dataclass
from enum import Enum

from ledger.domain.errors import InvalidKindError, StorageError


class EntryKind(Enum):
    """Classification of an entry as money going out or coming in.

    The persisted discriminant is an integer (0 for expense, 1 for income);
    conversion happens only through ``to_code`` and ``from_code``.
    """

    EXPENSE = "expense"
    INCOME = "income"

    @property
    def label(self) -> str:
        """Return the textual form used by the CLI and exports."""
        return self.value

    def to_code(self) -> int:
        """Return the integer stored in the ``kind`` column."""
        return _KIND_TO_CODE[self]

    @classmethod
    def from_code(cls, code: int) -> "EntryKind":
        """Decode a persisted discriminant.

        Args:
            code: Integer read from the ``kind`` column.

        Returns:
            EntryKind: Matching kind.

        Raises:
            StorageError: If the stored value is outside the two-valued set.
        """
        for kind, kind_code in _KIND_TO_CODE.items():
            if kind_code == code:
                return kind
        raise StorageError(f"Unknown kind code in storage: {code!r}")

    @classmethod
    def parse(cls, value: "EntryKind | str") -> "EntryKind":
        """Parse a caller-supplied kind.

        Args:
            value: An ``EntryKind`` or its text label (case-insensitive).

        Returns:
            EntryKind: Parsed kind.

        Raises:
            InvalidKindError: If the value is not ``expense`` or ``income``.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            cleaned = value.strip().lower()
            for kind in cls:
                if kind.value == cleaned:
                    return kind
        raise InvalidKindError(
            f"Invalid kind: {value!r}. Use 'expense' or 'income'."
        )


_KIND_TO_CODE = {
    EntryKind.EXPENSE: 0,
    EntryKind.INCOME: 1,
}


@dataclass(frozen=True)
class Entry:
    """One recorded monetary event, as persisted by the store."""

    id: int
    kind: EntryKind
    amount: int
    category: str
    note: str | None
    created_at: str


__all__ = ["EntryKind", "Entry"]
