"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from ledger.infrastructure.logging.logger import get_app_logger


DEFAULT_DB_FILENAME = "ledger.db"
DEFAULT_BUSY_TIMEOUT = 5.0

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LedgerSettings:
    """Settings locating and tuning the ledger store.

    Attributes:
        database_path: Filesystem path of the SQLite ledger file.
        busy_timeout: Seconds a connection waits on a locked database.
        echo_sql: Whether SQLAlchemy echoes emitted statements.
    """

    database_path: Path
    busy_timeout: float = DEFAULT_BUSY_TIMEOUT
    echo_sql: bool = False

    @property
    def database_url(self) -> str:
        """Return the SQLAlchemy URL for the ledger file."""
        return f"sqlite:///{self.database_path}"

    @classmethod
    def from_path(cls, path: Path | str, **kwargs) -> "LedgerSettings":
        """Build settings for an explicit store location."""
        return cls(database_path=cls._normalize_path(str(path)), **kwargs)

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables (and a ``.env`` file).

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_path = os.getenv("LEDGER_DB_PATH") or DEFAULT_DB_FILENAME
        busy_timeout = cls._parse_timeout(
            os.getenv("LEDGER_BUSY_TIMEOUT"),
            logger=logger,
        )
        echo_sql = (
            os.getenv("LEDGER_SQL_ECHO", "").strip().lower() in _TRUTHY
        )
        return cls(
            database_path=cls._normalize_path(raw_path),
            busy_timeout=busy_timeout,
            echo_sql=echo_sql,
        )

    @staticmethod
    def _normalize_path(raw_path: str) -> Path:
        return Path(raw_path).expanduser().resolve()

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the busy timeout, falling back to the default.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Non-negative timeout in seconds.
        """
        if raw_value is None or not raw_value.strip():
            return DEFAULT_BUSY_TIMEOUT
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid LEDGER_BUSY_TIMEOUT '{raw_value}', "
                f"using {DEFAULT_BUSY_TIMEOUT}"
            )
            return DEFAULT_BUSY_TIMEOUT
        if value < 0:
            logger.warning(
                f"Negative LEDGER_BUSY_TIMEOUT '{raw_value}', "
                f"using {DEFAULT_BUSY_TIMEOUT}"
            )
            return DEFAULT_BUSY_TIMEOUT
        return value


__all__ = ["LedgerSettings", "DEFAULT_DB_FILENAME", "DEFAULT_BUSY_TIMEOUT"]
