"""Application ports package."""

from .database import DatabaseEnginePort
from .entry_repository import EntryRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "EntryRepositoryPort",
]
