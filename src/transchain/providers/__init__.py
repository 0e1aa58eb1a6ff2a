"""Bundled lookup providers."""

from transchain.providers.database import DatabaseProvider
from transchain.providers.memory import MemoryProvider

__all__ = [
    "DatabaseProvider",
    "MemoryProvider",
]
