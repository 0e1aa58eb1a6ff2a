"""Integration test fixtures backed by in-memory SQLite."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from transchain.db.session import DatabaseManager
from transchain.providers.database import DatabaseProvider
from transchain.providers.memory import MemoryProvider
from transchain.resolution.chain import ChainResolver


@pytest.fixture
def database() -> Iterator[DatabaseManager]:
    """Fresh in-memory database with the schema created."""
    manager = DatabaseManager("sqlite://")
    manager.create_all()
    yield manager
    manager.close()


@pytest.fixture
def database_provider(database: DatabaseManager) -> DatabaseProvider:
    return DatabaseProvider(database)


@pytest.fixture
def memory_provider(static_translations: dict[str, dict[str, Any]]) -> MemoryProvider:
    return MemoryProvider(static_translations)


@pytest.fixture
def chain(database_provider: DatabaseProvider, memory_provider: MemoryProvider) -> ChainResolver:
    """Editable database store in front of static translations."""
    return ChainResolver(database_provider, memory_provider)
