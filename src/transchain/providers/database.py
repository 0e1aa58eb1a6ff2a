"""SQLAlchemy-backed provider for editable translations."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from transchain.core.exceptions import InvalidTranslationDataError, ProviderStorageError
from transchain.core.options import LookupOptions
from transchain.core.types import TranslationResult
from transchain.db.repositories import TranslationRepository
from transchain.db.session import DatabaseManager

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """
    Translations stored one leaf per row in a relational database.

    Intended as the writable front of a chain: application-specific
    translations are written here at runtime while static translations stay
    in a provider further down.

    Looking up a key that has rows beneath it (``messages`` when
    ``messages.greeting`` and ``messages.farewell`` are stored) returns the
    rebuilt namespace mapping.
    """

    def __init__(
        self,
        database: DatabaseManager,
        *,
        separator: str = ".",
        name: str = "database",
    ) -> None:
        self.name = name
        self._database = database
        self._separator = separator

    @contextmanager
    def _repository(self) -> Iterator[TranslationRepository]:
        """Repository bound to a fresh session, storage errors re-raised."""
        try:
            with self._database.session() as session:
                yield TranslationRepository(session)
        except SQLAlchemyError as e:
            raise ProviderStorageError(
                message=f"Database error: {e}",
                provider=self.name,
            ) from e

    def reload(self) -> None:
        # Rows are read on every lookup, nothing cached to drop
        logger.info(f"Reload requested for {self.name}, nothing cached")

    def store_translations(
        self,
        locale: str,
        data: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        if not isinstance(data, Mapping):
            raise InvalidTranslationDataError(
                message=f"Translations for {locale} must be a mapping, got {type(data).__name__}",
                provider=self.name,
            )

        rows = dict(self._flatten(data))
        with self._repository() as repository:
            for key, value in rows.items():
                # a leaf replaces whatever subtree or ancestor leaf it overlaps
                repository.delete_keys(locale, self._ancestors(key))
                repository.delete_under(locale, f"{key}{self._separator}")
                repository.upsert(locale, key, value)
        logger.info(f"Stored {len(rows)} translations for {locale} in {self.name}")

    def _ancestors(self, key: str) -> list[str]:
        """``a.b.c`` -> ``["a", "a.b"]``."""
        segments = key.split(self._separator)
        return [self._separator.join(segments[:i]) for i in range(1, len(segments))]

    def _flatten(self, data: Mapping[str, Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
        for key, value in data.items():
            if not isinstance(key, str):
                raise InvalidTranslationDataError(
                    message=f"Translation keys must be strings, got {key!r}",
                    provider=self.name,
                )
            path = f"{prefix}{self._separator}{key}" if prefix else key
            if isinstance(value, Mapping):
                yield from self._flatten(value, path)
            else:
                yield path, value

    def available_locales(self) -> list[str]:
        with self._repository() as repository:
            return repository.locales()

    def _lookup(self, repository: TranslationRepository, locale: str, key: str) -> TranslationResult:
        row = repository.get(locale, key)
        if row is not None:
            return row.value

        prefix = f"{key}{self._separator}"
        rows = repository.list_under(locale, prefix)
        if not rows:
            return None

        namespace: dict[str, Any] = {}
        for row in rows:
            *parents, leaf = row.key[len(prefix):].split(self._separator)
            node = namespace
            for parent in parents:
                child = node.get(parent)
                if not isinstance(child, dict):
                    child = node[parent] = {}
                node = child
            node[leaf] = row.value
        return namespace

    def translate(
        self,
        locale: str,
        key: str,
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> TranslationResult:
        options = LookupOptions.coerce(options)
        with self._repository() as repository:
            result = self._lookup(repository, locale, key)
        if result is None and options is not None and options.has_default:
            return options.default
        return result

    def exists(self, locale: str, key: str) -> bool:
        with self._repository() as repository:
            return repository.exists(locale, key, f"{key}{self._separator}")

    def localize(
        self,
        locale: str,
        obj: Any,
        format: str = "default",
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> str | None:
        """Apply the stored ``formats.<format>`` pattern to ``obj``."""
        with self._repository() as repository:
            row = repository.get(locale, self._separator.join(("formats", format)))
        if row is None or not isinstance(row.value, str):
            return None
        return row.value.format(obj)

    @classmethod
    def from_url(cls, database_url: str, *, echo: bool = False, **kwargs: Any) -> DatabaseProvider:
        """Create a provider for ``database_url``, creating tables if needed."""
        database = DatabaseManager(database_url, echo)
        database.create_all()
        return cls(database, **kwargs)
