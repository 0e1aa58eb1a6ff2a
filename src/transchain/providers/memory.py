"""In-process provider for static translation sets."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from transchain.core.exceptions import InvalidTranslationDataError
from transchain.core.merge import deep_merge
from transchain.core.options import LookupOptions
from transchain.core.types import TranslationResult

logger = logging.getLogger(__name__)

TranslationTree = Mapping[str, Mapping[str, Any]]


class MemoryProvider:
    """
    Translations held as nested dictionaries, one tree per locale.

    Usage:
        provider = MemoryProvider({"en": {"messages": {"greeting": "Hello"}}})
        provider.translate("en", "messages.greeting")  # "Hello"
        provider.translate("en", "messages")           # {"greeting": "Hello"}

    ``reload`` rebuilds the store from ``loader`` when given, otherwise from
    the translations passed at construction.
    """

    def __init__(
        self,
        translations: TranslationTree | None = None,
        *,
        loader: Callable[[], TranslationTree] | None = None,
        separator: str = ".",
        name: str = "memory",
    ) -> None:
        self.name = name
        self._initial = translations or {}
        self._loader = loader
        self._separator = separator
        self._translations: dict[str, dict[str, Any]] = self._load()

    def _load(self) -> dict[str, dict[str, Any]]:
        """Build a fresh store from the loader or the initial translations."""
        source = self._loader() if self._loader is not None else self._initial
        translations: dict[str, dict[str, Any]] = {}
        for locale, data in source.items():
            self._check_mapping(locale, data)
            translations[locale] = deep_merge(translations.get(locale, {}), data)
        return translations

    def _check_mapping(self, locale: str, data: Any) -> None:
        if not isinstance(data, Mapping):
            raise InvalidTranslationDataError(
                message=f"Translations for {locale} must be a mapping, got {type(data).__name__}",
                provider=self.name,
            )

    def reload(self) -> None:
        # swapped in only once loading succeeded
        self._translations = self._load()
        logger.info(f"Reloaded {self.name}: {len(self._translations)} locales")

    def store_translations(
        self,
        locale: str,
        data: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._check_mapping(locale, data)
        self._translations[locale] = deep_merge(self._translations.get(locale, {}), data)

    def available_locales(self) -> list[str]:
        return list(self._translations)

    def _lookup(self, locale: str, key: str) -> TranslationResult:
        """Walk ``key`` segment by segment through the locale tree."""
        node: Any = self._translations.get(locale)
        for segment in key.split(self._separator):
            if not isinstance(node, Mapping):
                return None
            node = node.get(segment)
        return node

    def translate(
        self,
        locale: str,
        key: str,
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> TranslationResult:
        options = LookupOptions.coerce(options)
        result = self._lookup(locale, key)
        if result is None and options is not None and options.has_default:
            return options.default
        return result

    def exists(self, locale: str, key: str) -> bool:
        return self._lookup(locale, key) is not None

    def localize(
        self,
        locale: str,
        obj: Any,
        format: str = "default",
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> str | None:
        """Apply the ``formats.<format>`` pattern of ``locale`` to ``obj``."""
        pattern = self._lookup(locale, self._separator.join(("formats", format)))
        if not isinstance(pattern, str):
            return None
        return pattern.format(obj)
