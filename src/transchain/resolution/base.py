"""Lookup provider contract shared by concrete providers and the chain."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from transchain.core.options import LookupOptions
from transchain.core.types import TranslationResult


@runtime_checkable
class LookupProvider(Protocol):
    """
    Translation lookup interface.

    Every translation source (static, database-backed, remote...) implements
    these six operations. ``ChainResolver`` implements them too, so a chain
    can be used anywhere a single provider is expected.
    """

    def reload(self) -> None:
        """Drop and reload whatever the provider has loaded."""
        ...

    def store_translations(
        self,
        locale: str,
        data: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> None:
        """Store a (nested) mapping of translations for ``locale``."""
        ...

    def translate(
        self,
        locale: str,
        key: str,
        options: LookupOptions | None = None,
    ) -> TranslationResult:
        """
        Look up ``key`` for ``locale``.

        Returns None when there is no entry, a mapping for a namespace
        subtree, or a leaf value otherwise.
        """
        ...

    def exists(self, locale: str, key: str) -> bool:
        """Whether an entry exists for ``key`` in ``locale``."""
        ...

    def localize(
        self,
        locale: str,
        obj: Any,
        format: str = "default",
        options: LookupOptions | None = None,
    ) -> str | None:
        """Format ``obj`` for ``locale``, or None if unsupported."""
        ...

    def available_locales(self) -> Sequence[str]:
        """Locales this provider has translations for."""
        ...


def provider_name(provider: object) -> str:
    """Human-readable provider name for logs and error notes."""
    return getattr(provider, "name", None) or type(provider).__name__
