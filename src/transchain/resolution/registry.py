"""Provider registry for managing named providers and building chains."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from transchain.core.exceptions import ProviderNotRegisteredError
from transchain.resolution.base import LookupProvider
from transchain.resolution.chain import ChainResolver

if TYPE_CHECKING:
    from transchain.config import TranschainSettings

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """
    Named collection of lookup providers.

    Builds chain resolvers from an ordered list of provider names, either
    given explicitly or taken from settings.
    """

    def __init__(self) -> None:
        self._providers: dict[str, LookupProvider] = {}
        self._default_order: list[str] | None = None

    def register(self, name: str, provider: LookupProvider) -> None:
        """Register a provider, replacing any previous one with that name."""
        if name in self._providers:
            logger.warning(f"Replacing registered provider: {name}")
        self._providers[name] = provider

    def get(self, name: str) -> LookupProvider:
        """Get a registered provider by name."""
        try:
            return self._providers[name]
        except KeyError:
            raise ProviderNotRegisteredError(name) from None

    @property
    def names(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._providers)

    def build_chain(self, order: Sequence[str] | None = None) -> ChainResolver:
        """
        Build a chain resolver.

        Args:
            order: Provider names in lookup order. Defaults to the order from
                settings when created via ``from_settings``, otherwise the
                registration order.

        Returns:
            A new ChainResolver sharing the registered provider instances
        """
        names = list(order) if order is not None else (self._default_order or self.names)
        return ChainResolver(*(self.get(name) for name in names))

    @classmethod
    def from_settings(
        cls,
        settings: "TranschainSettings",
        static_translations: Mapping[str, Mapping[str, Any]] | None = None,
    ) -> "ProviderRegistry":
        """
        Create a registry with the bundled providers configured from settings.

        Registers ``memory`` (seeded with ``static_translations``) and, when a
        database URL is configured, ``database``. Names in
        ``settings.provider_order`` that are not registered here must be
        registered by the caller before ``build_chain`` is used.
        """
        from transchain.providers.memory import MemoryProvider

        registry = cls()
        registry._default_order = list(settings.provider_order)

        if settings.database_url:
            from transchain.providers.database import DatabaseProvider

            registry.register(
                "database",
                DatabaseProvider.from_url(
                    settings.database_url,
                    echo=settings.database_echo,
                    separator=settings.key_separator,
                ),
            )

        registry.register(
            "memory",
            MemoryProvider(static_translations, separator=settings.key_separator),
        )

        return registry
