"""Chain resolver aggregating several lookup providers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from itertools import chain as iter_chain
from typing import Any

from transchain.core.exceptions import NoProvidersConfiguredError
from transchain.core.merge import classify_result, deep_merge
from transchain.core.options import LookupOptions
from transchain.core.types import ResultKind, TranslationResult
from transchain.resolution.base import LookupProvider, provider_name

logger = logging.getLogger(__name__)


@contextmanager
def _provider_call(provider: LookupProvider, operation: str) -> Iterator[None]:
    """Tag an exception escaping a provider with the provider's name."""
    try:
        yield
    except Exception as e:
        name = provider_name(provider)
        logger.debug(f"Provider {name} failed during {operation}: {e!r}")
        e.add_note(f"raised by provider {name!r} during {operation}")
        raise


class ChainResolver:
    """
    Presents an ordered list of lookup providers as a single provider.

    Behaviour per operation:
    - translate: leaf results short-circuit, namespace results are
      deep-merged across providers, ``default`` only reaches the last one
    - exists / localize: first positive answer wins
    - available_locales: union of all providers
    - store_translations: written to the first provider only
    - reload: every provider, in order

    Provider errors are never caught; the first failure aborts the call.
    The provider list is not synchronized, mutate it only while no
    lookups are in flight.
    """

    name = "chain"

    def __init__(self, *providers: LookupProvider) -> None:
        self._providers: list[LookupProvider] = list(providers)

    @property
    def providers(self) -> list[LookupProvider]:
        """The live, ordered provider list."""
        return self._providers

    @providers.setter
    def providers(self, providers: Iterable[LookupProvider]) -> None:
        self._providers = list(providers)

    def reload(self) -> None:
        for provider in self._providers:
            with _provider_call(provider, "reload"):
                provider.reload()
        logger.info(f"Reloaded {len(self._providers)} providers")

    def store_translations(
        self,
        locale: str,
        data: Mapping[str, Any],
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """Store translations in the first (writable) provider."""
        if not self._providers:
            raise NoProvidersConfiguredError("store_translations")

        primary = self._providers[0]
        with _provider_call(primary, "store_translations"):
            return primary.store_translations(locale, data, options)

    store = store_translations

    def available_locales(self) -> list[str]:
        """Locales offered by any provider, duplicates removed."""
        per_provider = []
        for provider in self._providers:
            with _provider_call(provider, "available_locales"):
                per_provider.append(provider.available_locales())
        return list(dict.fromkeys(iter_chain.from_iterable(per_provider)))

    def exists(self, locale: str, key: str) -> bool:
        for provider in self._providers:
            with _provider_call(provider, "exists"):
                if provider.exists(locale, key):
                    return True
        return False

    def localize(
        self,
        locale: str,
        obj: Any,
        format: str = "default",
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> str | None:
        """Return the first provider's non-None localization."""
        options = LookupOptions.coerce(options)
        for provider in self._providers:
            with _provider_call(provider, "localize"):
                result = provider.localize(locale, obj, format, options)
            if result is not None:
                return result
        return None

    def translate(
        self,
        locale: str,
        key: str,
        options: LookupOptions | Mapping[str, Any] | None = None,
    ) -> TranslationResult:
        """
        Resolve ``key`` across all providers.

        Providers are asked in order. A leaf value is returned as soon as one
        provider has it. Namespace mappings keep the scan going and are
        deep-merged, later providers overwriting earlier ones at identical
        leaf paths. Only the last provider sees the ``default`` option, so a
        default never hides translations held further down the chain.

        Returns:
            The first leaf found, the merged namespace, or None
        """
        options = LookupOptions.coerce(options)
        stripped = options.without_default() if options is not None else None

        providers = list(self._providers)
        last_index = len(providers) - 1
        namespace: dict[Any, Any] | None = None

        for index, provider in enumerate(providers):
            current = options if index == last_index else stripped
            with _provider_call(provider, "translate"):
                translation = provider.translate(locale, key, current)

            kind = classify_result(translation, current)
            if kind is ResultKind.NAMESPACE:
                logger.debug(f"Merging namespace {key} from {provider_name(provider)}")
                namespace = deep_merge(namespace or {}, translation)
            elif kind is ResultKind.LEAF:
                logger.debug(f"Translation {locale}.{key} found in {provider_name(provider)}")
                return translation

        return namespace

    def __repr__(self) -> str:
        names = ", ".join(provider_name(p) for p in self._providers)
        return f"ChainResolver([{names}])"
