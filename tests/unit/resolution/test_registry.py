"""Tests for provider registry."""

from __future__ import annotations

import pytest

from transchain.config import TranschainSettings
from transchain.core.exceptions import ProviderNotRegisteredError
from transchain.providers.database import DatabaseProvider
from transchain.providers.memory import MemoryProvider
from transchain.resolution.registry import ProviderRegistry


class TestProviderRegistry:
    """Tests for registering providers and building chains."""

    def test_register_and_get(self):
        registry = ProviderRegistry()
        provider = MemoryProvider()
        registry.register("static", provider)
        assert registry.get("static") is provider
        assert registry.names == ["static"]

    def test_get_unknown(self):
        with pytest.raises(ProviderNotRegisteredError) as exc_info:
            ProviderRegistry().get("missing")
        assert exc_info.value.name == "missing"

    def test_register_replaces(self):
        registry = ProviderRegistry()
        replacement = MemoryProvider()
        registry.register("static", MemoryProvider())
        registry.register("static", replacement)
        assert registry.get("static") is replacement

    def test_build_chain_registration_order(self):
        registry = ProviderRegistry()
        first, second = MemoryProvider(name="first"), MemoryProvider(name="second")
        registry.register("first", first)
        registry.register("second", second)

        assert registry.build_chain().providers == [first, second]

    def test_build_chain_explicit_order(self):
        registry = ProviderRegistry()
        first, second = MemoryProvider(name="first"), MemoryProvider(name="second")
        registry.register("first", first)
        registry.register("second", second)

        assert registry.build_chain(["second", "first"]).providers == [second, first]

    def test_build_chain_unknown_name(self):
        with pytest.raises(ProviderNotRegisteredError):
            ProviderRegistry().build_chain(["nope"])


class TestRegistryFromSettings:
    """Tests for ProviderRegistry.from_settings."""

    def test_default_settings_use_memory_only(self, monkeypatch: pytest.MonkeyPatch, static_translations):
        """Without a database URL nothing is written to disk."""
        monkeypatch.delenv("TRANSCHAIN_PROVIDER_ORDER", raising=False)
        monkeypatch.delenv("TRANSCHAIN_DATABASE_URL", raising=False)
        registry = ProviderRegistry.from_settings(TranschainSettings(_env_file=None), static_translations)

        assert registry.names == ["memory"]
        assert registry.build_chain().translate("en", "messages.greeting") == "Hello"

    def test_memory_only(self, memory_only_settings: TranschainSettings, static_translations):
        registry = ProviderRegistry.from_settings(memory_only_settings, static_translations)

        assert registry.names == ["memory"]
        chain = registry.build_chain()
        assert chain.translate("en", "messages.greeting") == "Hello"

    def test_database_and_memory(self, test_settings: TranschainSettings, static_translations):
        registry = ProviderRegistry.from_settings(test_settings, static_translations)

        assert isinstance(registry.get("database"), DatabaseProvider)
        assert isinstance(registry.get("memory"), MemoryProvider)

        chain = registry.build_chain()
        assert [p.name for p in chain.providers] == ["database", "memory"]

    def test_settings_order_requires_registered_names(self, static_translations):
        settings = TranschainSettings(database_url=None, provider_order=["database", "memory"])
        registry = ProviderRegistry.from_settings(settings, static_translations)

        with pytest.raises(ProviderNotRegisteredError):
            registry.build_chain()
