"""Shared test fixtures for all tests."""

from __future__ import annotations

from typing import Any

import pytest

from transchain.config import TranschainSettings

# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def static_translations() -> dict[str, dict[str, Any]]:
    """Translations as shipped with an application."""
    return {
        "en": {
            "messages": {
                "greeting": "Hello",
                "farewell": "Goodbye",
            },
            "inbox": {
                "one": "1 message",
                "other": "{count} messages",
            },
            "formats": {
                "default": "{:%Y-%m-%d}",
                "short": "{:%d %b}",
                "price": "{:.2f}",
            },
        },
        "de": {
            "messages": {
                "greeting": "Hallo",
            },
        },
    }


@pytest.fixture
def custom_translations() -> dict[str, Any]:
    """Application-specific overrides for the en locale."""
    return {
        "messages": {
            "greeting": "Welcome back",
            "welcome": {"title": "Dashboard"},
        },
    }


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def test_settings() -> TranschainSettings:
    """Settings backed by an in-memory SQLite database."""
    return TranschainSettings(
        database_url="sqlite://",
        database_echo=False,
        provider_order=["database", "memory"],
    )


@pytest.fixture
def memory_only_settings() -> TranschainSettings:
    """Settings without a database."""
    return TranschainSettings(
        database_url=None,
        provider_order=["memory"],
    )
