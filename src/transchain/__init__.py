"""Transchain - composite translation resolver over multiple lookup providers."""

from transchain.config import TranschainSettings, get_settings
from transchain.core.exceptions import (
    NoProvidersConfiguredError,
    ProviderError,
    TranschainError,
)
from transchain.core.options import LookupOptions
from transchain.core.types import ResultKind
from transchain.providers import DatabaseProvider, MemoryProvider
from transchain.resolution import ChainResolver, LookupProvider, ProviderRegistry

__version__ = "0.1.0"
__all__ = [
    # Chain
    "ChainResolver",
    "LookupProvider",
    "ProviderRegistry",
    # Providers
    "DatabaseProvider",
    "MemoryProvider",
    # Options and types
    "LookupOptions",
    "ResultKind",
    # Settings
    "TranschainSettings",
    "get_settings",
    # Exceptions
    "NoProvidersConfiguredError",
    "ProviderError",
    "TranschainError",
    # Version
    "__version__",
]
