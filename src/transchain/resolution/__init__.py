"""Resolution layer chaining translation lookup providers."""

from transchain.resolution.base import LookupProvider, provider_name
from transchain.resolution.chain import ChainResolver
from transchain.resolution.registry import ProviderRegistry

__all__ = [
    # Base
    "LookupProvider",
    "provider_name",
    # Chain
    "ChainResolver",
    # Registry
    "ProviderRegistry",
]
