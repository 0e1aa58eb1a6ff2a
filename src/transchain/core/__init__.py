"""Core types, options, merging and exceptions."""

from .exceptions import (
    InvalidTranslationDataError,
    NoProvidersConfiguredError,
    ProviderError,
    ProviderNotRegisteredError,
    ProviderStorageError,
    TranschainError,
)
from .merge import classify_result, deep_merge
from .options import LookupOptions
from .types import ResultKind, TranslationResult

__all__ = [
    # Types
    "ResultKind",
    "TranslationResult",
    # Options
    "LookupOptions",
    # Merging
    "classify_result",
    "deep_merge",
    # Exceptions
    "InvalidTranslationDataError",
    "NoProvidersConfiguredError",
    "ProviderError",
    "ProviderNotRegisteredError",
    "ProviderStorageError",
    "TranschainError",
]
