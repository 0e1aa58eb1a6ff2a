"""Custom exception hierarchy for transchain."""

from typing import Any


class TranschainError(Exception):
    """Base exception for all transchain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NoProvidersConfiguredError(TranschainError):
    """An operation needing at least one provider ran on an empty chain."""

    def __init__(
        self,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"No providers configured for {operation}", details)
        self.operation = operation


class ProviderNotRegisteredError(TranschainError):
    """Registry lookup for an unknown provider name."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Provider not registered: {name}", details)
        self.name = name


class ProviderError(TranschainError):
    """Failure raised by one of the bundled lookup providers."""

    def __init__(
        self,
        message: str,
        provider: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.provider = provider


class InvalidTranslationDataError(ProviderError):
    """Translation data passed to a provider has the wrong shape."""

    pass


class ProviderStorageError(ProviderError):
    """Provider backing storage failed."""

    pass
