"""Core enums and type definitions."""

from enum import StrEnum
from typing import Any

# A single provider's answer: None (absent), a mapping (namespace) or a leaf value
TranslationResult = Any


class ResultKind(StrEnum):
    """Classification of a provider's translate/localize result."""

    ABSENT = "absent"
    LEAF = "leaf"  # string, list or any other non-mapping value
    NAMESPACE = "namespace"  # partial subtree of the key hierarchy
