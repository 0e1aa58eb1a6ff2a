"""Result classification and namespace merging."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .options import LookupOptions
from .types import ResultKind, TranslationResult


def classify_result(
    result: TranslationResult,
    options: LookupOptions | None = None,
) -> ResultKind:
    """
    Classify a provider result.

    A mapping only counts as a mergeable namespace when no ``count`` was
    requested; with ``count`` the caller wants a concrete pluralized leaf.
    """
    if result is None:
        return ResultKind.ABSENT
    if isinstance(result, Mapping) and not (options is not None and options.has_count):
        return ResultKind.NAMESPACE
    return ResultKind.LEAF


def deep_merge(base: Mapping[Any, Any], other: Mapping[Any, Any]) -> dict[Any, Any]:
    """
    Merge ``other`` into a copy of ``base``.

    Recurses only where both sides hold a mapping at the same key; anywhere
    else the value from ``other`` replaces the one from ``base``. Neither
    input is mutated.
    """
    merged = dict(base)
    for key, value in other.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        else:
            merged[key] = value
    return merged
