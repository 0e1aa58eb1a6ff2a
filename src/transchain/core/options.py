"""Request options passed along with translate and localize calls."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LookupOptions(BaseModel):
    """
    Immutable options bag for a single lookup.

    Only ``default`` and ``count`` are interpreted by the chain. Any other
    keyword is kept as an extra field and forwarded to providers untouched.

    Presence of a key matters, not its value: ``LookupOptions(count=None)``
    still asks for a pluralized leaf.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    default: Any = Field(default=None, description="Fallback used once every provider missed")
    count: Any = Field(default=None, description="Pluralization count, only its presence is checked")

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @property
    def has_count(self) -> bool:
        return "count" in self.model_fields_set

    @property
    def extras(self) -> dict[str, Any]:
        """Provider-specific keys beyond ``default`` and ``count``."""
        return dict(self.model_extra or {})

    def without_default(self) -> LookupOptions:
        """Copy of these options with the ``default`` key removed."""
        values = {**self.__dict__, **(self.model_extra or {})}
        values.pop("default", None)
        # no validation pass, so every value keeps its identity
        return LookupOptions.model_construct(
            _fields_set=self.model_fields_set - {"default"},
            **values,
        )

    @classmethod
    def coerce(cls, options: LookupOptions | Mapping[str, Any] | None) -> LookupOptions | None:
        """Accept options as a model, a plain mapping or None."""
        if options is None or isinstance(options, LookupOptions):
            return options
        return cls(**dict(options))
