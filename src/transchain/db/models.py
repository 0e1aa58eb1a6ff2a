"""Translation database model."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from transchain.db.base import Base, TimestampMixin


class TranslationModel(Base, TimestampMixin):
    """
    A single leaf translation.

    Nested translation data is flattened into dotted keys, so
    ``{"messages": {"greeting": "Hi"}}`` is stored as the row
    ``("messages.greeting", "Hi")``. Values are JSON so lists and numbers
    survive the round trip.
    """

    __tablename__ = "translations"
    __table_args__ = (UniqueConstraint("locale", "key", name="uq_translations_locale_key"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    locale: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    key: Mapped[str] = mapped_column(String(500), nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<TranslationModel {self.locale}:{self.key}>"
