"""Repository for translation rows."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from transchain.db.models import TranslationModel


class TranslationRepository:
    """Data access for ``TranslationModel`` rows."""

    model = TranslationModel

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, locale: str, key: str) -> TranslationModel | None:
        """Get the row for an exact key."""
        stmt = select(self.model).where(self.model.locale == locale, self.model.key == key)
        return self._session.execute(stmt).scalar_one_or_none()

    def list_under(self, locale: str, prefix: str) -> Sequence[TranslationModel]:
        """List rows whose key starts with ``prefix``, ordered by key."""
        stmt = (
            select(self.model)
            .where(
                self.model.locale == locale,
                self.model.key.startswith(prefix, autoescape=True),
            )
            .order_by(self.model.key)
        )
        return self._session.execute(stmt).scalars().all()

    def exists(self, locale: str, key: str, prefix: str) -> bool:
        """Check for a row at ``key`` or anywhere under ``prefix``."""
        stmt = (
            select(self.model.id)
            .where(
                self.model.locale == locale,
                (self.model.key == key) | self.model.key.startswith(prefix, autoescape=True),
            )
            .limit(1)
        )
        return self._session.execute(stmt).scalar() is not None

    def upsert(self, locale: str, key: str, value: Any) -> TranslationModel:
        """Insert a row or update the value of the existing one."""
        entity = self.get(locale, key)
        if entity is None:
            entity = self.model(locale=locale, key=key, value=value)
            self._session.add(entity)
        else:
            entity.value = value
        self._session.flush()
        return entity

    def delete_keys(self, locale: str, keys: Sequence[str]) -> int:
        """Delete the rows at the given exact keys."""
        if not keys:
            return 0
        stmt = delete(self.model).where(self.model.locale == locale, self.model.key.in_(keys))
        stmt = stmt.execution_options(synchronize_session="fetch")
        return self._session.execute(stmt).rowcount

    def delete_under(self, locale: str, prefix: str) -> int:
        """Delete every row whose key starts with ``prefix``."""
        stmt = delete(self.model).where(
            self.model.locale == locale,
            self.model.key.startswith(prefix, autoescape=True),
        ).execution_options(synchronize_session="fetch")
        return self._session.execute(stmt).rowcount

    def locales(self) -> list[str]:
        """Distinct locales with at least one row."""
        stmt = select(self.model.locale).distinct().order_by(self.model.locale)
        return list(self._session.execute(stmt).scalars().all())
