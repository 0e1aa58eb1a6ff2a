"""Database layer for the editable translation store."""

from .base import Base, TimestampMixin, create_engine, create_session_factory
from .models import TranslationModel
from .repositories import TranslationRepository
from .session import DatabaseManager

__all__ = [
    "Base",
    "DatabaseManager",
    "TimestampMixin",
    "TranslationModel",
    "TranslationRepository",
    "create_engine",
    "create_session_factory",
]
