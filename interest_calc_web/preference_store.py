"""Persistence layer for the remembered interest rate.

This module implements the key/value ``PreferenceStore`` on top of a single
SQLAlchemy table. It defaults to SQLite for local use, but accepts any
SQLAlchemy-compatible URL. Database errors are raised as
``PreferenceStoreError`` so callers can show a notice and carry on with the
default rate.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, String, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from interest_calc.exceptions import PreferenceStoreError

logger = logging.getLogger(__name__)

Base = declarative_base()


class PreferenceModel(Base):
    __tablename__ = "preferences"

    key = Column(String(64), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SqlPreferenceStore:
    """Database-backed preference store."""

    def __init__(self, url: str) -> None:
        try:
            self._engine = create_engine(url, future=True)
            Base.metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise PreferenceStoreError("open", "*", str(exc)) from exc
        self._session_factory = sessionmaker(self._engine, expire_on_commit=False, future=True)

    def get(self, key: str) -> Optional[str]:
        try:
            with self._session_factory() as session:
                row = session.get(PreferenceModel, key)
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise PreferenceStoreError("read", key, str(exc)) from exc

    def set(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as session:
                row = session.get(PreferenceModel, key)
                if row:
                    row.value = value
                else:
                    session.add(PreferenceModel(key=key, value=value))
                session.commit()
        except SQLAlchemyError as exc:
            raise PreferenceStoreError("save", key, str(exc)) from exc
        logger.debug("Stored preference %s=%s", key, value)

    def remove(self, key: str) -> None:
        try:
            with self._session_factory() as session:
                row = session.get(PreferenceModel, key)
                if row:
                    session.delete(row)
                    session.commit()
        except SQLAlchemyError as exc:
            raise PreferenceStoreError("clear", key, str(exc)) from exc

    def dispose(self) -> None:
        self._engine.dispose()


def create_store_from_env(url: Optional[str]) -> SqlPreferenceStore:
    return SqlPreferenceStore(url or "sqlite:///preferences.sqlite3")
