from __future__ import annotations

from typing import Optional

import pytest

from interest_calc.exceptions import PreferenceStoreError
from interest_calc_web.app import app as flask_app
from interest_calc_web.preference_store import SqlPreferenceStore


class BrokenStore:
    """Preference store whose every call fails."""

    def get(self, key: str) -> Optional[str]:
        raise PreferenceStoreError("read", key, "disk unavailable")

    def set(self, key: str, value: str) -> None:
        raise PreferenceStoreError("save", key, "disk unavailable")

    def remove(self, key: str) -> None:
        raise PreferenceStoreError("clear", key, "disk unavailable")


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'preferences.sqlite3'}"


@pytest.fixture
def sql_store(database_url):
    store = SqlPreferenceStore(database_url)
    yield store
    store.dispose()


@pytest.fixture
def app(sql_store):
    flask_app.config.update(TESTING=True)
    flask_app.extensions["preference_store"] = sql_store
    yield flask_app
    flask_app.extensions.pop("preference_store", None)


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def broken_client():
    flask_app.config.update(TESTING=True)
    flask_app.extensions["preference_store"] = BrokenStore()
    with flask_app.test_client() as client:
        yield client
    flask_app.extensions.pop("preference_store", None)
