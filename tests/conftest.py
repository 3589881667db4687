import sys
from pathlib import Path

# чтобы видеть src/
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from fictive.settings import get_settings
from fictive.store import FakeDB

TABLE_FIXTURE = [
    {"id": 1, "content": "aaa"},
    {"id": 2, "content": "bbb"},
    {"id": 3, "content": "ccc"},
]


@pytest.fixture
def testing_env(monkeypatch):
    monkeypatch.setenv("FICTIVE_TESTING", "1")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def real_delays(monkeypatch):
    monkeypatch.setenv("FICTIVE_TESTING", "0")
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def table_rows():
    return [dict(row) for row in TABLE_FIXTURE]


@pytest.fixture
def fake_db():
    db = FakeDB()
    db.create("table", TABLE_FIXTURE)
    return db
