import os

# Must be set before the application settings are imported.
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient

from recipe_api.app.core import config
from recipe_api.app.core.db import init_db
from recipe_api.app.main import app


@pytest.fixture()
def database(tmp_path, monkeypatch):
    """Point the record store at a fresh SQLite file for one test."""
    db_file = tmp_path / "recipes.db"
    monkeypatch.setattr(config.settings, "database_url", str(db_file))
    init_db()
    return db_file


@pytest.fixture()
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def recipe_payload():
    return {
        "name": "Test Recipe",
        "ingredients": "Test ingredient 1\nTest ingredient 2",
        "instructions": "Test instructions",
        "cookTime": "30 minutes",
    }
