"""Shared fixtures: every test gets its own copy of the seed database."""

import json
import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from admock.core.config import Settings
from admock.core.database import JsonDatabase
from admock.main import create_app

SEED_FILE = Path(__file__).resolve().parents[1] / "db.initial.json"


@pytest.fixture
def db_files(tmp_path):
    """Paths of a fresh live database and its seed."""
    initial = tmp_path / "db.initial.json"
    live = tmp_path / "db.json"
    shutil.copyfile(SEED_FILE, initial)
    shutil.copyfile(SEED_FILE, live)
    return live, initial


@pytest.fixture
def settings(db_files):
    live, initial = db_files
    return Settings(DB_JSON_FILE=str(live), DB_INITIAL_FILE=str(initial))


@pytest.fixture
def db(db_files):
    live, initial = db_files
    return JsonDatabase(live, initial)


@pytest.fixture
def client(settings):
    """A test client bound to the temporary database."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def read_db(db_files):
    """Read the live database straight from disk."""
    live, _ = db_files

    def _read():
        return json.loads(live.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def valid_ad():
    return {
        "campaignName": "My Campaign",
        "objective": "traffic",
        "adText": "Nice creative",
        "cta": "Learn More",
        "musicOption": "none",
    }
