import json

import pytest
from fastapi.testclient import TestClient

from woke_or_not.catalog.store import load_catalog
from woke_or_not.config import Settings
from woke_or_not.main import create_app


@pytest.fixture
def catalog():
    """The packaged catalogue fixture."""
    return load_catalog()


@pytest.fixture
def client():
    """Test client for an app built with default settings."""
    return TestClient(create_app(Settings()))


@pytest.fixture
def write_fixture(tmp_path):
    """Write a list of raw entries to a JSON file and return its path."""

    def _write(entries, name="entities.json"):
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path

    return _write
