import pytest
from fastapi.testclient import TestClient

from pantry.db.engine import get_engine
from pantry.db.schema import metadata
from pantry.main import app


@pytest.fixture
def db_url(tmp_path, monkeypatch):
    """Point the app at a fresh SQLite file with the schema created."""
    url = f"sqlite:///{tmp_path / 'pantry.sqlite'}"
    monkeypatch.setenv("PANTRY_DB_URL", url)
    engine = get_engine(url)
    metadata.create_all(engine)
    yield url
    engine.dispose()


@pytest.fixture
def client(db_url) -> TestClient:
    return TestClient(app)
