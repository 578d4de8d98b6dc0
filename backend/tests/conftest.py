import pytest
from fastapi.testclient import TestClient
from lyrics_catalog.core.config import Settings
from lyrics_catalog.core.database import DatabaseManager
from lyrics_catalog.main import create_app
from lyrics_catalog.services.song_store import SongStore

@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path / 'songs_test.db'}",
        LOG_FORMAT="text",
        ENVIRONMENT="test",
    )

@pytest.fixture
async def test_db(test_settings):
    """Create a test database with the songs table."""
    db = DatabaseManager(settings=test_settings)
    await db.initialize()
    yield db
    await db.dispose()

@pytest.fixture
def store(test_db):
    return SongStore(test_db)

@pytest.fixture
def test_app(test_settings):
    """API client backed by its own SQLite file; startup creates the table."""
    app = create_app(test_settings, DatabaseManager(settings=test_settings))
    with TestClient(app) as client:
        yield client

@pytest.fixture
def songs_url(test_settings):
    return f"{test_settings.API_PREFIX}/songs"

@pytest.fixture
def test_song_data():
    """Return test song payload."""
    return {
        "title": "Imagine",
        "artist": "John Lennon",
        "lyrics": "Imagine there's no heaven\nIt's easy if you try",
    }
