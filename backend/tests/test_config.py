from lyrics_catalog.core.config import Settings, get_async_database_url, parse_comma_separated_list

def test_database_url_built_from_parts():
    settings = Settings(DB_USER="app", DB_PASSWORD="secret", DB_HOST="db", DB_PORT=6543, DB_NAME="songs")
    assert settings.database_url == "postgresql+asyncpg://app:secret@db:6543/songs"

def test_database_url_override():
    settings = Settings(DATABASE_URL="postgres://u:p@host/catalog")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/catalog"

def test_async_url_conversion():
    assert get_async_database_url("sqlite:///songs.db") == "sqlite+aiosqlite:///songs.db"
    assert get_async_database_url("sqlite+aiosqlite:///songs.db") == "sqlite+aiosqlite:///songs.db"
    assert get_async_database_url("postgresql+asyncpg://h/db") == "postgresql+asyncpg://h/db"

def test_parse_comma_separated_list():
    assert parse_comma_separated_list("*") == ["*"]
    assert parse_comma_separated_list("GET, POST,,PUT ") == ["GET", "POST", "PUT"]
    assert parse_comma_separated_list(None) == []

def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("API_PREFIX", "/catalog")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings()
    assert settings.API_PREFIX == "/catalog"
    assert settings.PORT == 8080
