from typing import List, Optional
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Try to load .env file if it exists
env_path = Path(__file__).parent.parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(str(env_path))

# Base directory is the backend directory
BASE_DIR: Path = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    PROJECT_NAME: str = "Lyrics Catalog"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database Settings
    DATABASE_URL: Optional[str] = None
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "songs_db"

    # Connection pool, ignored for SQLite
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_COMMAND_TIMEOUT: int = 30

    # CORS Settings
    CORS_ORIGINS: str = "*"
    CORS_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    CORS_HEADERS: str = "Content-Type,Authorization"

    # Logging
    LOG_FORMAT: str = "json"

    @property
    def cors_origins(self) -> List[str]:
        return parse_comma_separated_list(self.CORS_ORIGINS)

    @property
    def cors_methods(self) -> List[str]:
        return parse_comma_separated_list(self.CORS_METHODS)

    @property
    def cors_headers(self) -> List[str]:
        return parse_comma_separated_list(self.CORS_HEADERS)

    @property
    def database_url(self) -> str:
        """Full async database URL, built from the DB_* parts unless DATABASE_URL is set"""
        url = self.DATABASE_URL or (
            f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )
        return get_async_database_url(url)

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        json_schema_extra = {
            "title": "API Settings",
            "description": "Configuration settings for the Lyrics Catalog API"
        }

def get_async_database_url(url: str) -> str:
    """Convert a database URL to its async driver form if needed"""
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    if url.startswith('postgresql://'):
        url = url.replace('postgresql://', 'postgresql+asyncpg://', 1)
    elif url.startswith('sqlite://'):
        url = url.replace('sqlite://', 'sqlite+aiosqlite://', 1)
    return url

def parse_comma_separated_list(value: str | List[str] | None) -> List[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if value == "*":
        return ["*"]
    return [item.strip() for item in value.split(",") if item.strip()]

# Create global settings object
settings = Settings()
