"""Settings for the catalog viewer, read from ``CATALOG_*`` environment variables."""
from pathlib import Path
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(str(env_path))

class ClientSettings(BaseSettings):
    API_URL: str = "http://localhost:3000/api"
    POLL_INTERVAL: float = 30.0
    REQUEST_TIMEOUT: float = 10.0
    LAYOUT: str = "desktop"

    class Config:
        env_prefix = "CATALOG_"
        case_sensitive = True
        extra = "ignore"
