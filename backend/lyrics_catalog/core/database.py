from typing import Optional, Tuple
import logging
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from .config import Settings, settings as default_settings
from ..models.models import Base

logger = logging.getLogger(__name__)

class DatabaseManager:
    """Owns the process-wide engine and connection pool.

    Built once by ``create_app`` or a script and passed to the song store.
    """

    def __init__(self, database_url: Optional[str] = None, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.database_url = database_url if database_url else self.settings.database_url
        self.engine = create_async_engine(self.database_url, **self._engine_options())
        self.SessionLocal = async_sessionmaker(self.engine, expire_on_commit=False)

    def _engine_options(self) -> dict:
        options = {"echo": False}
        if self.database_url.startswith("sqlite"):
            return options
        options.update(
            pool_size=self.settings.DB_POOL_SIZE,
            max_overflow=self.settings.DB_MAX_OVERFLOW,
            pool_timeout=self.settings.DB_POOL_TIMEOUT,
            pool_pre_ping=True,
            connect_args={
                "timeout": 10,
                "command_timeout": self.settings.DB_COMMAND_TIMEOUT,
            },
        )
        return options

    async def initialize(self):
        """Create the songs table if it does not exist yet"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Songs table initialized")

    async def check_connection(self) -> Tuple[bool, str]:
        """Check that the database answers a trivial query"""
        try:
            async with self.SessionLocal() as session:
                await session.execute(text("SELECT 1"))
            return True, "Database connection healthy"
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False, f"Database connection failed: {e.__class__.__name__}"

    async def dispose(self):
        """Close every pooled connection"""
        await self.engine.dispose()
        logger.info("Database connection pool closed")

def get_db(request: Request) -> DatabaseManager:
    """FastAPI dependency returning the manager attached to the running app"""
    return request.app.state.db
