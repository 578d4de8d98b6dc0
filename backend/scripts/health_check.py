import asyncio
import logging
import sys
from lyrics_catalog.core.database import DatabaseManager

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)

async def run_health_check() -> bool:
    db = DatabaseManager()
    try:
        logging.info("Starting database health check...")
        healthy, detail = await db.check_connection()
        if not healthy:
            logging.error(f"Database health check failed: {detail}")
            return False
        logging.info("Database health check passed")
        return True
    finally:
        await db.dispose()

if __name__ == "__main__":
    sys.exit(0 if asyncio.run(run_health_check()) else 1)
