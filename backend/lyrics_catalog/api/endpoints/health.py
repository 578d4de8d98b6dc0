from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from ...core.database import DatabaseManager, get_db
from urllib.parse import urlparse
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

def get_redacted_url(url: str | None) -> str:
    """Return a redacted version of the URL with password hidden."""
    if not url:
        return "not set"
    try:
        parsed = urlparse(url)
        if parsed.password:
            netloc = parsed.netloc.replace(parsed.password, "***")
            return url.replace(parsed.netloc, netloc)
        return url
    except ValueError as e:
        logger.error(f"Error redacting URL: {e}")
        return "invalid url format"

@router.get("/health")
async def health_check(db: DatabaseManager = Depends(get_db)):
    """Health check endpoint that checks database connectivity"""
    healthy, detail = await db.check_connection()
    response = {
        "status": "healthy" if healthy else "unhealthy",
        "environment": db.settings.ENVIRONMENT,
        "database": {
            "status": "healthy" if healthy else "unhealthy",
            "url": get_redacted_url(db.database_url),
            "detail": detail
        }
    }
    return JSONResponse(status_code=200 if healthy else 503, content=response)
