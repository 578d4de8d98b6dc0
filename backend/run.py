import uvicorn
from lyrics_catalog.core.config import settings
from lyrics_catalog.core.logging import TEXT_FORMAT

# Configure logging for uvicorn
log_config = uvicorn.config.LOGGING_CONFIG
log_config["formatters"]["access"]["fmt"] = TEXT_FORMAT
log_config["formatters"]["default"]["fmt"] = TEXT_FORMAT

if __name__ == "__main__":
    print(f"Starting server on {settings.HOST}:{settings.PORT}")
    print(f"Environment: {settings.ENVIRONMENT}")
    print(f"Debug mode: {settings.DEBUG}")
    print(f"API docs available at: http://{settings.HOST}:{settings.PORT}/docs")

    uvicorn.run(
        "lyrics_catalog.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        log_config=log_config,
        access_log=True
    )
