import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional
from .config import Settings, settings as default_settings

# Attributes every LogRecord carries; anything else was passed through ``extra``
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for logs"""
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        # Add extra fields if present
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = {
                "type": str(record.exc_info[0].__name__),
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        return json.dumps(log_data, default=str)

def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure application logging"""
    settings = settings or default_settings
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Set log level based on environment
    log_level = logging.DEBUG if settings.DEBUG else logging.INFO
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    if settings.LOG_FORMAT == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    root_logger.addHandler(console_handler)

    # Set levels for third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)

    root_logger.info(
        "Application logging configured",
        extra={
            "environment": settings.ENVIRONMENT,
            "debug": settings.DEBUG,
            "log_level": logging.getLevelName(log_level),
            "formatter": settings.LOG_FORMAT,
        }
    )
