from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from .exceptions import CatalogError, StorageError

logger = logging.getLogger(__name__)

def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})

async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Map catalog errors to their status code and message"""
    if isinstance(exc, StorageError):
        logger.error(
            f"Storage failure on {request.method} {request.url.path}",
            exc_info=exc.__cause__ or exc
        )
    return error_response(exc.status_code, exc.message)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed bodies with 400 and a single message"""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return error_response(400, "Invalid request body: " + "; ".join(problems))

async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None)
    )

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
    return error_response(StorageError.status_code, StorageError.message)

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
