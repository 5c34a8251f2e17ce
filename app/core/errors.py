# app/core/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ExportPlatformError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal error"):
        super().__init__(message)
        self.message = message


class QueryNotFoundError(ExportPlatformError):
    status_code = 404

    def __init__(self, query_id):
        super().__init__("Query not found")
        self.query_id = query_id


class RatesUnavailableError(ExportPlatformError):
    """Carrier API failed. The upstream detail is kept for logs only."""

    def __init__(self, detail: str = ""):
        super().__init__("Error fetching rates")
        self.detail = detail


class StorageError(ExportPlatformError):
    pass


class PersistenceError(ExportPlatformError):
    pass


async def query_not_found_handler(request: Request, exc: QueryNotFoundError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def rates_unavailable_handler(request: Request, exc: RatesUnavailableError):
    logger.warning("Rate lookup failed on %s: %s", request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def platform_error_handler(request: Request, exc: ExportPlatformError):
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QueryNotFoundError, query_not_found_handler)
    app.add_exception_handler(RatesUnavailableError, rates_unavailable_handler)
    app.add_exception_handler(ExportPlatformError, platform_error_handler)
