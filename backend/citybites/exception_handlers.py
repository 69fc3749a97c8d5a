"""Exception handlers mapping pipeline errors to HTTP responses.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Upstream failures also carry "tool", the name of the tool that failed.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from citybites.errors import CityBitesError, ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, exc: CityBitesError, **extra: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code, **extra},
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error(f"Configuration error on {request.url.path}: {exc.message}")
    return _error_response(status.HTTP_503_SERVICE_UNAVAILABLE, exc)


async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.warning(f"Upstream failure in {exc.tool}: {exc.message}")
    return _error_response(status.HTTP_502_BAD_GATEWAY, exc, tool=exc.tool)


async def citybites_error_handler(request: Request, exc: CityBitesError) -> JSONResponse:
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(UpstreamError, upstream_error_handler)
    app.add_exception_handler(CityBitesError, citybites_error_handler)
