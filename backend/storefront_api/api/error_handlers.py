"""Error Handlers: global exception handlers for failures outside the dispatcher.

Invariants:
    - StorefrontApiError -> its own envelope and status
    - Exception (catch-all) -> never leaks internal details

Design Decisions:
    - The dispatcher already maps every operation failure; these handlers cover
      the transport itself (body read errors, reference routes)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from storefront_api.core.errors import StorefrontApiError, internal_error_response

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_storefront_error_handler(app)
    _register_generic_error_handler(app)


def _register_storefront_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StorefrontApiError)
    async def storefront_error_handler(request: Request, exc: StorefrontApiError):
        logger.error(
            f"StorefrontApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=internal_error_response(),
        )
