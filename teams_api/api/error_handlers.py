"""Exception handlers translating pipeline errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from teams_api.core.errors import TeamsAPIError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI app."""

    @app.exception_handler(TeamsAPIError)
    async def teams_api_error_handler(request: Request, exc: TeamsAPIError) -> JSONResponse:
        """Map a TeamsAPIError to its status; 5xx details stay in the logs."""
        if exc.http_status >= 500:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra={"path": request.url.path, "status_code": exc.http_status},
            )
        else:
            logger.info(
                exc.message,
                extra={"path": request.url.path, "status_code": exc.http_status},
            )
        return JSONResponse(
            status_code=exc.http_status,
            content={"detail": exc.public_message},
        )
