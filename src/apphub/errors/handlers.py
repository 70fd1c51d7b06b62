"""FastAPI exception handlers producing the ``{message, errors?}`` error shape."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from apphub.errors.exceptions import AppHubError, NotFoundError, PersistenceError
from apphub.models.common import ErrorResponse
from apphub.schemas.validator import field_errors

logger = logging.getLogger(__name__)


def _error_json(status_code: int, message: str, errors=None) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(AppHubError)
    async def apphub_error_handler(request: Request, exc: AppHubError):
        if isinstance(exc, PersistenceError):
            logger.error(
                "Persistence failure on %s %s", request.method, request.url.path, exc_info=exc.__cause__ or exc
            )
        elif isinstance(exc, NotFoundError):
            logger.debug("%s %s -> %s", request.method, request.url.path, exc.message)
        return _error_json(exc.status_code, exc.message, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return _error_json(400, "Invalid request data", field_errors(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return _error_json(500, "Internal server error")
