"""Exception handlers: every error leaves the API as {"error", "message"[, "details"]}.

register_exception_handlers(app) is called from create_app().
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tenantscope.core.config import get_settings
from tenantscope.domain.exceptions import TenantScopeException

logger = logging.getLogger(__name__)

# error_code -> HTTP status; unlisted codes are client errors (400).
_STATUS_BY_ERROR_CODE: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "TENANT_NOT_FOUND": 404,
    "SERVICE_UNAVAILABLE": 503,
}


def _error(status_code: int, error: str, message: object, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **extra},
    )


async def _tenantscope_error(request: Request, exc: TenantScopeException) -> JSONResponse:
    status_code = _STATUS_BY_ERROR_CODE.get(exc.error_code, 400)
    if status_code >= 500:
        logger.warning("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(422, "VALIDATION_ERROR", "Request validation failed", details=exc.errors())


async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, "HTTP_ERROR", exc.detail)


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything unexpected; the exception text is only exposed in debug mode."""
    logger.exception("Unhandled exception on %s", request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TenantScopeException, _tenantscope_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(Exception, _unhandled_error)
