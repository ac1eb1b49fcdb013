"""
Error taxonomy and exception handlers for the API.

Services raise the typed errors below; the handlers registered by
``setup_exception_handlers`` turn them into the JSON bodies clients expect:
``{"msg": ...}`` for domain failures, ``{"errors": [...]}`` for request
validation, and an opaque plain-text 500 for anything unexpected.
"""
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


class APIError(Exception):
    """Base class for failures that map onto a client-visible status code."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, msg: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(msg)
        self.msg = msg
        self.errors = errors


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotAuthorizedError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND


class ServiceUnavailableError(APIError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


def _format_validation_error(error: Dict[str, Any]) -> Dict[str, Any]:
    loc = [str(part) for part in error.get("loc", ())]
    location = loc[0] if loc else "body"
    param = ".".join(loc[1:]) if len(loc) > 1 else location
    return {"msg": error.get("msg", "Invalid value"), "param": param, "location": location}


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.errors is not None:
        content: Dict[str, Any] = {"errors": exc.errors}
    else:
        content = {"msg": exc.msg}
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [_format_validation_error(error) for error in exc.errors()]
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"errors": errors})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"msg": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Log the cause of an unhandled error and hide it from the client."""
    logger.exception(f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}")
    return PlainTextResponse("Server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
