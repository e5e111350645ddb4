"""
Error handling decorators and utilities for API endpoints.

This module centralizes the mapping from application exceptions to HTTP
responses. Every error body has the shape {"error": "<message>"}.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from constants import HTTPStatus, ErrorMessages
from exceptions import (
    ApplicationError,
    NotFoundError,
    StorageError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _to_http_exception(operation_name: str, e: Exception) -> HTTPException:
    """Translate an exception raised inside an endpoint into an HTTPException."""
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.message)
    if isinstance(e, NotFoundError):
        logger.info(f"{operation_name} - Not found: {e.details}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=e.message)
    if isinstance(e, StorageError):
        logger.error(
            f"{operation_name} - Storage error during {e.details.get('operation')}: {e.message}",
            exc_info=e,
        )
    elif isinstance(e, ApplicationError):
        logger.error(f"{operation_name} - Application error: {e.message}", exc_info=e)
    else:
        logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=e)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=ErrorMessages.INTERNAL
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    ValidationError maps to 400, NotFoundError to 404. Storage failures and
    anything unexpected are logged once here with a traceback and surface as
    an opaque 500.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create user")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.get("/{user_id}")
        @handle_api_errors("Get user")
        def get_user(...):
            return service.get_user(user_id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as e:
                raise _to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def format_validation_errors(errors) -> str:
    """
    Flatten pydantic/FastAPI validation errors into one message.

    Undecodable bodies and bodies that are not a JSON object collapse to
    "Invalid JSON"; field errors read "<field>: <msg>" joined with "; ".
    """
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "path", "query")]
        if error.get("type") == "json_invalid" or not loc:
            return ErrorMessages.INVALID_JSON
        messages.append(f"{'.'.join(loc)}: {error.get('msg')}")
    return "; ".join(messages) or ErrorMessages.INVALID_JSON


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc.errors())
    logger.warning(f"{request.method} {request.url.path} - Rejected request: {message}")
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path} - Unhandled error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content={"error": ErrorMessages.INTERNAL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the {"error": ...} response shape on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
