# greenroom/core/errors.py
"""
Application errors and their translation to HTTP responses.
Every AppError is rendered as {"data": null, "errors": <code>} with the
error's status code.
"""
import logging
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("uvicorn.error")


class AppError(Exception):
    """Base class for all application errors."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code: str = "InternalServerError"

    def __init__(self, code: Optional[str] = None):
        self.code = code or self.default_code
        super().__init__(self.code)


class BadRequestError(AppError):
    """Referenced entity is invalid (e.g. unknown target user on create)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "BadRequest"


class ForbiddenError(AppError):
    """Authorization gate rejected the actor."""
    status_code = status.HTTP_403_FORBIDDEN
    default_code = "Forbidden"


class NotFoundError(AppError):
    """Resource lookup (friendly_id, attachment key) failed."""
    status_code = status.HTTP_404_NOT_FOUND
    default_code = "NotFound"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """
    Render an AppError inside the standard response envelope.

    Registered on the FastAPI app for AppError and all its subclasses.
    """
    logger.info("[errors] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code)
    return JSONResponse(status_code=exc.status_code, content={"data": None, "errors": exc.code})


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request body/query validation failures as BadRequest in the
    standard envelope instead of FastAPI's default 422 body.
    """
    logger.info("[errors] %s %s -> 400 validation: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=BadRequestError.status_code,
        content={"data": None, "errors": BadRequestError.default_code},
    )
