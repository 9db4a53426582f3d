# app/shared/errors.py
"""
Error body and exception handlers.

Every error response has the shape {message, error?, errors?: [{field, reason}]}.
"""
import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class FieldError(BaseModel):
    field: str
    reason: str


class ErrorResponse(BaseModel):
    message: str
    error: Optional[str] = None
    errors: Optional[List[FieldError]] = None


class APIError(Exception):
    """Raised by routes to return a specific status with the standard error body."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error: Optional[str] = None,
        errors: Optional[List[FieldError]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error
        self.errors = errors


def error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _field_name(loc) -> str:
    # ("body", "userInfo", "age") → "userInfo.age"
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts) or "request"


# ============================================================
# ✅ HANDLERS
# ============================================================
async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    return error_response(
        exc.status_code, ErrorResponse(message=exc.message, error=exc.error, errors=exc.errors)
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = exc.errors()
    errors = [FieldError(field=_field_name(d.get("loc", ())), reason=d.get("msg", "")) for d in details]

    if any(d.get("loc", ())[:1] == ("path",) for d in details):
        message = "Invalid ID format"
    else:
        message = "Invalid request data"

    logger.info(f"⚠️  {request.method} {request.url.path} rejected: {len(errors)} validation error(s)")
    return error_response(status.HTTP_400_BAD_REQUEST, ErrorResponse(message=message, errors=errors))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, ErrorResponse(message=str(exc.detail)))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"❌ Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(message="Internal server error", error=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
