"""
API error types and the handlers that render them.

Single-message errors render as ``{"message": ...}``; validation errors
render as ``{"errors": [{"msg", "param", "location"}, ...]}``.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from utils.schemas import FieldError

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"


class ApiError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN


class Conflict(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: Sequence[FieldError]) -> None:
        super().__init__("Validation failed")
        self.errors: List[FieldError] = list(errors)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if isinstance(exc, ValidationFailed):
        logger.debug(
            "%s %s rejected: %d field error(s)",
            request.method, request.url.path, len(exc.errors),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"errors": [e.model_dump() for e in exc.errors]},
        )
    logger.debug("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's own parsing failures (bad JSON, bad path ids) as 400."""
    errors = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        location = str(loc[0]) if loc else "body"
        param = ".".join(str(part) for part in loc[1:])
        errors.append(FieldError(msg=err.get("msg", "Invalid value"), param=param, location=location))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [e.model_dump() for e in errors]},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
