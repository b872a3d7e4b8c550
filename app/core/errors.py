"""Local error type and the exception handlers that render error envelopes."""

import logging
from enum import StrEnum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import ErrorDetail, ErrorEnvelope, render_envelope

logger = logging.getLogger(__name__)


class ErrorType(StrEnum):
    """Machine-readable error kinds returned to callers."""

    INVALID_PARAMETER = "invalid_parameter"
    MISSING_PARAMETER = "missing_parameter"
    INVALID_REQUEST = "invalid_request"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    API_ERROR = "api_error"
    CREATION_ERROR = "creation_error"
    INTERNAL_ERROR = "internal_error"


class APIError(Exception):
    """Raised from a route to answer with an error envelope."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        message: str,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.message = message
        self.details = details

    @classmethod
    def invalid_parameter(cls, name: str) -> "APIError":
        return cls(
            status.HTTP_400_BAD_REQUEST,
            ErrorType.INVALID_PARAMETER,
            f"Invalid {name} parameter",
        )

    @classmethod
    def missing_parameter(cls, message: str) -> "APIError":
        return cls(status.HTTP_400_BAD_REQUEST, ErrorType.MISSING_PARAMETER, message)

    @classmethod
    def validation(cls, message: str) -> "APIError":
        return cls(status.HTTP_400_BAD_REQUEST, ErrorType.VALIDATION_ERROR, message)


def error_response(
    status_code: int,
    error_type: str,
    message: str,
    details: Any | None = None,
) -> JSONResponse:
    envelope = ErrorEnvelope(error=ErrorDetail(type=error_type, message=message, details=details))
    return JSONResponse(status_code=status_code, content=render_envelope(envelope))


def register_exception_handlers(app: FastAPI) -> None:
    """Make every failure leave the app as an error envelope."""

    @app.exception_handler(APIError)
    async def api_error_handler(_request: Request, exc: APIError) -> JSONResponse:
        return error_response(exc.status_code, exc.error_type, exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            ErrorType.INVALID_REQUEST,
            "Invalid request data",
            details=errors,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception: %s", exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorType.INTERNAL_ERROR,
            "Internal server error",
        )
