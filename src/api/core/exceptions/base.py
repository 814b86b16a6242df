"""Global exception handlers for the FastAPI application."""

import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..messages import MessageCode, get_default_message
from src.utils.logger import get_logger

logger = get_logger(__name__)


class AdminConsoleException(Exception):
    """Base exception for the admin console API with unified message codes."""

    def __init__(
        self,
        message_code: MessageCode,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict | None = None,
        headers: dict | None = None,
        message: str | None = None,
    ):
        self.message_code = message_code
        self.status_code = status_code
        self.message: str = message or get_default_message(message_code)
        self.details = details or {}
        self.headers = headers or {}
        super().__init__(self.message)

    def to_response_dict(self) -> dict:
        """Convert exception to API response format."""
        return {
            "success": False,
            "error": self.message,
            "message_code": self.message_code,
            "details": self.details,
        }


def _error_response(
    status_code: int,
    message_code: MessageCode,
    message: str,
    details: dict | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "message_code": message_code,
            "details": details or {},
        },
    )


def _serializable_errors(errors: list) -> list[dict]:
    serializable_errors = []
    for error in errors:
        error_dict = {
            key: value for key, value in dict(error).items() if key != "ctx"
        }
        if "input" in error_dict and hasattr(error_dict["input"], "isoformat"):
            error_dict["input"] = error_dict["input"].isoformat()
        serializable_errors.append(error_dict)
    return serializable_errors


def _first_error_message(errors: list) -> str:
    if not errors:
        return get_default_message(MessageCode.INVALID_INPUT)
    first = errors[0]
    message = str(first.get("msg", ""))
    # pydantic prefixes custom validator errors
    if message.startswith("Value error, "):
        message = message[len("Value error, ") :]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    if location and not message.startswith(location[-1]):
        return f"{'.'.join(location)}: {message}"
    return message


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""

    @app.exception_handler(AdminConsoleException)
    async def admin_console_exception_handler(
        request: Request, exc: AdminConsoleException
    ) -> JSONResponse:
        """Handle custom admin console exceptions."""
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"Admin console exception: {exc.message_code.value}",
            path=request.url.path,
            method=request.method,
            message_code=exc.message_code.value,
            status_code=exc.status_code,
            details=exc.details,
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response_dict(),
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle FastAPI/Starlette HTTP exceptions (404 routes, 405 methods)."""
        logger.warning(
            f"HTTP exception {exc.status_code}: {exc.detail}",
            path=request.url.path,
            method=request.method,
        )

        message_code = (
            MessageCode.NOT_FOUND
            if exc.status_code == status.HTTP_404_NOT_FOUND
            else MessageCode.INVALID_INPUT
        )
        return _error_response(exc.status_code, message_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors as InvalidInput."""
        errors = exc.errors()
        logger.warning(
            "Request validation error",
            path=request.url.path,
            method=request.method,
        )

        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            MessageCode.INVALID_INPUT,
            _first_error_message(errors),
            {"validation_errors": _serializable_errors(errors)},
        )

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle Pydantic validation errors raised inside endpoints."""
        errors = exc.errors()
        logger.warning(
            "Pydantic validation error",
            path=request.url.path,
            method=request.method,
        )

        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            MessageCode.INVALID_INPUT,
            _first_error_message(errors),
            {"validation_errors": _serializable_errors(errors)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle all other unhandled exceptions."""
        if isinstance(exc, AdminConsoleException):
            return await admin_console_exception_handler(request, exc)

        logger.error(
            f"Unhandled exception: {str(exc)}",
            path=request.url.path,
            method=request.method,
            exception_type=type(exc).__name__,
            traceback=traceback.format_exc(),
        )

        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            MessageCode.INTERNAL_ERROR,
            "Internal server error",
            {"error_type": type(exc).__name__},
        )
