from typing import Any, Dict, Iterable, List
import traceback

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging import get_logger
from .responses import ResponseBuilder

logger = get_logger()

VALIDATION_FAILED_MESSAGE = "The given data was invalid."


class NotFoundError(Exception):
    """Custom exception for resource not found errors."""

    def __init__(
        self, message: str = "Resource not found", error_code: str = "NOT_FOUND"
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class RecordValidationError(Exception):
    """Submitted fields violate the record schema.

    ``errors`` maps each offending field (as the client named it) to the list
    of reasons it was rejected.
    """

    def __init__(
        self,
        errors: Dict[str, List[str]],
        message: str = VALIDATION_FAILED_MESSAGE,
        error_code: str = "VALIDATION_ERROR",
    ):
        super().__init__(message)
        self.message = message
        self.errors = errors
        self.error_code = error_code

    @classmethod
    def from_pydantic(cls, exc: ValidationError) -> "RecordValidationError":
        return cls(format_validation_errors(exc.errors()))


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> Dict[str, List[str]]:
    """Group pydantic error entries by field name.

    Request body errors are located as ``("body", "<field>", ...)``; the
    ``body`` segment is dropped so the keys match the submitted JSON.
    """
    formatted: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        # A malformed document is located by character offset, not by field
        if error.get("type") == "json_invalid":
            loc = []
        if len(loc) > 1 and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        field = ".".join(loc) or "body"
        formatted.setdefault(field, []).append(error["msg"])
    return formatted


def setup_error_handlers(app: FastAPI):
    """Setup custom error handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error(f"HTTP Exception: {exc.status_code} - {exc.detail}")
        return ResponseBuilder.error(
            message=str(exc.detail),
            status_code=exc.status_code,
        )

    """
    RequestValidationError is raised by FastAPI before the handler runs,
    e.g. for a create body that fails the schema.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.error(f"Request Validation Error: {exc.errors()}")

        return ResponseBuilder.error(
            message=VALIDATION_FAILED_MESSAGE,
            errors=format_validation_errors(exc.errors()),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    @app.exception_handler(RecordValidationError)
    async def record_validation_exception_handler(
        request: Request, exc: RecordValidationError
    ):
        logger.error(f"Record Validation Error: {exc.errors}")

        return ResponseBuilder.error(
            message=exc.message,
            errors=exc.errors,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    """
    A pydantic ValidationError escaping a handler means the stored collection
    itself holds malformed records; that is a server fault, not a client one.
    """

    @app.exception_handler(ValidationError)
    async def pydantic_validation_exception_handler(
        request: Request, exc: ValidationError
    ):
        logger.error(f"Pydantic Validation Error: {exc.errors()}")

        return ResponseBuilder.error(
            message="Data validation failed",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.exception_handler(NotFoundError)
    async def not_found_exception_handler(request: Request, exc: NotFoundError):
        logger.error(f"Not Found Error: {exc.message}")

        return ResponseBuilder.error(
            message=exc.message,
            status_code=status.HTTP_404_NOT_FOUND,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other unhandled exceptions"""
        logger.error(f"Unhandled Exception: {str(exc)}")
        logger.error(f"Traceback: {traceback.format_exc()}")

        return ResponseBuilder.error(
            message="An internal server error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
