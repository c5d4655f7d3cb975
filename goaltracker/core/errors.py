"""Action failures and HTTP exception handler registration."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from goaltracker.core.results import ActionError
from goaltracker.core.results import ActionErrorCode
from goaltracker.core.results import FieldError
from goaltracker.core.results import create_error
from goaltracker.core.results import render_result

VALIDATION_FAILED_MESSAGE = "Validation failed. Please check your input."
UNKNOWN_ERROR_MESSAGE = "Something went wrong. Please try again."


class ActionFailure(Exception):
    """Base exception for anticipated failures converted at the action boundary."""

    code = ActionErrorCode.UNKNOWN_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_error(self) -> ActionError:
        return create_error(self.message, self.code)


class UnauthorizedError(ActionFailure):
    """No usable session for the caller."""

    code = ActionErrorCode.UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class NotFoundError(ActionFailure):
    """Resource absent, or hidden because the caller does not own it."""

    code = ActionErrorCode.NOT_FOUND

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


def _format_location(location: tuple[Any, ...] | list[Any] | Any) -> str:
    if not isinstance(location, (tuple, list)):
        return str(location) or "request"

    prefixes = {"body", "query", "path", "header", "cookie"}
    filtered = [str(part) for part in location if part not in prefixes]
    if filtered:
        return ".".join(filtered)

    if not location:
        return "request"

    return str(location[0])


def field_errors_from_issues(issues: list[Any]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts into field errors."""
    errors: list[FieldError] = []
    for issue in issues:
        field = _format_location(issue.get("loc", ()))
        message = str(issue.get("msg") or "Invalid value")
        errors.append(FieldError(field=field, message=message))
    return errors


def _http_error_code(status_code: int) -> ActionErrorCode:
    if status_code == status.HTTP_404_NOT_FOUND:
        return ActionErrorCode.NOT_FOUND
    if status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
        return ActionErrorCode.UNAUTHORIZED
    if status_code in (status.HTTP_400_BAD_REQUEST, 422):
        return ActionErrorCode.VALIDATION_ERROR
    return ActionErrorCode.UNKNOWN_ERROR


async def request_validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI request validation errors to the action envelope."""

    error = create_error(
        VALIDATION_FAILED_MESSAGE,
        ActionErrorCode.VALIDATION_ERROR,
        field_errors_from_issues(list(exc.errors())),
    )
    return render_result(error)


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Normalize HTTP exceptions (unknown routes, bad methods) to the action envelope."""

    code = _http_error_code(exc.status_code)
    message = str(exc.detail) if isinstance(exc.detail, str) and exc.detail else "Request failed"
    if code == ActionErrorCode.VALIDATION_ERROR:
        error = create_error(message, code, [FieldError(field="request", message=message)])
    else:
        error = create_error(message, code)
    return JSONResponse(status_code=exc.status_code, content=error.to_payload(), headers=getattr(exc, "headers", None))


async def action_failure_handler(_: Request, exc: ActionFailure) -> JSONResponse:
    """Render failures raised outside an action runner."""

    return render_result(exc.to_error())


async def unhandled_exception_handler(_: Request, __: Exception) -> JSONResponse:
    """Avoid leaking internal exceptions while keeping response shape stable."""

    return render_result(create_error(UNKNOWN_ERROR_MESSAGE, ActionErrorCode.UNKNOWN_ERROR))


def register_error_handlers(app: FastAPI) -> None:
    """Attach all error handlers to a FastAPI app instance."""

    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ActionFailure, action_failure_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
