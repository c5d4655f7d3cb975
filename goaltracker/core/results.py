"""Tagged success/error envelopes returned by every action."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from enum import Enum
from typing import Any
from typing import Generic
from typing import Literal
from typing import TypeVar
from typing import Union

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

T = TypeVar("T")


class ActionErrorCode(str, Enum):
    UNAUTHORIZED = "UNAUTHORIZED"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    DATABASE_ERROR = "DATABASE_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_STATUS_CODES: dict[ActionErrorCode, int] = {
    ActionErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ActionErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ActionErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ActionErrorCode.DATABASE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ActionErrorCode.UNKNOWN_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class FieldError(BaseModel):
    """Validation failure attributed to one named input."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ActionError(BaseModel):
    """Error half of an action result."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    error: str
    code: ActionErrorCode
    validation_errors: list[FieldError] | None = Field(default=None, alias="validationErrors")

    @model_validator(mode="after")
    def _field_errors_only_for_validation(self) -> "ActionError":
        if self.validation_errors is not None and self.code != ActionErrorCode.VALIDATION_ERROR:
            raise ValueError("validationErrors may only accompany VALIDATION_ERROR")
        return self

    @property
    def message(self) -> str:
        return self.error

    def to_payload(self) -> dict[str, Any]:
        """Return the wire shape, omitting ``validationErrors`` when unset."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ActionSuccess(BaseModel, Generic[T]):
    """Success half of an action result."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    data: T

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


ActionResult = Union[ActionSuccess[T], ActionError]


def create_error(
    message: str,
    code: ActionErrorCode,
    validation_errors: Sequence[FieldError] | None = None,
) -> ActionError:
    """Build an error envelope.

    ``validationErrors`` is left out entirely when no sequence is supplied; an
    explicitly supplied empty sequence is kept as an empty list.
    """
    if validation_errors is None:
        return ActionError(error=message, code=code)
    return ActionError(error=message, code=code, validation_errors=list(validation_errors))


def create_success(data: T) -> ActionSuccess[T]:
    """Wrap a payload in a success envelope."""
    return ActionSuccess(data=data)


def is_action_error(value: object) -> bool:
    """Return True for error envelopes or payloads carrying ``error`` and ``code``."""
    if isinstance(value, ActionError):
        return True
    if isinstance(value, BaseModel):
        return False
    return isinstance(value, Mapping) and isinstance(value.get("error"), str) and "code" in value


def is_action_success(value: object) -> bool:
    """Return True for success envelopes or payloads whose ``success`` is exactly True."""
    if isinstance(value, ActionSuccess):
        return True
    if isinstance(value, BaseModel):
        return False
    return isinstance(value, Mapping) and value.get("success") is True


def render_result(result: ActionSuccess[Any] | ActionError, *, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize an action result into a JSON response."""
    match result:
        case ActionSuccess():
            return JSONResponse(status_code=success_status, content=result.to_payload())
        case ActionError(code=code):
            return JSONResponse(status_code=ERROR_STATUS_CODES[code], content=result.to_payload())
        case _:
            raise TypeError(f"Unsupported action result: {type(result).__name__}")
