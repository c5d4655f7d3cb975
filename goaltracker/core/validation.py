"""Validation helpers shared by the action input schemas.

Input fields are sanitized before they are validated: the annotated types
below clean the raw value first and then apply length, format and membership
rules, raising pydantic custom errors whose messages are shown next to the
offending input.
"""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
from datetime import date
from datetime import datetime
from datetime import time
from datetime import timezone
from typing import Annotated
from typing import Any
from typing import TypeVar
from uuid import UUID

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import Field
from pydantic import ValidationError
from pydantic_core import PydanticCustomError

from goaltracker.core.errors import VALIDATION_FAILED_MESSAGE
from goaltracker.core.errors import field_errors_from_issues
from goaltracker.core.results import ActionError
from goaltracker.core.results import ActionErrorCode
from goaltracker.core.results import FieldError
from goaltracker.core.results import create_error
from goaltracker.core.sanitize import sanitize_optional_string
from goaltracker.core.sanitize import sanitize_string

ModelT = TypeVar("ModelT", bound=BaseModel)

TITLE_MAX_LENGTH = 255


def _clean_title(value: Any) -> str:
    if value is None:
        value = ""
    if not isinstance(value, str):
        raise PydanticCustomError("title_type", "Title must be text")
    title = sanitize_string(value)
    if not title:
        raise PydanticCustomError("title_required", "Title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise PydanticCustomError("title_too_long", "Title must be 255 characters or less")
    return title


def _clean_description(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PydanticCustomError("description_type", "Description must be text")
    return sanitize_optional_string(value)


def identifier(message: str) -> Any:
    """Build a UUID field type whose parse failures report ``message``."""

    def _parse(value: Any) -> UUID:
        if isinstance(value, UUID):
            return value
        if isinstance(value, str):
            try:
                return UUID(value.strip())
            except ValueError:
                pass
        raise PydanticCustomError("invalid_id", message)

    return Annotated[UUID, BeforeValidator(_parse)]


def choice(allowed: Iterable[str], message: str, *, default: str | None = None) -> Any:
    """Build a string field type restricted to ``allowed`` values.

    A missing value falls back to ``default`` when one is given.
    """
    values = frozenset(allowed)

    def _check(value: Any) -> str:
        if value is None and default is not None:
            return default
        if isinstance(value, str) and value.strip() in values:
            return value.strip()
        raise PydanticCustomError("invalid_choice", message)

    return Annotated[str, BeforeValidator(_check)]


def _parse_deadline(value: Any) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = f"{raw[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError:
            raise PydanticCustomError("invalid_deadline", "Invalid deadline date") from None
    else:
        raise PydanticCustomError("invalid_deadline", "Invalid deadline date")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_week_start(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        raw = value.strip()
        try:
            return date.fromisoformat(raw)
        except ValueError:
            pass
        if raw.endswith("Z"):
            raw = f"{raw[:-1]}+00:00"
        try:
            return datetime.fromisoformat(raw).date()
        except ValueError:
            pass
    raise PydanticCustomError("invalid_week_start", "Invalid week start date")


def _parse_priority(value: Any) -> int:
    if isinstance(value, bool):
        raise PydanticCustomError("invalid_priority", "Priority must be 1, 2, or 3")
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and 1 <= value <= 3:
        return value
    raise PydanticCustomError("invalid_priority", "Priority must be 1, 2, or 3")


Title = Annotated[str, BeforeValidator(_clean_title)]
Description = Annotated[str | None, BeforeValidator(_clean_description)]
Deadline = Annotated[datetime, BeforeValidator(_parse_deadline)]
WeekStartDate = Annotated[date, BeforeValidator(_parse_week_start)]
Priority = Annotated[int, BeforeValidator(_parse_priority)]


def required() -> Any:
    """Mark a field whose absence is reported by its own validator message."""
    return Field(default=None, validate_default=True)


def extract_form_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """Trim submitted strings and store empty ones as ``None``."""
    extracted: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str):
            value = value.strip()
            extracted[key] = value or None
        else:
            extracted[key] = value
    return extracted


def validate_payload(schema: type[ModelT], data: Any) -> ModelT | ActionError:
    """Validate raw input against ``schema``.

    Returns the parsed model, or a ``VALIDATION_ERROR`` result carrying one
    field error per failed input.
    """
    if not isinstance(data, Mapping):
        return create_error(
            "Invalid input data",
            ActionErrorCode.VALIDATION_ERROR,
            [FieldError(field="request", message="Request body must be an object")],
        )
    try:
        return schema.model_validate(extract_form_data(data))
    except ValidationError as exc:
        return create_error(
            VALIDATION_FAILED_MESSAGE,
            ActionErrorCode.VALIDATION_ERROR,
            field_errors_from_issues(exc.errors()),
        )
