"""Pydantic schemas for user profile, preferences and sign-in payloads."""

from __future__ import annotations

from datetime import datetime
import re
from typing import Annotated
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator
from pydantic_core import PydanticCustomError

from goaltracker.core.sanitize import sanitize_optional_string
from goaltracker.core.validation import choice
from goaltracker.core.validation import required
from goaltracker.db.models.user import SUPPORTED_LANGUAGES
from goaltracker.db.models.user import SUPPORTED_THEMES

NAME_MAX_LENGTH = 100
EMAIL_MAX_LENGTH = 320

_EMAIL_RE = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)+$")


def _clean_name(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PydanticCustomError("name_type", "Name must be text")
    name = sanitize_optional_string(value)
    if name is not None and len(name) > NAME_MAX_LENGTH:
        raise PydanticCustomError("name_too_long", "Name must be 100 characters or less")
    return name


def _clean_email(value: Any) -> str:
    if isinstance(value, str):
        email = value.strip().lower()
        if len(email) <= EMAIL_MAX_LENGTH and _EMAIL_RE.match(email):
            return email
    raise PydanticCustomError("invalid_email", "Please enter a valid email address")


Name = Annotated[str | None, BeforeValidator(_clean_name)]
Email = Annotated[str, BeforeValidator(_clean_email)]
Language = choice(SUPPORTED_LANGUAGES, "Language must be en or de")
Theme = choice(SUPPORTED_THEMES, "Theme must be light, dark, or system")


class UserNameUpdate(BaseModel):
    """Payload to change the display name; blank clears it."""

    name: Name = None


class UserPreferencesUpdate(BaseModel):
    """Payload to change language and/or theme."""

    language: Language | None = None
    theme: Theme | None = None

    @model_validator(mode="after")
    def _at_least_one_field(self) -> "UserPreferencesUpdate":
        if self.language is None and self.theme is None:
            raise PydanticCustomError("empty_update", "Provide a language or theme to update")
        return self


class LocaleUpdate(BaseModel):
    locale: Language = required()


class SignInRequest(BaseModel):
    """Payload to request a magic sign-in link."""

    model_config = ConfigDict(populate_by_name=True)

    email: Email = required()
    callback_url: str | None = Field(default=None, alias="callbackUrl")


class User(BaseModel):
    """User profile response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    name: str | None = None
    email: str
    email_verified: datetime | None = None
    image: str | None = None


class UserPreferences(BaseModel):
    """Preferences response payload."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: UUID
    user_id: UUID
    language: str
    theme: str
    created_at: datetime
    updated_at: datetime
