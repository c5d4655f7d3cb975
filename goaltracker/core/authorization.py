"""Resource-level authorization checks used by services."""

from __future__ import annotations

from typing import TypeVar
from uuid import UUID

from goaltracker.core.errors import NotFoundError
from goaltracker.core.errors import UnauthorizedError
from goaltracker.core.security import SessionIdentity

ResourceT = TypeVar("ResourceT")


def require_identity(identity: SessionIdentity | None, *, message: str = "Unauthorized") -> UUID:
    """Return the caller's user id or fail with ``UNAUTHORIZED``."""
    if identity is None:
        raise UnauthorizedError(message)
    return identity.user_id


def ensure_owned(
    loaded: tuple[ResourceT, UUID] | None,
    user_id: UUID,
    *,
    message: str,
) -> ResourceT:
    """Return the resource when ``user_id`` owns it.

    ``loaded`` is the resource paired with its owning user id. A missing row
    and a row owned by someone else raise the same ``NOT_FOUND`` failure with
    the same message so callers cannot discover other users' ids.
    """
    if loaded is None:
        raise NotFoundError(message)
    resource, owner_id = loaded
    if owner_id != user_id:
        raise NotFoundError(message)
    return resource
