"""Action runner converting every outcome into an action result."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from goaltracker.core.errors import UNKNOWN_ERROR_MESSAGE
from goaltracker.core.errors import ActionFailure
from goaltracker.core.results import ActionError
from goaltracker.core.results import ActionErrorCode
from goaltracker.core.results import ActionSuccess
from goaltracker.core.results import create_error
from goaltracker.core.results import create_success

logger = logging.getLogger(__name__)

T = TypeVar("T")


def run_action(
    name: str,
    session: Session,
    operation: Callable[[], T],
    *,
    failure_message: str,
) -> ActionSuccess[T] | ActionError:
    """Run the authorize/execute stages of an action.

    Anticipated failures become their own error codes, persistence failures
    become ``DATABASE_ERROR`` and anything else ``UNKNOWN_ERROR``. Nothing
    raised by ``operation`` escapes. Failed operations are rolled back and
    never retried.
    """
    try:
        data = operation()
    except ActionFailure as exc:
        session.rollback()
        logger.info("[%s] rejected with %s", name, exc.code.value)
        return exc.to_error()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("[%s] Database error", name)
        return create_error(failure_message, ActionErrorCode.DATABASE_ERROR)
    except Exception:
        session.rollback()
        logger.exception("[%s] Unexpected error", name)
        return create_error(UNKNOWN_ERROR_MESSAGE, ActionErrorCode.UNKNOWN_ERROR)
    logger.debug("[%s] completed", name)
    return create_success(data)
