"""String sanitization applied to user input before validation and storage."""

from __future__ import annotations

import re

_HTML_TAG_RE = re.compile(r"<[^>]*>")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_JAVASCRIPT_SCHEME_RE = re.compile(r"javascript:", re.IGNORECASE)
_EVENT_HANDLER_RE = re.compile(r"on\w+\s*=", re.IGNORECASE)


def sanitize_string(value: str) -> str:
    """Strip markup, control characters and script-like patterns, then trim.

    Tab, newline and carriage return are kept. Tag contents are kept, only the
    tags themselves are removed, so ``"<b>hi</b>"`` becomes ``"hi"``.
    """
    cleaned = _HTML_TAG_RE.sub("", value)
    cleaned = _CONTROL_CHARS_RE.sub("", cleaned)
    cleaned = _JAVASCRIPT_SCHEME_RE.sub("", cleaned)
    cleaned = _EVENT_HANDLER_RE.sub("", cleaned)
    return cleaned.strip()


def sanitize_optional_string(value: str | None) -> str | None:
    """Sanitize an optional value, collapsing empty results to ``None``."""
    if not value:
        return None
    sanitized = sanitize_string(value)
    return sanitized or None
