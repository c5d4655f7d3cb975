"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from goaltracker.core.config import Settings
from goaltracker.core.config import get_settings
from goaltracker.core.mailer import LoggingMailer
from goaltracker.core.mailer import SmtpMailer
from goaltracker.core.mailer import build_mailer
from goaltracker.core.mailer import build_magic_link_message


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_are_read_from_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOALTRACKER_DATABASE_URL", "sqlite://")
    monkeypatch.setenv("GOALTRACKER_SECRET_KEY", "s3cret")
    monkeypatch.setenv("GOALTRACKER_BASE_URL", "https://goals.example.com/")
    monkeypatch.setenv("GOALTRACKER_MAGIC_LINK_MAX_AGE_SECONDS", "600")
    monkeypatch.setenv("GOALTRACKER_COOKIE_SECURE", "true")
    monkeypatch.setenv("GOALTRACKER_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.database_url == "sqlite://"
    assert settings.secret_key == "s3cret"
    assert settings.base_url == "https://goals.example.com"
    assert settings.magic_link_max_age_seconds == 600
    assert settings.cookie_secure is True
    assert settings.log_level == "DEBUG"


def test_safe_for_logging_redacts_secrets() -> None:
    settings = Settings(
        database_url="postgresql+psycopg://user:pw@db/goals",
        secret_key="s3cret",
        email_server_password="smtp-pw",
    )

    safe = settings.safe_for_logging()

    assert safe["database_url"] == "<redacted>"
    assert safe["secret_key"] == "<redacted>"
    assert safe["email_server_password"] == "<redacted>"
    assert "s3cret" not in str(safe)
    assert "smtp-pw" not in str(safe)


def test_build_mailer_prefers_smtp_when_host_is_configured() -> None:
    assert isinstance(build_mailer(Settings()), LoggingMailer)
    assert isinstance(build_mailer(Settings(email_server_host="smtp.example.com")), SmtpMailer)


def test_magic_link_message_contains_link() -> None:
    message = build_magic_link_message(
        sender="noreply@example.com",
        email="alice@example.com",
        url="http://testserver/api/auth/callback/email?token=abc",
    )

    assert message["To"] == "alice@example.com"
    assert "token=abc" in message.get_content()
