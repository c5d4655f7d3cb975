"""Delivery of sign-in links."""

from __future__ import annotations

from email.message import EmailMessage
import logging
import smtplib
from typing import Protocol

from goaltracker.core.config import Settings

logger = logging.getLogger(__name__)

MAGIC_LINK_SUBJECT = "Sign in to Goal Tracker"


class Mailer(Protocol):
    def send_magic_link(self, *, email: str, url: str) -> None:
        ...


def build_magic_link_message(*, sender: str, email: str, url: str) -> EmailMessage:
    message = EmailMessage()
    message["Subject"] = MAGIC_LINK_SUBJECT
    message["From"] = sender
    message["To"] = email
    message.set_content(
        "Use the link below to sign in. It can be used once.\n\n"
        f"{url}\n\n"
        "If you did not request this email you can safely ignore it.\n"
    )
    return message


class SmtpMailer:
    """Send sign-in links through an SMTP relay."""

    def __init__(
        self,
        *,
        host: str,
        port: int,
        sender: str,
        username: str | None = None,
        password: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.host = host
        self.port = port
        self.sender = sender
        self.username = username
        self.password = password
        self.timeout_seconds = timeout_seconds

    def send_magic_link(self, *, email: str, url: str) -> None:
        message = build_magic_link_message(sender=self.sender, email=email, url=url)
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout_seconds) as smtp:
            smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(message)
        logger.info("Sent sign-in link to %s via %s:%s", email, self.host, self.port)


class LoggingMailer:
    """Development mailer that records the delivery without the link itself."""

    def send_magic_link(self, *, email: str, url: str) -> None:
        logger.info("Sign-in link issued for %s (no SMTP host configured, link not delivered)", email)


def build_mailer(settings: Settings) -> Mailer:
    if settings.email_server_host:
        return SmtpMailer(
            host=settings.email_server_host,
            port=settings.email_server_port,
            sender=settings.email_from,
            username=settings.email_server_user,
            password=settings.email_server_password,
        )
    return LoggingMailer()
