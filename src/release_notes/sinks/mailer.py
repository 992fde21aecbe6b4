"""Email sink - sends the release notes as HTML through SendGrid."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from release_notes.config import DEFAULT_EMAIL_FROM
from release_notes.sinks.exceptions import MailConfigError, MailSendError
from release_notes.sinks.rendering import markdown_to_html

if TYPE_CHECKING:
    from release_notes.report import Report

logger = logging.getLogger("release_notes.sinks.mailer")


def parse_recipients(value: str) -> list[str]:
    """Split a comma-separated recipient list, dropping blanks."""
    return [addr.strip() for addr in value.split(",") if addr.strip()]


class EmailSink:
    """Dispatches the report via the SendGrid v3 mail API."""

    def __init__(
        self,
        api_key: str,
        recipients: str | list[str],
        sender: str = DEFAULT_EMAIL_FROM,
        subject: str | None = None,
        base_url: str = "https://api.sendgrid.com",
        timeout: float = 30.0,
    ) -> None:
        """Initialize the email sink.

        Args:
            api_key: SendGrid API key
            recipients: Comma-separated string or list of addresses
            sender: From address
            subject: Subject line; defaults to the report title
            base_url: SendGrid API base URL (for testing)
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        if isinstance(recipients, str):
            recipients = parse_recipients(recipients)
        self.recipients = recipients
        self.sender = sender
        self.subject = subject
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the SendGrid API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def check_config(self) -> None:
        """Validate configuration before any work is done.

        Raises:
            MailConfigError: If the API key or recipients are missing
        """
        if not self.api_key:
            raise MailConfigError("Environment variable SENDGRID_API_KEY is missing")
        if not self.recipients:
            raise MailConfigError("No email recipients given")

    def build_message(self, report: Report) -> dict[str, Any]:
        """Build the SendGrid mail/send payload."""
        subject = self.subject or report.title
        return {
            "personalizations": [{"to": [{"email": addr} for addr in self.recipients]}],
            "from": {"email": self.sender},
            "subject": subject,
            "content": [
                {"type": "text/html", "value": markdown_to_html(report.markdown, title=subject)}
            ],
        }

    def write(self, report: Report) -> None:
        """Send the report.

        Raises:
            MailConfigError: If configuration is incomplete
            MailSendError: If SendGrid rejects the message or can't be reached
        """
        self.check_config()
        logger.info("Emailing release notes to %s", ", ".join(self.recipients))

        try:
            response = self.client.post("/v3/mail/send", json=self.build_message(report))
        except httpx.HTTPError as e:
            logger.error("SendGrid request failed: %s", e)
            raise MailSendError(f"Could not reach SendGrid: {e}") from e

        if response.status_code not in (200, 202):
            logger.error("SendGrid rejected message: %s", response.text)
            raise MailSendError(
                f"Failed to send email: {response.status_code} - {response.text}"
            )
        logger.info("Email sent")
