"""JiraClient - Minimal Jira REST API v2 client for ticket summaries."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from release_notes.tracker.exceptions import (
    TicketNotFoundError,
    TrackerAuthError,
    TrackerLookupError,
)

logger = logging.getLogger("release_notes.tracker")

API_PATH = "/rest/api/2"


class JiraClient:
    """Client for a Jira server's REST API.

    Authenticates with basic auth (username/password) or, when a token is
    given, with a bearer token.
    """

    def __init__(
        self,
        host: str,
        username: str = "",
        password: str = "",
        token: str = "",
        timeout: float = 30.0,
        protocol: str = "https",
    ) -> None:
        """Initialize Jira client.

        Args:
            host: Jira hostname, e.g. "jira.example.com"
            username: Jira username for basic auth
            password: Jira password for basic auth
            token: Personal access token; takes precedence over username/password
            timeout: Request timeout in seconds
            protocol: URL scheme (for testing)
        """
        self.host = host
        self.username = username
        self.password = password
        self.token = token
        self.timeout = timeout
        self.base_url = f"{protocol}://{host}{API_PATH}"
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for the Jira API."""
        if self._client is None:
            headers = {"Accept": "application/json"}
            auth: tuple[str, str] | None = None
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            else:
                auth = (self.username, self.password)
            self._client = httpx.Client(
                base_url=self.base_url,
                headers=headers,
                auth=auth,
                timeout=self.timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _get(self, path: str, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            return self.client.get(path, params=params)
        except httpx.HTTPError as e:
            logger.error("Request to %s%s failed: %s", self.base_url, path, e)
            raise TrackerLookupError(f"Could not reach Jira at {self.host}: {e}") from e

    def _json(self, response: httpx.Response, what: str) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError as e:
            raise TrackerLookupError(f"Unexpected response for {what} from {self.host}") from e
        if not isinstance(data, dict):
            raise TrackerLookupError(f"Unexpected response for {what} from {self.host}")
        return data

    def authenticate(self) -> None:
        """Verify the credentials against the server.

        Raises:
            TrackerAuthError: If the credentials are rejected
            TrackerLookupError: If the server cannot be reached or errors
        """
        logger.info("Logging on to Jira at %s", self.host)
        response = self._get("/myself")

        if response.status_code in (401, 403):
            raise TrackerAuthError(
                f"Jira rejected the credentials for {self.host} ({response.status_code})"
            )
        if response.status_code != 200:
            raise TrackerLookupError(
                f"Jira login failed: {response.status_code} - {response.text}"
            )

        data = self._json(response, "login")
        logger.debug("Authenticated as %s", data.get("name") or data.get("displayName"))

    def get_summary(self, ticket_id: str) -> str:
        """Get the summary (title) of a ticket.

        Args:
            ticket_id: Ticket key, e.g. "GCW-123"

        Returns:
            Trimmed summary, or an empty string if the ticket has none

        Raises:
            TicketNotFoundError: If the ticket doesn't exist
            TrackerAuthError: If the credentials are rejected
            TrackerLookupError: For any other failure
        """
        response = self._get(f"/issue/{ticket_id}", params={"fields": "summary"})

        if response.status_code == 404:
            raise TicketNotFoundError(f"Ticket {ticket_id} not found on {self.host}")
        if response.status_code in (401, 403):
            raise TrackerAuthError(
                f"Not authorized to read {ticket_id} ({response.status_code})"
            )
        if response.status_code != 200:
            raise TrackerLookupError(
                f"Failed to fetch {ticket_id}: {response.status_code} - {response.text}"
            )

        data = self._json(response, ticket_id)
        fields = data.get("fields")
        summary = fields.get("summary") if isinstance(fields, dict) else None
        summary = summary or ""
        return str(summary).strip()
