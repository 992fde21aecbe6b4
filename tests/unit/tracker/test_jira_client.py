"""Unit tests for JiraClient."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from release_notes.exceptions import ReleaseNotesError
from release_notes.tracker import (
    JiraClient,
    TicketNotFoundError,
    TrackerAuthError,
    TrackerLookupError,
)


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock HTTP client."""
    return MagicMock()


@pytest.fixture
def client(mock_client: MagicMock) -> JiraClient:
    """Create a JiraClient instance with mocked HTTP client."""
    jira = JiraClient(host="jira.example.com", username="alice", password="pw")
    jira._client = mock_client
    return jira


def _mock_response(status_code: int, data: dict | None = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = data or {}
    response.text = text
    return response


@pytest.mark.unit
class TestAuthenticate:
    """Tests for authenticate."""

    def test_success(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(200, {"name": "alice"})

        client.authenticate()

        mock_client.get.assert_called_once_with("/myself", params=None)

    @pytest.mark.parametrize("status", [401, 403])
    def test_rejected_credentials(
        self, client: JiraClient, mock_client: MagicMock, status: int
    ) -> None:
        mock_client.get.return_value = _mock_response(status)

        with pytest.raises(TrackerAuthError):
            client.authenticate()

    def test_server_error(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(500, text="boom")

        with pytest.raises(TrackerLookupError, match="500"):
            client.authenticate()

    def test_network_failure(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(TrackerLookupError, match="jira.example.com"):
            client.authenticate()

    def test_non_json_reply(self, client: JiraClient, mock_client: MagicMock) -> None:
        response = _mock_response(200, text="<html>Single sign-on</html>")
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        mock_client.get.return_value = response

        with pytest.raises(TrackerLookupError, match="login"):
            client.authenticate()


@pytest.mark.unit
class TestGetSummary:
    """Tests for get_summary."""

    def test_returns_trimmed_summary(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(
            200, {"key": "GCW-1", "fields": {"summary": "  Fix login  \n"}}
        )

        assert client.get_summary("GCW-1") == "Fix login"
        mock_client.get.assert_called_once_with("/issue/GCW-1", params={"fields": "summary"})

    def test_missing_summary_is_empty(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(200, {"key": "GCW-1", "fields": {}})

        assert client.get_summary("GCW-1") == ""

    def test_missing_fields_is_empty(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(200, {"key": "GCW-1"})

        assert client.get_summary("GCW-1") == ""

    def test_not_found(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(404)

        with pytest.raises(TicketNotFoundError, match="GCW-99"):
            client.get_summary("GCW-99")

    def test_not_found_is_a_lookup_error(self) -> None:
        assert issubclass(TicketNotFoundError, TrackerLookupError)

    def test_unauthorized(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.return_value = _mock_response(401)

        with pytest.raises(TrackerAuthError):
            client.get_summary("GCW-1")

    def test_server_error_is_not_not_found(
        self, client: JiraClient, mock_client: MagicMock
    ) -> None:
        mock_client.get.return_value = _mock_response(502, text="bad gateway")

        with pytest.raises(TrackerLookupError) as exc_info:
            client.get_summary("GCW-1")

        assert not isinstance(exc_info.value, TicketNotFoundError)

    def test_timeout(self, client: JiraClient, mock_client: MagicMock) -> None:
        mock_client.get.side_effect = httpx.ReadTimeout("timed out")

        with pytest.raises(TrackerLookupError):
            client.get_summary("GCW-1")

    def test_non_json_reply(self, client: JiraClient, mock_client: MagicMock) -> None:
        response = _mock_response(200, text="<html>Single sign-on</html>")
        response.json.side_effect = json.JSONDecodeError("Expecting value", "<html>", 0)
        mock_client.get.return_value = response

        with pytest.raises(ReleaseNotesError) as exc_info:
            client.get_summary("GCW-1")

        assert isinstance(exc_info.value, TrackerLookupError)
        assert not isinstance(exc_info.value, TicketNotFoundError)
        assert "GCW-1" in str(exc_info.value)

    def test_non_object_reply(self, client: JiraClient, mock_client: MagicMock) -> None:
        response = _mock_response(200)
        response.json.return_value = ["GCW-1"]
        mock_client.get.return_value = response

        with pytest.raises(TrackerLookupError, match="Unexpected response for GCW-1"):
            client.get_summary("GCW-1")

    def test_non_object_fields_is_empty(
        self, client: JiraClient, mock_client: MagicMock
    ) -> None:
        mock_client.get.return_value = _mock_response(200, {"key": "GCW-1", "fields": None})

        assert client.get_summary("GCW-1") == ""


@pytest.mark.unit
class TestClientSetup:
    """Tests for HTTP client construction."""

    def test_basic_auth(self) -> None:
        jira = JiraClient(host="jira.example.com", username="alice", password="pw")
        try:
            assert str(jira.client.base_url) == "https://jira.example.com/rest/api/2/"
            assert isinstance(jira.client.auth, httpx.BasicAuth)
            assert "Authorization" not in jira.client.headers
        finally:
            jira.close()

    def test_token_auth(self) -> None:
        jira = JiraClient(host="jira.example.com", token="tok123")
        try:
            assert jira.client.headers["Authorization"] == "Bearer tok123"
        finally:
            jira.close()

    def test_close_resets_client(self, client: JiraClient, mock_client: MagicMock) -> None:
        client.close()

        mock_client.close.assert_called_once()
        assert client._client is None
