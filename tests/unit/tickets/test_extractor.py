"""Unit tests for ticket extraction."""

import pytest

from release_notes.tickets import extract_tickets, ticket_pattern

SAMPLE_LOG = "\n".join(
    [
        "abc123 Fix GCW-10 bug",
        "def456 GCW-10 followup",
        "ghi789 no ticket",
        "jkl012 GCW-22 feature",
    ]
)


@pytest.mark.unit
class TestExtractTickets:
    """Tests for extract_tickets."""

    def test_dedupes_in_first_seen_order(self) -> None:
        assert extract_tickets(SAMPLE_LOG) == ["GCW-10", "GCW-22"]

    def test_order_follows_log_not_numbers(self) -> None:
        log = "a1 GCW-300 newest\nb2 GCW-2 older\nc3 GCW-300 again\nd4 GCW-41 oldest"

        assert extract_tickets(log) == ["GCW-300", "GCW-2", "GCW-41"]

    def test_empty_log(self) -> None:
        assert extract_tickets("") == []

    def test_no_matches(self) -> None:
        assert extract_tickets("abc Merge branch 'master'\ndef bump deps") == []

    def test_only_first_match_per_line(self) -> None:
        log = "abc GCW-1 and GCW-2 together\ndef GCW-3"

        assert extract_tickets(log) == ["GCW-1", "GCW-3"]

    def test_custom_code(self) -> None:
        log = "a FOO-7 thing\nb GCW-8 other\nc FOO-9 more"

        assert extract_tickets(log, code="FOO") == ["FOO-7", "FOO-9"]

    def test_custom_code_ignores_default_prefix(self) -> None:
        assert extract_tickets(SAMPLE_LOG, code="FOO") == []

    def test_requires_digits(self) -> None:
        assert extract_tickets("abc GCW- missing number\ndef GCW-x") == []

    def test_matches_inside_branch_names(self) -> None:
        log = "abc Merge pull request #4 from org/feature/GCW-55-export"

        assert extract_tickets(log) == ["GCW-55"]


@pytest.mark.unit
class TestTicketPattern:
    """Tests for ticket_pattern."""

    def test_escapes_code(self) -> None:
        pattern = ticket_pattern("A.B")

        assert pattern.search("A.B-1")
        assert not pattern.search("AxB-1")

    def test_single_capture_group(self) -> None:
        match = ticket_pattern().search("xx GCW-12 yy")

        assert match is not None
        assert match.group(1) == "GCW-12"
