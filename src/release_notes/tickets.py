"""Ticket extraction from commit log text."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger("release_notes.tickets")

DEFAULT_CODE = "GCW"


def ticket_pattern(code: str = DEFAULT_CODE) -> re.Pattern[str]:
    """Compile the identifier pattern for a tracker project code.

    Args:
        code: Tracker project code, e.g. "GCW" for GCW-123.

    Returns:
        Pattern with a single capture group for the identifier.
    """
    return re.compile(rf"({re.escape(code)}-\d+)")


def extract_tickets(log: str, code: str = DEFAULT_CODE) -> list[str]:
    """Extract ticket identifiers from a commit log.

    Only the first identifier on each line is taken. The result keeps
    first-seen order and contains no duplicates.

    Args:
        log: Commit log, one commit per line.
        code: Tracker project code.

    Returns:
        Ordered, de-duplicated identifiers.
    """
    pattern = ticket_pattern(code)
    tickets: dict[str, None] = {}

    for line in log.splitlines():
        match = pattern.search(line)
        if match:
            tickets.setdefault(match.group(1), None)

    logger.debug("Extracted %d %s ticket(s)", len(tickets), code)
    return list(tickets)
