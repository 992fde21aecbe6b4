"""TicketResolver - Fetches summaries for extracted tickets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from release_notes.tracker.exceptions import TicketNotFoundError
from release_notes.tracker.models import UNAVAILABLE_SUMMARY, ResolvedTicket

if TYPE_CHECKING:
    from release_notes.tracker.client import JiraClient

logger = logging.getLogger("release_notes.tracker.resolver")


class TicketResolver:
    """Resolves ticket identifiers to summaries, one lookup at a time.

    A ticket missing from the tracker gets a placeholder summary. Any other
    tracker failure propagates and ends the run.
    """

    def __init__(self, client: JiraClient) -> None:
        """Initialize the resolver.

        Args:
            client: JiraClient used for authentication and lookups.
        """
        self.client = client

    def resolve(self, ticket_ids: list[str]) -> list[ResolvedTicket]:
        """Resolve summaries for tickets, preserving order.

        Args:
            ticket_ids: Ordered, de-duplicated ticket identifiers.

        Returns:
            One ResolvedTicket per identifier, in the same order.

        Raises:
            TrackerAuthError: If authentication fails.
            TrackerLookupError: If a lookup fails for a reason other than not-found.
        """
        if not ticket_ids:
            return []

        self.client.authenticate()

        resolved = []
        for ticket_id in ticket_ids:
            logger.info("Fetching ticket %s", ticket_id)
            try:
                summary = self.client.get_summary(ticket_id)
            except TicketNotFoundError:
                logger.warning("Ticket %s not found, using placeholder", ticket_id)
                resolved.append(ResolvedTicket(ticket_id, UNAVAILABLE_SUMMARY, found=False))
                continue
            resolved.append(ResolvedTicket(ticket_id, summary))

        return resolved
