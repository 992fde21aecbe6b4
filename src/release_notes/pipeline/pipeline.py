"""ReleaseNotesPipeline - Drives a single release notes run."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

from release_notes.pipeline.models import RunOptions
from release_notes.report import Report, assemble_report
from release_notes.tickets import extract_tickets

if TYPE_CHECKING:
    from release_notes.git_reader import GitReader
    from release_notes.tracker import TicketResolver

logger = logging.getLogger("release_notes.pipeline")

CONFIRM_PROMPT = "Are the local {base} and {head} branches up to date?"


class Sink(Protocol):
    """Anything that consumes an assembled report."""

    def write(self, report: Report) -> Any: ...


class ReleaseNotesPipeline:
    """Runs Reader -> Extractor -> Resolver -> Assembler -> Sinks.

    Every step blocks until done. Only a missing ticket is recovered
    (inside the resolver); any other error propagates to the caller before
    a single sink has run.
    """

    def __init__(
        self,
        git_reader: GitReader,
        make_resolver: Callable[[], TicketResolver],
        tracker_host: str,
        console: Sink,
        sinks: Sequence[Sink] = (),
        confirm: Callable[[str], bool] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the pipeline.

        Args:
            git_reader: Reads the commit range and repo metadata.
            make_resolver: Builds the ticket resolver. Called only when there are
                tickets to resolve, so credentials are not requested otherwise.
            tracker_host: Jira hostname used for ticket links.
            console: Sink that always receives the report.
            sinks: Optional extra sinks (PDF, clipboard, email), run in order.
            confirm: Asks the user to confirm the refs are current; None skips it.
            clock: Source of the generation timestamp.
        """
        self.git_reader = git_reader
        self.make_resolver = make_resolver
        self.tracker_host = tracker_host
        self.console = console
        self.sinks = list(sinks)
        self.confirm = confirm
        self.clock = clock

    def run(self, options: RunOptions) -> Report | None:
        """Execute one run.

        Args:
            options: Refs, ticket code and overrides for this run.

        Returns:
            The report, or None if the user declined to continue.

        Raises:
            ReleaseNotesError: Any fatal error from git, the tracker or a sink.
        """
        if self.confirm is not None and not self.confirm(
            CONFIRM_PROMPT.format(base=options.base, head=options.head)
        ):
            logger.info("Aborted by user")
            return None

        # Fail on missing sink configuration before doing any work
        for sink in self.sinks:
            check = getattr(sink, "check_config", None)
            if check is not None:
                check()

        if options.fetch:
            self.git_reader.fetch()
        log = self.git_reader.read_log(base=options.base, head=options.head)

        ticket_ids = extract_tickets(log, options.jira_code)
        logger.info(
            "Found %d ticket(s) between %s and %s", len(ticket_ids), options.base, options.head
        )

        if ticket_ids:
            resolved = self.make_resolver().resolve(ticket_ids)
        else:
            resolved = []

        info = self.git_reader.repo_info()
        report = assemble_report(
            repo_name=options.app_name or info.name,
            version=options.app_version or info.version,
            remote_url=info.remote_url,
            generated_at=self.clock(),
            tickets=resolved,
            tracker_host=self.tracker_host,
        )

        self.console.write(report)
        if not ticket_ids:
            logger.info("No tickets found; skipping remaining outputs")
            return report

        for sink in self.sinks:
            sink.write(report)

        return report
