"""Markdown rendering for release notes."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from release_notes.report.models import Report
from release_notes.tracker.models import ResolvedTicket

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def render_markdown(
    repo_name: str,
    version: str,
    remote_url: str,
    generated_at: datetime,
    tickets: Sequence[ResolvedTicket],
    tracker_host: str,
) -> str:
    """Render the release notes body.

    Returns:
        Markdown ending in a single newline.
    """
    lines = [
        f"# Release notes {repo_name} v{version}",
        "",
        f"**Generated on:** {generated_at.strftime(TIMESTAMP_FORMAT)}",
        "",
        f"**Repository:** `{remote_url}`",
        "",
        "## Tickets affected by this release",
    ]
    if tickets:
        lines.append("")
        lines.extend(
            f"- [{t.id}](https://{tracker_host}/browse/{t.id}) {t.summary}" for t in tickets
        )
    return "\n".join(lines) + "\n"


def assemble_report(
    repo_name: str,
    version: str,
    remote_url: str,
    generated_at: datetime,
    tickets: Sequence[ResolvedTicket],
    tracker_host: str,
) -> Report:
    """Build the immutable Report for a run.

    Args:
        repo_name: Repository display name.
        version: Version being released.
        remote_url: URL of the repository remote.
        generated_at: Generation timestamp.
        tickets: Resolved tickets in first-seen order.
        tracker_host: Jira hostname used for ticket links.

    Returns:
        Report with its markdown body rendered.
    """
    markdown = render_markdown(repo_name, version, remote_url, generated_at, tickets, tracker_host)
    return Report(
        repo_name=repo_name,
        version=version,
        remote_url=remote_url,
        generated_at=generated_at,
        tracker_host=tracker_host,
        tickets=tuple(tickets),
        markdown=markdown,
    )
