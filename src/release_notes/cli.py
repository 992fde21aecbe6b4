"""CLI entry point for release-notes.

Diffs two git refs, resolves the Jira tickets referenced in the commits and
prints release notes as markdown, optionally also as PDF, to the clipboard or
by email.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from release_notes import __version__
from release_notes.config import (
    DEFAULT_BASE_REF,
    DEFAULT_HEAD_REF,
    Settings,
    load_settings,
)
from release_notes.credentials import resolve_credential, solicit_secret, solicit_value
from release_notes.exceptions import ReleaseNotesError
from release_notes.git_reader import GitReader
from release_notes.logging import sanitize_for_log, setup_logging
from release_notes.pipeline import ReleaseNotesPipeline, RunOptions
from release_notes.sinks import ClipboardSink, ConsoleSink, EmailSink, PdfSink
from release_notes.tracker import JiraClient, TicketResolver

logger = logging.getLogger("release_notes.cli")


def build_jira_client(settings: Settings, env: dict[str, str]) -> JiraClient:
    """Create a Jira client, asking for credentials that aren't in the environment.

    A configured JIRA_TOKEN replaces username and password entirely.
    """
    if settings.jira_token:
        return JiraClient(settings.jira_host, token=settings.jira_token, timeout=settings.timeout)

    username = resolve_credential(env, "JIRA_USERNAME", "JIRA Username", solicit_value)
    password = resolve_credential(env, "JIRA_PASSWORD", "JIRA Password", solicit_secret)
    return JiraClient(
        settings.jira_host,
        username=username,
        password=password,
        timeout=settings.timeout,
    )


def confirm_up_to_date(prompt: str) -> bool:
    """Ask the user whether the refs are current. Defaults to yes."""
    return click.confirm(prompt, default=True)


@click.command(context_settings={"help_option_names": ["--help"]})
@click.version_option(__version__, prog_name="release-notes")
@click.option("-p", "--pdf", is_flag=True, help="Also render release-<app>.pdf")
@click.option("-c", "--clipboard", is_flag=True, help="Also copy the markdown to the clipboard")
@click.option("-h", "--head", default=None, help=f"Head ref (default: {DEFAULT_HEAD_REF})")
@click.option("-b", "--base", default=None, help=f"Base ref (default: {DEFAULT_BASE_REF})")
@click.option("--email-to", default=None, help="Comma-separated recipients; sends by email")
@click.option("--email-subject", default=None, help="Email subject (default: report title)")
@click.option("--app-name", default=None, help="Name shown in the title (default: repo name)")
@click.option("--app-version", default=None, help="Version shown in the title (default: detected)")
@click.option("--jira-code", default=None, help="Jira project code (default: GCW)")
@click.option("-y", "--yes", is_flag=True, help="Don't ask whether the branches are up to date")
@click.option("--no-fetch", is_flag=True, help="Don't fetch the remote before reading the log")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to release-notes.yaml (default: ./release-notes.yaml if present)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(
    pdf: bool,
    clipboard: bool,
    head: str | None,
    base: str | None,
    email_to: str | None,
    email_subject: str | None,
    app_name: str | None,
    app_version: str | None,
    jira_code: str | None,
    yes: bool,
    no_fetch: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Generate release notes for the tickets merged between two refs."""
    setup_logging(level="DEBUG" if verbose else None)
    env = dict(os.environ)

    jira_client: JiraClient | None = None
    email_sink: EmailSink | None = None

    def make_resolver() -> TicketResolver:
        nonlocal jira_client
        jira_client = build_jira_client(settings, env)
        return TicketResolver(jira_client)

    try:
        settings = load_settings(config_path, env)

        sinks: list[PdfSink | ClipboardSink | EmailSink] = []
        if pdf:
            sinks.append(PdfSink())
        if clipboard:
            sinks.append(ClipboardSink())
        if email_to:
            email_sink = EmailSink(
                api_key=settings.sendgrid_api_key,
                recipients=email_to,
                sender=settings.email_from,
                subject=email_subject,
                timeout=settings.timeout,
            )
            sinks.append(email_sink)

        pipeline = ReleaseNotesPipeline(
            git_reader=GitReader(),
            make_resolver=make_resolver,
            tracker_host=settings.jira_host,
            console=ConsoleSink(),
            sinks=sinks,
            confirm=None if yes else confirm_up_to_date,
        )
        pipeline.run(
            RunOptions(
                base=base or settings.base_ref,
                head=head or settings.head_ref,
                jira_code=jira_code or settings.jira_code,
                app_name=app_name,
                app_version=app_version,
                fetch=not no_fetch,
            )
        )
    except ReleaseNotesError as e:
        message = sanitize_for_log(str(e))
        logger.debug("Run failed", exc_info=True)
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)
    finally:
        if jira_client is not None:
            jira_client.close()
        if email_sink is not None:
            email_sink.close()


if __name__ == "__main__":
    main()
