"""Console sink - prints the markdown between separator lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from release_notes.report import Report

SEPARATOR = "-" * 76


class ConsoleSink:
    """Writes the report body to standard output."""

    def write(self, report: Report) -> None:
        click.echo(SEPARATOR)
        click.echo(report.markdown, nl=False)
        click.echo(SEPARATOR)
