"""Report - Assembles the release notes markdown."""

from release_notes.report.assembler import TIMESTAMP_FORMAT, assemble_report, render_markdown
from release_notes.report.models import Report

__all__ = [
    "TIMESTAMP_FORMAT",
    "Report",
    "assemble_report",
    "render_markdown",
]
