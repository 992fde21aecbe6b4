"""PDF sink - renders the markdown body to a PDF file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from xhtml2pdf import pisa

from release_notes.sinks.exceptions import RenderError
from release_notes.sinks.rendering import markdown_to_html

if TYPE_CHECKING:
    from release_notes.report import Report

logger = logging.getLogger("release_notes.sinks.pdf")


def pdf_path_for(repo_name: str, directory: str | Path = ".") -> Path:
    """Get the output path for a repository's release notes PDF."""
    return Path(directory) / f"release-{repo_name.replace(' ', '-')}.pdf"


class PdfSink:
    """Writes the report as ./release-<repo-name>.pdf."""

    def __init__(self, directory: str | Path = ".") -> None:
        """Initialize the PDF sink.

        Args:
            directory: Directory the PDF is written to.
        """
        self.directory = Path(directory)

    def write(self, report: Report) -> Path:
        """Render the report to PDF.

        Args:
            report: The assembled report.

        Returns:
            Path of the written PDF.

        Raises:
            RenderError: If the conversion fails.
        """
        path = pdf_path_for(report.repo_name, self.directory)
        html = markdown_to_html(report.markdown, title=report.title)
        logger.info("Rendering PDF to %s", path)

        try:
            with open(path, "w+b") as f:
                status = pisa.CreatePDF(html, dest=f, encoding="utf-8")
        except OSError as e:
            path.unlink(missing_ok=True)
            raise RenderError(f"Failed to write {path}: {e}") from e
        except Exception as e:
            # xhtml2pdf and reportlab raise their own exception types
            path.unlink(missing_ok=True)
            raise RenderError(f"Failed to render {path}: {e}") from e

        if status.err:
            path.unlink(missing_ok=True)
            raise RenderError(f"Failed to render {path}: {status.err} error(s) during conversion")

        logger.info("Wrote %s", path)
        return path
