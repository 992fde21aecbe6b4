"""Sinks - Output channels for the assembled report."""

from release_notes.sinks.clipboard import ClipboardSink
from release_notes.sinks.console import SEPARATOR, ConsoleSink
from release_notes.sinks.exceptions import (
    MailConfigError,
    MailSendError,
    RenderError,
    SinkError,
)
from release_notes.sinks.mailer import EmailSink
from release_notes.sinks.pdf import PdfSink, pdf_path_for

__all__ = [
    "SEPARATOR",
    "ClipboardSink",
    "ConsoleSink",
    "EmailSink",
    "MailConfigError",
    "MailSendError",
    "PdfSink",
    "RenderError",
    "SinkError",
    "pdf_path_for",
]
