"""Markdown to HTML conversion shared by the PDF and email sinks."""

from __future__ import annotations

import html

import markdown

STYLE = """
body { font-family: Helvetica, Arial, sans-serif; font-size: 11pt; color: #222; }
h1 { font-size: 18pt; }
h2 { font-size: 14pt; margin-top: 16pt; }
code { font-family: Courier, monospace; }
a { color: #0052cc; }
"""


def _converter() -> markdown.Markdown:
    md = markdown.Markdown(output_format="html")
    # Ticket summaries come from Jira; raw HTML in them is shown as text
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md


def markdown_to_html(text: str, title: str = "") -> str:
    """Convert markdown into a standalone HTML document."""
    body = _converter().convert(text)
    return (
        "<!DOCTYPE html>\n"
        "<html><head><meta charset=\"utf-8\">"
        f"<title>{html.escape(title)}</title><style>{STYLE}</style></head>"
        f"<body>{body}</body></html>"
    )
