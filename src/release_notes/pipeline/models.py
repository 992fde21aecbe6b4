"""Data models for the release notes pipeline."""

from __future__ import annotations

from dataclasses import dataclass

from release_notes.config import DEFAULT_BASE_REF, DEFAULT_HEAD_REF, DEFAULT_JIRA_CODE


@dataclass(frozen=True)
class RunOptions:
    """Per-run options, mostly from the command line."""

    base: str = DEFAULT_BASE_REF
    head: str = DEFAULT_HEAD_REF
    jira_code: str = DEFAULT_JIRA_CODE
    app_name: str | None = None  # overrides detected repo name
    app_version: str | None = None  # overrides detected version
    fetch: bool = True
