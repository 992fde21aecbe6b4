"""Clipboard sink - copies the markdown using the platform clipboard tool."""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from release_notes.report import Report

logger = logging.getLogger("release_notes.sinks.clipboard")

# Tried in order; first one installed wins
CLIPBOARD_COMMANDS = [
    ["pbcopy"],  # macOS
    ["clip"],  # Windows
    ["wl-copy"],  # Wayland
    ["xclip", "-selection", "clipboard"],  # X11
    ["xsel", "--clipboard", "--input"],  # X11
]


class ClipboardSink:
    """Best-effort copy of the report body to the system clipboard."""

    def __init__(self, commands: list[list[str]] | None = None) -> None:
        self.commands = commands if commands is not None else CLIPBOARD_COMMANDS

    def _find_command(self) -> list[str] | None:
        for command in self.commands:
            if shutil.which(command[0]):
                return command
        return None

    def write(self, report: Report) -> bool:
        """Copy the markdown verbatim.

        Returns:
            True if the text was copied, False if no clipboard tool worked.
        """
        command = self._find_command()
        if command is None:
            logger.warning("No clipboard tool found; skipping copy")
            return False

        try:
            subprocess.run(command, input=report.markdown, text=True, check=True)
        except (subprocess.CalledProcessError, OSError) as e:
            logger.warning("Copy to clipboard with %s failed: %s", command[0], e)
            return False

        logger.info("Copied release notes to clipboard")
        return True
