"""GitReader - Reads the commit range and repository metadata from git."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path

from release_notes.git_reader.exceptions import SourceControlError
from release_notes.git_reader.models import RepoInfo

logger = logging.getLogger("release_notes.git_reader")

# One line per commit: abbreviated hash and subject
LOG_FORMAT = "%h %s"
DEFAULT_VERSION = "0.0.0"


class GitReader:
    """Reads commit history between two refs of a local clone.

    Assumes the repository is already cloned locally and has a remote.
    """

    def __init__(self, repo_path: str | Path = ".", remote: str = "origin") -> None:
        """Initialize Git Reader.

        Args:
            repo_path: Path to local repository clone
            remote: Name of the remote to fetch and describe
        """
        self.repo_path = Path(repo_path)
        self.remote = remote

    def _run_git(self, *args: str) -> str:
        """Run a git command in the repo directory.

        Args:
            *args: Git command arguments

        Returns:
            Command stdout

        Raises:
            subprocess.CalledProcessError: If command fails
            FileNotFoundError: If git is not installed
        """
        result = subprocess.run(
            ["git", *args],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()

    def fetch(self) -> None:
        """Synchronize remote-tracking refs with the remote.

        Raises:
            SourceControlError: If the fetch fails
        """
        logger.info("Fetching %s", self.remote)
        try:
            self._run_git("fetch", self.remote)
        except subprocess.CalledProcessError as e:
            logger.error("Failed to fetch %s: %s", self.remote, e.stderr)
            raise SourceControlError(f"Failed to fetch '{self.remote}': {e.stderr}") from e
        except FileNotFoundError as e:
            raise SourceControlError("git executable not found") from e

    def read_log(self, base: str = "origin/live", head: str = "origin/master") -> str:
        """Read the commits reachable from head but not from base.

        Args:
            base: Ref already released
            head: Ref about to be released

        Returns:
            Commit log, newest first, one commit per line

        Raises:
            SourceControlError: If either ref is invalid or git fails
        """
        logger.info("Reading commits %s..%s", base, head)
        try:
            log = self._run_git(
                "--no-pager",
                "log",
                f"--pretty=format:{LOG_FORMAT}",
                "--abbrev-commit",
                f"{base}..{head}",
            )
        except subprocess.CalledProcessError as e:
            logger.error("Failed to read log %s..%s: %s", base, head, e.stderr)
            raise SourceControlError(
                f"Failed to read commits between '{base}' and '{head}': {e.stderr}"
            ) from e
        except FileNotFoundError as e:
            raise SourceControlError("git executable not found") from e

        logger.debug("Read %d commit line(s)", len(log.splitlines()))
        return log

    def remote_url(self) -> str:
        """Get the URL of the configured remote, or an empty string."""
        try:
            return self._run_git("config", "--get", f"remote.{self.remote}.url")
        except (subprocess.CalledProcessError, FileNotFoundError):
            logger.debug("No URL configured for remote %s", self.remote)
            return ""

    def toplevel(self) -> Path:
        """Get the repository's top-level directory."""
        try:
            return Path(self._run_git("rev-parse", "--show-toplevel"))
        except (subprocess.CalledProcessError, FileNotFoundError):
            return self.repo_path.resolve()

    def repo_name(self) -> str:
        """Get a display name for the repository.

        Uses the last path segment of the remote URL, falling back to the
        name of the top-level directory.
        """
        url = self.remote_url().rstrip("/")
        if url:
            name = url.replace(":", "/").rsplit("/", 1)[-1]
            if name.endswith(".git"):
                name = name[: -len(".git")]
            if name:
                return name
        return self.toplevel().name

    def version(self) -> str:
        """Get the version being released.

        Reads package.json at the top level if present, else the latest tag.
        """
        package_json = self.toplevel() / "package.json"
        if package_json.is_file():
            try:
                version = json.loads(package_json.read_text()).get("version")
            except (OSError, ValueError, AttributeError):
                logger.warning("Could not read version from %s", package_json)
            else:
                if version:
                    return str(version)

        try:
            tag = self._run_git("describe", "--tags", "--abbrev=0")
        except (subprocess.CalledProcessError, FileNotFoundError):
            logger.debug("No tags found, using default version")
            return DEFAULT_VERSION
        return tag[1:] if tag[:1] in ("v", "V") else tag

    def repo_info(self) -> RepoInfo:
        """Collect name, version and remote URL in one call."""
        return RepoInfo(name=self.repo_name(), version=self.version(), remote_url=self.remote_url())
