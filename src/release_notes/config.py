"""Configuration loading for release-notes runs."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from release_notes.exceptions import ReleaseNotesError

DEFAULT_CONFIG_FILE = "release-notes.yaml"
DEFAULT_JIRA_HOST = "jira.crossroads.org.hk"
DEFAULT_JIRA_CODE = "GCW"
DEFAULT_BASE_REF = "origin/live"
DEFAULT_HEAD_REF = "origin/master"
DEFAULT_EMAIL_FROM = "deployer@goodcity.hk"
DEFAULT_TIMEOUT = 30.0


class ConfigError(ReleaseNotesError):
    """Raised when configuration is invalid."""


@dataclass(frozen=True)
class Settings:
    """Resolved settings for a single run.

    Secrets (Jira token, SendGrid key) only ever come from the environment;
    the YAML file carries non-sensitive defaults. Jira username and password
    are resolved separately, see release_notes.credentials.
    """

    jira_host: str = DEFAULT_JIRA_HOST
    jira_code: str = DEFAULT_JIRA_CODE
    jira_token: str = ""
    sendgrid_api_key: str = ""
    email_from: str = DEFAULT_EMAIL_FROM
    base_ref: str = DEFAULT_BASE_REF
    head_ref: str = DEFAULT_HEAD_REF
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create settings from a config file mapping.

        Args:
            data: Configuration dictionary from YAML.

        Returns:
            Settings with file values applied over the defaults.

        Raises:
            ConfigError: If a section is not a mapping or a value has the wrong type.
        """
        sections = {}
        for name in ("jira", "git", "email", "http"):
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigError(f"Config section '{name}' must be a mapping")
            sections[name] = section

        jira, git, email, http = (sections[n] for n in ("jira", "git", "email", "http"))

        try:
            timeout = float(http.get("timeout", DEFAULT_TIMEOUT))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid http.timeout: {http.get('timeout')!r}") from e

        return cls(
            jira_host=str(jira.get("host", DEFAULT_JIRA_HOST)),
            jira_code=str(jira.get("code", DEFAULT_JIRA_CODE)),
            email_from=str(email.get("from", DEFAULT_EMAIL_FROM)),
            base_ref=str(git.get("base", DEFAULT_BASE_REF)),
            head_ref=str(git.get("head", DEFAULT_HEAD_REF)),
            timeout=timeout,
        )

    def with_env(self, env: Mapping[str, str]) -> Settings:
        """Return a copy with environment values applied.

        Empty environment values are ignored.
        """
        overrides: dict[str, Any] = {}
        for var, attr in ENV_VARS.items():
            value = env.get(var, "")
            if value:
                overrides[attr] = value
        return replace(self, **overrides)


# Environment variable -> Settings attribute
ENV_VARS = {
    "JIRA_HOST": "jira_host",
    "JIRA_TOKEN": "jira_token",
    "SENDGRID_API_KEY": "sendgrid_api_key",
    "EMAIL_FROM": "email_from",
}


def load_config(config_path: Path | str) -> Settings:
    """Load settings from a YAML file.

    Args:
        config_path: Path to release-notes.yaml file.

    Returns:
        Parsed settings (environment not applied).

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return Settings.from_dict(data)


def load_settings(
    config_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve settings from defaults, an optional config file and the environment.

    Args:
        config_path: Explicit config file. When None, ./release-notes.yaml is
                     used if it exists.
        env: Environment snapshot. Defaults to os.environ.

    Returns:
        Fully resolved settings.
    """
    if env is None:
        env = os.environ

    if config_path is None and Path(DEFAULT_CONFIG_FILE).exists():
        config_path = DEFAULT_CONFIG_FILE

    settings = load_config(config_path) if config_path is not None else Settings()
    return settings.with_env(env)
