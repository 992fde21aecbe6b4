"""Credential resolution: environment first, interactive prompt second."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import click

SecretPrompt = Callable[[str], str]


def solicit_secret(prompt: str) -> str:
    """Ask for a secret on the terminal without echoing it."""
    return str(click.prompt(prompt, hide_input=True, default="", show_default=False))


def solicit_value(prompt: str) -> str:
    """Ask for a plain value on the terminal."""
    return str(click.prompt(prompt, default="", show_default=False))


def resolve_credential(
    env: Mapping[str, str],
    name: str,
    prompt: str,
    solicit: SecretPrompt,
) -> str:
    """Resolve a credential from an environment snapshot or a prompt.

    Args:
        env: Environment snapshot.
        name: Environment variable holding the credential.
        prompt: Prompt text used when the variable is missing or empty.
        solicit: Prompt capability, called only when needed.

    Returns:
        The environment value if present and non-empty, else the solicited one.
    """
    value = env.get(name, "")
    if value:
        return value
    return solicit(prompt)
