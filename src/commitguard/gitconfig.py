# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Sanity checks applied to the repository's git configuration at install time."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

import typer

from .logging import info, warn
from .repository import RepositoryHandler

LOGGER = logging.getLogger(__name__)

Prompt = Callable[[str], str]

EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[_A-Za-z0-9\-+]+(\.[_A-Za-z0-9-]+)*@[A-Za-z0-9-]+(\.[A-Za-z0-9]+)*(\.[A-Za-z]{2,})$",
)
AUTOCRLF_WINDOWS: Final[str] = "true"
AUTOCRLF_POSIX: Final[str] = "input"


@dataclass(slots=True)
class GitConfigReport:
    """Configuration values written, and warnings raised, by :func:`validate_git_config`."""

    updated: dict[str, str] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)


def is_valid_email(value: str | None) -> bool:
    """Return whether ``value`` looks like a usable commit email address."""

    return bool(value) and EMAIL_PATTERN.match(value) is not None


def _default_prompt(text: str) -> str:
    return str(typer.prompt(text, default="", show_default=False))


def validate_git_config(
    repository: RepositoryHandler,
    *,
    prompt: Prompt | None = None,
    is_windows: bool | None = None,
    use_emoji: bool = True,
) -> GitConfigReport:
    """Fix up ``core.autocrlf`` and make sure the committer identity is set.

    ``core.autocrlf`` defaults to ``true`` on Windows and ``input`` elsewhere.
    Windows always gets ``true``; elsewhere ``true`` is left alone with a
    warning and any other value except ``input`` is replaced. Missing names and
    missing or malformed emails are asked for until a usable value is given.

    Args:
        repository: Repository whose configuration is checked.
        prompt: Callable returning user input for a prompt; defaults to ``typer.prompt``.
        is_windows: Platform override, detected from ``os.name`` when ``None``.
        use_emoji: Toggle emoji in progress messages.

    Returns:
        GitConfigReport: Values written and warnings emitted.
    """

    ask = prompt or _default_prompt
    windows = os.name == "nt" if is_windows is None else is_windows
    report = GitConfigReport()

    def _set(section: str, key: str, value: str, message: str) -> None:
        info(message, use_emoji=use_emoji)
        repository.set_config_string(section, None, key, value)
        report.updated[f"{section}.{key}"] = value

    autocrlf = repository.get_config_string("core", None, "autocrlf")
    if not autocrlf:
        value = AUTOCRLF_WINDOWS if windows else AUTOCRLF_POSIX
        LOGGER.info("Setting git config 'core.autocrlf' to '%s' as it is not set", value)
        _set("core", "autocrlf", value, f"Setting git config 'core.autocrlf' to '{value}' as it is not set.")
    elif windows:
        if autocrlf != AUTOCRLF_WINDOWS:
            _set(
                "core",
                "autocrlf",
                AUTOCRLF_WINDOWS,
                f"Overriding git config 'core.autocrlf' to 'true' as it is set to '{autocrlf}'.",
            )
    elif autocrlf == AUTOCRLF_WINDOWS:
        message = "Consider changing git config 'core.autocrlf' to 'input' as it is set to 'true'."
        warn(message, use_emoji=use_emoji)
        report.warnings.append(message)
    elif autocrlf != AUTOCRLF_POSIX:
        _set(
            "core",
            "autocrlf",
            AUTOCRLF_POSIX,
            f"Overriding git config 'core.autocrlf' to 'input' as it is set to '{autocrlf}'.",
        )

    name = repository.get_config_string("user", None, "name")
    if not name:
        LOGGER.warning("git config 'user.name' not set")
        value = ""
        while not value:
            value = ask("Please enter your full name").strip()
        _set("user", "name", value, f"Setting git config 'user.name' to '{value}'.")

    email = repository.get_config_string("user", None, "email")
    if not is_valid_email(email):
        if email:
            LOGGER.warning("git config 'user.email' set to '%s' is invalid", email)
        else:
            LOGGER.warning("git config 'user.email' not set")
        value = ask("Please enter your email").strip()
        while not is_valid_email(value):
            value = ask("Please enter a valid email").strip()
        _set("user", "email", value, f"Setting git config 'user.email' to '{value}'.")

    return report


__all__ = ["EMAIL_PATTERN", "GitConfigReport", "is_valid_email", "validate_git_config"]
