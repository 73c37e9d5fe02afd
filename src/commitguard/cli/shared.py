# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared utilities for CLI commands (console output, errors, logging levels)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import HookSettings
from ..logging import configure_logging
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn

DEFAULT_BASE_DIR: Final[Path] = Path(".")

BASE_DIR_OPTION = Annotated[
    Path,
    typer.Option(
        "--base-dir",
        "-b",
        help="Directory holding blacklist-words.txt, whitelist-words.txt and commit-prefix.txt.",
    ),
]
SETTINGS_OPTION = Annotated[
    str | None,
    typer.Option("--settings", help="TOML settings file; an empty value means none."),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console helpers respecting CLI emoji and colour settings."""

    use_emoji: bool
    use_color: bool | None = None

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, color: bool | None = None) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided preferences."""

    return CLILogger(use_emoji=emoji, use_color=color)


def apply_settings_logging(settings: HookSettings) -> None:
    """Lower the package log level to the one requested by ``settings``.

    A more verbose level already chosen on the command line is kept.
    """

    requested = logging.DEBUG if settings.verbose else logging.getLevelName(settings.log_level)
    current = logging.getLogger("commitguard").getEffectiveLevel()
    if isinstance(requested, int) and requested < current:
        configure_logging(requested)


__all__ = [
    "BASE_DIR_OPTION",
    "CLIError",
    "DEFAULT_BASE_DIR",
    "CLILogger",
    "DRY_RUN_OPTION",
    "EMOJI_OPTION",
    "SETTINGS_OPTION",
    "apply_settings_logging",
    "build_cli_logger",
]
