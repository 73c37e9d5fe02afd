# SPDX-License-Identifier: MIT
"""Data structures for the hook installation CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

SKIP_GIT_CONFIG_OPTION = Annotated[
    bool,
    typer.Option("--skip-git-config", help="Do not check core.autocrlf, user.name and user.email."),
]


@dataclass(slots=True)
class InstallCLIOptions:
    """Capture CLI options for hook installation."""

    base_dir: Path
    settings: str | None
    dry_run: bool
    skip_git_config: bool
    emoji: bool

    @classmethod
    def from_cli(
        cls,
        base_dir: Path,
        settings: str | None,
        *,
        dry_run: bool,
        skip_git_config: bool,
        emoji: bool,
    ) -> InstallCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(
            base_dir=base_dir.expanduser().resolve(),
            settings=settings or None,
            dry_run=dry_run,
            skip_git_config=skip_git_config,
            emoji=emoji,
        )


@dataclass(slots=True)
class CleanCLIOptions:
    """Capture CLI options for hook removal."""

    base_dir: Path
    dry_run: bool
    emoji: bool


__all__ = ["CleanCLIOptions", "InstallCLIOptions", "SKIP_GIT_CONFIG_OPTION"]
