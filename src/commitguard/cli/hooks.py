# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands for installing and removing the git hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ._hooks_cli_models import SKIP_GIT_CONFIG_OPTION, CleanCLIOptions, InstallCLIOptions
from ._hooks_cli_services import (
    emit_clean_summary,
    emit_hooks_summary,
    perform_clean,
    perform_installation,
)
from .shared import (
    BASE_DIR_OPTION,
    DEFAULT_BASE_DIR,
    DRY_RUN_OPTION,
    EMOJI_OPTION,
    SETTINGS_OPTION,
    CLIError,
    build_cli_logger,
)


def install_hooks_command(
    base_dir: BASE_DIR_OPTION = DEFAULT_BASE_DIR,
    settings: SETTINGS_OPTION = None,
    dry_run: DRY_RUN_OPTION = False,
    skip_git_config: SKIP_GIT_CONFIG_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install the commitguard git hooks for the current repository."""

    options = InstallCLIOptions.from_cli(
        base_dir,
        settings,
        dry_run=dry_run,
        skip_git_config=skip_git_config,
        emoji=emoji,
    )
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_hooks_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


def clean_hooks_command(
    base_dir: BASE_DIR_OPTION = DEFAULT_BASE_DIR,
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Remove the git hooks installed by commitguard."""

    options = CleanCLIOptions(base_dir=Path(base_dir).expanduser().resolve(), dry_run=dry_run, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_clean(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_clean_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["clean_hooks_command", "install_hooks_command"]
