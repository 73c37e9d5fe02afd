# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command invoked by the installed git hook scripts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..config import load_settings, resolve_settings_path
from ..constants import ERROR_CODE
from ..errors import CommitGuardError
from ..hooks import HookContext, HookKind, run_hook
from ..repository import GitRepository
from .shared import (
    BASE_DIR_OPTION,
    DEFAULT_BASE_DIR,
    SETTINGS_OPTION,
    apply_settings_logging,
    build_cli_logger,
)

LOGGER = logging.getLogger(__name__)

HOOK_ARGUMENT = Annotated[HookKind, typer.Argument(help="Git hook being run.", case_sensitive=False)]
HOOK_ARGS_ARGUMENT = Annotated[
    list[str] | None,
    typer.Argument(metavar="[ARGS]...", help="Arguments git passed to the hook."),
]


@dataclass(slots=True)
class RunHookOptions:
    """Normalised CLI inputs for a hook invocation."""

    hook: HookKind
    args: tuple[str, ...]
    base_dir: Path
    settings: str | None

    @classmethod
    def from_cli(
        cls,
        hook: HookKind,
        args: list[str] | None,
        base_dir: Path,
        settings: str | None,
    ) -> RunHookOptions:
        return cls(
            hook=hook,
            args=tuple(args or ()),
            base_dir=base_dir.expanduser().resolve(),
            settings=settings or None,
        )


def run_hook_command(
    hook: HOOK_ARGUMENT,
    args: HOOK_ARGS_ARGUMENT = None,
    base_dir: BASE_DIR_OPTION = DEFAULT_BASE_DIR,
    settings: SETTINGS_OPTION = None,
) -> None:
    """Run a git hook; exits with status 1 when git must abort."""

    options = RunHookOptions.from_cli(hook, args, base_dir, settings)
    logger = build_cli_logger(emoji=True)
    try:
        hook_settings = load_settings(resolve_settings_path(options.base_dir, options.settings))
        apply_settings_logging(hook_settings)
        logger = build_cli_logger(emoji=hook_settings.emoji, color=hook_settings.color)
        context = HookContext.load(
            GitRepository(options.base_dir),
            home_dir=Path.home(),
            settings=hook_settings,
        )
        abort = run_hook(options.hook, context, options.args)
    except CommitGuardError as exc:
        LOGGER.debug("%s hook failed", options.hook.value, exc_info=True)
        logger.fail(f"{options.hook.value} hook failed: {exc}")
        raise typer.Exit(code=ERROR_CODE) from exc

    if abort:
        LOGGER.debug("%s hook aborted the git operation", options.hook.value)
        raise typer.Exit(code=ERROR_CODE)


__all__ = ["RunHookOptions", "run_hook_command"]
