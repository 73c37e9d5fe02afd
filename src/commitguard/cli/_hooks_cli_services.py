# SPDX-License-Identifier: MIT
"""Helper services used by the hook installation CLI commands."""

from __future__ import annotations

from ..config import resolve_settings_path
from ..errors import CommitGuardError
from ..gitconfig import validate_git_config
from ..hooks import CleanResult, InstallResult, clean_hooks, install_hooks
from ..repository import GitRepository
from ._hooks_cli_models import CleanCLIOptions, InstallCLIOptions
from .shared import CLIError, CLILogger


def perform_installation(options: InstallCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks, then check the git configuration unless told otherwise.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when the repository cannot be located or updated.
    """

    repository = GitRepository(options.base_dir)
    try:
        result = install_hooks(
            repository,
            settings=resolve_settings_path(options.base_dir, options.settings),
            dry_run=options.dry_run,
            use_emoji=options.emoji,
        )
        if not (options.skip_git_config or options.dry_run):
            validate_git_config(repository, use_emoji=options.emoji)
    except CommitGuardError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    return result


def perform_clean(options: CleanCLIOptions, *, logger: CLILogger) -> CleanResult:
    """Remove the hooks installed by commitguard.

    Raises:
        CLIError: Raised when the repository cannot be located.
    """

    try:
        return clean_hooks(GitRepository(options.base_dir), dry_run=options.dry_run, use_emoji=options.emoji)
    except CommitGuardError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_hooks_summary(
    result: InstallResult,
    options: InstallCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary warnings after attempting hook installation."""

    if result.backups:
        backup_paths = ", ".join(str(path) for path in result.backups)
        logger.warn(f"Backed up existing hooks: {backup_paths}")
    if result.skipped:
        logger.warn(f"Could not install: {', '.join(str(path) for path in result.skipped)}")
    if options.dry_run and result.installed:
        planned = ", ".join(str(path) for path in result.installed)
        logger.warn(f"DRY RUN: would install {planned}")


def emit_clean_summary(
    result: CleanResult,
    options: CleanCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit the hooks a dry run would remove."""

    if options.dry_run and result.removed:
        planned = ", ".join(str(path) for path in result.removed)
        logger.warn(f"DRY RUN: would remove {planned}")


__all__ = ["emit_clean_summary", "emit_hooks_summary", "perform_clean", "perform_installation"]
