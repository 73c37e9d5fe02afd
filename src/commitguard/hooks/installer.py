# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install and remove the hook scripts in a repository."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from importlib import resources
from pathlib import Path
from string import Template
from typing import Final

from ..constants import HOOK_MARKER, HOOKS_DIR_NAME
from ..logging import info, ok, warn
from ..repository import RepositoryHandler
from .models import CleanResult, InstallResult
from .registry import HookKind, available_hooks

LOGGER = logging.getLogger(__name__)

TEMPLATE_PACKAGE: Final[str] = "commitguard.templates"
TEMPLATE_NAME: Final[str] = "hook.sh"
_EXECUTABLE_MODE: Final[int] = 0o755


class HookTemplate(Template):
    """``string.Template`` using ``@{NAME}`` placeholders (``@@`` escapes)."""

    delimiter = "@"


@dataclass(frozen=True, slots=True)
class HookVariables:
    """Values substituted into the hook script template."""

    python: str
    base_dir: str
    settings: str

    @classmethod
    def build(cls, base_dir: Path, settings: Path | str | None, python: str | None = None) -> HookVariables:
        # hook scripts use forward slashes on every platform
        return cls(
            python=_posix(python or sys.executable),
            base_dir=_posix(str(base_dir.resolve())),
            settings=_posix(str(Path(settings).expanduser().resolve())) if settings else "",
        )


def _posix(value: str) -> str:
    return value.replace("\\", "/")


def render_hook(kind: HookKind, variables: HookVariables) -> str:
    """Return the hook script for ``kind``."""

    template = resources.files(TEMPLATE_PACKAGE).joinpath(TEMPLATE_NAME).read_text(encoding="utf-8")
    return HookTemplate(template).safe_substitute(
        PYTHON=variables.python,
        HOOK=kind.value,
        BASEDIR=variables.base_dir,
        SETTINGS=variables.settings,
    )


def is_managed_hook(path: Path) -> bool:
    """Return whether ``path`` is a hook script written by commitguard."""

    try:
        return HOOK_MARKER in path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return False


def hooks_directory(repository: RepositoryHandler) -> Path:
    return repository.metadata_dir / HOOKS_DIR_NAME


def install_hooks(
    repository: RepositoryHandler,
    *,
    settings: Path | str | None = None,
    python: str | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Write a hook script for every registered hook into ``.git/hooks``.

    Existing hooks not written by commitguard are renamed to
    ``<name>.backup.<timestamp>`` first.

    Args:
        repository: Repository receiving the hooks.
        settings: Optional settings file passed to every hook invocation.
        python: Interpreter used by the scripts; defaults to the running one.
        dry_run: When ``True`` avoid filesystem mutations while reporting actions.
        use_emoji: Toggle emoji in progress messages.

    Returns:
        InstallResult: Aggregated record of installed, skipped, and backed-up hooks.
    """

    target_dir = hooks_directory(repository)
    variables = HookVariables.build(repository.base_dir, settings, python)
    result = InstallResult(installed=[], skipped=[], backups=[])
    LOGGER.info("Installing hooks into directory: %s", target_dir)
    if not dry_run:
        target_dir.mkdir(parents=True, exist_ok=True)

    for kind in available_hooks():
        destination = target_dir / kind.value
        if destination.exists() and not is_managed_hook(destination):
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
            backup_path = destination.with_name(f"{destination.name}.backup.{timestamp}")
            info(f"Backing up existing {kind.value} hook to {backup_path}", use_emoji=use_emoji)
            if not dry_run:
                destination.rename(backup_path)
            result.backups.append(backup_path)

        info(f"Installing {kind.value} hook", use_emoji=use_emoji)
        if dry_run:
            result.installed.append(destination)
            continue
        try:
            destination.write_text(render_hook(kind, variables), encoding="utf-8")
            destination.chmod(_EXECUTABLE_MODE)
        except OSError as exc:
            warn(f"Unable to write {destination}: {exc}", use_emoji=use_emoji)
            result.skipped.append(destination)
            continue
        result.installed.append(destination)

    if dry_run:
        ok(f"Dry run complete: would install {len(result.installed)} hooks", use_emoji=use_emoji)
    else:
        ok(f"Installed {len(result.installed)} hooks", use_emoji=use_emoji)
    return result


def clean_hooks(
    repository: RepositoryHandler,
    *,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> CleanResult:
    """Remove the hook scripts written by :func:`install_hooks`.

    Hooks with the same names that commitguard did not write are left alone.
    """

    target_dir = hooks_directory(repository)
    result = CleanResult(removed=[], skipped=[])
    LOGGER.info("Cleaning hooks from directory: %s", target_dir)
    for kind in available_hooks():
        hook_file = target_dir / kind.value
        if not hook_file.exists():
            continue
        if not is_managed_hook(hook_file):
            warn(f"Leaving {hook_file} in place: not installed by commitguard", use_emoji=use_emoji)
            result.skipped.append(hook_file)
            continue
        if not dry_run:
            hook_file.unlink()
        result.removed.append(hook_file)

    verb = "would remove" if dry_run else "removed"
    ok(f"Hooks {verb}: {len(result.removed)}", use_emoji=use_emoji)
    return result


__all__ = [
    "HookTemplate",
    "HookVariables",
    "clean_hooks",
    "hooks_directory",
    "install_hooks",
    "is_managed_hook",
    "render_hook",
]
