# SPDX-License-Identifier: MIT
"""Dataclasses shared by hook execution and installation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import HookSettings, read_commit_prefix
from ..repository import RepositoryHandler
from ..scanner import DirtyWordScanner
from ..wordlists import load_dirty_words


@dataclass(slots=True)
class HookContext:
    """Everything a hook handler needs, loaded once per invocation."""

    repository: RepositoryHandler
    scanner: DirtyWordScanner
    prefix: str
    settings: HookSettings = field(default_factory=HookSettings)

    @classmethod
    def load(
        cls,
        repository: RepositoryHandler,
        *,
        home_dir: Path | None,
        settings: HookSettings | None = None,
    ) -> HookContext:
        """Read word lists and the commit prefix for ``repository``.

        Raises:
            ConfigurationError: If a dirty word pattern is malformed.
            InputUnavailableError: If a repository word list cannot be read.
        """

        rules = load_dirty_words(home_dir, repository.base_dir)
        return cls(
            repository=repository,
            scanner=DirtyWordScanner(rules),
            prefix=read_commit_prefix(repository.base_dir),
            settings=settings or HookSettings(),
        )


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from attempting to install git hooks."""

    installed: list[Path]
    skipped: list[Path]
    backups: list[Path]


@dataclass(slots=True)
class CleanResult:
    """Hooks removed, and foreign hooks left in place, by a clean run."""

    removed: list[Path]
    skipped: list[Path]


__all__ = ["CleanResult", "HookContext", "InstallResult"]
