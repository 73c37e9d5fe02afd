# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the hook implementations."""

from __future__ import annotations

from pathlib import Path


class CommitGuardError(Exception):
    """Base class for errors that abort a hook invocation."""


class ConfigurationError(CommitGuardError):
    """Raised when a word list entry or settings file is invalid."""


class InputUnavailableError(CommitGuardError):
    """Raised when the commit message, staged diff or a local list cannot be read."""


class MissingResourceError(CommitGuardError):
    """Raised when an optional word list source is absent or unreadable."""

    def __init__(self, path: Path | str, reason: str | None = None) -> None:
        """Record the missing ``path`` and an optional ``reason``.

        Args:
            path: Location of the optional resource.
            reason: Extra context describing why it could not be read.
        """

        message = f"Optional resource not available: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.path = path


__all__ = [
    "CommitGuardError",
    "ConfigurationError",
    "InputUnavailableError",
    "MissingResourceError",
]
