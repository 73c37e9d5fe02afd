# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook handlers: each returns ``True`` when git should abort."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..commit_msg import CommitMessageValidator
from ..diff import DiffDirtyWordValidator
from ..logging import ok, plain
from ..reporting import format_commit_rejection, format_diff_rejection
from .models import HookContext

LOGGER = logging.getLogger(__name__)


def check_commit_message(context: HookContext, args: Sequence[str], *, hook: str) -> bool:
    """Validate the commit message stored in the file named by ``args[0]``.

    Args:
        context: Loaded hook context.
        args: Arguments git passed to the hook; the first is the message file.
        hook: Hook name used in the rejection banner.

    Returns:
        bool: ``True`` when the commit must be aborted.

    Raises:
        InputUnavailableError: If the message file cannot be read.
    """

    if not args:
        LOGGER.warning("%s hook called without a commit message file; nothing to check", hook)
        return False
    settings = context.settings
    LOGGER.debug("Reading commit message from: %s", args[0])
    message = context.repository.get_file_as_string(args[0])
    LOGGER.debug("Commit message: %s", message)

    validator = CommitMessageValidator(context.scanner, context.prefix, release_marker=settings.release_marker)
    result = validator.validate(message)
    if result.accepted:
        ok("Commit message is clean.", use_emoji=settings.emoji, use_color=settings.color)
        return False
    plain(
        format_commit_rejection(result, hook=hook, release_marker=settings.release_marker),
        use_color=settings.color,
    )
    return True


def check_staged_changes(context: HookContext, args: Sequence[str], *, hook: str) -> bool:
    """Scan the added lines of the staged diff for dirty words.

    Raises:
        InputUnavailableError: If the staged diff cannot be obtained.
    """

    settings = context.settings
    if not context.scanner.has_rules():
        LOGGER.debug("No dirty words defined; skipping the diff scan")
        return False
    LOGGER.debug("Executing the git diff to determine files with changes.")
    diff = context.repository.get_diff()
    result = DiffDirtyWordValidator(context.scanner).validate(diff)
    if result.clean:
        ok("Commit is clean.", use_emoji=settings.emoji, use_color=settings.color)
        return False
    plain(format_diff_rejection(result, hook=hook), use_color=settings.color)
    return True


__all__ = ["check_commit_message", "check_staged_changes"]
