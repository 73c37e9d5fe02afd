# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Commit message validation: ticket prefix first, then dirty words."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .config import prefix_enforced
from .constants import RELEASE_MARKER
from .scanner import DirtyWordScanner, ScanResult

LOGGER = logging.getLogger(__name__)

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s", re.ASCII)
_TICKET_NUMBER: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_QUOTE: Final[str] = '"'


class CommitState(str, Enum):
    """States a commit message passes through during validation."""

    INIT = "init"
    TICKET_CHECKED = "ticket-checked"
    WORDS_CHECKED = "words-checked"
    ACCEPT = "accept"
    REJECT = "reject"


class FailedCheck(str, Enum):
    """Identify which check rejected a commit message."""

    TICKET = "ticket"
    DIRTY_WORDS = "dirty-words"


@dataclass(slots=True)
class CommitCheckResult:
    """Outcome of validating a single commit message."""

    prefix: str
    scan: ScanResult = field(default_factory=ScanResult)
    failed: FailedCheck | None = None
    history: list[CommitState] = field(default_factory=lambda: [CommitState.INIT])

    @property
    def state(self) -> CommitState:
        """Return the most recent state reached."""

        return self.history[-1]

    @property
    def accepted(self) -> bool:
        """Return ``True`` when the message passed every check."""

        return self.state is CommitState.ACCEPT

    def advance(self, state: CommitState) -> None:
        self.history.append(state)

    def reject(self, check: FailedCheck) -> None:
        self.failed = check
        self.history.append(CommitState.REJECT)


def ticket_number_missing(message: str | None, prefix: str | None, *, release_marker: str = RELEASE_MARKER) -> bool:
    """Return whether ``message`` lacks a valid ``<prefix>-<digits>`` leading token.

    Args:
        message: Full commit message text.
        prefix: Configured ticket prefix, or the "no enforcement" sentinel.
        release_marker: Leading text that exempts release commits.

    Returns:
        bool: ``True`` when the commit must be rejected for a missing ticket.
    """

    if not prefix_enforced(prefix):
        return False
    if not message:
        LOGGER.warning("Commit message is empty - aborting commit.")
        return True
    if message.startswith(release_marker):
        return False

    fields = _WHITESPACE.split(message)
    while fields and not fields[-1]:
        fields.pop()
    if len(fields) > 1:
        parts = fields[0].split("-")
        if len(parts) == 2:
            ticket_prefix, number = parts
            if ticket_prefix.startswith(_QUOTE) and len(ticket_prefix) > 1:
                ticket_prefix = ticket_prefix[1:]
            LOGGER.debug(
                "Validating commit message with prefix: %s and number: %s against expected prefix: %s",
                ticket_prefix,
                number,
                prefix,
            )
            if ticket_prefix == prefix and _TICKET_NUMBER.fullmatch(number):
                LOGGER.info("Commit message is valid.")
                return False
    LOGGER.warning("Invalid commit message: %r aborting commit.", message)
    return True


class CommitMessageValidator:
    """Validate commit messages against a ticket prefix and dirty word rules."""

    def __init__(
        self,
        scanner: DirtyWordScanner,
        prefix: str,
        *,
        release_marker: str = RELEASE_MARKER,
    ) -> None:
        self._scanner = scanner
        self._prefix = prefix
        self._release_marker = release_marker

    @property
    def prefix(self) -> str:
        return self._prefix

    def validate(self, message: str | None) -> CommitCheckResult:
        """Run the ticket check and, when it passes, the dirty word check.

        Args:
            message: Commit message text.

        Returns:
            CommitCheckResult: Final state plus the failed check and words found.
        """

        result = CommitCheckResult(prefix=self._prefix)
        if ticket_number_missing(message, self._prefix, release_marker=self._release_marker):
            result.reject(FailedCheck.TICKET)
            return result
        result.advance(CommitState.TICKET_CHECKED)

        result.scan.register(self._scanner.scan(message))
        result.advance(CommitState.WORDS_CHECKED)
        if result.scan.dirty:
            LOGGER.info("Dirty words found: %s in the commit message", sorted(result.scan.words))
            result.reject(FailedCheck.DIRTY_WORDS)
            return result
        result.advance(CommitState.ACCEPT)
        return result


__all__ = [
    "CommitCheckResult",
    "CommitMessageValidator",
    "CommitState",
    "FailedCheck",
    "ticket_number_missing",
]
