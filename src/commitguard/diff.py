# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dirty word detection over the added lines of a staged diff."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .constants import DIFF_FILE_HEADER, UNKNOWN_FILE
from .scanner import DirtyWordScanner, ScanResult

LOGGER = logging.getLogger(__name__)


class DiffState(str, Enum):
    """States of a diff validation pass."""

    INIT = "init"
    PARSING = "parsing"
    CLEAN = "clean"
    DIRTY = "dirty"


@dataclass(frozen=True, slots=True)
class DiffSection:
    """Accumulated added lines belonging to one file."""

    path: str
    text: str


@dataclass(slots=True)
class DiffCheckResult:
    """Outcome of validating a diff."""

    state: DiffState = DiffState.INIT
    scan: ScanResult = field(default_factory=ScanResult)

    @property
    def clean(self) -> bool:
        return self.state is DiffState.CLEAN


def iter_sections(diff: str | None) -> Iterator[DiffSection]:
    """Split an added-lines-only diff into per-file sections.

    A ``+++ b/<path>`` line starts a new section for ``<path>``; the header
    line is kept in its section so file names are scanned too. Lines before
    the first header are attributed to :data:`UNKNOWN_FILE`. Empty lines are
    dropped and every kept line is terminated by ``\\n``.

    Args:
        diff: Diff text produced by the repository handler.

    Yields:
        DiffSection: Non-empty blocks in diff order.
    """

    if not diff:
        return
    current = UNKNOWN_FILE
    block: list[str] = []
    for raw in diff.split("\n"):
        line = raw.rstrip("\r")
        if not line:
            continue
        if line.startswith(DIFF_FILE_HEADER):
            if block:
                yield DiffSection(current, "".join(block))
            block = []
            current = line[len(DIFF_FILE_HEADER) :].rstrip("\t")
        block.append(f"{line}\n")
    if block:
        yield DiffSection(current, "".join(block))


class DiffDirtyWordValidator:
    """Scan each file's added lines and aggregate findings by file."""

    def __init__(self, scanner: DirtyWordScanner) -> None:
        self._scanner = scanner

    def validate(self, diff: str | None) -> DiffCheckResult:
        """Return whether ``diff`` introduces dirty words, and where."""

        result = DiffCheckResult(state=DiffState.PARSING)
        LOGGER.debug("Diff for this commit: %s", diff)
        for section in iter_sections(diff):
            result.scan.register(self._scanner.scan(section.text), path=section.path)
        if result.scan.dirty:
            LOGGER.debug("Dirty words found: %s", sorted(result.scan.words))
            LOGGER.debug("Files with dirty words: %s", sorted(result.scan.files))
            result.state = DiffState.DIRTY
        else:
            LOGGER.info("Commit is clean.")
            result.state = DiffState.CLEAN
        return result


__all__ = ["DiffCheckResult", "DiffDirtyWordValidator", "DiffSection", "DiffState", "iter_sections"]
