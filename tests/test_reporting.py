# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for rejection banners."""

from __future__ import annotations

from commitguard.commit_msg import CommitMessageValidator
from commitguard.diff import DiffDirtyWordValidator
from commitguard.patterns import compile_rules
from commitguard.reporting import (
    RULE,
    banner,
    display_entry,
    format_commit_rejection,
    format_diff_rejection,
)
from commitguard.scanner import DirtyWordScanner

SCANNER = DirtyWordScanner(compile_rules(["bill", "What", "REGEX:fo+"]))


def test_banner_frames_body() -> None:
    lines = banner("pre-commit", ["body"]).splitlines()

    assert len(lines[0]) == len(RULE)
    assert " PRE-COMMIT HOOK ABORTED OPERATION " in lines[0]
    assert lines[1] == "body"
    assert "--no-verify" in lines[2]
    assert lines[-1] == RULE


def test_display_entry_strips_regex_marker() -> None:
    assert display_entry("REGEX:fo+") == "fo+"
    assert display_entry("bill") == "bill"


def test_ticket_rejection_shows_example() -> None:
    result = CommitMessageValidator(SCANNER, "ABC").validate("no ticket")

    text = format_commit_rejection(result)

    assert "COMMIT-MSG HOOK ABORTED OPERATION" in text
    assert "must start with a ticket number" in text
    assert '"ABC-1234 "' in text
    assert "[maven-release-plugin]" in text


def test_dirty_commit_rejection_lists_words_and_patterns() -> None:
    result = CommitMessageValidator(SCANNER, "NONE").validate("what about bill and foo")

    lines = format_commit_rejection(result, hook="applypatch-msg").splitlines()

    assert "APPLYPATCH-MSG HOOK ABORTED OPERATION" in lines[0]
    assert lines[1:7] == [
        "Dirty words found:",
        "\tbill",
        "\tWhat",
        "Dirty regex patterns found:",
        "\tfo+",
        "in the commit message.",
    ]


def test_diff_rejection_lists_files() -> None:
    result = DiffDirtyWordValidator(SCANNER).validate("+++ b/a.py\n+bill foo\n+++ b/b.py\n+what\n+++ b/c.py\n+ok\n")

    text = format_diff_rejection(result)

    assert "In files:" in text
    assert "\ta.py: bill, fo+" in text
    assert "\tb.py: What" in text
    assert "c.py" not in text
