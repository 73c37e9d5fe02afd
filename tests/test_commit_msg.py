# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the commit message validator."""

from __future__ import annotations

import pytest

from commitguard.commit_msg import (
    CommitMessageValidator,
    CommitState,
    FailedCheck,
    ticket_number_missing,
)
from commitguard.constants import RELEASE_MARKER
from commitguard.patterns import compile_rules
from commitguard.scanner import DirtyWordScanner

PREFIX = "PREFIX"


@pytest.mark.parametrize(
    "message",
    [
        None,
        "",
        '"',
        "xyz abc",
        PREFIX,
        f"{PREFIX}-",
        f"{PREFIX}-abc",
        f"{PREFIX}-123abc other",
        f"{PREFIX}--123 other",
        f"{PREFIX}-123.00 other",
        f"{PREFIX}-123-2 other",
        f"{PREFIX}-1",
        f"{PREFIX}-1\n",
        f"{PREFIX}-123: message with colon",
        f"REFIX-1234 Misspelled the {PREFIX} ticket.",
    ],
)
def test_ticket_number_missing(message: str | None) -> None:
    assert ticket_number_missing(message, PREFIX)


@pytest.mark.parametrize(
    "message",
    [
        f"{PREFIX}-1 rest of commit msg",
        f"{PREFIX}-001 rest of commit msg",
        f"{PREFIX}-000 rest of commit msg",
        f"{PREFIX}-1234 valid message",
        f"{PREFIX}-123\tTab separated",
        f'"{PREFIX}-123 rest of commit msg"',
        RELEASE_MARKER,
        f"{RELEASE_MARKER} rest of commit msg",
        f"{RELEASE_MARKER}no spaces is ok here",
        "[maven-release-plugin] no ticket needed",
    ],
)
def test_ticket_number_present(message: str) -> None:
    assert not ticket_number_missing(message, PREFIX)


@pytest.mark.parametrize("prefix", ["NONE", ""])
def test_disabled_prefix_accepts_anything(prefix: str) -> None:
    assert not ticket_number_missing("no ticket at all", prefix)
    assert not ticket_number_missing("", prefix)


def test_custom_release_marker() -> None:
    assert not ticket_number_missing("Release 1.2", PREFIX, release_marker="Release ")
    assert ticket_number_missing(f"{RELEASE_MARKER} x", PREFIX, release_marker="Release ")


@pytest.fixture
def validator() -> CommitMessageValidator:
    return CommitMessageValidator(DirtyWordScanner(compile_rules(["MAN", "what", "bill"])), PREFIX)


def test_valid_message_walks_every_state(validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}-1234 Sample valid commit msg.")

    assert result.accepted
    assert result.failed is None
    assert result.history == [
        CommitState.INIT,
        CommitState.TICKET_CHECKED,
        CommitState.WORDS_CHECKED,
        CommitState.ACCEPT,
    ]


def test_missing_ticket_skips_word_check(validator: CommitMessageValidator) -> None:
    result = validator.validate("REFIX-1234 contains bill")

    assert result.state is CommitState.REJECT
    assert result.failed is FailedCheck.TICKET
    assert result.history == [CommitState.INIT, CommitState.REJECT]
    assert not result.scan.dirty


def test_dirty_words_reject(validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{PREFIX}-1234 Bad commit message - contains bill")

    assert not result.accepted
    assert result.failed is FailedCheck.DIRTY_WORDS
    assert result.history[-2:] == [CommitState.WORDS_CHECKED, CommitState.REJECT]
    assert result.scan.words == {"bill"}


def test_release_message_still_checked_for_dirty_words(validator: CommitMessageValidator) -> None:
    result = validator.validate(f"{RELEASE_MARKER} what a release")

    assert result.failed is FailedCheck.DIRTY_WORDS


def test_only_ascii_whitespace_separates_ticket() -> None:
    assert ticket_number_missing(f"{PREFIX}-123\u00a0message", PREFIX)
    assert not ticket_number_missing(f"{PREFIX}-123\x0bmessage", PREFIX)
