# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for dirty word pattern compilation and scanning."""

from __future__ import annotations

import pytest

from commitguard.errors import ConfigurationError
from commitguard.patterns import compile_entry, compile_rules, entry_body, is_regex_entry
from commitguard.scanner import DirtyWordScanner, ScanResult, scan_text

DIRTY_WORDS = ["Bill", "WHAT", "march madness", "DOB-11-1-4", r"REGEX:System\.ouch\.print(f|ln)?"]


@pytest.fixture
def scanner() -> DirtyWordScanner:
    return DirtyWordScanner(compile_rules(DIRTY_WORDS))


@pytest.mark.parametrize(
    "text",
    [
        "Commit with dirty word: bill and others",
        "Commit with dirty word and punctuation: bill.",
        "Commit with mixed case dirty words: BILL",
        "Commit with mixed case dirty words: BiLL",
        "Commit with dirty words separated with _: bill_",
        "Commit with dirty words separated with _: _bill",
        "Commit with dirty words separated with _: _bill_",
        "Commit with dirty words and operators: 2|bill",
        "Commit with dirty words and operators: 2-bill",
        "Commit with dirty words and slashes: /bill/",
        'Commit with dirty words and double quotes: "bill"',
        "Commit with dirty words and single quotes: 'bill'",
        "Commit with dirty words and parathesis: (bill)",
        "Commit with dirty words and square brackets: [bill]",
        "Commit with dirty words and angle brackets: <bill>",
        "Commit with dirty words and braces: {bill}",
        "Commit with dirty words and $: $bill",
        "Commit with dirty words and %: %bill",
        "Commit with dirty words and colons: :bill:",
        "Commit with mixed case dirty words: mArch Madness",
        "Check for special chars: DOB-11-1-4",
        "Surrounded by punctuation: ...WHAT!!",
        'regex System.ouch.println("this");',
        'regex System.ouch.print("this");',
        'regex System.ouch.printf("this");',
    ],
)
def test_dirty_text_is_detected(scanner: DirtyWordScanner, text: str) -> None:
    assert scanner.scan(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        None,
        "Initial commit - no dirty words.",
        "Commit with prefixed dirty word: abiLL",
        "Commit with dirty word which is part of another: billions",
        "Commit with dirty words suffixed with a number: 2 * bill4",
        "Dirty word as part of another word: whatever",
        'regex System_ouch_print("this");',
    ],
)
def test_clean_text_is_not_flagged(scanner: DirtyWordScanner, text: str | None) -> None:
    assert scanner.scan(text) == set()


def test_scan_reports_configured_entries(scanner: DirtyWordScanner) -> None:
    found = scanner.scan('BILL said System.ouch.println("what")')
    assert found == {"Bill", "WHAT", r"REGEX:System\.ouch\.print(f|ln)?"}


def test_literal_entries_are_escaped() -> None:
    pattern = compile_entry("a.b")
    assert pattern.search("see a.b here")
    assert not pattern.search("see axb here")


def test_non_ascii_letters_fold_case() -> None:
    assert compile_entry("ÉCOLE").search("une école")


def test_invalid_regex_names_entry() -> None:
    with pytest.raises(ConfigurationError, match=r"REGEX:\(unclosed"):
        compile_entry("REGEX:(unclosed")


def test_entry_helpers() -> None:
    assert is_regex_entry("REGEX:foo")
    assert not is_regex_entry("regex:foo")
    assert entry_body("REGEX:fo+") == "fo+"
    assert entry_body("fo+") == r"fo\+"


def test_scan_without_rules_is_empty() -> None:
    empty = DirtyWordScanner({})
    assert not empty.has_rules()
    assert empty.scan("bill") == set()
    assert scan_text("bill", {}) == set()


def test_scan_result_splits_literals_and_patterns() -> None:
    result = ScanResult()
    result.register({"what", "Bill", "REGEX:fo+"}, path="a.txt")
    result.register(set(), path="b.txt")

    assert result.dirty
    assert result.literal_words() == ["Bill", "what"]
    assert result.regex_patterns() == ["fo+"]
    assert result.files == {"a.txt": {"what", "Bill", "REGEX:fo+"}}


def test_repeated_scans_agree(scanner: DirtyWordScanner) -> None:
    text = 'bill asked WHAT about System.ouch.printf("x")'
    rules_before = dict(scanner.rules)

    first = scanner.scan(text)
    second = scanner.scan(text)

    assert first == second
    assert scan_text(text, scanner.rules) == scan_text(text, scanner.rules) == first
    assert dict(scanner.rules) == rules_before
