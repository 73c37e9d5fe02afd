# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered blacklist/whitelist loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from commitguard.errors import ConfigurationError, InputUnavailableError
from commitguard.wordlists import (
    default_blacklist,
    iter_entries,
    load_dirty_words,
    load_words,
    user_blacklist,
)


def _write_lines(path: Path, *lines: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    path = tmp_path / "repo"
    path.mkdir()
    return path


def test_local_blacklist_only(tmp_path: Path, base_dir: Path, empty_default: Path) -> None:
    _write_lines(base_dir / "blacklist-words.txt", "a1", "b2")

    rules = load_dirty_words(tmp_path / "nohome", base_dir, default_source=empty_default)

    assert set(rules) == {"a1", "b2"}


def test_merge_then_whitelist(tmp_path: Path, base_dir: Path, empty_default: Path) -> None:
    home = tmp_path / "home"
    _write_lines(base_dir / "blacklist-words.txt", "a1", "b2", "c3", "e5")
    _write_lines(user_blacklist(home), "a1", "c3", "d4", "f6")
    _write_lines(base_dir / "whitelist-words.txt", "b2", "d4", "a1")

    assert load_words(home, base_dir, default_source=empty_default) == {"c3", "e5", "f6"}


def test_comments_and_blank_lines_are_skipped(base_dir: Path, empty_default: Path) -> None:
    _write_lines(base_dir / "blacklist-words.txt", "# heading", "", "alpha", "  spaced  ", "REGEX:b[0-9]+")

    words = load_words(None, base_dir, default_source=empty_default)

    assert words == {"alpha", "  spaced  ", "REGEX:b[0-9]+"}


def test_iter_entries_strips_only_line_separators() -> None:
    assert list(iter_entries(["one\r\n", "#two\n", "\n", "three \n"])) == ["one", "three "]


def test_whitelist_ignored_when_nothing_blacklisted(base_dir: Path, empty_default: Path) -> None:
    _write_lines(base_dir / "whitelist-words.txt", "a1")

    assert load_words(None, base_dir, default_source=empty_default) == set()


def test_missing_optional_sources_contribute_nothing(tmp_path: Path, base_dir: Path) -> None:
    _write_lines(base_dir / "blacklist-words.txt", "zeta")

    words = load_words(tmp_path / "missing-home", base_dir, default_source=tmp_path / "missing.txt")

    assert words == {"zeta"}


def test_unreadable_user_list_is_ignored(tmp_path: Path, base_dir: Path, empty_default: Path) -> None:
    home = tmp_path / "home"
    user_blacklist(home).mkdir(parents=True)
    _write_lines(base_dir / "blacklist-words.txt", "zeta")

    assert load_words(home, base_dir, default_source=empty_default) == {"zeta"}


def test_unreadable_local_list_propagates(base_dir: Path, empty_default: Path) -> None:
    (base_dir / "blacklist-words.txt").mkdir()

    with pytest.raises(InputUnavailableError):
        load_words(None, base_dir, default_source=empty_default)


def test_unreadable_whitelist_propagates(base_dir: Path, empty_default: Path) -> None:
    _write_lines(base_dir / "blacklist-words.txt", "zeta")
    (base_dir / "whitelist-words.txt").mkdir()

    with pytest.raises(InputUnavailableError):
        load_words(None, base_dir, default_source=empty_default)


def test_bundled_default_list_is_loaded(base_dir: Path) -> None:
    assert default_blacklist().is_file()

    words = load_words(None, base_dir)

    assert "password123" in words
    assert not any(word.startswith("#") for word in words)


def test_bundled_default_can_be_whitelisted(base_dir: Path) -> None:
    _write_lines(base_dir / "whitelist-words.txt", "password123")

    assert "password123" not in load_words(None, base_dir)


def test_bad_regex_entry_raises(base_dir: Path, empty_default: Path) -> None:
    _write_lines(base_dir / "blacklist-words.txt", "REGEX:[unterminated")

    with pytest.raises(ConfigurationError):
        load_dirty_words(None, base_dir, default_source=empty_default)
