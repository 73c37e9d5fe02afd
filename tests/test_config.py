# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for hook settings and repository setup files."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from commitguard.config import (
    HookSettings,
    load_settings,
    prefix_enforced,
    read_commit_prefix,
    resolve_settings_path,
)
from commitguard.constants import PREFIX_NONE, RELEASE_MARKER
from commitguard.errors import ConfigurationError


def test_defaults() -> None:
    settings = HookSettings()

    assert settings.emoji is True
    assert settings.color is None
    assert settings.log_level == "WARNING"
    assert settings.release_marker == RELEASE_MARKER


def test_log_level_is_normalised() -> None:
    assert HookSettings(log_level=" debug ").log_level == "DEBUG"
    with pytest.raises(ValidationError):
        HookSettings(log_level="chatty")


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.toml") == HookSettings()
    assert load_settings(None) == HookSettings()


def test_load_section_table(tmp_path: Path) -> None:
    path = tmp_path / "commitguard.toml"
    path.write_text('[commitguard]\nemoji = false\nlog_level = "info"\n', encoding="utf-8")

    settings = load_settings(path)

    assert settings.emoji is False
    assert settings.log_level == "INFO"


def test_load_top_level_table(tmp_path: Path) -> None:
    path = tmp_path / "settings.toml"
    path.write_text('release_marker = "Release:"\nverbose = true\n', encoding="utf-8")

    settings = load_settings(path)

    assert settings.release_marker == "Release:"
    assert settings.verbose is True


@pytest.mark.parametrize(
    "content",
    [
        "[commitguard\n",
        "[commitguard]\nunknown = 1\n",
        '[commitguard]\nrelease_marker = ""\n',
        'commitguard = "not a table"\n',
    ],
)
def test_invalid_settings_raise(tmp_path: Path, content: str) -> None:
    path = tmp_path / "commitguard.toml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_settings(path)


def test_resolve_settings_path(tmp_path: Path) -> None:
    explicit = tmp_path / "custom.toml"

    assert resolve_settings_path(tmp_path, str(explicit)) == explicit
    assert resolve_settings_path(tmp_path, "") is None
    assert resolve_settings_path(tmp_path, None) is None

    (tmp_path / "commitguard.toml").write_text("", encoding="utf-8")
    assert resolve_settings_path(tmp_path, "") == tmp_path / "commitguard.toml"


def test_read_commit_prefix(tmp_path: Path) -> None:
    assert read_commit_prefix(tmp_path) == PREFIX_NONE

    (tmp_path / "commit-prefix.txt").write_text("  DDF \n", encoding="utf-8")
    assert read_commit_prefix(tmp_path) == "DDF"


def test_prefix_enforced() -> None:
    assert prefix_enforced("DDF")
    assert not prefix_enforced(PREFIX_NONE)
    assert not prefix_enforced("")
    assert not prefix_enforced(None)


def test_undecodable_commit_prefix_raises(tmp_path: Path) -> None:
    (tmp_path / "commit-prefix.txt").write_bytes(b"\xff\xfeDDF\n")

    with pytest.raises(ConfigurationError, match="commit prefix"):
        read_commit_prefix(tmp_path)
