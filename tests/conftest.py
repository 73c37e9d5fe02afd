# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from commitguard.errors import InputUnavailableError
from commitguard.repository import config_key


@dataclass
class StubRepository:
    """In-memory repository handler used in place of ``git``."""

    base_dir: Path
    metadata_dir: Path
    files: dict[str, str] = field(default_factory=dict)
    diff: str = ""
    config: dict[str, str] = field(default_factory=dict)
    diff_calls: int = 0

    def get_file_as_string(self, filename: str | Path) -> str:
        try:
            return self.files[str(filename)]
        except KeyError as exc:
            raise InputUnavailableError(f"Unable to read {filename}") from exc

    def get_diff(self) -> str:
        self.diff_calls += 1
        return self.diff

    def get_config_string(self, section: str, subsection: str | None, key: str) -> str | None:
        return self.config.get(config_key(section, subsection, key))

    def set_config_string(self, section: str, subsection: str | None, key: str, value: str) -> None:
        self.config[config_key(section, subsection, key)] = value


@pytest.fixture
def stub_repo(tmp_path: Path) -> StubRepository:
    """Return a stub repository whose base and metadata directories exist."""

    base_dir = tmp_path / "repo"
    metadata_dir = base_dir / ".git"
    metadata_dir.mkdir(parents=True)
    return StubRepository(base_dir=base_dir, metadata_dir=metadata_dir)


@pytest.fixture
def empty_default(tmp_path: Path) -> Path:
    """Return an empty stand-in for the bundled default blacklist."""

    path = tmp_path / "default-blacklist-words.txt"
    path.write_text("", encoding="utf-8")
    return path


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty directory under ``tmp_path``."""

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    return home
