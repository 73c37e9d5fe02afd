# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings model and loaders for hook invocations."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import COMMIT_PREFIX_FILENAME, PREFIX_NONE, RELEASE_MARKER, SETTINGS_FILENAME
from .errors import ConfigurationError

LOGGER = logging.getLogger(__name__)

SETTINGS_SECTION: Final[str] = "commitguard"
_LOG_LEVELS: Final[frozenset[str]] = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class HookSettings(BaseModel):
    """Presentation and behaviour settings shared by every hook."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    emoji: bool = True
    color: bool | None = None
    log_level: str = "WARNING"
    release_marker: str = Field(default=RELEASE_MARKER, min_length=1)
    verbose: bool = False

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        upper = value.strip().upper()
        if upper not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return upper


def load_settings(path: Path | None) -> HookSettings:
    """Return settings parsed from the TOML document at ``path``.

    A ``[commitguard]`` table is used when present, otherwise the top-level
    table. A missing or unspecified file yields the defaults.

    Args:
        path: Optional settings file location.

    Returns:
        HookSettings: Validated settings.

    Raises:
        ConfigurationError: If the file cannot be parsed or fails validation.
    """

    if path is None or not path.is_file():
        if path is not None:
            LOGGER.debug("Settings file %s not found; using defaults", path)
        return HookSettings()
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Unable to read settings file {path}: {exc}") from exc
    payload: Any = document.get(SETTINGS_SECTION, document)
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"Settings section '{SETTINGS_SECTION}' in {path} must be a table")
    try:
        return HookSettings.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {path}: {exc}") from exc


def resolve_settings_path(base_dir: Path, settings: Path | str | None) -> Path | None:
    """Return the settings file to use for ``base_dir``.

    An empty string (as substituted into hook scripts) means "not given", in
    which case ``<base_dir>/commitguard.toml`` is used when it exists.
    """

    if settings:
        return Path(settings).expanduser()
    candidate = base_dir / SETTINGS_FILENAME
    return candidate if candidate.is_file() else None


def read_commit_prefix(base_dir: Path) -> str:
    """Return the ticket prefix from ``commit-prefix.txt`` or :data:`PREFIX_NONE`.

    Args:
        base_dir: Directory holding the hook setup files.

    Returns:
        str: Stripped prefix value, or the sentinel when the file is absent.

    Raises:
        ConfigurationError: If the file exists but cannot be read.
    """

    prefix_file = base_dir / COMMIT_PREFIX_FILENAME
    if not prefix_file.exists():
        return PREFIX_NONE
    try:
        return prefix_file.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Unable to read commit prefix from {prefix_file}: {exc}") from exc


def prefix_enforced(prefix: str | None) -> bool:
    """Return whether ``prefix`` requires a ticket token on commit messages."""

    return bool(prefix) and prefix != PREFIX_NONE


__all__ = [
    "HookSettings",
    "load_settings",
    "prefix_enforced",
    "read_commit_prefix",
    "resolve_settings_path",
]
