# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Layered blacklist/whitelist loading for dirty word checks.

Blacklists are merged from three places, in order:

1. ``~/.gitsetup/blacklist-words.txt`` (per user)
2. the default list bundled with the package
3. ``<base_dir>/blacklist-words.txt`` (per repository)

Entries listed in ``<base_dir>/whitelist-words.txt`` are then removed. The
per-user and bundled lists are optional: when absent or unreadable they
contribute nothing. The repository lists may be absent, but an existing file
that cannot be read aborts the hook.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from .constants import BLACKLIST_FILENAME, COMMENT_PREFIX, USER_SETUP_DIR, WHITELIST_FILENAME
from .errors import InputUnavailableError, MissingResourceError
from .patterns import compile_rules

LOGGER = logging.getLogger(__name__)

DEFAULT_LIST_PACKAGE = "commitguard.data"


def iter_entries(lines: Iterable[str]) -> Iterator[str]:
    """Yield list entries from ``lines``, skipping blanks and ``#`` comments.

    Entries are returned verbatim apart from their line separator.
    """

    for line in lines:
        entry = line.rstrip("\r\n")
        if not entry or entry.startswith(COMMENT_PREFIX):
            continue
        yield entry


def read_entries(path: Path) -> set[str]:
    """Return the entries of the required list file at ``path``.

    Args:
        path: Word list location; absence yields an empty set.

    Returns:
        set[str]: Entries read from the file.

    Raises:
        InputUnavailableError: If the file exists but cannot be read.
    """

    if not path.exists():
        return set()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputUnavailableError(f"Unable to read word list {path}: {exc}") from exc
    return set(iter_entries(text.splitlines()))


def _read_optional(source: Path | Traversable) -> set[str]:
    if not source.is_file():
        raise MissingResourceError(source)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MissingResourceError(source, str(exc)) from exc
    return set(iter_entries(text.splitlines()))


def default_blacklist() -> Traversable:
    """Return the bundled default blacklist resource."""

    return resources.files(DEFAULT_LIST_PACKAGE).joinpath(BLACKLIST_FILENAME)


def user_blacklist(home_dir: Path) -> Path:
    """Return the per-user blacklist location under ``home_dir``."""

    return home_dir / USER_SETUP_DIR / BLACKLIST_FILENAME


def load_words(
    home_dir: Path | None,
    base_dir: Path,
    *,
    default_source: Path | Traversable | None = None,
) -> set[str]:
    """Return the merged set of dirty word entries.

    Args:
        home_dir: User home directory, or ``None`` to skip the per-user list.
        base_dir: Directory holding the repository's hook setup files.
        default_source: Override for the bundled default list.

    Returns:
        set[str]: ``(user ∪ default ∪ local) - whitelist`` as raw entry strings.

    Raises:
        InputUnavailableError: If an existing repository list cannot be read.
    """

    words: set[str] = set()
    optional_sources: list[Path | Traversable] = []
    if home_dir is not None:
        optional_sources.append(user_blacklist(home_dir))
    optional_sources.append(default_source if default_source is not None else default_blacklist())

    for source in optional_sources:
        try:
            entries = _read_optional(source)
        except MissingResourceError as exc:
            LOGGER.debug("%s", exc)
            continue
        LOGGER.debug("Loaded %d blacklist entries from %s", len(entries), source)
        words |= entries

    local = base_dir / BLACKLIST_FILENAME
    if local.exists():
        LOGGER.debug("Loading local blacklist from %s", local)
        words |= read_entries(local)

    whitelist = base_dir / WHITELIST_FILENAME
    if words and whitelist.exists():
        LOGGER.debug("Loading local whitelist from %s", whitelist)
        words -= read_entries(whitelist)

    LOGGER.debug("Dirty words are: %s", sorted(words))
    return words


def load_dirty_words(
    home_dir: Path | None,
    base_dir: Path,
    *,
    default_source: Path | Traversable | None = None,
) -> dict[str, re.Pattern[str]]:
    """Return compiled rules for the merged word lists.

    Raises:
        ConfigurationError: If any regex entry fails to compile.
        InputUnavailableError: If an existing repository list cannot be read.
    """

    return compile_rules(load_words(home_dir, base_dir, default_source=default_source))


__all__ = [
    "default_blacklist",
    "iter_entries",
    "load_dirty_words",
    "load_words",
    "read_entries",
    "user_blacklist",
]
