# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across commitguard modules."""

from __future__ import annotations

from typing import Final

REGEX_PREFIX: Final[str] = "REGEX:"
# word boundary or underscore on both sides, non-capturing
BOUNDARY_TEMPLATE: Final[str] = r"(?:\b|_){body}(?:\b|_)"
COMMENT_PREFIX: Final[str] = "#"

PREFIX_NONE: Final[str] = "NONE"
RELEASE_MARKER: Final[str] = "[maven-release-plugin]"

USER_SETUP_DIR: Final[str] = ".gitsetup"
BLACKLIST_FILENAME: Final[str] = "blacklist-words.txt"
WHITELIST_FILENAME: Final[str] = "whitelist-words.txt"
COMMIT_PREFIX_FILENAME: Final[str] = "commit-prefix.txt"
SETTINGS_FILENAME: Final[str] = "commitguard.toml"

DIFF_FILE_HEADER: Final[str] = "+++ b/"
UNKNOWN_FILE: Final[str] = "<unknown file>"

HOOKS_DIR_NAME: Final[str] = "hooks"
HOOK_MARKER: Final[str] = "# commitguard-managed hook"

# git bash does not recognise negative exit codes
ERROR_CODE: Final[int] = 1
