# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version-control access used by the hooks."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Sequence
from functools import cached_property
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final, Protocol, runtime_checkable

from .constants import DIFF_FILE_HEADER
from .errors import CommitGuardError, InputUnavailableError
from .process import run_command

LOGGER = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], CompletedProcess[str]]

GIT_EXECUTABLE: Final[str] = "git"
_OLD_FILE_HEADER: Final[str] = "--- "
_NEW_FILE_HEADER: Final[str] = "+++ "
_ADDED_LINE: Final[str] = "+"
_NEW_FILE_PREFIX: Final[str] = "b/"
_QUOTE: Final[str] = '"'
_OCTAL_ESCAPE: Final[re.Pattern[str]] = re.compile(r"[0-7]{3}")
_C_ESCAPES: Final[dict[str, int]] = {
    "a": 0x07,
    "b": 0x08,
    "t": 0x09,
    "n": 0x0A,
    "v": 0x0B,
    "f": 0x0C,
    "r": 0x0D,
    '"': 0x22,
    "\\": 0x5C,
}
_CONFIG_MISSING_STATUS: Final[int] = 1


@runtime_checkable
class RepositoryHandler(Protocol):
    """Capabilities the hooks need from a version-control backend."""

    @property
    def base_dir(self) -> Path:
        """Return the directory holding the hook setup files."""

        raise NotImplementedError

    @property
    def metadata_dir(self) -> Path:
        """Return the repository metadata directory (``.git``)."""

        raise NotImplementedError

    def get_file_as_string(self, filename: str | Path) -> str:
        """Return the text of ``filename``, resolving it against the work tree if needed."""

        raise NotImplementedError

    def get_diff(self) -> str:
        """Return the staged diff restricted to added lines and ``+++ b/`` headers."""

        raise NotImplementedError

    def get_config_string(self, section: str, subsection: str | None, key: str) -> str | None:
        """Return a configuration value or ``None`` when unset."""

        raise NotImplementedError

    def set_config_string(self, section: str, subsection: str | None, key: str, value: str) -> None:
        """Persist a configuration value."""

        raise NotImplementedError


def config_key(section: str, subsection: str | None, key: str) -> str:
    """Return the dotted git configuration name for the given parts."""

    if subsection:
        return f"{section}.{subsection}.{key}"
    return f"{section}.{key}"


def unquote_path(quoted: str) -> str:
    """Decode a path quoted by git in C style (``"b/tab\\there"``).

    Octal escapes are raw bytes of the UTF-8 encoded name. Text that is not
    wrapped in double quotes is returned unchanged.
    """

    if len(quoted) < 2 or not (quoted.startswith(_QUOTE) and quoted.endswith(_QUOTE)):
        return quoted
    body = quoted[1:-1]
    decoded = bytearray()
    index = 0
    while index < len(body):
        char = body[index]
        if char != "\\":
            decoded += char.encode("utf-8")
            index += 1
            continue
        escape = body[index + 1 : index + 2]
        octal = body[index + 1 : index + 4]
        if escape in _C_ESCAPES:
            decoded.append(_C_ESCAPES[escape])
            index += 2
        elif _OCTAL_ESCAPE.fullmatch(octal):
            decoded.append(int(octal, 8))
            index += 4
        else:
            decoded += b"\\"
            index += 1
    return decoded.decode("utf-8", errors="replace")


def new_file_header(line: str) -> str | None:
    """Return ``line`` normalised to ``+++ b/<path>``, or ``None`` for other targets.

    Git appends a tab to names containing spaces and C-quotes names with
    special characters; both forms are reduced to the plain path.
    """

    target = line[len(_NEW_FILE_HEADER) :].rstrip("\t")
    target = unquote_path(target)
    if not target.startswith(_NEW_FILE_PREFIX):
        return None
    return f"{DIFF_FILE_HEADER}{target[len(_NEW_FILE_PREFIX) :]}"


def iter_added_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield only ``+++ b/`` file headers and added lines from a unified diff.

    Hunk headers, context lines, removed lines and the git extended headers
    are dropped. A ``+++`` line only counts as a file header directly after a
    ``---`` line; elsewhere it is an added line whose text starts with ``++``.
    Headers are yielded through :func:`new_file_header`.
    """

    previous = ""
    for line in lines:
        if line.startswith(_NEW_FILE_HEADER) and previous.startswith(_OLD_FILE_HEADER):
            header = new_file_header(line)
            if header is not None:
                yield header
        elif line.startswith(_ADDED_LINE):
            yield line
        previous = line


def filter_added_lines(diff: str) -> str:
    """Return ``diff`` reduced by :func:`iter_added_lines`, newline terminated."""

    return "".join(f"{line}\n" for line in iter_added_lines(diff.splitlines()))


def _default_runner(cmd: Sequence[str], cwd: Path) -> CompletedProcess[str]:
    return run_command(cmd, cwd=cwd, check=False)


class GitRepository:
    """:class:`RepositoryHandler` backed by the ``git`` executable."""

    def __init__(
        self,
        base_dir: Path,
        *,
        cwd: Path | None = None,
        runner: GitRunner | None = None,
    ) -> None:
        """Bind the repository containing ``cwd`` (default: the current directory).

        Args:
            base_dir: Directory holding the hook setup files.
            cwd: Directory inside the work tree used to locate the repository.
            runner: Optional command runner, mainly for tests.
        """

        self._base_dir = base_dir.expanduser().resolve()
        self._cwd = (cwd or Path.cwd()).resolve()
        self._runner = runner or _default_runner

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @cached_property
    def work_tree(self) -> Path:
        """Return the top-level directory of the work tree."""

        return Path(self._rev_parse("--show-toplevel"))

    @cached_property
    def metadata_dir(self) -> Path:
        return Path(self._rev_parse("--absolute-git-dir"))

    def get_file_as_string(self, filename: str | Path) -> str:
        path = Path(filename)
        if not path.exists():
            LOGGER.debug("File %s does not exist - checking relative to the work tree", filename)
            path = self.work_tree / filename
        LOGGER.debug("Reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise InputUnavailableError(f"Unable to read {path}: {exc}") from exc

    def get_diff(self) -> str:
        LOGGER.debug("Scanning the staged changes for added lines")
        completed = self._git(
            "-c",
            "core.quotepath=false",
            "diff",
            "--cached",
            "--no-color",
            "--no-ext-diff",
            "--unified=0",
        )
        if completed.returncode != 0:
            raise InputUnavailableError(f"Unable to obtain the staged diff: {completed.stderr.strip()}")
        return filter_added_lines(completed.stdout)

    def get_config_string(self, section: str, subsection: str | None, key: str) -> str | None:
        name = config_key(section, subsection, key)
        completed = self._git("config", "--get", name)
        if completed.returncode == _CONFIG_MISSING_STATUS:
            value = None
        elif completed.returncode != 0:
            raise CommitGuardError(f"Unable to read git config '{name}': {completed.stderr.strip()}")
        else:
            value = completed.stdout.rstrip("\n")
        LOGGER.debug("Value for %s: %s", name, value)
        return value

    def set_config_string(self, section: str, subsection: str | None, key: str, value: str) -> None:
        name = config_key(section, subsection, key)
        completed = self._git("config", name, value)
        if completed.returncode != 0:
            raise CommitGuardError(f"Unable to set git config '{name}': {completed.stderr.strip()}")
        LOGGER.debug("Value for %s set to: %s", name, value)

    def _rev_parse(self, flag: str) -> str:
        completed = self._git("rev-parse", flag)
        if completed.returncode != 0:
            raise InputUnavailableError(f"Not a git repository: {self._cwd}")
        return completed.stdout.strip()

    def _git(self, *args: str) -> CompletedProcess[str]:
        try:
            return self._runner([GIT_EXECUTABLE, *args], self._cwd)
        except FileNotFoundError as exc:
            raise InputUnavailableError(str(exc)) from exc


__all__ = [
    "GitRepository",
    "GitRunner",
    "RepositoryHandler",
    "config_key",
    "filter_added_lines",
    "iter_added_lines",
    "new_file_header",
    "unquote_path",
]
