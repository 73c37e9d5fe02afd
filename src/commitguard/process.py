# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are argument lists run without a shell.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
    timeout: float | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` capturing text output after normalising the executable path.

    Args:
        args: Command and arguments to execute.
        cwd: Optional working directory.
        check: Raise :class:`SubprocessExecutionError` on a non-zero exit status.
        timeout: Optional timeout in seconds.

    Returns:
        CompletedProcess[str]: Completed process with captured stdout and stderr.

    Raises:
        SubprocessExecutionError: When ``check`` is true and the command fails.
        FileNotFoundError: When the executable cannot be located.
    """

    normalized = _normalize_args(args)
    try:
        # Bandit: argument lists are passed directly without shell expansion.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired:
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=124,
            stdout="",
            stderr=timeout_msg,
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(
            normalized,
            completed.returncode,
            completed.stdout,
            completed.stderr,
        )

    return completed


__all__ = ["SubprocessExecutionError", "run_command"]
