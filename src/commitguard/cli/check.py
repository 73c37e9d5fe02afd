# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command for checking arbitrary text against the dirty word lists."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from ..constants import ERROR_CODE
from ..errors import CommitGuardError
from ..reporting import dirty_word_lines
from ..scanner import DirtyWordScanner, ScanResult
from ..wordlists import load_dirty_words
from .shared import BASE_DIR_OPTION, DEFAULT_BASE_DIR, EMOJI_OPTION, build_cli_logger

TEXT_OPTION = Annotated[
    str | None,
    typer.Option("--text", help="Text content to scan directly."),
]
MESSAGE_FILE_ARGUMENT = Annotated[
    Path | None,
    typer.Argument(metavar="[FILE]", help="File to scan, such as a commit message."),
]


@dataclass(slots=True)
class CheckCLIOptions:
    """Normalised CLI inputs for the dirty word scanner."""

    base_dir: Path
    message_file: Path | None
    text: str | None


def _read_input(options: CheckCLIOptions) -> str:
    if options.text is not None:
        return options.text
    if options.message_file is None or not options.message_file.is_file():
        raise typer.BadParameter("File not found or unreadable")
    try:
        return options.message_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {options.message_file}: {exc}") from exc


def check_dirty_words_command(
    message_file: MESSAGE_FILE_ARGUMENT = None,
    text: TEXT_OPTION = None,
    base_dir: BASE_DIR_OPTION = DEFAULT_BASE_DIR,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Scan a file or ``--text`` for dirty words using the merged word lists."""

    if text is None and message_file is None:
        raise typer.BadParameter("Provide either a file or --text.")
    options = CheckCLIOptions(
        base_dir=base_dir.expanduser().resolve(),
        message_file=message_file.expanduser().resolve() if message_file else None,
        text=text,
    )
    logger = build_cli_logger(emoji=emoji)
    content = _read_input(options)

    try:
        scanner = DirtyWordScanner(load_dirty_words(Path.home(), options.base_dir))
    except CommitGuardError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=ERROR_CODE) from exc

    result = ScanResult()
    result.register(scanner.scan(content))
    if not result.dirty:
        logger.ok("No dirty words found")
        raise typer.Exit(code=0)

    logger.fail("Dirty words detected:")
    for line in dirty_word_lines(result):
        logger.echo(line)
    raise typer.Exit(code=ERROR_CODE)


__all__ = ["CheckCLIOptions", "check_dirty_words_command"]
