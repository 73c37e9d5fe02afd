# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from .. import __version__
from ..logging import configure_logging
from .check import check_dirty_words_command
from .hooks import clean_hooks_command, install_hooks_command
from .run import run_hook_command
from .typer_ext import create_typer

app = create_typer(
    name="commitguard",
    help="Git hooks rejecting dirty words and commit messages without a ticket number.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitguard {__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    log_level: Annotated[str, typer.Option("--log-level", help="Log level for diagnostics.")] = "WARNING",
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Shortcut for --log-level DEBUG.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Configure logging before any command runs."""

    configure_logging(logging.DEBUG if verbose else log_level)


app.command("run-hook")(run_hook_command)
app.command("install-hooks")(install_hooks_command)
app.command("clean-hooks")(clean_hooks_command)
app.command("check-dirty-words")(check_dirty_words_command)


def main() -> None:
    """Run the ``commitguard`` command line application."""

    app()


__all__ = ["app", "main"]
