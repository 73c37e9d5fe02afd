# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for logging and console helpers."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from commitguard.logging import configure_logging, emoji, fail, ok, plain, warn


def test_configure_logging_installs_single_handler() -> None:
    logger = configure_logging("debug")
    configure_logging(logging.INFO)

    handlers = [handler for handler in logger.handlers if isinstance(handler, RichHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.INFO
    assert logger.propagate is False


def test_configure_logging_ignores_unknown_level() -> None:
    assert configure_logging("chatty").level == logging.WARNING


def test_emoji_toggle() -> None:
    assert emoji("✅", True) == "✅"
    assert emoji("✅", False) == ""


def test_console_helpers(capsys: pytest.CaptureFixture[str]) -> None:
    ok("done", use_emoji=True, use_color=False)
    warn("careful", use_emoji=False, use_color=False)
    fail("broken", use_emoji=False, use_color=False)
    plain("[maven-release-plugin] as is", use_color=False)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("✅")
    assert lines[0].endswith("done")
    assert lines[1:] == ["careful", "broken", "[maven-release-plugin] as is"]
