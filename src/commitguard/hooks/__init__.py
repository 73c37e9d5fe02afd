# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook registration, execution and installation services."""

from __future__ import annotations

from .installer import clean_hooks, install_hooks
from .models import CleanResult, HookContext, InstallResult
from .registry import HookKind, HookSpec, available_hooks, get_hook
from .runner import run_hook

HOOK_NAMES: tuple[str, ...] = tuple(kind.value for kind in available_hooks())

__all__ = [
    "HOOK_NAMES",
    "CleanResult",
    "HookContext",
    "HookKind",
    "HookSpec",
    "InstallResult",
    "available_hooks",
    "clean_hooks",
    "get_hook",
    "install_hooks",
    "run_hook",
]
