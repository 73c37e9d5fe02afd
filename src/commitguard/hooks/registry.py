# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static registry mapping git hook names to their handlers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Protocol

from .handlers import check_commit_message, check_staged_changes
from .models import HookContext


class HookKind(str, Enum):
    """Git hooks installed and handled by commitguard."""

    APPLYPATCH_MSG = "applypatch-msg"
    COMMIT_MSG = "commit-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    PRE_COMMIT = "pre-commit"


class HookHandler(Protocol):
    """Callable implementing a hook; returns ``True`` to abort the git operation."""

    def __call__(self, context: HookContext, args: Sequence[str], *, hook: str) -> bool:
        """Run the hook for ``args``."""

        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class HookSpec:
    """Registry entry describing one hook."""

    kind: HookKind
    handler: HookHandler
    description: str


_REGISTRY: Final[MappingProxyType[HookKind, HookSpec]] = MappingProxyType(
    {
        HookKind.APPLYPATCH_MSG: HookSpec(
            HookKind.APPLYPATCH_MSG,
            check_commit_message,
            "Validate the message of a patch applied with git am.",
        ),
        HookKind.COMMIT_MSG: HookSpec(
            HookKind.COMMIT_MSG,
            check_commit_message,
            "Require a ticket prefix and reject dirty words in the commit message.",
        ),
        HookKind.PRE_APPLYPATCH: HookSpec(
            HookKind.PRE_APPLYPATCH,
            check_staged_changes,
            "Reject patches applied with git am that add dirty words.",
        ),
        HookKind.PRE_COMMIT: HookSpec(
            HookKind.PRE_COMMIT,
            check_staged_changes,
            "Reject staged changes that add dirty words.",
        ),
    },
)


def available_hooks() -> tuple[HookKind, ...]:
    """Return every registered hook in a stable order."""

    return tuple(_REGISTRY)


def get_hook(kind: HookKind | str) -> HookSpec:
    """Return the registry entry for ``kind``.

    Raises:
        ValueError: If ``kind`` does not name a registered hook.
    """

    return _REGISTRY[HookKind(kind)]


__all__ = ["HookHandler", "HookKind", "HookSpec", "available_hooks", "get_hook"]
