# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook execution entry point."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .models import HookContext
from .registry import HookKind, get_hook

LOGGER = logging.getLogger(__name__)


def run_hook(kind: HookKind | str, context: HookContext, args: Sequence[str] = ()) -> bool:
    """Run the handler registered for ``kind``.

    Args:
        kind: Hook name or :class:`HookKind`.
        context: Hook context loaded for this invocation.
        args: Arguments git passed to the hook script.

    Returns:
        bool: ``True`` when the git operation must be aborted.
    """

    spec = get_hook(kind)
    LOGGER.debug("Hook %s being called with arguments: %s", spec.kind.value, list(args))
    return spec.handler(context, tuple(args), hook=spec.kind.value)


__all__ = ["run_hook"]
