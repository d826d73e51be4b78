"""Public package surface for vfsbrowser.

Exports ``main`` for programmatic CLI invocation plus the dispatcher entry
points. Most implementation lives in submodules under ``vfsbrowser``.
"""

from __future__ import annotations

from .actions import ActionRegistry, default_action_registry, define_file_action
from .dispatcher import Dispatcher, FileActionData
from .runtime import BrowserState


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "ActionRegistry",
    "BrowserState",
    "Dispatcher",
    "FileActionData",
    "default_action_registry",
    "define_file_action",
    "main",
]
