"""Error taxonomy for the file-browser core.

Configuration errors (unknown actions, bad parents, malformed payloads or file
maps) are raised immediately. Guarded no-ops are not errors and never reach
this module.
"""

from __future__ import annotations


class VfsBrowserError(Exception):
    """Base class for every error raised by ``vfsbrowser``."""


class UnknownAction(VfsBrowserError, LookupError):
    """Raised when an action id is not present in the registry."""

    def __init__(self, action_id: str) -> None:
        super().__init__(f"unknown action: {action_id!r}")
        self.action_id = action_id


class InvalidParent(VfsBrowserError, ValueError):
    """Raised when an id expected to name a folder does not resolve to one."""

    def __init__(self, node_id: str | None) -> None:
        super().__init__(f"not an existing folder: {node_id!r}")
        self.node_id = node_id


class PayloadError(VfsBrowserError, TypeError):
    """Raised when a payload cannot be coerced into an action's payload type."""


class FileMapError(VfsBrowserError, ValueError):
    """Raised when a serialized file map is malformed or inconsistent."""


class DispatchError(VfsBrowserError, RuntimeError):
    """Raised on dispatcher misuse, e.g. re-entrant top-level dispatch."""


class IntegrityError(VfsBrowserError, AssertionError):
    """Raised when a node store violates referential integrity."""


__all__ = [
    "VfsBrowserError",
    "UnknownAction",
    "InvalidParent",
    "PayloadError",
    "FileMapError",
    "DispatchError",
    "IntegrityError",
]
