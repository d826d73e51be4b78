"""Action catalog and registry primitives.

``default_action_registry()`` returns every built-in action. Front ends add
their own definitions with ``ActionRegistry.extended``.
"""

from __future__ import annotations

from .payloads import (
    CLICK_DOUBLE,
    CLICK_SINGLE,
    ChangeSelectionPayload,
    CreateFolderPayload,
    MouseClickFilePayload,
    MoveFilesPayload,
    OpenFileContextMenuPayload,
    OpenFilesPayload,
    coerce_payload,
)
from .registry import (
    ActionButton,
    ActionContext,
    ActionDefinition,
    ActionRegistry,
    ActionRequest,
    Effect,
    define_file_action,
)
from .essential import CHANGE_SELECTION_ID, ESSENTIAL_ACTIONS, MOVE_FILES_ID, OPEN_FILES_ID
from .extra import EXTRA_ACTIONS

DEFAULT_ACTIONS = ESSENTIAL_ACTIONS + EXTRA_ACTIONS


def default_action_registry() -> ActionRegistry:
    return ActionRegistry(DEFAULT_ACTIONS)


__all__ = [
    "CLICK_SINGLE",
    "CLICK_DOUBLE",
    "MouseClickFilePayload",
    "OpenFilesPayload",
    "MoveFilesPayload",
    "ChangeSelectionPayload",
    "OpenFileContextMenuPayload",
    "CreateFolderPayload",
    "coerce_payload",
    "ActionButton",
    "ActionContext",
    "ActionDefinition",
    "ActionRegistry",
    "ActionRequest",
    "Effect",
    "define_file_action",
    "OPEN_FILES_ID",
    "MOVE_FILES_ID",
    "CHANGE_SELECTION_ID",
    "ESSENTIAL_ACTIONS",
    "EXTRA_ACTIONS",
    "DEFAULT_ACTIONS",
    "default_action_registry",
]
