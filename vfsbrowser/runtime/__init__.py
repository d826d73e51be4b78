"""Browser runtime state: selection, cut staging, combined snapshot and reducer.

Everything here is immutable; ``commands.reduce`` is the only way to derive
a new ``BrowserState`` from an old one.
"""

from __future__ import annotations

from .selection import LastClick, SelectionState, range_between
from .cut_state import EMPTY_CUT_STATE, CutState
from .state import BrowserState, ContextMenu
from .commands import (
    ClearSelection,
    Command,
    CreateFolder,
    DeleteNodes,
    HideContextMenu,
    MoveNodes,
    SelectFiles,
    SelectRange,
    SetCurrentFolder,
    SetCutState,
    SetLastClick,
    SetSelectionMode,
    ShowContextMenu,
    ToggleSelection,
    reduce,
)

__all__ = [
    "LastClick",
    "SelectionState",
    "range_between",
    "EMPTY_CUT_STATE",
    "CutState",
    "BrowserState",
    "ContextMenu",
    "ClearSelection",
    "Command",
    "CreateFolder",
    "DeleteNodes",
    "HideContextMenu",
    "MoveNodes",
    "SelectFiles",
    "SelectRange",
    "SetCurrentFolder",
    "SetCutState",
    "SetLastClick",
    "SetSelectionMode",
    "ShowContextMenu",
    "ToggleSelection",
    "reduce",
]
