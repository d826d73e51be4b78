"""State-mutation commands and the pure reducer that applies them.

Action handlers never touch state directly. They emit commands, and
:func:`reduce` turns ``(state, command)`` into the next ``BrowserState``.
Structural commands also reconcile selection, cut staging, the open folder
and the context menu with the new node store so no stale id survives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace

from ..file_tree_model import NodeStore, is_selectable
from .cut_state import EMPTY_CUT_STATE, CutState
from .selection import SelectionState, range_between
from .state import BrowserState, ContextMenu

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateFolder:
    parent_id: str
    name: str


@dataclass(frozen=True)
class DeleteNodes:
    node_ids: tuple[str, ...]
    cascade: bool = False


@dataclass(frozen=True)
class MoveNodes:
    node_ids: tuple[str, ...]
    source_id: str
    destination_id: str


@dataclass(frozen=True)
class SetCurrentFolder:
    folder_id: str


@dataclass(frozen=True)
class ToggleSelection:
    node_id: str
    exclusive: bool = False


@dataclass(frozen=True)
class SelectFiles:
    node_ids: tuple[str, ...]
    reset: bool = False


@dataclass(frozen=True)
class SelectRange:
    """Select display indices ``start..end`` inclusive, replacing the selection."""

    start: int
    end: int


@dataclass(frozen=True)
class ClearSelection:
    pass


@dataclass(frozen=True)
class SetLastClick:
    index: int
    node_id: str


@dataclass(frozen=True)
class SetCutState:
    source_id: str | None
    node_ids: tuple[str, ...]


@dataclass(frozen=True)
class ShowContextMenu:
    trigger_file_id: str | None
    mouse_x: int
    mouse_y: int


@dataclass(frozen=True)
class HideContextMenu:
    pass


@dataclass(frozen=True)
class SetSelectionMode:
    enabled: bool


Command = (
    CreateFolder
    | DeleteNodes
    | MoveNodes
    | SetCurrentFolder
    | ToggleSelection
    | SelectFiles
    | SelectRange
    | ClearSelection
    | SetLastClick
    | SetCutState
    | ShowContextMenu
    | HideContextMenu
    | SetSelectionMode
)

SELECTION_COMMANDS = (ToggleSelection, SelectFiles, SelectRange, ClearSelection)


def _surviving_folder(old_store: NodeStore, new_store: NodeStore, folder_id: str) -> str:
    """Return ``folder_id`` or its nearest ancestor still present as a folder."""
    for node in reversed(old_store.folder_chain(folder_id)):
        candidate = new_store.get(node.id)
        if candidate is not None and candidate.is_dir:
            return candidate.id
    return new_store.root_id


def _with_store(state: BrowserState, store: NodeStore) -> BrowserState:
    if store is state.store:
        return state
    current_folder_id = _surviving_folder(state.store, store, state.current_folder_id)
    context_menu = state.context_menu
    if context_menu is not None and context_menu.trigger_file_id is not None:
        if context_menu.trigger_file_id not in store:
            context_menu = None
    return replace(
        state,
        store=store,
        current_folder_id=current_folder_id,
        selection=state.selection.restricted_to(store.nodes),
        cut_state=state.cut_state.restricted_to(store.nodes),
        context_menu=context_menu,
    )


def _selectable_ids(state: BrowserState, node_ids: Iterable[str]) -> list[str]:
    return [node_id for node_id in node_ids if is_selectable(state.store.get(node_id))]


def _reduce_selection(state: BrowserState, command: Command) -> BrowserState:
    selection = state.selection
    if isinstance(command, ToggleSelection):
        if command.node_id not in selection and not _selectable_ids(state, [command.node_id]):
            return state
        selection = selection.toggle(command.node_id, exclusive=command.exclusive)
    elif isinstance(command, SelectFiles):
        selection = selection.select(_selectable_ids(state, command.node_ids), reset=command.reset)
    elif isinstance(command, SelectRange):
        in_range = range_between(state.display_ids, command.start, command.end)
        selection = selection.select(_selectable_ids(state, in_range), reset=True)
    else:
        selection = selection.clear()
    if selection == state.selection:
        return state
    return replace(state, selection=selection)


def reduce(state: BrowserState, command: Command) -> BrowserState:
    """Apply one command and return the next snapshot.

    ``state`` is never modified. Unknown command types raise ``TypeError``.
    """
    if isinstance(command, CreateFolder):
        store, _new_id = state.store.create_folder(command.parent_id, command.name)
        return _with_store(state, store)
    if isinstance(command, DeleteNodes):
        return _with_store(state, state.store.delete_nodes(command.node_ids, cascade=command.cascade))
    if isinstance(command, MoveNodes):
        store = state.store.move_nodes(command.node_ids, command.source_id, command.destination_id)
        return _with_store(state, store)
    if isinstance(command, SetCurrentFolder):
        folder = state.store.require_folder(command.folder_id)
        if folder.id == state.current_folder_id:
            return state
        return replace(
            state,
            current_folder_id=folder.id,
            selection=SelectionState(),
            context_menu=None,
        )
    if isinstance(command, SELECTION_COMMANDS):
        if state.disable_selection:
            logger.debug("selection disabled; ignoring %s", type(command).__name__)
            return state
        return _reduce_selection(state, command)
    if isinstance(command, SetLastClick):
        return replace(state, selection=state.selection.with_last_click(command.index, command.node_id))
    if isinstance(command, SetCutState):
        if command.source_id is None or not command.node_ids:
            return replace(state, cut_state=EMPTY_CUT_STATE)
        source = state.store.require_folder(command.source_id)
        return replace(state, cut_state=CutState(source_id=source.id, node_ids=tuple(command.node_ids)))
    if isinstance(command, ShowContextMenu):
        menu = ContextMenu(command.trigger_file_id, command.mouse_x, command.mouse_y)
        return replace(state, context_menu=menu)
    if isinstance(command, HideContextMenu):
        if state.context_menu is None:
            return state
        return replace(state, context_menu=None)
    if isinstance(command, SetSelectionMode):
        return replace(state, selection_mode=command.enabled)
    raise TypeError(f"not a command: {command!r}")


__all__ = [
    "CreateFolder",
    "DeleteNodes",
    "MoveNodes",
    "SetCurrentFolder",
    "ToggleSelection",
    "SelectFiles",
    "SelectRange",
    "ClearSelection",
    "SetLastClick",
    "SetCutState",
    "ShowContextMenu",
    "HideContextMenu",
    "SetSelectionMode",
    "Command",
    "reduce",
]
