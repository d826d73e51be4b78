"""Core browsing actions: clicks, opening, moving and the context menu."""

from __future__ import annotations

import logging

from ..file_tree_model import is_folder, is_openable, is_selectable
from ..runtime.commands import (
    ClearSelection,
    MoveNodes,
    SelectFiles,
    SelectRange,
    SetCurrentFolder,
    SetLastClick,
    ShowContextMenu,
    ToggleSelection,
)
from .payloads import (
    CLICK_DOUBLE,
    ChangeSelectionPayload,
    MouseClickFilePayload,
    MoveFilesPayload,
    OpenFileContextMenuPayload,
    OpenFilesPayload,
)
from .registry import ActionButton, ActionContext, define_file_action

logger = logging.getLogger(__name__)

OPEN_FILES_ID = "open_files"
MOVE_FILES_ID = "move_files"
CHANGE_SELECTION_ID = "change_selection"


def _mouse_click_file(ctx: ActionContext) -> None:
    """Translate a single or double click into selection or open requests.

    Double clicks only ever open. Single clicks on selectable nodes toggle
    (ctrl or selection mode), extend a range (shift, falling back to toggle
    without a previous click), or select exclusively. Clicks on anything else
    clear the selection unless ctrl is held. The clicked position is recorded
    for later range clicks in every single-click branch except a range
    extension.
    """
    payload: MouseClickFilePayload = ctx.payload
    state = ctx.state
    file = state.store.get(payload.file_id)
    if file is None:
        logger.debug("click on unknown node %s ignored", payload.file_id)
        return

    if payload.click_type == CLICK_DOUBLE:
        if is_openable(file):
            ctx.request(OPEN_FILES_ID, OpenFilesPayload(target_file_id=file.id, file_ids=(file.id,)))
        return

    index = payload.file_display_index
    if is_selectable(file) and not state.disable_selection:
        if payload.ctrl_key or state.selection_mode:
            ctx.apply(ToggleSelection(file.id, exclusive=False))
            ctx.apply(SetLastClick(index, file.id))
        elif payload.shift_key:
            last_click = state.selection.last_click
            if last_click is not None:
                ctx.apply(SelectRange(last_click.index, index))
            else:
                ctx.apply(ToggleSelection(file.id, exclusive=False))
                ctx.apply(SetLastClick(index, file.id))
        else:
            ctx.apply(ToggleSelection(file.id, exclusive=True))
            ctx.apply(SetLastClick(index, file.id))
        return

    if not payload.ctrl_key and not state.disable_selection:
        ctx.apply(ClearSelection())
    ctx.apply(SetLastClick(index, file.id))


def _move_files(ctx: ActionContext) -> None:
    payload: MoveFilesPayload = ctx.payload
    if payload.source_id == payload.destination_id:
        logger.debug("move into its own source folder %s ignored", payload.source_id)
        return
    ctx.apply(MoveNodes(payload.file_ids, payload.source_id, payload.destination_id))


def _open_files(ctx: ActionContext) -> None:
    payload: OpenFilesPayload = ctx.payload
    target = ctx.state.store.get(payload.file_to_open)
    # Opening plain files is left to file-action listeners.
    if is_folder(target) and is_openable(target):
        ctx.apply(SetCurrentFolder(target.id))


def _open_parent_folder(ctx: ActionContext) -> None:
    state = ctx.state
    parent = state.parent_folder
    if is_folder(parent) and is_openable(parent):
        ctx.request(OPEN_FILES_ID, OpenFilesPayload(target_file_id=parent.id, file_ids=(parent.id,)))
    elif not state.force_enable_open_parent:
        logger.warning(
            "Open parent folder was requested even though the parent of %s is not openable. "
            "This indicates a bug in the presentation layer.",
            state.current_folder_id,
        )


def _open_file_context_menu(ctx: ActionContext) -> None:
    payload: OpenFileContextMenuPayload = ctx.payload
    state = ctx.state
    trigger = state.store.get(payload.trigger_file_id)
    if trigger is not None and not state.is_selected(trigger.id):
        # Right click outside the selection moves the selection to the trigger.
        if is_selectable(trigger):
            ctx.apply(SelectFiles((trigger.id,), reset=True))
        else:
            ctx.apply(ClearSelection())
    ctx.apply(ShowContextMenu(payload.trigger_file_id, payload.client_x - 2, payload.client_y - 4))


MOUSE_CLICK_FILE = define_file_action(
    "mouse_click_file",
    _mouse_click_file,
    payload_type=MouseClickFilePayload,
)
MOVE_FILES = define_file_action(MOVE_FILES_ID, _move_files, payload_type=MoveFilesPayload)
CHANGE_SELECTION = define_file_action(CHANGE_SELECTION_ID, payload_type=ChangeSelectionPayload)
OPEN_FILES = define_file_action(OPEN_FILES_ID, _open_files, payload_type=OpenFilesPayload)
OPEN_PARENT_FOLDER = define_file_action(
    "open_parent_folder",
    _open_parent_folder,
    hotkeys=("backspace",),
    button=ActionButton(name="Go up a directory", toolbar=True, icon="open-parent-folder", icon_only=True),
)
OPEN_FILE_CONTEXT_MENU = define_file_action(
    "open_file_context_menu",
    _open_file_context_menu,
    payload_type=OpenFileContextMenuPayload,
)

ESSENTIAL_ACTIONS = (
    MOUSE_CLICK_FILE,
    MOVE_FILES,
    CHANGE_SELECTION,
    OPEN_FILES,
    OPEN_PARENT_FOLDER,
    OPEN_FILE_CONTEXT_MENU,
)


__all__ = [
    "OPEN_FILES_ID",
    "MOVE_FILES_ID",
    "CHANGE_SELECTION_ID",
    "MOUSE_CLICK_FILE",
    "MOVE_FILES",
    "CHANGE_SELECTION",
    "OPEN_FILES",
    "OPEN_PARENT_FOLDER",
    "OPEN_FILE_CONTEXT_MENU",
    "ESSENTIAL_ACTIONS",
]
