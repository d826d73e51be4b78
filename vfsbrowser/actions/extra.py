"""Toolbar actions: folder creation, clipboard-style cut/paste, delete and selection helpers."""

from __future__ import annotations

import logging

from ..runtime.commands import (
    ClearSelection,
    CreateFolder,
    DeleteNodes,
    HideContextMenu,
    SelectFiles,
    SetCutState,
    SetSelectionMode,
)
from .essential import MOVE_FILES_ID
from .payloads import CreateFolderPayload, MoveFilesPayload
from .registry import ActionButton, ActionContext, define_file_action

logger = logging.getLogger(__name__)


def _create_folder(ctx: ActionContext) -> None:
    payload: CreateFolderPayload = ctx.payload
    name = payload.name.strip()
    if not name:
        logger.debug("create_folder without a name ignored")
        return
    ctx.apply(CreateFolder(ctx.state.current_folder_id, name))


def _delete_files(ctx: ActionContext) -> None:
    ctx.apply(DeleteNodes(tuple(node.id for node in ctx.selected_files), cascade=True))


def _cut_files(ctx: ActionContext) -> None:
    ctx.apply(SetCutState(ctx.state.current_folder_id, tuple(node.id for node in ctx.selected_files)))


def _paste_files(ctx: ActionContext) -> None:
    """Move staged nodes into the open folder, then empty the staging record.

    Nothing happens when nothing is staged or when the open folder is the
    staged source; staging is left untouched in both cases.
    """
    state = ctx.state
    cut_state = state.cut_state
    if not cut_state.is_staged:
        return
    target_id = state.current_folder_id
    if target_id == cut_state.source_id:
        return
    assert cut_state.source_id is not None
    ctx.request(
        MOVE_FILES_ID,
        MoveFilesPayload(file_ids=cut_state.node_ids, source_id=cut_state.source_id, destination_id=target_id),
    )
    ctx.apply(SetCutState(None, ()))


def _select_all_files(ctx: ActionContext) -> None:
    ctx.apply(SelectFiles(ctx.state.display_ids, reset=True))


def _clear_selection(ctx: ActionContext) -> None:
    ctx.apply(ClearSelection())
    ctx.apply(HideContextMenu())


def _toggle_selection_mode(ctx: ActionContext) -> None:
    ctx.apply(SetSelectionMode(not ctx.state.selection_mode))


CREATE_FOLDER = define_file_action(
    "create_folder",
    _create_folder,
    payload_type=CreateFolderPayload,
    button=ActionButton(name="New folder", toolbar=True, tooltip="New folder", icon="folder-create", group="Add"),
)
UPLOAD_FILES = define_file_action(
    "upload_files",
    button=ActionButton(name="Upload files", toolbar=True, tooltip="Upload files", icon="upload", group="Add"),
)
DOWNLOAD_FILES = define_file_action(
    "download_files",
    requires_selection=True,
    file_filter=lambda node: not node.is_dir,
    button=ActionButton(name="Download", toolbar=True, context_menu=True, icon="download", icon_only=True),
)
DELETE_FILES = define_file_action(
    "delete_files",
    _delete_files,
    requires_selection=True,
    hotkeys=("delete",),
    button=ActionButton(name="Delete", toolbar=True, context_menu=True, icon="trash", icon_only=True),
)
PASTE_FILES = define_file_action(
    "paste_files",
    _paste_files,
    hotkeys=("ctrl+v",),
    button=ActionButton(name="Paste", toolbar=True, context_menu=True, icon="paste", icon_only=True),
)
CUT_FILES = define_file_action(
    "cut_files",
    _cut_files,
    requires_selection=True,
    hotkeys=("ctrl+x",),
    button=ActionButton(name="Cut", toolbar=True, context_menu=True, icon="cut", icon_only=True),
)
RENAME_FILE = define_file_action(
    "rename_file",
    requires_selection=True,
    hotkeys=("f2",),
    button=ActionButton(name="Rename", toolbar=True, context_menu=True, icon="rename", icon_only=True),
)
SELECT_ALL_FILES = define_file_action(
    "select_all_files",
    _select_all_files,
    hotkeys=("ctrl+a",),
    button=ActionButton(name="Select all", group="Actions", icon="select-all"),
)
CLEAR_SELECTION = define_file_action(
    "clear_selection",
    _clear_selection,
    hotkeys=("escape",),
    button=ActionButton(name="Clear selection", group="Actions", icon="clear-selection"),
)
TOGGLE_SELECTION_MODE = define_file_action(
    "toggle_selection_mode",
    _toggle_selection_mode,
    button=ActionButton(name="Selection mode", toolbar=True, icon="checkbox", icon_only=True),
)

EXTRA_ACTIONS = (
    CREATE_FOLDER,
    UPLOAD_FILES,
    DOWNLOAD_FILES,
    DELETE_FILES,
    PASTE_FILES,
    CUT_FILES,
    RENAME_FILE,
    SELECT_ALL_FILES,
    CLEAR_SELECTION,
    TOGGLE_SELECTION_MODE,
)


__all__ = [
    "CREATE_FOLDER",
    "UPLOAD_FILES",
    "DOWNLOAD_FILES",
    "DELETE_FILES",
    "PASTE_FILES",
    "CUT_FILES",
    "RENAME_FILE",
    "SELECT_ALL_FILES",
    "CLEAR_SELECTION",
    "TOGGLE_SELECTION_MODE",
    "EXTRA_ACTIONS",
]
