"""Pointer-event translation into action payloads."""

from __future__ import annotations

from ..actions import (
    CLICK_DOUBLE,
    CLICK_SINGLE,
    MouseClickFilePayload,
    MoveFilesPayload,
    OpenFileContextMenuPayload,
)
from ..runtime.state import BrowserState


def click_payload(
    state: BrowserState,
    display_index: int,
    *,
    double: bool = False,
    ctrl: bool = False,
    shift: bool = False,
    alt: bool = False,
) -> MouseClickFilePayload | None:
    """Build a click payload for the listing row at ``display_index``.

    Returns ``None`` for positions outside the current listing.
    """
    display_ids = state.display_ids
    if not (0 <= display_index < len(display_ids)):
        return None
    return MouseClickFilePayload(
        file_id=display_ids[display_index],
        file_display_index=display_index,
        click_type=CLICK_DOUBLE if double else CLICK_SINGLE,
        ctrl_key=ctrl,
        shift_key=shift,
        alt_key=alt,
    )


def context_menu_payload(
    state: BrowserState,
    display_index: int | None,
    client_x: int,
    client_y: int,
) -> OpenFileContextMenuPayload:
    """Build a context-menu payload; rows outside the listing open it with no trigger."""
    display_ids = state.display_ids
    trigger_id = None
    if display_index is not None and 0 <= display_index < len(display_ids):
        trigger_id = display_ids[display_index]
    return OpenFileContextMenuPayload(client_x=client_x, client_y=client_y, trigger_file_id=trigger_id)


def drop_payload(state: BrowserState, destination_id: str) -> MoveFilesPayload | None:
    """Build a move payload for dropping the current selection onto ``destination_id``.

    Returns ``None`` when nothing is selected.
    """
    selected = tuple(node.id for node in state.selected_files)
    if not selected:
        return None
    return MoveFilesPayload(file_ids=selected, source_id=state.current_folder_id, destination_id=destination_id)
