"""JSON dump of a ``BrowserState`` with optional Pygments highlighting."""

from __future__ import annotations

import json

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..file_tree_model import file_map_to_dict
from ..runtime.state import BrowserState

DEFAULT_STYLE = "monokai"

_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def state_to_dict(state: BrowserState) -> dict[str, object]:
    """Return a JSON-serializable view of ``state``."""
    selection = state.selection
    last_click = selection.last_click
    cut_state = state.cut_state
    menu = state.context_menu
    return {
        "currentFolderId": state.current_folder_id,
        "selection": {
            "selectedIds": [node.id for node in state.selected_files],
            "lastClick": None if last_click is None else {"index": last_click.index, "fileId": last_click.node_id},
        },
        "cutState": {"sourceId": cut_state.source_id, "fileIds": list(cut_state.node_ids)},
        "selectionMode": state.selection_mode,
        "disableSelection": state.disable_selection,
        "contextMenu": None
        if menu is None
        else {"triggerFileId": menu.trigger_file_id, "mouseX": menu.mouse_x, "mouseY": menu.mouse_y},
        "version": state.store.version,
        **file_map_to_dict(state.store),
    }


def _normalize_style(style: str) -> str:
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def dump_state(state: BrowserState, *, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Render ``state`` as indented JSON, highlighted unless ``no_color``."""
    text = json.dumps(state_to_dict(state), indent=2) + "\n"
    if no_color:
        return text
    formatter = TerminalFormatter(style=_normalize_style(style))
    return highlight(text, JsonLexer(), formatter)


__all__ = [
    "DEFAULT_STYLE",
    "state_to_dict",
    "dump_state",
]
