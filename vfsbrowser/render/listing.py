"""Text rendering of the open folder: breadcrumb, rows and a status line."""

from __future__ import annotations

from ..file_tree_model import Node
from ..runtime.state import BrowserState
from .theme import DEFAULT_THEME, UITheme


def format_breadcrumb(state: BrowserState, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    separator = f"{active_theme.breadcrumb_separator} / {active_theme.reset}"
    names = [f"{active_theme.breadcrumb}{node.name}{active_theme.reset}" for node in state.folder_chain]
    return separator.join(names)


def format_listing_row(
    node: Node,
    display_index: int,
    *,
    selected: bool,
    staged: bool,
    theme: UITheme | None = None,
) -> str:
    """Render one listing row as ``<index> [x] name/ (cut)`` with ANSI styling."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    marker = f"{active_theme.selected_marker}[x]{reset}" if selected else "[ ]"
    if not node.selectable:
        name_color = active_theme.disabled
    elif node.is_dir:
        name_color = active_theme.folder
    else:
        name_color = active_theme.file
    name = node.name + ("/" if node.is_dir else "")
    badge = f" {active_theme.cut_badge}(cut){reset}" if staged else ""
    return f"{active_theme.index}{display_index:>3}{reset} {marker} {name_color}{name}{reset}{badge}"


def format_status_line(state: BrowserState, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    parts = [f"{len(state.selected_files)} selected"]
    cut_state = state.cut_state
    if cut_state.is_staged:
        source = state.store.get(cut_state.source_id)
        source_name = source.name if source is not None else cut_state.source_id
        parts.append(f"{len(cut_state.node_ids)} staged from {source_name}")
    if state.selection_mode:
        parts.append("selection mode")
    if state.context_menu is not None:
        menu = state.context_menu
        parts.append(f"context menu at {menu.mouse_x},{menu.mouse_y}")
    return f"{active_theme.status}{' | '.join(parts)}{active_theme.reset}"


def render_listing(state: BrowserState, theme: UITheme | None = None) -> str:
    """Render breadcrumb, every row of the open folder, and the status line."""
    staged = set(state.cut_state.node_ids) if state.cut_state.is_staged else set()
    lines = [format_breadcrumb(state, theme)]
    for index, node in enumerate(state.store.children(state.current_folder_id)):
        lines.append(
            format_listing_row(
                node,
                index,
                selected=state.is_selected(node.id),
                staged=node.id in staged,
                theme=theme,
            )
        )
    if len(lines) == 1:
        lines.append("    (empty)")
    lines.append(format_status_line(state, theme))
    return "\n".join(lines) + "\n"


__all__ = [
    "format_breadcrumb",
    "format_listing_row",
    "format_status_line",
    "render_listing",
]
