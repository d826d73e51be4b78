"""Combined browser snapshot: node store, open folder, selection, staging and menu."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..file_tree_model import Node, NodeStore
from .cut_state import EMPTY_CUT_STATE, CutState
from .selection import SelectionState


@dataclass(frozen=True)
class ContextMenu:
    trigger_file_id: str | None
    mouse_x: int
    mouse_y: int


@dataclass(frozen=True)
class BrowserState:
    """Combined snapshot published after every top-level dispatch."""

    store: NodeStore
    current_folder_id: str
    selection: SelectionState = field(default_factory=SelectionState)
    cut_state: CutState = EMPTY_CUT_STATE
    selection_mode: bool = False
    disable_selection: bool = False
    force_enable_open_parent: bool = False
    context_menu: ContextMenu | None = None

    @classmethod
    def initial(cls, store: NodeStore, current_folder_id: str | None = None, **settings: bool) -> BrowserState:
        """Open ``current_folder_id`` (default: root) on a fresh selection."""
        folder = store.require_folder(current_folder_id or store.root_id)
        return cls(store=store, current_folder_id=folder.id, **settings)

    @property
    def current_folder(self) -> Node | None:
        return self.store.get(self.current_folder_id)

    @property
    def parent_folder(self) -> Node | None:
        current = self.current_folder
        if current is None:
            return None
        return self.store.get(current.parent_id)

    @property
    def display_ids(self) -> tuple[str, ...]:
        """Ids of the current folder's listing; positions are display indices."""
        return tuple(node.id for node in self.store.children(self.current_folder_id))

    @property
    def folder_chain(self) -> list[Node]:
        return self.store.folder_chain(self.current_folder_id)

    @property
    def selected_files(self) -> list[Node]:
        """Selected nodes that still exist, listing order first, the rest by id."""
        selected = self.selection.selected_ids
        ordered = [node_id for node_id in self.display_ids if node_id in selected]
        ordered.extend(sorted(selected.difference(ordered)))
        return [self.store.nodes[node_id] for node_id in ordered if node_id in self.store]

    def is_selected(self, node_id: str) -> bool:
        return node_id in self.selection


__all__ = [
    "ContextMenu",
    "BrowserState",
]
