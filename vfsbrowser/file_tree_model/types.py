"""Domain datatypes for virtual file tree nodes."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Node:
    """One file or folder entry in the virtual tree.

    ``children_ids`` is display order. Files always carry an empty tuple.
    """

    id: str
    name: str
    is_dir: bool = False
    parent_id: str | None = None
    children_ids: tuple[str, ...] = ()
    selectable: bool = True
    openable: bool = True

    @property
    def children_count(self) -> int:
        return len(self.children_ids)

    def with_children(self, children_ids: tuple[str, ...]) -> Node:
        """Return a copy listing ``children_ids`` as its children."""
        return replace(self, children_ids=tuple(children_ids))

    def with_parent(self, parent_id: str | None) -> Node:
        return replace(self, parent_id=parent_id)


def is_folder(node: Node | None) -> bool:
    return node is not None and node.is_dir


def is_selectable(node: Node | None) -> bool:
    """Return whether ``node`` may join a selection."""
    return node is not None and node.selectable


def is_openable(node: Node | None) -> bool:
    """Return whether ``node`` may be opened (folders navigate, files report)."""
    return node is not None and node.openable


__all__ = [
    "Node",
    "is_folder",
    "is_selectable",
    "is_openable",
]
