"""Copy-on-write node store holding the virtual file tree.

Every structural operation returns a new :class:`NodeStore`; published
snapshots are never edited in place. Unchanged ``Node`` objects are shared
between consecutive snapshots and each committed change bumps ``version``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..errors import InvalidParent
from .types import Node

logger = logging.getLogger(__name__)

NEW_FOLDER_ID_PREFIX = "new-folder-"


class _PendingEdit:
    """Overlay of staged node changes on top of a base mapping.

    A value of ``None`` marks a staged removal.
    """

    def __init__(self, base: Mapping[str, Node]) -> None:
        self._base = base
        self.changes: dict[str, Node | None] = {}

    def get(self, node_id: str | None) -> Node | None:
        if node_id is None:
            return None
        if node_id in self.changes:
            return self.changes[node_id]
        return self._base.get(node_id)

    def put(self, node: Node) -> None:
        self.changes[node.id] = node

    def remove(self, node_id: str) -> None:
        self.changes[node_id] = None

    def unlink_child(self, parent_id: str | None, child_ids: set[str]) -> None:
        """Drop ``child_ids`` from the staged children of ``parent_id``."""
        parent = self.get(parent_id)
        if parent is None:
            return
        kept = tuple(child for child in parent.children_ids if child not in child_ids)
        if kept != parent.children_ids:
            self.put(parent.with_children(kept))


@dataclass(frozen=True)
class NodeStore:
    """Immutable snapshot of every node keyed by id."""

    root_id: str
    nodes: Mapping[str, Node] = field(default_factory=lambda: MappingProxyType({}))
    version: int = 0
    next_folder_index: int = 0

    @classmethod
    def from_nodes(cls, root_id: str, nodes: Iterable[Node], *, next_folder_index: int = 0) -> NodeStore:
        """Build a store from ``nodes``; structure is taken as given."""
        by_id = {node.id: node for node in nodes}
        return cls(
            root_id=root_id,
            nodes=MappingProxyType(by_id),
            next_folder_index=next_folder_index,
        )

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    @property
    def root(self) -> Node:
        return self.nodes[self.root_id]

    def get(self, node_id: str | None) -> Node | None:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def require_folder(self, node_id: str | None) -> Node:
        """Return the folder named by ``node_id`` or raise ``InvalidParent``."""
        node = self.get(node_id)
        if node is None or not node.is_dir:
            raise InvalidParent(node_id)
        return node

    def children(self, folder_id: str) -> list[Node]:
        """Return the listing of ``folder_id`` in display order."""
        folder = self.get(folder_id)
        if folder is None:
            return []
        return [self.nodes[child_id] for child_id in folder.children_ids if child_id in self.nodes]

    def folder_chain(self, folder_id: str) -> list[Node]:
        """Return nodes from the outermost reachable ancestor down to ``folder_id``."""
        current = self.get(folder_id)
        if current is None:
            return []
        chain = [current]
        seen = {current.id}
        parent = self.get(current.parent_id)
        while parent is not None and parent.id not in seen:
            chain.append(parent)
            seen.add(parent.id)
            parent = self.get(parent.parent_id)
        chain.reverse()
        return chain

    def is_descendant(self, node_id: str, ancestor_id: str) -> bool:
        """Return whether ``ancestor_id`` appears on the parent chain of ``node_id``."""
        node = self.get(node_id)
        seen: set[str] = set()
        while node is not None and node.parent_id is not None and node.id not in seen:
            if node.parent_id == ancestor_id:
                return True
            seen.add(node.id)
            node = self.get(node.parent_id)
        return False

    def descendant_closure(self, node_ids: Iterable[str]) -> tuple[str, ...]:
        """Return ``node_ids`` plus every descendant, parents before children."""
        ordered: list[str] = []
        seen: set[str] = set()
        stack = list(node_ids)
        stack.reverse()
        while stack:
            node_id = stack.pop()
            if node_id in seen or node_id not in self.nodes:
                continue
            seen.add(node_id)
            ordered.append(node_id)
            stack.extend(reversed(self.nodes[node_id].children_ids))
        return tuple(ordered)

    def _commit(self, edit: _PendingEdit, **overrides: int) -> NodeStore:
        if not edit.changes and not overrides:
            return self
        staged = dict(self.nodes)
        for node_id, node in edit.changes.items():
            if node is None:
                staged.pop(node_id, None)
            else:
                staged[node_id] = node
        return NodeStore(
            root_id=self.root_id,
            nodes=MappingProxyType(staged),
            version=self.version + 1,
            next_folder_index=overrides.get("next_folder_index", self.next_folder_index),
        )

    def create_folder(self, parent_id: str, name: str) -> tuple[NodeStore, str]:
        """Insert an empty folder named ``name`` under ``parent_id``.

        Returns ``(store, new_id)``. Ids follow ``new-folder-<n>`` and skip
        any id already taken.
        """
        parent = self.require_folder(parent_id)
        index = self.next_folder_index
        while f"{NEW_FOLDER_ID_PREFIX}{index}" in self.nodes:
            index += 1
        new_id = f"{NEW_FOLDER_ID_PREFIX}{index}"

        edit = _PendingEdit(self.nodes)
        edit.put(Node(id=new_id, name=name, is_dir=True, parent_id=parent.id))
        edit.put(parent.with_children(parent.children_ids + (new_id,)))
        logger.debug("create folder %s (%r) under %s", new_id, name, parent.id)
        return self._commit(edit, next_folder_index=index + 1), new_id

    def delete_nodes(self, node_ids: Iterable[str], *, cascade: bool = False) -> NodeStore:
        """Remove ``node_ids`` and unlink each from its parent.

        Absent ids are ignored so repeated delivery is harmless. The root is
        never removed. Without ``cascade`` children of a removed folder are
        left in place; with it the full descendant closure goes too.
        """
        requested = tuple(dict.fromkeys(node_ids))
        if cascade:
            requested = self.descendant_closure(requested)

        edit = _PendingEdit(self.nodes)
        for node_id in requested:
            node = edit.get(node_id)
            if node is None:
                continue
            if node_id == self.root_id:
                logger.debug("refusing to delete root node %s", node_id)
                continue
            edit.remove(node_id)
            edit.unlink_child(node.parent_id, {node_id})
        return self._commit(edit)

    def move_nodes(self, node_ids: Iterable[str], source_id: str, destination_id: str) -> NodeStore:
        """Move ``node_ids`` from ``source_id`` to the end of ``destination_id``.

        The whole move lands in one new snapshot. Absent ids, the root and
        folders that would end up inside themselves are skipped.
        """
        source = self.require_folder(source_id)
        destination = self.require_folder(destination_id)

        moving: list[Node] = []
        for node_id in dict.fromkeys(node_ids):
            node = self.get(node_id)
            if node is None or node_id == self.root_id:
                continue
            if node.is_dir and (node_id == destination.id or self.is_descendant(destination.id, node_id)):
                logger.debug("skipping move of %s into its own subtree %s", node_id, destination.id)
                continue
            moving.append(node)
        if not moving:
            return self

        moving_ids = {node.id for node in moving}
        edit = _PendingEdit(self.nodes)
        edit.unlink_child(source.id, moving_ids)
        for node in moving:
            if node.parent_id != source.id:
                edit.unlink_child(node.parent_id, {node.id})

        target = edit.get(destination.id)
        assert target is not None
        appended = target.children_ids + tuple(
            node.id for node in moving if node.id not in target.children_ids
        )
        edit.put(target.with_children(appended))
        for node in moving:
            staged = edit.get(node.id)
            assert staged is not None
            edit.put(staged.with_parent(destination.id))
        logger.debug("move %s from %s to %s", sorted(moving_ids), source.id, destination.id)
        return self._commit(edit)


__all__ = [
    "NEW_FOLDER_ID_PREFIX",
    "NodeStore",
]
