"""Referential-integrity checks for node stores."""

from __future__ import annotations

from ..errors import IntegrityError
from .store import NodeStore


def find_integrity_violations(store: NodeStore) -> list[str]:
    """Return human-readable descriptions of every structural defect in ``store``.

    Checks parent/child agreement in both directions, that only folders have
    children, that sibling lists carry no duplicates, and that every node is
    reachable from the root.
    """
    problems: list[str] = []
    root = store.get(store.root_id)
    if root is None:
        return [f"root {store.root_id!r} is missing"]
    if not root.is_dir:
        problems.append(f"root {root.id!r} is not a folder")
    if root.parent_id is not None:
        problems.append(f"root {root.id!r} has parent {root.parent_id!r}")

    for node in store:
        if node.id != store.root_id:
            parent = store.get(node.parent_id)
            if parent is None:
                problems.append(f"{node.id!r} points at missing parent {node.parent_id!r}")
            elif not parent.is_dir:
                problems.append(f"{node.id!r} has non-folder parent {parent.id!r}")
            elif node.id not in parent.children_ids:
                problems.append(f"{node.id!r} is not listed by parent {parent.id!r}")

        if not node.is_dir and node.children_ids:
            problems.append(f"file {node.id!r} has children")
        if len(set(node.children_ids)) != len(node.children_ids):
            problems.append(f"{node.id!r} lists a child more than once")
        for child_id in node.children_ids:
            child = store.get(child_id)
            if child is None:
                problems.append(f"{node.id!r} lists missing child {child_id!r}")
            elif child.parent_id != node.id:
                problems.append(f"{node.id!r} lists {child_id!r} whose parent is {child.parent_id!r}")

    reachable = set(store.descendant_closure([store.root_id]))
    for node in store:
        if node.id not in reachable:
            problems.append(f"{node.id!r} is unreachable from root")
    return problems


def check_integrity(store: NodeStore) -> None:
    """Raise ``IntegrityError`` listing every violation found in ``store``."""
    problems = find_integrity_violations(store)
    if problems:
        raise IntegrityError("; ".join(problems))


__all__ = [
    "find_integrity_violations",
    "check_integrity",
]
