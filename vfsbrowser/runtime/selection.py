"""Selection tracker: selected node ids plus last-click bookkeeping."""

from __future__ import annotations

from collections.abc import Container, Iterable, Sequence
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class LastClick:
    """Display position and id of the last explicit click."""

    index: int
    node_id: str


@dataclass(frozen=True)
class SelectionState:
    """Immutable selection snapshot.

    ``last_click`` is only consulted by later range clicks; it is overwritten,
    never merged.
    """

    selected_ids: frozenset[str] = frozenset()
    last_click: LastClick | None = None

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.selected_ids

    def __len__(self) -> int:
        return len(self.selected_ids)

    @property
    def is_empty(self) -> bool:
        return not self.selected_ids

    def toggle(self, node_id: str, *, exclusive: bool) -> SelectionState:
        """Toggle ``node_id``; ``exclusive`` replaces the selection with it instead."""
        if exclusive:
            return replace(self, selected_ids=frozenset({node_id}))
        if node_id in self.selected_ids:
            return replace(self, selected_ids=self.selected_ids - {node_id})
        return replace(self, selected_ids=self.selected_ids | {node_id})

    def select(self, node_ids: Iterable[str], *, reset: bool) -> SelectionState:
        """Add ``node_ids``, first dropping everything else when ``reset``."""
        base = frozenset() if reset else self.selected_ids
        return replace(self, selected_ids=base | frozenset(node_ids))

    def clear(self) -> SelectionState:
        return replace(self, selected_ids=frozenset())

    def with_last_click(self, index: int, node_id: str) -> SelectionState:
        return replace(self, last_click=LastClick(index=index, node_id=node_id))

    def restricted_to(self, existing: Container[str]) -> SelectionState:
        """Drop selected ids and last-click references not in ``existing``."""
        kept = frozenset(node_id for node_id in self.selected_ids if node_id in existing)
        last_click = self.last_click
        if last_click is not None and last_click.node_id not in existing:
            last_click = None
        if kept == self.selected_ids and last_click is self.last_click:
            return self
        return SelectionState(selected_ids=kept, last_click=last_click)


def range_between(display_ids: Sequence[str], first: int, second: int) -> list[str]:
    """Return ids at display indices in the inclusive range spanned by both ends."""
    start, end = sorted((first, second))
    if end < 0:
        return []
    start = max(0, start)
    return list(display_ids[start : end + 1])


__all__ = [
    "LastClick",
    "SelectionState",
    "range_between",
]
