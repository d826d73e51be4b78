"""Cut/paste staging record."""

from __future__ import annotations

from collections.abc import Container
from dataclasses import dataclass


@dataclass(frozen=True)
class CutState:
    """At most one pending cut: source folder plus staged node ids.

    An instance without ids is the empty staging record.
    """

    source_id: str | None = None
    node_ids: tuple[str, ...] = ()

    @property
    def is_staged(self) -> bool:
        return self.source_id is not None and bool(self.node_ids)

    def restricted_to(self, existing: Container[str]) -> CutState:
        """Drop staged ids that no longer exist; empty out if nothing survives."""
        if not self.is_staged:
            return self
        if self.source_id not in existing:
            return EMPTY_CUT_STATE
        kept = tuple(node_id for node_id in self.node_ids if node_id in existing)
        if kept == self.node_ids:
            return self
        if not kept:
            return EMPTY_CUT_STATE
        return CutState(source_id=self.source_id, node_ids=kept)


EMPTY_CUT_STATE = CutState()


__all__ = [
    "CutState",
    "EMPTY_CUT_STATE",
]
