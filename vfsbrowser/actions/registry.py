"""Declarative action definitions and the read-only registry holding them.

An :class:`ActionDefinition` bundles applicability rules (``requires_selection``
and an optional per-node ``file_filter``), UI metadata the core ignores, and an
optional effect. Effects receive an :class:`ActionContext` and express every
change as a command or a follow-up :class:`ActionRequest`; they never mutate
state themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownAction
from ..file_tree_model import Node
from ..runtime.commands import Command
from ..runtime.state import BrowserState


@dataclass(frozen=True)
class ActionButton:
    """Toolbar/context-menu presentation hints; not used by dispatch."""

    name: str
    toolbar: bool = False
    context_menu: bool = False
    group: str | None = None
    tooltip: str | None = None
    icon: str | None = None
    icon_only: bool = False


@dataclass(frozen=True)
class ActionRequest:
    action_id: str
    payload: object = None


class ActionContext:
    """What an effect sees: payload, snapshot, filtered selection, and a sink for effects."""

    def __init__(
        self,
        action: ActionDefinition,
        payload: object,
        state: BrowserState,
        selected_files: list[Node],
    ) -> None:
        self.action = action
        self.payload = payload
        self.state = state
        self.selected_files = selected_files
        self.effects: list[Command | ActionRequest] = []

    def apply(self, command: Command) -> None:
        """Queue a state-mutation command."""
        self.effects.append(command)

    def request(self, action_id: str, payload: object = None) -> None:
        """Queue a follow-up action, run depth-first before anything queued after it."""
        self.effects.append(ActionRequest(action_id, payload))


Effect = Callable[[ActionContext], None]


@dataclass(frozen=True)
class ActionDefinition:
    id: str
    requires_selection: bool = False
    file_filter: Callable[[Node], bool] | None = None
    hotkeys: tuple[str, ...] = ()
    button: ActionButton | None = None
    payload_type: type | None = None
    effect: Effect | None = None

    def selected_files_for_action(self, state: BrowserState) -> list[Node]:
        """Return the current selection narrowed by ``file_filter``."""
        selected = state.selected_files
        if self.file_filter is None:
            return selected
        return [node for node in selected if self.file_filter(node)]

    def is_applicable(self, state: BrowserState) -> bool:
        return not self.requires_selection or bool(self.selected_files_for_action(state))


def define_file_action(
    action_id: str,
    effect: Effect | None = None,
    *,
    requires_selection: bool = False,
    file_filter: Callable[[Node], bool] | None = None,
    hotkeys: Iterable[str] = (),
    button: ActionButton | None = None,
    payload_type: type | None = None,
) -> ActionDefinition:
    """Build an ``ActionDefinition``; ``effect`` may be omitted for descriptive actions."""
    return ActionDefinition(
        id=action_id,
        requires_selection=requires_selection,
        file_filter=file_filter,
        hotkeys=tuple(hotkeys),
        button=button,
        payload_type=payload_type,
        effect=effect,
    )


class ActionRegistry:
    """Ordered, read-only mapping from action id to definition."""

    def __init__(self, definitions: Iterable[ActionDefinition] = ()) -> None:
        by_id: dict[str, ActionDefinition] = {}
        for definition in definitions:
            if definition.id in by_id:
                raise ValueError(f"duplicate action id: {definition.id!r}")
            by_id[definition.id] = definition
        self._definitions = MappingProxyType(by_id)

    def extended(self, *definitions: ActionDefinition) -> ActionRegistry:
        """Return a new registry where ``definitions`` add to or replace entries by id."""
        merged = dict(self._definitions)
        for definition in definitions:
            merged[definition.id] = definition
        return ActionRegistry(merged.values())

    def get(self, action_id: str) -> ActionDefinition:
        try:
            return self._definitions[action_id]
        except KeyError:
            raise UnknownAction(action_id) from None

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._definitions

    def __iter__(self) -> Iterator[ActionDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def ids(self) -> tuple[str, ...]:
        return tuple(self._definitions)


__all__ = [
    "ActionButton",
    "ActionRequest",
    "ActionContext",
    "Effect",
    "ActionDefinition",
    "define_file_action",
    "ActionRegistry",
]
