"""Action dispatch engine.

A dispatch chain starts from one :class:`ActionRequest` and drains a work
deque holding commands and further requests. Effects emitted by a handler are
pushed to the front of the deque in issue order, so follow-up requests run to
completion before anything their caller queued afterwards (depth-first). The
whole chain runs synchronously; the resulting snapshot is published only once
the deque is empty.

Cycle freedom is up to action authors: a handler that keeps requesting itself
keeps the chain running.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass

from .actions import CHANGE_SELECTION_ID, ActionContext, ActionDefinition, ActionRegistry, ActionRequest
from .actions.payloads import ChangeSelectionPayload, coerce_payload
from .errors import DispatchError
from .file_tree_model import Node
from .runtime.commands import Command, reduce
from .runtime.state import BrowserState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileActionData:
    """Report of one action that passed its guards, handed to listeners."""

    id: str
    action: ActionDefinition
    payload: object
    state: BrowserState
    selected_files: tuple[Node, ...]


def _run_request(
    actions: ActionRegistry,
    state: BrowserState,
    request: ActionRequest,
    reports: list[FileActionData],
) -> list[Command | ActionRequest]:
    action = actions.get(request.action_id)
    payload = coerce_payload(action.payload_type, request.payload)
    selected = action.selected_files_for_action(state)
    if action.requires_selection and not selected:
        logger.debug("%s needs a selection; nothing to do", action.id)
        return []

    logger.debug("dispatch %s payload=%r", action.id, payload)
    reports.append(FileActionData(action.id, action, payload, state, tuple(selected)))
    if action.effect is None:
        return []
    ctx = ActionContext(action, payload, state, selected)
    action.effect(ctx)
    return ctx.effects


def run_dispatch_chain(
    actions: ActionRegistry,
    state: BrowserState,
    request: ActionRequest,
    *,
    selection_change_action: str | None = CHANGE_SELECTION_ID,
) -> tuple[BrowserState, list[FileActionData]]:
    """Run ``request`` and everything it triggers against ``state``.

    Returns the final snapshot plus one ``FileActionData`` per executed
    action in execution order. When the chain changed the selection and
    ``selection_change_action`` is registered, that action runs last with a
    ``ChangeSelectionPayload``.
    """
    reports: list[FileActionData] = []
    initial_selection = state.selection.selected_ids
    pending: deque[Command | ActionRequest] = deque([request])
    announced = False

    while pending:
        item = pending.popleft()
        if isinstance(item, ActionRequest):
            effects = _run_request(actions, state, item, reports)
            pending.extendleft(reversed(effects))
        else:
            state = reduce(state, item)

        if pending or announced:
            continue
        announced = True
        if (
            selection_change_action is not None
            and selection_change_action in actions
            and request.action_id != selection_change_action
            and state.selection.selected_ids != initial_selection
        ):
            payload = ChangeSelectionPayload(state.selection.selected_ids)
            pending.append(ActionRequest(selection_change_action, payload))

    return state, reports


class Dispatcher:
    """Single writer of the current ``BrowserState``.

    Subscribers see every published snapshot; file-action listeners see a
    report for each action executed in the chain, after publication.
    """

    def __init__(
        self,
        actions: ActionRegistry,
        state: BrowserState,
        *,
        on_file_action: Callable[[FileActionData], None] | None = None,
        selection_change_action: str | None = CHANGE_SELECTION_ID,
    ) -> None:
        self._actions = actions
        self._state = state
        self._selection_change_action = selection_change_action
        self._subscribers: list[Callable[[BrowserState], None]] = []
        self._listeners: list[Callable[[FileActionData], None]] = []
        if on_file_action is not None:
            self._listeners.append(on_file_action)
        self._dispatching = False

    @property
    def actions(self) -> ActionRegistry:
        return self._actions

    @property
    def state(self) -> BrowserState:
        return self._state

    def subscribe(self, callback: Callable[[BrowserState], None]) -> Callable[[], None]:
        """Register ``callback`` for published snapshots; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def add_file_action_listener(self, listener: Callable[[FileActionData], None]) -> None:
        self._listeners.append(listener)

    def dispatch(self, action_id: str, payload: object = None) -> BrowserState:
        """Run one top-level action chain and publish the resulting snapshot.

        Raises ``UnknownAction`` for unregistered ids and ``DispatchError``
        when called from inside a running chain; handlers must use
        ``ActionContext.request`` instead.
        """
        if self._dispatching:
            raise DispatchError(f"dispatch({action_id!r}) called while another dispatch is running")
        self._dispatching = True
        try:
            state, reports = run_dispatch_chain(
                self._actions,
                self._state,
                ActionRequest(action_id, payload),
                selection_change_action=self._selection_change_action,
            )
        finally:
            self._dispatching = False

        self._state = state
        for subscriber in list(self._subscribers):
            subscriber(state)
        for report in reports:
            for listener in list(self._listeners):
                listener(report)
        return state


__all__ = [
    "FileActionData",
    "run_dispatch_chain",
    "Dispatcher",
]
