"""Key-combo registry mapping normalized hotkeys to action dispatch."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from ..actions import ActionRegistry

MODIFIER_ORDER = ("ctrl", "alt", "shift", "meta")
_MODIFIER_ALIASES = {
    "control": "ctrl",
    "cmd": "meta",
    "command": "meta",
    "super": "meta",
    "option": "alt",
}
_KEY_ALIASES = {
    "esc": "escape",
    "del": "delete",
    "return": "enter",
}


def normalize_combo(combo: str) -> str:
    """Return a canonical ``mod+...+key`` spelling.

    Tokens are lower-cased, modifier aliases collapse (``control`` -> ``ctrl``),
    and modifiers are ordered ctrl, alt, shift, meta ahead of the key.
    """
    tokens = [token.strip().lower() for token in combo.split("+") if token.strip()]
    if not tokens:
        return ""
    modifiers: set[str] = set()
    keys: list[str] = []
    for token in tokens:
        token = _MODIFIER_ALIASES.get(token, token)
        if token in MODIFIER_ORDER:
            modifiers.add(token)
        else:
            keys.append(_KEY_ALIASES.get(token, token))
    ordered = [modifier for modifier in MODIFIER_ORDER if modifier in modifiers]
    return "+".join(ordered + keys)


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key combos to a single callback."""

    combos: tuple[str, ...]
    handler: Callable[[], object]


class KeyComboRegistry:
    """Small key-dispatch table with a combo normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] = normalize_combo) -> None:
        self._normalize = normalize
        self._handlers: dict[str, Callable[[], object]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Bind every combo of ``binding``; combos already bound are taken over."""
        for combo in binding.combos:
            normalized = self._normalize(combo)
            if normalized:
                self._handlers[normalized] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def combos(self) -> tuple[str, ...]:
        return tuple(sorted(self._handlers))

    def dispatch(self, key: str) -> bool:
        """Invoke the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return False
        handler()
        return True


def action_hotkeys(
    actions: ActionRegistry,
    overrides: Mapping[str, Iterable[str]] | None = None,
) -> dict[str, tuple[str, ...]]:
    """Return ``action id -> combos`` after applying config overrides.

    Overrides for ids missing from ``actions`` are ignored.
    """
    overrides = overrides or {}
    resolved: dict[str, tuple[str, ...]] = {}
    for action in actions:
        combos = tuple(overrides[action.id]) if action.id in overrides else action.hotkeys
        if combos:
            resolved[action.id] = combos
    return resolved


def build_hotkey_registry(
    actions: ActionRegistry,
    dispatch: Callable[[str], object],
    overrides: Mapping[str, Iterable[str]] | None = None,
) -> KeyComboRegistry:
    """Bind every action hotkey to ``dispatch(action_id)``.

    Later actions win when two claim the same combo.
    """
    registry = KeyComboRegistry()
    for action_id, combos in action_hotkeys(actions, overrides).items():
        registry.register_binding(KeyComboBinding(combos, lambda action_id=action_id: dispatch(action_id)))
    return registry


__all__ = [
    "MODIFIER_ORDER",
    "normalize_combo",
    "KeyComboBinding",
    "KeyComboRegistry",
    "action_hotkeys",
    "build_hotkey_registry",
]
