"""Input-layer public API: hotkey registries and pointer payload builders."""

from .key_registry import (
    KeyComboBinding,
    KeyComboRegistry,
    action_hotkeys,
    build_hotkey_registry,
    normalize_combo,
)
from .pointer import click_payload, context_menu_payload, drop_payload

__all__ = [
    "KeyComboBinding",
    "KeyComboRegistry",
    "action_hotkeys",
    "build_hotkey_registry",
    "normalize_combo",
    "click_payload",
    "context_menu_payload",
    "drop_payload",
]
