"""User settings for the browser front door.

The settings file lives in the platform config dir and holds three groups:
behavior flags copied onto the initial ``BrowserState``, per-action hotkey
overrides and the listing theme name. Reads never raise; a broken file
behaves like an empty one.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "vfsbrowser"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

BEHAVIOR_FLAGS = ("disable_selection", "selection_mode", "force_enable_open_parent")
HOTKEYS_KEY = "hotkeys"
THEME_KEY = "theme"


def load_config() -> dict[str, object]:
    """Return the settings object, or ``{}`` if the file is absent or not a JSON object."""
    try:
        raw = CONFIG_PATH.read_text(encoding="utf-8")
        settings = json.loads(raw)
    except (OSError, ValueError):
        return {}
    if not isinstance(settings, dict):
        return {}
    return settings


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` as indented JSON; an unwritable location is ignored."""
    payload = json.dumps(data, indent=2, sort_keys=True) + "\n"
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(payload, encoding="utf-8")
    except OSError:
        pass


def _update_config(key: str, value: object) -> None:
    settings = load_config()
    settings[key] = value
    save_config(settings)


def load_behavior_flags() -> dict[str, bool]:
    """Return every behavior flag; anything but a literal JSON ``true`` reads as off."""
    settings = load_config()
    return {name: settings.get(name) is True for name in BEHAVIOR_FLAGS}


def save_behavior_flag(name: str, value: bool) -> None:
    if name not in BEHAVIOR_FLAGS:
        raise KeyError(name)
    _update_config(name, bool(value))


def _clean_combos(combos: list[object]) -> tuple[str, ...]:
    return tuple(combo.strip() for combo in combos if isinstance(combo, str) and combo.strip())


def load_hotkey_overrides() -> dict[str, tuple[str, ...]]:
    """Return ``action id -> combos`` from the ``hotkeys`` table.

    Entries whose value is not a list are dropped, as are blank or non-string
    combos. An empty list is kept and unbinds the action.
    """
    table = load_config().get(HOTKEYS_KEY)
    if not isinstance(table, dict):
        return {}
    return {
        action_id: _clean_combos(combos)
        for action_id, combos in table.items()
        if isinstance(action_id, str) and isinstance(combos, list)
    }


def save_hotkey_overrides(overrides: dict[str, tuple[str, ...]]) -> None:
    _update_config(HOTKEYS_KEY, {action_id: list(combos) for action_id, combos in overrides.items()})


def load_theme_name() -> str | None:
    name = load_config().get(THEME_KEY)
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def save_theme_name(theme_name: str) -> None:
    """Persist ``theme_name``; blank names leave the stored theme alone."""
    name = str(theme_name).strip()
    if name:
        _update_config(THEME_KEY, name)
