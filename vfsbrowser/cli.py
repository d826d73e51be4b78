"""Command-line front door for vfsbrowser.

Loads a file map, replays an ordered script of action requests, hotkeys and
clicks through the dispatcher, then prints the open folder or the full state.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .actions import default_action_registry
from .dispatcher import Dispatcher
from .errors import VfsBrowserError
from .file_tree_model import load_demo_file_map, load_file_map
from .input import KeyComboRegistry, action_hotkeys, build_hotkey_registry, click_payload
from .render import available_theme_names, dump_state, render_listing, resolve_theme
from .runtime.config import load_behavior_flags, load_hotkey_overrides, load_theme_name
from .runtime.state import BrowserState

logger = logging.getLogger(__name__)

CLICK_MODIFIERS = ("ctrl", "shift", "alt", "double")


class _AppendStep(argparse.Action):
    """Append ``(kind, value)`` to one shared list so step order survives parsing."""

    def __call__(self, parser, namespace, values, option_string=None):
        steps = list(getattr(namespace, self.dest, None) or [])
        steps.append((self.const, values))
        setattr(namespace, self.dest, steps)


def parse_action_step(text: str) -> tuple[str, object]:
    """Split ``ID`` or ``ID=JSON`` into an action id and decoded payload."""
    action_id, sep, raw_payload = text.partition("=")
    action_id = action_id.strip()
    if not action_id:
        raise SystemExit(f"Missing action id in {text!r}.")
    if not sep:
        return action_id, None
    try:
        return action_id, json.loads(raw_payload)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON payload for {action_id}: {exc}") from exc


def parse_click_step(text: str) -> tuple[int, set[str]]:
    """Split ``INDEX[:mod[,mod...]]`` into a display index and modifier names."""
    raw_index, _sep, raw_modifiers = text.partition(":")
    try:
        index = int(raw_index)
    except ValueError as exc:
        raise SystemExit(f"Invalid click index: {raw_index!r}") from exc
    modifiers = {token.strip().lower() for token in raw_modifiers.split(",") if token.strip()}
    unknown = modifiers.difference(CLICK_MODIFIERS)
    if unknown:
        raise SystemExit(f"Unknown click modifier(s): {', '.join(sorted(unknown))}")
    return index, modifiers


def _run_step(dispatcher: Dispatcher, hotkeys: KeyComboRegistry, kind: str, value: str) -> None:
    if kind == "action":
        action_id, payload = parse_action_step(value)
        dispatcher.dispatch(action_id, payload)
    elif kind == "key":
        if not hotkeys.dispatch(value):
            logger.warning("no action bound to key %r", value)
    else:
        index, modifiers = parse_click_step(value)
        payload = click_payload(
            dispatcher.state,
            index,
            double="double" in modifiers,
            ctrl="ctrl" in modifiers,
            shift="shift" in modifiers,
            alt="alt" in modifiers,
        )
        if payload is None:
            logger.warning("click index %d is outside the listing", index)
            return
        dispatcher.dispatch("mouse_click_file", payload)


def _format_action_table(dispatcher: Dispatcher, overrides: dict[str, tuple[str, ...]]) -> str:
    hotkeys = action_hotkeys(dispatcher.actions, overrides)
    lines = []
    for action in dispatcher.actions:
        combos = ", ".join(hotkeys.get(action.id, ()))
        flags = "selection" if action.requires_selection else ""
        lines.append(f"{action.id:<24} {flags:<10} {combos}".rstrip())
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, replay the requested steps and print the result.

    Configuration errors (unknown action, bad folder id, malformed payload
    or file map) are logged and end the process with exit status 2.
    """
    parser = argparse.ArgumentParser(
        description="Drive a virtual file browser through its action dispatcher."
    )
    parser.add_argument(
        "file_map",
        nargs="?",
        default=None,
        help="Path to a {rootFolderId, fileMap} JSON file. Defaults to the bundled demo.",
    )
    parser.add_argument("--open", metavar="FOLDER_ID", default=None, help="Folder to open first (default: root).")
    parser.add_argument(
        "-a",
        "--action",
        dest="steps",
        action=_AppendStep,
        const="action",
        metavar="ID[=JSON]",
        help="Dispatch an action, optionally with a JSON payload. Repeatable.",
    )
    parser.add_argument(
        "-k",
        "--key",
        dest="steps",
        action=_AppendStep,
        const="key",
        metavar="COMBO",
        help="Press a hotkey such as ctrl+x. Repeatable.",
    )
    parser.add_argument(
        "-c",
        "--click",
        dest="steps",
        action=_AppendStep,
        const="click",
        metavar="INDEX[:MODS]",
        help=f"Click a listing row; MODS is a comma list of {', '.join(CLICK_MODIFIERS)}. Repeatable.",
    )
    parser.add_argument("--dump-state", action="store_true", help="Print the final state as JSON.")
    parser.add_argument("--list-actions", action="store_true", help="Print registered actions and hotkeys.")
    parser.add_argument("--style", default="monokai", help="Pygments style name for --dump-state.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Listing theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every dispatch to stderr.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides = load_hotkey_overrides()
    try:
        if args.file_map is not None:
            path = Path(args.file_map)
            if not path.exists():
                raise SystemExit(f"Path not found: {path}")
            store = load_file_map(path)
        else:
            store = load_demo_file_map()
        state = BrowserState.initial(store, args.open, **load_behavior_flags())
        dispatcher = Dispatcher(default_action_registry(), state)
        hotkeys = build_hotkey_registry(dispatcher.actions, dispatcher.dispatch, overrides)
        for kind, value in args.steps or ():
            _run_step(dispatcher, hotkeys, kind, value)
    except VfsBrowserError as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    no_color = args.no_color or not sys.stdout.isatty()
    if args.list_actions:
        sys.stdout.write(_format_action_table(dispatcher, overrides))
    elif args.dump_state:
        sys.stdout.write(dump_state(dispatcher.state, style=args.style, no_color=no_color))
    else:
        theme = resolve_theme(args.theme or load_theme_name(), no_color=no_color)
        sys.stdout.write(render_listing(dispatcher.state, theme))


if __name__ == "__main__":
    main()
