"""Listing themes and theme-name resolution.

Themes are ANSI palettes for the folder listing only. The JSON state dump
uses a separate Pygments style setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Escape sequences for each styled part of the listing."""

    name: str
    reset: str
    breadcrumb: str
    breadcrumb_separator: str
    index: str
    folder: str
    file: str
    disabled: str
    selected_marker: str
    cut_badge: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    breadcrumb="\033[1;38;5;81m",
    breadcrumb_separator="\033[2m",
    index="\033[2;38;5;250m",
    folder="\033[1;34m",
    file="\033[38;5;252m",
    disabled="\033[2;38;5;244m",
    selected_marker="\033[38;5;44m",
    cut_badge="\033[38;5;214m",
    status="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    breadcrumb="\033[1;38;5;45m",
    breadcrumb_separator="\033[2;38;5;31m",
    index="\033[2;38;5;110m",
    folder="\033[1;38;5;45m",
    file="\033[38;5;153m",
    disabled="\033[2;38;5;24m",
    selected_marker="\033[38;5;39m",
    cut_badge="\033[38;5;215m",
    status="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    breadcrumb="",
    breadcrumb_separator="",
    index="",
    folder="",
    file="",
    disabled="",
    selected_marker="",
    cut_badge="",
    status="",
)

THEMES_BY_NAME = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme`` and the ``theme`` setting."""
    return tuple(sorted(THEMES_BY_NAME))


def normalize_theme_name(name: str | None) -> str:
    key = (name or "").strip().lower()
    return key if key in THEMES_BY_NAME else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the listing palette; ``no_color`` forces the escape-free plain theme."""
    if no_color:
        return PLAIN_THEME
    return THEMES_BY_NAME[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
