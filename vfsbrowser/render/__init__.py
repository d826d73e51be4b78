"""Rendering helpers for the folder listing and state dumps."""

from .listing import format_breadcrumb, format_listing_row, format_status_line, render_listing
from .state_dump import dump_state, state_to_dict
from .theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    UITheme,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)

__all__ = [
    "format_breadcrumb",
    "format_listing_row",
    "format_status_line",
    "render_listing",
    "dump_state",
    "state_to_dict",
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
