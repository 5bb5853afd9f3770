"""Color theme and layout constants for page rendering.

A single Theme instance is built at startup and carried on the registry;
renderers receive it through the root state.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Styles (Rich markup colors) and layout margins used by the renderers."""

    # Breadcrumb bar
    breadcrumb_style: str = "bold on #585858"
    breadcrumb_separator: str = " > "

    # Menus
    option_style: str = "#d0d0d0"
    selected_option_style: str = "bold #ff87af"
    description_style: str = "#8a8a8a"

    # Search pages
    spinner_style: str = "#ff5faf"
    placeholder_style: str = "dim"
    cursor_style: str = "reverse"
    result_title_style: str = "bold"
    result_description_style: str = "#8a8a8a"
    selected_result_style: str = "bold #ff87af"
    error_style: str = "bold red"

    # Detail pages
    ruler_style: str = "#8a8a8a"
    status_style: str = "green"

    # Help legend
    help_key_style: str = "bold #626262"
    help_text_style: str = "#4e4e4e"

    # Horizontal/vertical space reserved around list and record viewports
    viewport_margin_x: int = 20
    viewport_margin_y: int = 8

    # Rows kept below the help legend when padding it towards the bottom
    help_bottom_margin: int = 2


DEFAULT_THEME = Theme()
