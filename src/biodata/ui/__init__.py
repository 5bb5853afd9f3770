"""UI styling."""

from __future__ import annotations

from .theme import DEFAULT_THEME, Theme

__all__ = ["DEFAULT_THEME", "Theme"]
