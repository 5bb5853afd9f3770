"""Page-based navigation state machine."""

from __future__ import annotations

from .effects import DownloadSequence, Effect, SearchAndFetch, run_effect
from .keymap import HELP_LEGEND, decode_key
from .pages import AnyPage, MenuPage, Page, ResultDetailPage, SearchPage, SearchState
from .registry import HistoryEntry, Registry

__all__ = [
    "HELP_LEGEND",
    "AnyPage",
    "DownloadSequence",
    "Effect",
    "HistoryEntry",
    "MenuPage",
    "Page",
    "Registry",
    "ResultDetailPage",
    "SearchAndFetch",
    "SearchPage",
    "SearchState",
    "decode_key",
    "run_effect",
]
