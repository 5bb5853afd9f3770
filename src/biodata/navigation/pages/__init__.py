"""Page variants. The registry stores exactly these three kinds."""

from __future__ import annotations

from typing import Union

from .base import Page
from .detail import ResultDetailPage
from .menu import MenuPage
from .search import SearchPage, SearchState

AnyPage = Union[MenuPage, SearchPage, ResultDetailPage]


def page_kind(page: AnyPage) -> str:
    """Name of the variant, for logging and display."""
    if isinstance(page, MenuPage):
        return "menu"
    if isinstance(page, SearchPage):
        return "search"
    if isinstance(page, ResultDetailPage):
        return "detail"
    raise TypeError(f"Not a page variant: {type(page).__name__}")


__all__ = [
    "AnyPage",
    "MenuPage",
    "Page",
    "ResultDetailPage",
    "SearchPage",
    "SearchState",
    "page_kind",
]
