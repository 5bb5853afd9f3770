"""Root navigation registry: page table, history and action dispatch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.markup import escape

from ..exceptions import UnknownPageError
from ..ui.theme import DEFAULT_THEME
from .actions import CompletionAction, Quit, Resize, ToggleHelp
from .keymap import HELP_LEGEND
from .pages import MenuPage, page_kind

if TYPE_CHECKING:
    from ..config import Settings
    from ..exceptions import BiodataError
    from ..ui.theme import Theme
    from .actions import Action
    from .effects import Effect
    from .pages import AnyPage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """A page left by forward navigation, with the title shown in breadcrumbs."""

    page_id: int
    title: str


class Registry:
    """Addressable page table and the root navigation state.

    Invariants:
    - `current` always resolves in `pages`
    - `history` has one entry per forward navigation not yet unwound
    - ids handed out by allocate_page_id() are never reused
    """

    def __init__(
        self,
        settings: Settings,
        theme: Theme = DEFAULT_THEME,
        root_page: int = 0,
        width: int = 80,
        height: int = 24,
    ) -> None:
        self.settings = settings
        self.theme = theme
        self.pages: dict[int, AnyPage] = {}
        self.root_page = root_page
        self.current = root_page
        self.history: list[HistoryEntry] = []
        self.show_help = False
        self.quitting = False
        self.error: BiodataError | None = None
        self.width = width
        self.height = height
        self._next_result_id = settings.result_page_offset

    # -------------------------------------------------------------------------
    # Page table
    # -------------------------------------------------------------------------

    def register(self, page_id: int, page: AnyPage) -> None:
        """Add a page under a new id."""
        if page_id in self.pages:
            raise ValueError(f"Page id {page_id} already registered")
        if page.page_id != page_id:
            raise ValueError(
                f"Page '{page.title}' carries id {page.page_id}, registered as {page_id}"
            )
        self.pages[page_id] = page
        logger.debug("Registered %s page %d '%s'", page_kind(page), page_id, page.title)

    def allocate_page_id(self) -> int:
        """Hand out a fresh id in the runtime range."""
        while self._next_result_id in self.pages:
            self._next_result_id += 1
        page_id = self._next_result_id
        self._next_result_id += 1
        return page_id

    def page(self, page_id: int) -> AnyPage:
        try:
            return self.pages[page_id]
        except KeyError:
            raise UnknownPageError(page_id) from None

    @property
    def current_page(self) -> AnyPage:
        return self.page(self.current)

    def validate(self) -> None:
        """Check that the current page and every menu destination resolve."""
        self.page(self.current)
        for page in self.pages.values():
            if isinstance(page, MenuPage):
                for destination in page.options:
                    self.page(destination)

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    @property
    def depth(self) -> int:
        return len(self.history)

    def navigate(self, destination: int, from_title: str) -> None:
        """Move forward to `destination`, remembering the current page."""
        self.page(destination)
        self.history.append(HistoryEntry(self.current, from_title))
        logger.debug("Navigate %d -> %d", self.current, destination)
        self.current = destination

    def go_back(self) -> bool:
        """Unwind one level of history. Returns False at the root."""
        if not self.history:
            return False
        entry = self.history.pop()
        logger.debug("Back %d -> %d", self.current, entry.page_id)
        self.current = entry.page_id
        return True

    def breadcrumbs(self) -> str:
        titles = [entry.title for entry in self.history]
        titles.append(self.current_page.get_title())
        return self.theme.breadcrumb_separator.join(titles)

    def fail(self, error: BiodataError) -> None:
        """Record a fatal error and stop the session."""
        logger.error("Fatal: %s", error.message)
        self.error = error
        self.quitting = True

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> Effect | None:
        """Handle one action and return the effect to run, if any.

        Quit and ToggleHelp are handled here. Resize updates the stored size
        and is still forwarded. Completion actions go to the page that asked
        for them, everything else to the current page.
        """
        if isinstance(action, Quit):
            self.quitting = True
            return None
        if isinstance(action, ToggleHelp):
            self.show_help = not self.show_help
            return None
        if isinstance(action, Resize):
            self.width = action.width
            self.height = action.height

        if isinstance(action, CompletionAction):
            target = self.page(action.page_id)
        else:
            target = self.current_page
        _, effect = target.handle(action, self)
        return effect

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render_help(self) -> str:
        theme = self.theme
        rows = []
        for group in HELP_LEGEND:
            cells = [
                f"[{theme.help_key_style}]{escape(key)}[/] [{theme.help_text_style}]{desc}[/]"
                for key, desc in group
            ]
            rows.append(f"[{theme.help_text_style}] • [/]".join(cells))
        return "\n".join(rows)

    def render(self) -> str:
        """Compose breadcrumbs, the current page and, when enabled, the help legend."""
        if self.quitting:
            if self.error is not None:
                return f"\n  [{self.theme.error_style}]{escape(self.error.message)}[/]\n\n"
            return "\n  See you later!\n\n"

        s = f"[{self.theme.breadcrumb_style}] {escape(self.breadcrumbs())} [/]\n\n"
        s += self.current_page.render(self)

        if not self.show_help:
            return s

        help_view = self.render_help()
        used = s.count("\n") + help_view.count("\n") + 1
        padding = max(self.height - used - self.theme.help_bottom_margin, 0)
        return s + "\n" * padding + help_view
