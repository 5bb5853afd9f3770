"""Main Textual TUI app for the biodata browser."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Static

from .catalog import build_registry
from .config import get_settings
from .entrez import EntrezClient
from .navigation import SearchPage, SearchState, decode_key, run_effect
from .navigation.actions import Quit, Resize, Tick
from .ui.theme import DEFAULT_THEME

if TYPE_CHECKING:
    from textual import events

    from .config import Settings
    from .navigation import Effect, Registry
    from .navigation.actions import Action
    from .ui.theme import Theme

logger = logging.getLogger(__name__)

SPINNER_INTERVAL = 0.1


class ActionPosted(Message):
    """Posted when an effect completes; carries its completion action."""

    def __init__(self, action: Action) -> None:
        super().__init__()
        self.action = action


class PageView(Static):
    """Displays the registry's rendered frame."""

    pass


class BiodataApp(App[int]):
    """Biodata - Entrez sequence browser TUI."""

    TITLE = "Biodata"

    CSS = """
    PageView {
        width: 100%;
        height: 100%;
        padding: 1 0 0 2;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    BINDINGS: ClassVar[list[Binding | tuple[str, str] | tuple[str, str, str]]] = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
        Binding("escape", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        client: EntrezClient | None = None,
        theme: Theme | None = None,
        registry: Registry | None = None,
    ) -> None:
        super().__init__()
        self._app_settings = settings or get_settings()
        self._entrez_client = client or EntrezClient(self._app_settings)
        self.registry = registry or build_registry(self._app_settings, theme or DEFAULT_THEME)

    def compose(self) -> ComposeResult:
        yield PageView(id="page-view")

    def on_mount(self) -> None:
        self.apply_action(Resize(self.size.width, self.size.height))
        self.set_interval(SPINNER_INTERVAL, self._tick)

    async def on_unmount(self) -> None:
        """Close the HTTP client on exit."""
        await self._entrez_client.aclose()

    def on_key(self, event: events.Key) -> None:
        """Decode keys into actions for the registry."""
        action = decode_key(event.key, event.character)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        self.apply_action(action)

    def on_resize(self, event: events.Resize) -> None:
        self.apply_action(Resize(event.size.width, event.size.height))

    async def action_quit(self) -> None:
        """Quit the application cleanly."""
        self.apply_action(Quit())

    @on(ActionPosted)
    def handle_action_posted(self, event: ActionPosted) -> None:
        self.apply_action(event.action)

    def apply_action(self, action: Action) -> None:
        """Feed one action to the registry, start its effect and redraw."""
        effect = self.registry.dispatch(action)
        if effect is not None:
            self._run_effect(effect)

        if self.registry.quitting:
            error = self.registry.error
            if error is not None:
                self.exit(return_code=1, message=error.message)
            else:
                self.exit(return_code=0)
            return
        self._refresh_view()

    @work(group="effects")
    async def _run_effect(self, effect: Effect) -> None:
        """Run an effect off the dispatch path and post its completion back."""
        action = await run_effect(effect, self._entrez_client)
        self.post_message(ActionPosted(action))

    def _tick(self) -> None:
        page = self.registry.current_page
        if isinstance(page, SearchPage) and page.state is SearchState.LOADING:
            self.apply_action(Tick())

    def _refresh_view(self) -> None:
        try:
            view = self.query_one("#page-view", PageView)
        except NoMatches:
            # Resize can arrive before compose
            return
        view.update(self.registry.render())
