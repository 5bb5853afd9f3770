"""Search page: query input, loading state and the list of fetched results."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from rich.markup import escape

from ...formatting import ResultSummary, summarize_records
from ..actions import (
    Back,
    CursorEnd,
    CursorHome,
    DeleteForward,
    FetchFailed,
    FetchSucceeded,
    InsertText,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    PageDown,
    PageUp,
    Resize,
    Select,
    Tick,
)
from ..components import SelectList, Spinner, TextField
from ..effects import SearchAndFetch
from .base import Page
from .detail import ResultDetailPage

if TYPE_CHECKING:
    from ...entrez.models import SeqRecord
    from ..actions import Action
    from ..effects import Effect
    from ..registry import Registry

logger = logging.getLogger(__name__)

# Rows taken by one result entry: title, description, spacer
ROWS_PER_RESULT = 3


class SearchState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RECEIVED = "received"


class SearchPage(Page):
    """Free-text search against one Entrez database and filter.

    IDLE -> (Select with a query) -> LOADING -> (FetchSucceeded) -> RECEIVED.
    FetchFailed returns to IDLE with an inline error, or ends the session when
    the registry is configured to treat fetch errors as fatal.

    Back in RECEIVED clears the list and returns to IDLE, unless a result was
    opened from it; then Back unwinds history like any other page.
    """

    def __init__(
        self,
        page_id: int,
        title: str,
        filter: str,
        description: str = "",
        database: str = "nuccore",
    ) -> None:
        self.page_id = page_id
        self.title = title
        self.description = description
        self.filter = filter
        self.database = database
        self.input = TextField(placeholder="Text query", char_limit=156, width=20)
        self.spinner = Spinner()
        self.state = SearchState.IDLE
        self.results: SelectList[ResultSummary] = SelectList()
        self.records: dict[int, SeqRecord] = {}
        self.result_pages: list[int] = []
        self.error: str | None = None
        # Set once a result detail page was opened from the current list
        self.visited_result = False

    @property
    def query(self) -> str:
        return self.input.value.strip()

    def reset(self) -> None:
        """Back to IDLE with an empty input.

        Detail pages registered for the discarded results stay in the registry.
        """
        self.state = SearchState.IDLE
        self.input.reset()
        self.results = SelectList()
        self.records = {}
        self.result_pages = []
        self.error = None
        self.visited_result = False

    def handle(self, action: Action, root: Registry) -> tuple[Registry, Effect | None]:
        if isinstance(action, FetchSucceeded):
            self._receive(action, root)
            return root, None
        if isinstance(action, FetchFailed):
            self._fail(action, root)
            return root, None
        if isinstance(action, Resize):
            self._resize(action.width, action.height, root)
            return root, None

        if self.state is SearchState.IDLE:
            return root, self._handle_idle(action, root)
        if self.state is SearchState.LOADING:
            if isinstance(action, Tick):
                self.spinner.tick()
            elif isinstance(action, Back):
                # The fetch keeps running and will still be delivered here
                root.go_back()
            return root, None

        self._handle_received(action, root)
        return root, None

    def _handle_idle(self, action: Action, root: Registry) -> Effect | None:
        field = self.input
        if isinstance(action, Select):
            if not self.query:
                return None
            self.state = SearchState.LOADING
            self.error = None
            self.spinner.frame = 0
            logger.debug("Searching %s/%s for %r", self.database, self.filter, self.query)
            return SearchAndFetch(
                page_id=self.page_id,
                database=self.database,
                filter=self.filter,
                query=self.query,
            )
        if isinstance(action, Back):
            if field.value:
                field.delete_backward()
            else:
                root.go_back()
        elif isinstance(action, (MoveUp, MoveDown)):
            if action.char:
                field.insert(action.char)
        elif isinstance(action, (MoveLeft, MoveRight)):
            if action.char:
                field.insert(action.char)
            else:
                field.move_cursor(-1 if isinstance(action, MoveLeft) else 1)
        elif isinstance(action, InsertText):
            field.insert(action.text)
        elif isinstance(action, DeleteForward):
            field.delete_forward()
        elif isinstance(action, CursorHome):
            field.home()
        elif isinstance(action, CursorEnd):
            field.end()
        return None

    def _handle_received(self, action: Action, root: Registry) -> None:
        if isinstance(action, Back):
            if self.visited_result:
                root.go_back()
            else:
                self.reset()
        elif isinstance(action, MoveUp):
            self.results.move(-1)
        elif isinstance(action, MoveDown):
            self.results.move(1)
        elif isinstance(action, PageUp):
            self.results.move(-self.results.height)
        elif isinstance(action, PageDown):
            self.results.move(self.results.height)
        elif isinstance(action, Select):
            if self.results.selected is None:
                return
            root.show_help = False
            self.visited_result = True
            root.navigate(self.result_pages[self.results.index], self.title)

    def _receive(self, action: FetchSucceeded, root: Registry) -> None:
        if self.state is not SearchState.LOADING:
            logger.warning("Dropping results for '%s' delivered outside a search", self.title)
            return

        theme = root.theme
        width = root.width - theme.viewport_margin_x
        height = root.height - theme.viewport_margin_y

        summaries = summarize_records(action.records, action.ids)
        self.records = {}
        self.result_pages = []
        self.visited_result = False
        for position, (record, summary) in enumerate(zip(action.records, summaries)):
            page_id = root.allocate_page_id()
            root.register(
                page_id,
                ResultDetailPage(
                    page_id=page_id,
                    record=record,
                    title=record.primary_accession or summary.accession,
                    database=self.database,
                    width=width,
                    height=height,
                    label_padding=root.settings.label_padding,
                ),
            )
            self.records[position] = record
            self.result_pages.append(page_id)

        self.results = SelectList(items=summaries, title=action.query or self.query)
        self.results.set_height(height // ROWS_PER_RESULT)
        self.state = SearchState.RECEIVED
        if root.current == self.page_id:
            root.show_help = False
        logger.info("'%s' received %d results", self.title, len(summaries))

    def _fail(self, action: FetchFailed, root: Registry) -> None:
        if root.settings.exit_on_fetch_error:
            root.fail(action.error)
            return
        self.state = SearchState.IDLE
        self.error = action.error.message

    def _resize(self, width: int, height: int, root: Registry) -> None:
        theme = root.theme
        self.input.set_width(width - theme.viewport_margin_x)
        if self.state is SearchState.RECEIVED:
            self.results.set_height((height - theme.viewport_margin_y) // ROWS_PER_RESULT)

    def render(self, root: Registry) -> str:
        theme = root.theme
        parts = [escape(self.description), "", ""]

        if self.state is SearchState.RECEIVED:
            parts.append(self._render_results(root))
        elif self.state is SearchState.LOADING:
            parts.append(
                f"[{theme.spinner_style}]{self.spinner.view()}[/] Loading results of query ... "
            )
        else:
            parts.append(self.input.render(theme.cursor_style, theme.placeholder_style))
            if self.error:
                parts.append("")
                parts.append(f"[{theme.error_style}]✗ {escape(self.error)}[/]")

        parts.append("")
        parts.append("")
        return "\n".join(parts)

    def _render_results(self, root: Registry) -> str:
        theme = root.theme
        lines = [f"[bold]{escape(self.results.title)}[/]", ""]
        if not self.results.items:
            lines.append(f"[{theme.description_style}]No results found.[/]")
            return "\n".join(lines)

        for position, item in self.results.visible():
            if position == self.results.index:
                lines.append(f"[{theme.selected_result_style}]│ {escape(item.title)}[/]")
                lines.append(f"[{theme.selected_result_style}]│ {escape(item.description)}[/]")
            else:
                lines.append(f"[{theme.result_title_style}]  {escape(item.title)}[/]")
                lines.append(f"[{theme.result_description_style}]  {escape(item.description)}[/]")
            lines.append("")
        lines.append(
            f"[{theme.description_style}]{self.results.index + 1}/{len(self.results.items)}[/]"
        )
        return "\n".join(lines)
