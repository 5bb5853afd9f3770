"""Result detail page: one fetched record in a scrollable viewport."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.markup import escape

from ...formatting import format_record
from ..actions import (
    Back,
    CursorEnd,
    CursorHome,
    Download,
    FetchFailed,
    MoveDown,
    MoveUp,
    PageDown,
    PageUp,
    Resize,
    SequenceSaved,
)
from ..components import Viewport
from ..effects import DownloadSequence
from .base import Page

if TYPE_CHECKING:
    from ...entrez.models import SeqRecord
    from ..actions import Action
    from ..effects import Effect
    from ..registry import Registry

logger = logging.getLogger(__name__)


def header_lines(title: str, width: int) -> list[str]:
    """Rounded title box joined to a ruler running to `width`."""
    inner = "─" * (len(title) + 2)
    ruler = "─" * max(0, width - len(title) - 4)
    return [f"╭{inner}╮", f"│ {title} ├{ruler}", f"╰{inner}╯"]


def footer_line(width: int) -> str:
    return "─" * max(0, width)


HEADER_HEIGHT = 3
FOOTER_HEIGHT = 1


class ResultDetailPage(Page):
    """Viewer for a single record; created when a search returns."""

    def __init__(
        self,
        page_id: int,
        record: SeqRecord,
        title: str,
        database: str = "nuccore",
        width: int = 80,
        height: int = 24,
        label_padding: int = 20,
    ) -> None:
        self.page_id = page_id
        self.record = record
        self.title = title
        self.database = database
        self.width = max(1, width)
        self.viewport = Viewport()
        self.viewport.set_size(self.width, height - HEADER_HEIGHT - FOOTER_HEIGHT)
        self.viewport.set_content(format_record(record, label_padding))
        self.downloading = False
        self.status: str | None = None
        self.status_is_error = False

    @property
    def accession(self) -> str:
        return self.record.primary_accession or self.title

    def handle(self, action: Action, root: Registry) -> tuple[Registry, Effect | None]:
        if isinstance(action, Back):
            root.go_back()
        elif isinstance(action, MoveUp):
            self.viewport.scroll(-1)
        elif isinstance(action, MoveDown):
            self.viewport.scroll(1)
        elif isinstance(action, PageUp):
            self.viewport.page(-1)
        elif isinstance(action, PageDown):
            self.viewport.page(1)
        elif isinstance(action, CursorHome):
            self.viewport.scroll(-self.viewport.offset)
        elif isinstance(action, CursorEnd):
            self.viewport.scroll(self.viewport.max_offset)
        elif isinstance(action, Resize):
            self.width = max(1, action.width - root.theme.viewport_margin_x)
            height = action.height - root.theme.viewport_margin_y
            self.viewport.set_size(self.width, height - HEADER_HEIGHT - FOOTER_HEIGHT)
        elif isinstance(action, Download):
            return root, self._download(root)
        elif isinstance(action, SequenceSaved):
            self.downloading = False
            self.status = f"Saved sequence of {action.accession} to {action.path}"
            self.status_is_error = False
        elif isinstance(action, FetchFailed):
            self.downloading = False
            if root.settings.exit_on_fetch_error:
                root.fail(action.error)
            else:
                self.status = f"Download failed: {action.error.message}"
                self.status_is_error = True
        return root, None

    def _download(self, root: Registry) -> Effect | None:
        if self.downloading:
            return None
        self.downloading = True
        self.status = f"Downloading {self.accession} ..."
        self.status_is_error = False
        logger.debug("Downloading full sequence of %s", self.accession)
        return DownloadSequence(
            page_id=self.page_id,
            database=self.database,
            accession=self.accession,
            path=root.settings.sequence_path,
        )

    def render(self, root: Registry) -> str:
        theme = root.theme
        header = "\n".join(escape(line) for line in header_lines(self.title, self.width))
        footer = f"[{theme.ruler_style}]{footer_line(self.width)}[/]"
        parts = [header, self.viewport.view(), footer]
        if self.status:
            style = theme.error_style if self.status_is_error else theme.status_style
            parts.append(f"[{style}]{escape(self.status)}[/]")
        return "\n".join(parts)
