"""Stateful sub-views used by pages: text field, selectable list, viewport, spinner.

Each component mutates only itself and renders to Rich markup. Styles are
passed in by the owning page from the registry's theme.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from rich.markup import escape

T = TypeVar("T")


@dataclass
class TextField:
    """Single-line text input with a cursor.

    Only `width` columns are shown; the window scrolls horizontally to keep
    the cursor in view.
    """

    placeholder: str = ""
    char_limit: int = 156
    width: int = 20
    value: str = ""
    cursor: int = 0
    offset: int = 0

    def insert(self, text: str) -> None:
        room = self.char_limit - len(self.value)
        if room <= 0:
            return
        text = text[:room]
        self.value = self.value[: self.cursor] + text + self.value[self.cursor :]
        self.cursor += len(text)
        self._follow()

    def delete_backward(self) -> None:
        if self.cursor == 0:
            return
        self.value = self.value[: self.cursor - 1] + self.value[self.cursor :]
        self.cursor -= 1
        self._follow()

    def delete_forward(self) -> None:
        self.value = self.value[: self.cursor] + self.value[self.cursor + 1 :]
        self._follow()

    def move_cursor(self, delta: int) -> None:
        self.cursor = max(0, min(len(self.value), self.cursor + delta))
        self._follow()

    def home(self) -> None:
        self.cursor = 0
        self._follow()

    def end(self) -> None:
        self.cursor = len(self.value)
        self._follow()

    def reset(self) -> None:
        self.value = ""
        self.cursor = 0
        self.offset = 0

    def set_width(self, width: int) -> None:
        self.width = max(1, width)
        self._follow()

    def _follow(self) -> None:
        # Keep the window filled, then keep the cursor cell inside it
        self.offset = min(self.offset, max(0, len(self.value) + 1 - self.width))
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.width:
            self.offset = self.cursor - self.width + 1

    def render(self, cursor_style: str, placeholder_style: str) -> str:
        """Render the visible window as `> text` with the cursor cell highlighted."""
        if not self.value:
            head = self.placeholder[:1] or " "
            rest = self.placeholder[1 : self.width]
            return f"> [{cursor_style}]{escape(head)}[/][{placeholder_style}]{escape(rest)}[/]"
        window = self.value[self.offset : self.offset + self.width]
        pos = self.cursor - self.offset
        before = window[:pos]
        at = window[pos : pos + 1] or " "
        after = window[pos + 1 :]
        return f"> {escape(before)}[{cursor_style}]{escape(at)}[/]{escape(after)}"


@dataclass
class SelectList(Generic[T]):
    """Vertical list with a highlighted entry and a scrolling window."""

    items: list[T] = field(default_factory=list)
    index: int = 0
    offset: int = 0
    height: int = 10
    title: str = ""

    @property
    def selected(self) -> T | None:
        if not self.items:
            return None
        return self.items[self.index]

    def move(self, delta: int) -> None:
        if not self.items:
            return
        self.index = max(0, min(len(self.items) - 1, self.index + delta))
        self._follow()

    def set_height(self, height: int) -> None:
        self.height = max(1, height)
        self._follow()

    def visible(self) -> list[tuple[int, T]]:
        """(position, item) pairs inside the window."""
        end = self.offset + self.height
        return list(enumerate(self.items))[self.offset : end]

    def _follow(self) -> None:
        if self.index < self.offset:
            self.offset = self.index
        elif self.index >= self.offset + self.height:
            self.offset = self.index - self.height + 1


@dataclass
class Viewport:
    """Scrollable window over a block of text."""

    lines: list[str] = field(default_factory=list)
    width: int = 80
    height: int = 20
    offset: int = 0

    def set_content(self, text: str) -> None:
        self.lines = text.splitlines()
        self.offset = min(self.offset, self.max_offset)

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    def scroll(self, delta: int) -> None:
        self.offset = max(0, min(self.max_offset, self.offset + delta))

    def page(self, pages: int) -> None:
        self.scroll(pages * self.height)

    def set_size(self, width: int, height: int) -> None:
        self.width = max(1, width)
        self.height = max(1, height)
        self.offset = min(self.offset, self.max_offset)

    def view(self) -> str:
        """Visible lines, padded to the viewport height."""
        window = self.lines[self.offset : self.offset + self.height]
        window += [""] * (self.height - len(window))
        return "\n".join(escape(line[: self.width]) for line in window)


# Braille dots, the classic terminal spinner
DOT_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")


@dataclass
class Spinner:
    frames: tuple[str, ...] = DOT_FRAMES
    frame: int = 0

    def tick(self) -> None:
        self.frame = (self.frame + 1) % len(self.frames)

    def view(self) -> str:
        return self.frames[self.frame]
