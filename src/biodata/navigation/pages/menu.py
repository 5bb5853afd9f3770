"""Static menu page: a list of labelled options leading to other pages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from ..actions import Back, MoveDown, MoveUp, Select
from .base import Page

if TYPE_CHECKING:
    from ..actions import Action
    from ..effects import Effect
    from ..registry import Registry


class MenuPage(Page):
    """Menu of (label, destination page id) options with a clamped cursor."""

    def __init__(
        self,
        page_id: int,
        title: str,
        labels: list[str],
        destinations: list[int],
        description: str = "",
    ) -> None:
        if len(labels) != len(destinations):
            raise ValueError(
                f"Menu '{title}' has {len(labels)} labels but {len(destinations)} destinations"
            )
        if not labels:
            raise ValueError(f"Menu '{title}' has no options")
        self.page_id = page_id
        self.title = title
        self.description = description
        self.labels = list(labels)
        self.options = list(destinations)
        self.choice = 0

    @property
    def destination(self) -> int:
        """Page id of the highlighted option."""
        return self.options[self.choice]

    def handle(self, action: Action, root: Registry) -> tuple[Registry, Effect | None]:
        if isinstance(action, MoveUp):
            self.choice = max(0, self.choice - 1)
        elif isinstance(action, MoveDown):
            self.choice = min(len(self.labels) - 1, self.choice + 1)
        elif isinstance(action, Select):
            root.navigate(self.destination, self.title)
        elif isinstance(action, Back):
            root.go_back()
        # MoveLeft/MoveRight are reserved for menus
        return root, None

    def render(self, root: Registry) -> str:
        theme = root.theme
        lines = [f"[bold]{escape(self.title)}[/]"]
        if self.description:
            lines.append(f"[{theme.description_style}]{escape(self.description)}[/]")
        lines.append("")
        for idx, label in enumerate(self.labels):
            if idx == self.choice:
                lines.append(f"[{theme.selected_option_style}]❯ {escape(label)}[/]")
            else:
                lines.append(f"[{theme.option_style}]  {escape(label)}[/]")
        lines.append("")
        return "\n".join(lines)
