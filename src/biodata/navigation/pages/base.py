"""Page contract shared by every screen in the registry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..actions import Action
    from ..effects import Effect
    from ..registry import Registry


class Page(ABC):
    """One addressable screen.

    Subclasses must:
    1. Set `page_id` (its registry key) and `title` at construction; the title
       is shown in breadcrumbs and must not change
    2. Implement handle() to react to actions the registry delegates
    3. Implement render() without side effects

    handle() may mutate the page's own fields and navigate the registry, and
    returns the root state together with at most one effect to run.
    """

    page_id: int
    title: str

    @abstractmethod
    def handle(self, action: Action, root: Registry) -> tuple[Registry, Effect | None]:
        """React to an action."""

    @abstractmethod
    def render(self, root: Registry) -> str:
        """Render the page body as Rich markup."""

    def get_title(self) -> str:
        return self.title
