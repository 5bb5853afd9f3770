"""Actions delivered to the navigation registry.

The set is closed: every input the state machine reacts to is one of the
classes below. Completion actions (results of an effect) carry the id of the
page that requested the effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from biodata.entrez.models import SeqRecord
    from biodata.exceptions import BiodataError


@dataclass(frozen=True)
class Action:
    """Base class for all actions."""


@dataclass(frozen=True)
class Quit(Action):
    pass


@dataclass(frozen=True)
class ToggleHelp(Action):
    pass


@dataclass(frozen=True)
class MoveUp(Action):
    # Printable character of the key (e.g. "k"), so text fields can insert it
    char: str | None = None


@dataclass(frozen=True)
class MoveDown(Action):
    char: str | None = None


@dataclass(frozen=True)
class MoveLeft(Action):
    char: str | None = None


@dataclass(frozen=True)
class MoveRight(Action):
    char: str | None = None


@dataclass(frozen=True)
class Select(Action):
    pass


@dataclass(frozen=True)
class Back(Action):
    pass


@dataclass(frozen=True)
class InsertText(Action):
    text: str


@dataclass(frozen=True)
class DeleteForward(Action):
    pass


@dataclass(frozen=True)
class CursorHome(Action):
    pass


@dataclass(frozen=True)
class CursorEnd(Action):
    pass


@dataclass(frozen=True)
class PageUp(Action):
    pass


@dataclass(frozen=True)
class PageDown(Action):
    pass


@dataclass(frozen=True)
class Download(Action):
    pass


@dataclass(frozen=True)
class Tick(Action):
    pass


@dataclass(frozen=True)
class Resize(Action):
    width: int
    height: int


@dataclass(frozen=True)
class FetchSucceeded(Action):
    page_id: int
    records: list[SeqRecord] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    query: str = ""


@dataclass(frozen=True)
class FetchFailed(Action):
    page_id: int
    error: BiodataError


@dataclass(frozen=True)
class SequenceSaved(Action):
    page_id: int
    accession: str
    path: Path


CompletionAction = FetchSucceeded | FetchFailed | SequenceSaved
