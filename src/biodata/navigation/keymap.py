"""Key decoding: terminal key names to actions, plus the help legend."""

from __future__ import annotations

from .actions import (
    Action,
    Back,
    CursorEnd,
    CursorHome,
    DeleteForward,
    Download,
    InsertText,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    PageDown,
    PageUp,
    Quit,
    Select,
    ToggleHelp,
)

# Key names follow Textual's naming (textual.keys)
_KEY_ACTIONS: dict[str, Action] = {
    "up": MoveUp(),
    "down": MoveDown(),
    "left": MoveLeft(),
    "right": MoveRight(),
    "k": MoveUp(char="k"),
    "j": MoveDown(char="j"),
    "h": MoveLeft(char="h"),
    "l": MoveRight(char="l"),
    "enter": Select(),
    "backspace": Back(),
    "ctrl+h": Back(),
    "question_mark": ToggleHelp(),
    "escape": Quit(),
    "ctrl+c": Quit(),
    "delete": DeleteForward(),
    "home": CursorHome(),
    "end": CursorEnd(),
    "pageup": PageUp(),
    "pagedown": PageDown(),
    "ctrl+d": Download(),
}

# Grouped (keys, description) pairs; each group renders as one legend row
HELP_LEGEND: list[list[tuple[str, str]]] = [
    [("↑/k", "move up"), ("↓/j", "move down")],
    [("←/h", "move left"), ("→/l", "move right")],
    [("bksp", "previous page"), ("enter", "select")],
    [("pgup/pgdn", "page"), ("ctrl+d", "download sequence")],
    [("?", "toggle help"), ("esc/ctrl+c", "quit")],
]


def decode_key(key: str, character: str | None = None) -> Action | None:
    """Translate one key event into an action.

    Printable characters without a binding become InsertText. Returns None for
    keys the application ignores.
    """
    action = _KEY_ACTIONS.get(key)
    if action is not None:
        return action
    if character == "?":
        return ToggleHelp()
    if character is not None and character.isprintable():
        return InsertText(character)
    return None
