"""Tests for key decoding."""

from __future__ import annotations

import pytest

from biodata.navigation.actions import (
    Back,
    Download,
    InsertText,
    MoveDown,
    MoveLeft,
    MoveRight,
    MoveUp,
    PageDown,
    Quit,
    Select,
    ToggleHelp,
)
from biodata.navigation.keymap import HELP_LEGEND, decode_key


class TestDecodeKey:
    """Tests for mapping key events to actions."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("up", MoveUp()),
            ("down", MoveDown()),
            ("left", MoveLeft()),
            ("right", MoveRight()),
            ("enter", Select()),
            ("backspace", Back()),
            ("escape", Quit()),
            ("ctrl+c", Quit()),
            ("pagedown", PageDown()),
            ("ctrl+d", Download()),
            ("question_mark", ToggleHelp()),
        ],
    )
    def test_named_keys(self, key: str, expected: object) -> None:
        """Bound key names decode to their action."""
        assert decode_key(key) == expected

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("k", MoveUp(char="k")),
            ("j", MoveDown(char="j")),
            ("h", MoveLeft(char="h")),
            ("l", MoveRight(char="l")),
        ],
    )
    def test_vim_keys_carry_their_letter(self, key: str, expected: object) -> None:
        """Vim keys move but keep the typed letter for text input."""
        assert decode_key(key, key) == expected

    def test_printable_character_inserts(self) -> None:
        """Unbound printable characters become text input."""
        assert decode_key("a", "a") == InsertText("a")
        assert decode_key("space", " ") == InsertText(" ")

    def test_question_mark_by_character(self) -> None:
        """'?' toggles help even when the key name differs."""
        assert decode_key("shift+slash", "?") == ToggleHelp()

    def test_unknown_keys_ignored(self) -> None:
        """Keys without a binding or printable character decode to nothing."""
        assert decode_key("f5") is None
        assert decode_key("tab", "\t") is None


def test_help_legend_mentions_bindings() -> None:
    """The legend documents quit, help and download."""
    descriptions = {desc for group in HELP_LEGEND for _, desc in group}
    assert {"quit", "toggle help", "download sequence", "select"} <= descriptions
