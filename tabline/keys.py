# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Abstract key events consumed by the Tabline line editor.

Key sources translate terminal input into `KeyEvent`s so the editor never
depends on a particular terminal implementation.

Example:
    KeyEvent.of("a")        → printable character `a`
    KeyEvent(Key.ENTER)     → Enter
    KeyEvent.ctrl("c")      → Ctrl-C
    KeyEvent.alt("\\x7f")   → Alt+Backspace
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BACKSPACE_CHAR = "\x7f"


class Key(Enum):
    """Kinds of decoded key events."""

    CHAR = "char"
    ENTER = "enter"
    TAB = "tab"
    BACKSPACE = "backspace"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    CTRL = "ctrl"
    ALT = "alt"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """
    One decoded key press.

    Attributes:
        key (Key): The kind of key.
        char (str): The character for `CHAR` and `ALT` events, or the lowercase
            letter for `CTRL` events. Empty for all other kinds.
    """

    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> KeyEvent:
        return cls(Key.CHAR, char)

    @classmethod
    def ctrl(cls, letter: str) -> KeyEvent:
        return cls(Key.CTRL, letter.lower())

    @classmethod
    def alt(cls, char: str) -> KeyEvent:
        return cls(Key.ALT, char)

    def is_word_erase(self) -> bool:
        """Alt+Backspace erases the last word."""
        return self.key is Key.ALT and self.char in (BACKSPACE_CHAR, "\b")
