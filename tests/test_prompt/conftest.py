from contextlib import contextmanager

import pytest

from tabline.keys import Key, KeyEvent


class FakeScreen:
    """Simulates a terminal: rows of text and a cursor column."""

    def __init__(self):
        self.rows = [""]
        self.row = 0
        self.col = 0
        self.flushes = 0

    def write(self, text):
        for char in text:
            if char == "\r":
                self.col = 0
            elif char == "\n":
                self.row += 1
                if self.row == len(self.rows):
                    self.rows.append("")
            else:
                line = self.rows[self.row].ljust(self.col)
                self.rows[self.row] = line[: self.col] + char + line[self.col + 1 :]
                self.col += 1

    def move_left(self, columns):
        self.col = max(0, self.col - columns)

    def move_right(self, columns):
        self.col += columns

    def carriage_return(self):
        self.col = 0

    def flush(self):
        self.flushes += 1

    def text(self, row):
        return self.rows[row].rstrip()


class FakeRawMode:
    def __init__(self):
        self.entered = 0
        self.exited = 0

    @contextmanager
    def __call__(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class BrokenKeySource:
    def __init__(self, events):
        self.events = events

    def __iter__(self):
        yield from self.events
        raise OSError("input/output error")


def keys(text):
    """Turn text into key events: Tab and newline become TAB and ENTER."""
    events = []
    for char in text:
        if char == "\t":
            events.append(KeyEvent(Key.TAB))
        elif char == "\n":
            events.append(KeyEvent(Key.ENTER))
        else:
            events.append(KeyEvent.of(char))
    return events


UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)
ENTER = KeyEvent(Key.ENTER)
TAB = KeyEvent(Key.TAB)
BACKSPACE = KeyEvent(Key.BACKSPACE)
WORD_ERASE = KeyEvent.alt("\x7f")
CTRL_C = KeyEvent.ctrl("c")
CTRL_D = KeyEvent.ctrl("d")


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def raw_mode():
    return FakeRawMode()
