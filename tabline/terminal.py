# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Terminal adapters for Tabline built on prompt_toolkit's VT100 primitives.

- `Vt100KeySource` reads bytes from a file descriptor, decodes them with
  prompt_toolkit's `Vt100Parser` and yields Tabline `KeyEvent`s.
- `Vt100Screen` writes text and cursor movements through a prompt_toolkit
  `Output`.
- `raw_terminal` enters raw mode on a file descriptor for the duration of a
  `with` block and restores the previous settings on exit.

These are the defaults `Prompt` uses when no other collaborators are injected.
They require a POSIX terminal.
"""
from __future__ import annotations

import codecs
import os
import select
from collections import deque
from typing import ContextManager, Iterator

from prompt_toolkit.input.vt100 import raw_mode
from prompt_toolkit.input.vt100_parser import Vt100Parser
from prompt_toolkit.key_binding import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import Output, create_output

from tabline.keys import BACKSPACE_CHAR, Key, KeyEvent
from tabline.logger import logger

_NAMED_KEYS: dict[Keys, Key] = {
    Keys.ControlM: Key.ENTER,
    Keys.ControlJ: Key.ENTER,
    Keys.ControlI: Key.TAB,
    Keys.ControlH: Key.BACKSPACE,
    Keys.Left: Key.LEFT,
    Keys.Right: Key.RIGHT,
    Keys.Up: Key.UP,
    Keys.Down: Key.DOWN,
}


def raw_terminal(fileno: int) -> ContextManager[object]:
    """Return a context manager keeping the terminal on `fileno` in raw mode."""
    return raw_mode(fileno)


class Vt100KeySource:
    """
    Blocking key source reading VT100 input from a file descriptor.

    Iterating yields one `KeyEvent` per decoded key press and stops when the
    descriptor reports end of file. An `Escape` key press followed by a character
    or Backspace within `escape_timeout` is reported as a single `ALT` event;
    otherwise the `Escape` is reported on its own as `OTHER`. Read errors
    propagate as `OSError`.

    Args:
        fileno (int): Descriptor to read from, usually `sys.stdin.fileno()`.
        escape_timeout (float): Seconds to wait for the rest of an escape
            sequence before treating a lone `Escape` as complete.
    """

    def __init__(self, fileno: int, escape_timeout: float = 0.05):
        self.fileno = fileno
        self.escape_timeout = escape_timeout
        self._escape_pending = False

    def __iter__(self) -> Iterator[KeyEvent]:
        key_presses: deque[KeyPress] = deque()
        parser = Vt100Parser(key_presses.append)
        decoder = codecs.getincrementaldecoder("utf-8")("replace")
        self._escape_pending = False

        while True:
            while key_presses:
                yield from self._translate(key_presses.popleft())

            data = os.read(self.fileno, 1024)
            if not data:
                parser.feed(decoder.decode(b"", final=True))
                parser.flush()
                yield from self._drain(key_presses)
                logger.debug("Key source on fd %d reached end of input.", self.fileno)
                return

            parser.feed(decoder.decode(data))
            if not self._more_input_pending():
                parser.flush()
                yield from self._drain(key_presses)

    def _drain(self, key_presses: deque[KeyPress]) -> Iterator[KeyEvent]:
        """Translate buffered key presses and close any Escape left waiting."""
        while key_presses:
            yield from self._translate(key_presses.popleft())
        if self._escape_pending:
            self._escape_pending = False
            yield KeyEvent(Key.OTHER)

    def _more_input_pending(self) -> bool:
        ready, _, _ = select.select([self.fileno], [], [], self.escape_timeout)
        return bool(ready)

    def _translate(self, key_press: KeyPress) -> list[KeyEvent]:
        key = key_press.key
        if key == Keys.Escape:
            if self._escape_pending:
                return [KeyEvent(Key.OTHER)]
            self._escape_pending = True
            return []

        event = self._to_event(key_press)
        if self._escape_pending:
            self._escape_pending = False
            if event.key is Key.CHAR:
                return [KeyEvent.alt(event.char)]
            if event.key is Key.BACKSPACE:
                return [KeyEvent.alt(BACKSPACE_CHAR)]
        if key == Keys.BracketedPaste:
            return [
                KeyEvent.of(char)
                for char in key_press.data
                if char.isprintable() and char not in "\r\n"
            ]
        return [event]

    def _to_event(self, key_press: KeyPress) -> KeyEvent:
        key = key_press.key
        if isinstance(key, Keys):
            if key in _NAMED_KEYS:
                return KeyEvent(_NAMED_KEYS[key])
            name = key.value
            if name.startswith("c-") and len(name) == 3 and name[2].isalpha():
                return KeyEvent.ctrl(name[2])
            return KeyEvent(Key.OTHER)
        if len(key) == 1 and key.isprintable():
            return KeyEvent.of(key)
        return KeyEvent(Key.OTHER)


class Vt100Screen:
    """
    Screen sink writing through a prompt_toolkit `Output`.

    Args:
        output (Output | None): Target output. Defaults to `create_output()`,
            which wraps `sys.stdout`.
    """

    def __init__(self, output: Output | None = None):
        self.output = output or create_output()

    def write(self, text: str) -> None:
        self.output.write(text)

    def move_left(self, columns: int) -> None:
        if columns > 0:
            self.output.cursor_backward(columns)

    def move_right(self, columns: int) -> None:
        if columns > 0:
            self.output.cursor_forward(columns)

    def carriage_return(self) -> None:
        self.output.write_raw("\r")

    def flush(self) -> None:
        self.output.flush()
