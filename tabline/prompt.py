# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Prompt`, the interactive line editor at the heart of Tabline.

A `Prompt` prints its prompt text, reads key events one at a time and keeps an
edit buffer split at the cursor (`left` / `right`). It supports:

- Cursor movement with Left/Right
- History browsing with Up/Down across reads of the same `Prompt`
- Backspace and Alt+Backspace (erase the last word)
- Tab completion from a command grammar or a user callback
- Ctrl-C and Ctrl-D, raised as `InterruptSignal` and `EndOfInputSignal`

On Enter the finished line is recorded in the history (unless empty) and
returned split into shell-like words.

Example:
    prompt = Prompt("> ", [Command("print"), Command("cat").arg("--help")])
    while True:
        try:
            words = prompt.read_commandline()
        except InterruptSignal:
            continue
        except EndOfInputSignal:
            break
"""
from __future__ import annotations

import functools
import sys
from typing import Callable, Sequence

from tabline.completion import (
    CallbackCompleter,
    Command,
    CompletionResult,
    Description,
    GrammarCompleter,
    PossibilityList,
)
from tabline.keys import Key, KeyEvent
from tabline.logger import logger
from tabline.protocols import KeySource, RawModeScope, Screen
from tabline.signals import EndOfInputSignal, InterruptSignal
from tabline.split import last_word_start, quote_word, split


class Prompt:
    """
    Reusable interactive command-line reader.

    The completion strategy is chosen once here: pass `commands` for grammar
    based completion or `completion` for a callback returning candidate words.

    Args:
        prompt_text (str): Text written before the user input.
        commands (Sequence[Command] | None): Command grammar used by Tab.
        completion (Callable[[str], list[str]] | None): Completion callback
            receiving the text left of the cursor.
        key_source (KeySource | None): Source of key events. Defaults to a
            `Vt100KeySource` on stdin.
        screen (Screen | None): Output sink. Defaults to a `Vt100Screen` on stdout.
        raw_mode (RawModeScope | None): Factory for the raw-mode context.
            Defaults to `raw_terminal` on stdin.
        history (list[str] | None): Initial history, oldest first.

    Raises:
        ValueError: If both `commands` and `completion` are given.
    """

    def __init__(
        self,
        prompt_text: str = "> ",
        commands: Sequence[Command] | None = None,
        completion: Callable[[str], list[str]] | None = None,
        *,
        key_source: KeySource | None = None,
        screen: Screen | None = None,
        raw_mode: RawModeScope | None = None,
        history: list[str] | None = None,
    ):
        if commands is not None and completion is not None:
            raise ValueError("Pass either a command grammar or a completion callback, not both.")
        self.prompt_text = prompt_text
        self.history: list[str] = list(history or [])
        self.completer: GrammarCompleter | CallbackCompleter
        if completion is not None:
            self.completer = CallbackCompleter(completion)
        else:
            self.completer = GrammarCompleter(commands or [])
        self._key_source = key_source
        self._screen = screen
        self._raw_mode = raw_mode

    @property
    def key_source(self) -> KeySource:
        if self._key_source is None:
            from tabline.terminal import Vt100KeySource

            self._key_source = Vt100KeySource(sys.stdin.fileno())
        return self._key_source

    @property
    def screen(self) -> Screen:
        if self._screen is None:
            from tabline.terminal import Vt100Screen

            self._screen = Vt100Screen()
        return self._screen

    @property
    def raw_mode(self) -> RawModeScope:
        if self._raw_mode is None:
            from tabline.terminal import raw_terminal

            self._raw_mode = functools.partial(raw_terminal, sys.stdin.fileno())
        return self._raw_mode

    def reprint(self, left: str, right: str, wipe: int = 0) -> None:
        """
        Redraw the current line and park the cursor between `left` and `right`.

        `wipe` extra blanks are written after the line to erase characters left
        over from a longer previous rendering.
        """
        screen = self.screen
        screen.carriage_return()
        screen.write(f"{self.prompt_text}{left}{right}{' ' * wipe}")
        screen.move_left(len(right) + wipe)
        screen.flush()

    def replace_cmdline(self, new_line: str, left: str, right: str) -> tuple[str, str]:
        """Blank the displayed line and show `new_line` with the cursor at its end."""
        screen = self.screen
        screen.carriage_return()
        screen.write(" " * (len(self.prompt_text) + len(left) + len(right)))
        self.reprint(new_line, "")
        return new_line, ""

    def print_below(self, text: str, left: str, right: str) -> None:
        """Print `text` on a fresh line below, then redraw the prompt and buffer."""
        self.screen.write(f"\r\n{text}\r\n")
        self.reprint(left, right)

    def apply_completion(self, result: CompletionResult, left: str, right: str) -> str:
        """Apply a completion result to the buffer and return the new `left`."""
        if isinstance(result, Description):
            self.print_below(result.text, left, right)
        elif isinstance(result, PossibilityList):
            if len(result.words) == 1:
                start = last_word_start(left)
                new_left = f"{left[:start]}{quote_word(result.words[0])} "
                self.reprint(new_left, right, wipe=max(0, len(left) - len(new_left)))
                return new_left
            if result.words:
                self.print_below("  ".join(result.words), left, right)
        return left

    def erase_word(self, left: str, right: str) -> str:
        """Drop the last word of `left`, rebuilding it from the remaining words."""
        words = split(left)
        if not words:
            return left
        words.pop()
        new_left = "".join(f"{word} " for word in words)
        self.reprint(new_left, right, wipe=max(0, len(left) - len(new_left)))
        return new_left

    def read_commandline(self) -> list[str]:
        """
        Prompt for a single command line.

        Returns:
            list[str]: The submitted line split into words, e.g.
            `> print out "example command"` gives
            `["print", "out", "example command"]`.

        Raises:
            InterruptSignal: Ctrl-C was pressed.
            EndOfInputSignal: Ctrl-D was pressed or the input ended.
            OSError: Reading keys or writing to the screen failed.
        """
        screen = self.screen
        left = ""
        right = ""
        history_offset = 0

        with self.raw_mode():
            screen.write(self.prompt_text)
            screen.flush()
            for event in self.key_source:
                if event.key is Key.ENTER:
                    break
                if event.key is Key.TAB:
                    left = self.apply_completion(self.completer.complete(left), left, right)
                elif event.key is Key.CHAR:
                    left += event.char
                    self.reprint(left, right)
                elif event.key is Key.LEFT:
                    if left:
                        right = left[-1] + right
                        left = left[:-1]
                        screen.move_left(1)
                        screen.flush()
                elif event.key is Key.RIGHT:
                    if right:
                        left += right[0]
                        right = right[1:]
                        screen.move_right(1)
                        screen.flush()
                elif event.key is Key.UP:
                    if history_offset < len(self.history):
                        history_offset += 1
                        logger.debug("History offset %d.", history_offset)
                        left, right = self.replace_cmdline(
                            self.history[-history_offset], left, right
                        )
                elif event.key is Key.DOWN:
                    if history_offset == 1:
                        history_offset = 0
                        left, right = self.replace_cmdline("", left, right)
                    elif history_offset > 1:
                        history_offset -= 1
                        logger.debug("History offset %d.", history_offset)
                        left, right = self.replace_cmdline(
                            self.history[-history_offset], left, right
                        )
                elif event.key is Key.BACKSPACE:
                    if left:
                        left = left[:-1]
                        self.reprint(left, right, wipe=1)
                elif event.is_word_erase():
                    left = self.erase_word(left, right)
                elif event == KeyEvent.ctrl("c"):
                    self._end_line()
                    raise InterruptSignal()
                elif event == KeyEvent.ctrl("d"):
                    self._end_line()
                    raise EndOfInputSignal()
            else:
                raise EndOfInputSignal()
            self._end_line()

        line = left + right
        if line:
            self.history.append(line)
        logger.debug("Submitted %r.", line)
        return split(line)

    def _end_line(self) -> None:
        self.screen.write("\r\n")
        self.screen.flush()
