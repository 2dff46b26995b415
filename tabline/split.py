# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Shell-like tokenizer for Tabline command lines.

Splits a raw line into argument words while honouring single quotes, double
quotes and backslash escapes. The tokenizer never fails: an unterminated quote
or a trailing backslash simply yields whatever characters were collected.

`EscapingState` exposes the underlying state machine so callers can tell
whether a line ends inside an open quote or right after a backslash.

Example:
    >>> split('print out "example command"')
    ['print', 'out', 'example command']
    >>> EscapingState.process('echo "unterminated').whitespace_escaped()
    True
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EscapingState:
    """
    Escaping state of a command line scanned left to right.

    Attributes:
        single_quote (bool): A single-quoted region is open.
        double_quote (bool): A double-quoted region is open.
        backslash (bool): The previous character was an active backslash.
    """

    single_quote: bool = False
    double_quote: bool = False
    backslash: bool = False

    def step(self, char: str) -> None:
        """Advance the state over one character."""
        if char == '"':
            if not self.doublequote_escaped():
                self.double_quote = not self.double_quote
        elif char == "'":
            if not self.singlequote_escaped():
                self.single_quote = not self.single_quote

        if self.backslash:
            self.backslash = False
        elif char == "\\":
            self.backslash = True

    def whitespace_escaped(self) -> bool:
        """Would a following whitespace be part of the word instead of a delimiter?"""
        return self.single_quote or self.double_quote or self.backslash

    def doublequote_escaped(self) -> bool:
        """Would a following `"` be literal instead of opening/closing a region?"""
        return self.single_quote or self.backslash

    def singlequote_escaped(self) -> bool:
        """Would a following `'` be literal instead of opening/closing a region?"""
        return self.double_quote or self.backslash

    def backslash_escaped(self) -> bool:
        """Would a following backslash be literal instead of escaping the next character?"""
        return self.single_quote or self.double_quote or self.backslash

    @classmethod
    def process(cls, line: str) -> EscapingState:
        """Step over every character of `line` and return the resulting state."""
        state = cls()
        for char in line:
            state.step(char)
        return state


def split(line: str) -> list[str]:
    """
    Split a command line into its argument words.

    Works like `str.split()` but respects whitespace escaping through `"`, `'`
    and `\\`, as well as escaping of the escape characters themselves
    (`\\"`, `'\\'`, `"'"`). Quote and backslash markers are stripped from the
    resulting words. No empty words are ever produced.

    Args:
        line (str): The raw command line.

    Returns:
        list[str]: The argument words in order.
    """
    words: list[str] = []
    current: list[str] = []
    state = EscapingState()
    for char in line:
        if char.isspace() and not state.whitespace_escaped():
            if current:
                words.append("".join(current))
                current = []
        elif char == '"':
            if state.doublequote_escaped():
                current.append(char)
        elif char == "'":
            if state.singlequote_escaped():
                current.append(char)
        elif char == "\\":
            if state.backslash_escaped():
                current.append(char)
        else:
            current.append(char)
        state.step(char)

    if current:
        words.append("".join(current))
    return words


def ends_with_whitespace(text: str) -> bool:
    """Return True if the last character of `text` is whitespace, escaped or not."""
    return bool(text) and text[-1].isspace()


def starts_new_word(text: str) -> bool:
    """
    Return True if the next typed character would begin a fresh word.

    That is the case when `text` ends with whitespace that is not itself
    escaped by an open quote or a preceding backslash.
    """
    if not ends_with_whitespace(text):
        return False
    return not EscapingState.process(text[:-1]).whitespace_escaped()


def last_word_start(text: str) -> int:
    """
    Return the index in `text` where the word currently being typed begins.

    Returns `len(text)` when `text` is empty or ends on a word boundary.
    """
    start: int | None = None
    state = EscapingState()
    for index, char in enumerate(text):
        if char.isspace() and not state.whitespace_escaped():
            start = None
        elif start is None:
            start = index
        state.step(char)
    return len(text) if start is None else start


def quote_word(word: str) -> str:
    """
    Make `word` safe to insert into a command line.

    Words with plain whitespace are wrapped in double quotes. Words carrying
    quote or backslash characters get every special character backslash-escaped
    instead, since a backslash stays literal inside quotes. In both cases
    `split(quote_word(word)) == [word]` for any non-empty word.
    """
    if not any(char.isspace() or char in "\"'\\" for char in word):
        return word
    if not any(char in "\"'\\" for char in word):
        return f'"{word}"'
    return "".join(
        f"\\{char}" if char.isspace() or char in "\"'\\" else char for char in word
    )
