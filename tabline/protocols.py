# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines structural protocols for the terminal collaborators of `Prompt`.

The line editor only talks to these capabilities, so any object with the right
shape can stand in for a real terminal:

Protocols:
- KeySource: Blocking iterable of decoded `KeyEvent`s. Iteration stops when the
  input stream ends; transport errors surface as `OSError`.
- Screen: Writes text and moves the cursor within the current line.
- RawModeScope: Zero-argument callable returning a context manager that puts
  the terminal into raw mode and restores it on exit.
"""
from __future__ import annotations

from typing import ContextManager, Iterator, Protocol, runtime_checkable

from tabline.keys import KeyEvent


@runtime_checkable
class KeySource(Protocol):
    def __iter__(self) -> Iterator[KeyEvent]: ...


@runtime_checkable
class Screen(Protocol):
    def write(self, text: str) -> None: ...

    def move_left(self, columns: int) -> None: ...

    def move_right(self, columns: int) -> None: ...

    def carriage_return(self) -> None: ...

    def flush(self) -> None: ...


@runtime_checkable
class RawModeScope(Protocol):
    def __call__(self) -> ContextManager[object]: ...
