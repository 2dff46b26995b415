# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command grammar and tab-completion resolver for Tabline prompts.

A grammar is an immutable tree of `Command` nodes. Each command declares
arguments (`Flag`s with optional value slots, or free-form
`ArbitraryArgument`s) and subcommands:

    commands = [
        Command("print"),
        Command("echo"),
        Command("cat").arg("--help"),
        Command("exit"),
    ]

`complete()` resolves the text typed so far against such a tree and returns a
`CompletionResult`:
- `NO_COMPLETION`: nothing to suggest
- `Description`: the position accepts a free-form value; `text` is a hint
- `PossibilityList`: literal words that validly continue the line

Two completer strategies wrap this for `Prompt`:
- `GrammarCompleter` resolves against a command grammar
- `CallbackCompleter` delegates to a user function `(text) -> list[str]`
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Sequence, Union

from tabline.logger import logger
from tabline.split import last_word_start, split


@dataclass(frozen=True)
class ArbitraryArgument:
    """
    A free-form argument that cannot be completed from a fixed word list.

    `name` and `description` are informative only and shown to the user as a
    hint when completion is requested at this position.
    """

    name: str
    description: str = ""

    def hint(self) -> str:
        if self.description:
            return f"<{self.name}>: {self.description}"
        return f"<{self.name}>"


@dataclass(frozen=True)
class Flag:
    """
    A concrete argument such as `--help`.

    A flag may require a number of values, described by `arguments`. Only after
    `len(arguments)` words following the flag can the next argument be
    completed again.
    """

    name: str
    arguments: tuple[ArbitraryArgument, ...] = ()


Argument = Union[Flag, ArbitraryArgument]


@dataclass(frozen=True)
class Command:
    """
    A (sub)command displayed in tab completion.

    Attributes:
        name (str): The word that selects this command.
        args (tuple[Argument, ...]): Flags and free-form arguments, in order.
        subcommands (tuple[Command, ...]): Nested commands, in order.
    """

    name: str
    args: tuple[Argument, ...] = ()
    subcommands: tuple[Command, ...] = ()

    def arg(self, argument: Argument | str) -> Command:
        """Return a copy of this command with `argument` appended.

        A plain string is shorthand for a `Flag` without values.
        """
        if isinstance(argument, str):
            argument = Flag(argument)
        return replace(self, args=(*self.args, argument))

    def subcommand(self, command: Command) -> Command:
        """Return a copy of this command with `command` appended as a subcommand."""
        return replace(self, subcommands=(*self.subcommands, command))


class NoCompletion:
    """Nothing to suggest at this position."""

    _instance: NoCompletion | None = None

    def __new__(cls) -> NoCompletion:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_COMPLETION"


NO_COMPLETION = NoCompletion()


@dataclass(frozen=True)
class Description:
    """The position takes a free-form value; `text` describes it."""

    text: str


@dataclass(frozen=True)
class PossibilityList:
    """Literal words that validly continue the line, in grammar order."""

    words: list[str]


CompletionResult = Union[NoCompletion, Description, PossibilityList]


def prefix_completion(word: str, candidates: Sequence[str]) -> list[str]:
    """
    Return every candidate that starts with `word`, preserving order.

    Handy for building completion callbacks:

        def complete_line(text: str) -> list[str]:
            words = split(text)
            if len(words) <= 1 and not starts_new_word(text):
                return prefix_completion(words[0] if words else "", ["print", "exit"])
            return []
    """
    return [candidate for candidate in candidates if candidate.startswith(word)]


def command_names(commands: Sequence[Command]) -> list[str]:
    return [command.name for command in commands]


@dataclass
class _Position:
    """Where in the grammar the walk over typed words ended."""

    command: Command | None = None
    pending: tuple[ArbitraryArgument, ...] = ()


def active_position(components: Sequence[str], commands: Sequence[Command]) -> _Position:
    """
    Walk `components` through the grammar.

    Each word equal to the name of a command in the current pool selects it,
    the last equal entry winning, and the pool becomes that command's
    subcommands. Words that match nothing are skipped without backtracking.
    A word naming a flag of the selected command makes the next
    `len(flag.arguments)` words flag values, which are never matched.
    """
    position = _Position()
    pool: Sequence[Command] = commands
    for component in components:
        if position.pending:
            position.pending = position.pending[1:]
            continue

        matched = None
        for command in pool:
            if component == command.name:
                matched = command
        if matched is not None:
            position.command = matched
            pool = matched.subcommands
            continue

        if position.command is not None:
            for argument in position.command.args:
                if isinstance(argument, Flag) and argument.name == component:
                    position.pending = argument.arguments
    return position


def possible_completions(command: Command) -> CompletionResult:
    """Return the direct candidates of `command`: flags first, then subcommands."""
    words = []
    for argument in command.args:
        if isinstance(argument, ArbitraryArgument):
            return Description(argument.hint())
        words.append(argument.name)
    words.extend(command_names(command.subcommands))
    return PossibilityList(words)


def complete(text: str, commands: Sequence[Command]) -> CompletionResult:
    """
    Resolve the completions for `text` against the command grammar.

    Args:
        text (str): The command line typed so far (left of the cursor).
        commands (Sequence[Command]): The top-level commands.

    Returns:
        CompletionResult: `NO_COMPLETION` when there is nothing to offer at all,
        a `Description` when the position accepts a free-form value, otherwise a
        `PossibilityList` filtered by the word being typed (possibly empty).
    """
    if not text:
        names = command_names(commands)
        return PossibilityList(names) if names else NO_COMPLETION

    start = last_word_start(text)
    components = split(text[:start])
    to_complete = "".join(split(text[start:]))

    position = active_position(components, commands)
    if position.command is not None:
        if position.pending:
            return Description(position.pending[0].hint())
        result = possible_completions(position.command)
        if not isinstance(result, PossibilityList):
            return result
        candidates = result.words
    elif not components:
        candidates = command_names(commands)
    else:
        candidates = []

    return PossibilityList(prefix_completion(to_complete, candidates))


class GrammarCompleter:
    """Completer that resolves the typed text against a static command grammar."""

    def __init__(self, commands: Sequence[Command]):
        self.commands = tuple(commands)

    def complete(self, text: str) -> CompletionResult:
        result = complete(text, self.commands)
        logger.debug("Grammar completion for %r: %r", text, result)
        return result


class CallbackCompleter:
    """Completer that delegates to a user function returning candidate words."""

    def __init__(self, callback: Callable[[str], list[str]]):
        if not callable(callback):
            raise TypeError(f"{callback!r} is not callable")
        self.callback = callback

    def complete(self, text: str) -> CompletionResult:
        words = list(self.callback(text))
        logger.debug("Callback completion for %r: %r", text, words)
        return PossibilityList(words) if words else NO_COMPLETION
