# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the signals `Prompt.read_commandline()` raises when a read ends without
a submitted line.

These are not errors. They subclass the builtins prompt_toolkit uses for the
same situations (`KeyboardInterrupt`, `EOFError`), so callers that already
handle those keep working.

Signals:
- InterruptSignal: Ctrl-C was pressed. The caller decides whether to re-prompt.
- EndOfInputSignal: Ctrl-D was pressed or the input stream closed.
"""


class InterruptSignal(KeyboardInterrupt):
    """Raised when the user presses Ctrl-C while a line is being read."""

    def __init__(self, message: str = "Ctrl-C pressed."):
        super().__init__(message)


class EndOfInputSignal(EOFError):
    """Raised on Ctrl-D or when the key source runs out of input."""

    def __init__(self, message: str = "End of input."):
        super().__init__(message)
