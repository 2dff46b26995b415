"""
Tabline Line Editor

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .completion import (
    NO_COMPLETION,
    ArbitraryArgument,
    Command,
    CompletionResult,
    Description,
    Flag,
    PossibilityList,
    complete,
    prefix_completion,
)
from .prompt import Prompt
from .signals import EndOfInputSignal, InterruptSignal
from .split import EscapingState, split

logger = logging.getLogger("tabline")


__all__ = [
    "Prompt",
    "Command",
    "Flag",
    "ArbitraryArgument",
    "CompletionResult",
    "NO_COMPLETION",
    "Description",
    "PossibilityList",
    "complete",
    "prefix_completion",
    "split",
    "EscapingState",
    "InterruptSignal",
    "EndOfInputSignal",
]
