# Tabline Line Editor — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the custom exception classes used by Tabline.

The tokenizer and the completion resolver never raise, and terminal I/O errors
propagate as plain `OSError`. What remains are problems with how a prompt is
set up.

Exception Hierarchy:
- TablineError
    └── GrammarConfigError
"""


class TablineError(Exception):
    """Base exception for Tabline."""


class GrammarConfigError(TablineError):
    """Exception raised when a command grammar configuration is invalid."""
