# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Slashkit.

The completion engine itself never raises: every unresolved situation degrades
to an empty result. These exceptions cover the developer-facing edges instead,
such as building a grammar registry, loading a grammar config, and parsing a
submitted command line.

Exception Hierarchy:
- SlashkitError
    ├── CommandAlreadyExistsError
    ├── InvalidGrammarError
    ├── ConfigError
    └── CommandParseError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from slashkit.parser import ParseErrorCode


class SlashkitError(Exception):
    """Base exception for Slashkit."""


class CommandAlreadyExistsError(SlashkitError):
    """Exception raised when a command name or alias is already registered."""


class InvalidGrammarError(SlashkitError):
    """Exception raised when a command grammar is structurally invalid."""


class ConfigError(SlashkitError):
    """Exception raised when a grammar configuration file cannot be loaded."""


class CommandParseError(SlashkitError):
    """Exception raised when a submitted slash command cannot be parsed."""

    def __init__(self, code: ParseErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message
