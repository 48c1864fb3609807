"""
Slashkit Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .completion import (
    CompletionResult,
    CompletionSession,
    CompletionSuggestion,
    ContextKind,
    ProviderContext,
    apply_suggestion,
    resolve_completion,
)
from .grammar import COMMAND_SPECS, CommandRegistry, CommandSpec, get_command_spec
from .logger import logger
from .parser import ParsedCommand, parse_slash_command

__all__ = [
    "COMMAND_SPECS",
    "CommandRegistry",
    "CommandSpec",
    "CompletionResult",
    "CompletionSession",
    "CompletionSuggestion",
    "ContextKind",
    "ParsedCommand",
    "ProviderContext",
    "apply_suggestion",
    "get_command_spec",
    "logger",
    "parse_slash_command",
    "resolve_completion",
]
