"""
Slashkit Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .arg_kind import ArgKind, FlagKind
from .registry import CommandRegistry
from .schema import ArgSpec, ArgumentNode, CommandNode, CommandSpec, FlagSpec, LiteralNode
from .specs import COMMAND_SPECS, DEFAULT_REGISTRY, get_command_spec

__all__ = [
    "ArgKind",
    "FlagKind",
    "ArgSpec",
    "FlagSpec",
    "LiteralNode",
    "ArgumentNode",
    "CommandNode",
    "CommandSpec",
    "CommandRegistry",
    "COMMAND_SPECS",
    "DEFAULT_REGISTRY",
    "get_command_spec",
]
