# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""Inline placeholder ("ghost text") derived from a `WalkState`."""
from __future__ import annotations

from slashkit.completion.walker import WalkState
from slashkit.grammar.arg_kind import FlagKind
from slashkit.grammar.schema import ArgumentNode, LiteralNode

MAX_GHOST_OPTIONS = 5


def compute_ghost_text(state: WalkState) -> str | None:
    """
    Return the placeholder for the next expected token, or None.

    Only meaningful while the active token is still empty; callers drop it as
    soon as the user starts typing.
    """
    if state.free_text_reached:
        return None

    flag = state.pending_flag_value
    if flag is not None:
        if flag.kind is FlagKind.ENUM and flag.enum_values:
            return f"<{'|'.join(flag.enum_values)}>"
        return "<value>"

    if not state.current_nodes:
        return None

    if all(isinstance(node, LiteralNode) for node in state.current_nodes):
        values = [node.value for node in state.current_nodes]
        if len(values) <= MAX_GHOST_OPTIONS:
            return f"<{'|'.join(values)}>"
        return f"<{'|'.join(values[:4])}|...>"

    for node in state.current_nodes:
        if isinstance(node, ArgumentNode) and node.arg.placeholder:
            return node.arg.placeholder

    return None
