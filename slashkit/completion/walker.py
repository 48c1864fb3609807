# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Tree walker folding settled tokens over a command's argument tree.

`walk_token()` is a pure step function: it takes a `WalkState` and one token
and returns a new `WalkState`. `walk_tokens()` folds it over every settled
token, i.e. every token left of the token under the cursor.

Priority per step:
1. Free text reached: nothing changes any more.
2. A value-taking flag is pending: the token is its value.
3. Flag-shaped token (`-x`, `--name`, `--name=value`): mark the flag used.
   Unknown flags are absorbed without advancing.
4. Literal node match: descend into its children.
5. Argument node: consume the token (or reach free text) and descend.
6. Nothing matches: the grammar is exhausted at this depth.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Iterable

from slashkit.grammar.arg_kind import ArgKind
from slashkit.grammar.schema import ArgumentNode, CommandNode, CommandSpec, FlagSpec, LiteralNode


@dataclass(frozen=True)
class WalkState:
    """
    Immutable accumulator threaded through the walk.

    Attributes:
        current_nodes (tuple[CommandNode, ...]): Nodes the next token is matched against.
        available_flags (tuple[FlagSpec, ...]): Command-level flags plus the flags
            of every node matched so far. Never shrinks.
        used_flags (frozenset[str]): Lowercase names of flags already given.
        pending_flag_value (FlagSpec | None): Flag whose value is expected next.
        free_text_reached (bool): A free-text argument has swallowed the rest.
    """

    current_nodes: tuple[CommandNode, ...] = ()
    available_flags: tuple[FlagSpec, ...] = ()
    used_flags: frozenset[str] = frozenset()
    pending_flag_value: FlagSpec | None = None
    free_text_reached: bool = False


def initial_state(spec: CommandSpec) -> WalkState:
    """State right after the command token."""
    return WalkState(current_nodes=spec.root, available_flags=spec.flags)


def find_flag(flags: Iterable[FlagSpec], token: str) -> FlagSpec | None:
    """Resolve `token` case-insensitively against flag names and aliases."""
    return next((flag for flag in flags if flag.matches(token)), None)


def _use_flag(state: WalkState, flag: FlagSpec, pending: FlagSpec | None) -> WalkState:
    return replace(
        state,
        used_flags=state.used_flags | {flag.name.lower()},
        pending_flag_value=pending,
    )


def _descend(state: WalkState, node: CommandNode, free_text: bool = False) -> WalkState:
    return WalkState(
        current_nodes=node.children,
        available_flags=(*state.available_flags, *node.flags),
        used_flags=state.used_flags,
        pending_flag_value=None,
        free_text_reached=free_text,
    )


def walk_token(state: WalkState, token_text: str) -> WalkState:
    """Walk one settled token through the tree, returning the updated state."""
    if state.free_text_reached:
        return state

    if state.pending_flag_value is not None:
        return replace(state, pending_flag_value=None)

    if token_text.startswith("-") and len(token_text) > 1:
        flag = find_flag(state.available_flags, token_text)
        if flag is not None:
            return _use_flag(state, flag, flag if flag.takes_value else None)
        if "=" in token_text:
            name, _, _ = token_text.partition("=")
            flag = find_flag(state.available_flags, name)
            if flag is not None:
                return _use_flag(state, flag, None)
        return state

    lowered = token_text.lower()
    for node in state.current_nodes:
        if isinstance(node, LiteralNode) and node.value.lower() == lowered:
            return _descend(state, node)

    for node in state.current_nodes:
        if isinstance(node, ArgumentNode):
            return _descend(state, node, free_text=node.arg.kind is ArgKind.FREE_TEXT)

    return replace(state, current_nodes=())


def walk_tokens(spec: CommandSpec, tokens: Iterable[str]) -> WalkState:
    """Fold `walk_token` over `tokens`, starting from `initial_state(spec)`."""
    return reduce(walk_token, tokens, initial_state(spec))
