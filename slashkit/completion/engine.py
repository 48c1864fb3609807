# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Core completion engine.

Given the current input, cursor position, and provider context,
`resolve_completion()` returns ranked suggestions and an optional ghost-text
hint. `apply_suggestion()` splices an accepted suggestion back into the input.

Resolution:
    1. Tokenize the input with cursor awareness.
    2. Cursor in the command token: suggest command names.
    3. Look up the `CommandSpec` for the command token.
    4. Walk the spec tree with every settled token.
    5. Suggest flag values, flag names, or tree nodes for the active token.
    6. Compute ghost text for the next expected token.

The engine is synchronous and performs no I/O. It never raises for bad input;
anything it cannot make sense of resolves to an empty result.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from slashkit.completion.ghost_text import compute_ghost_text
from slashkit.completion.providers import ProviderContext, ProviderRegistry
from slashkit.completion.suggestions import (
    FLAG_SCORE_PENALTY,
    CompletionSuggestion,
    ContextKind,
    command_name_suggestions,
    flag_suggestions,
    flag_value_suggestions,
    node_suggestions,
)
from slashkit.completion.tokenizer import get_cursor_token_info
from slashkit.completion.walker import walk_tokens
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.specs import DEFAULT_REGISTRY
from slashkit.logger import logger

COMMAND_PREFIX = "/"


@dataclass(frozen=True)
class CompletionResult:
    """Suggestions for the active token plus an optional ghost-text hint."""

    suggestions: tuple[CompletionSuggestion, ...] = ()
    ghost_text: str | None = None
    context_kind: ContextKind = ContextKind.NONE


EMPTY_RESULT = CompletionResult()


class AppliedSuggestion(NamedTuple):
    value: str
    cursor: int


def resolve_completion(
    text: str,
    cursor: int,
    context: ProviderContext | None = None,
    registry: CommandRegistry | None = None,
    providers: ProviderRegistry | None = None,
) -> CompletionResult:
    """
    Resolve completions for `text` with the cursor at offset `cursor`.

    Args:
        text (str): The full input line.
        cursor (int): Cursor offset; clamped to `[0, len(text)]`.
        context (ProviderContext | None): Snapshot for dynamic values.
        registry (CommandRegistry | None): Grammar; defaults to the built-in table.
        providers (ProviderRegistry | None): Provider lookup; defaults to the
            built-in providers.

    Returns:
        CompletionResult: Sorted suggestions, ghost text and context kind.
    """
    if not text.lstrip().startswith(COMMAND_PREFIX):
        return EMPTY_RESULT

    registry = registry or DEFAULT_REGISTRY
    context = context or ProviderContext()
    info = get_cursor_token_info(text, cursor)
    if not info.tokens:
        return EMPTY_RESULT

    command_token = info.tokens[0]
    if info.active_token_index == 0 or command_token.text == COMMAND_PREFIX:
        prefix = info.active_prefix if info.active_token_index == 0 else ""
        if prefix.startswith(COMMAND_PREFIX):
            prefix = prefix[1:]
        return CompletionResult(
            suggestions=tuple(
                command_name_suggestions(
                    registry, prefix, command_token.start, command_token.end
                )
            ),
            context_kind=ContextKind.COMMAND_NAME,
        )

    command_name = command_token.text.removeprefix(COMMAND_PREFIX)
    spec = registry.get(command_name)
    if spec is None:
        logger.debug("No completion grammar for command '%s'.", command_name)
        return EMPTY_RESULT

    settled_end = len(info.tokens) if info.in_gap else info.active_token_index
    state = walk_tokens(spec, (token.text for token in info.tokens[1:settled_end]))

    if state.free_text_reached:
        return EMPTY_RESULT

    prefix = info.active_prefix
    replace_start, replace_end = info.replace_start, info.replace_end
    ghost_text = compute_ghost_text(state) if not prefix else None

    if state.pending_flag_value is not None:
        return CompletionResult(
            suggestions=tuple(
                flag_value_suggestions(
                    state.pending_flag_value,
                    prefix,
                    replace_start,
                    replace_end,
                    context,
                    providers,
                )
            ),
            ghost_text=ghost_text,
            context_kind=ContextKind.FLAG_VALUE,
        )

    if prefix.startswith("-"):
        return CompletionResult(
            suggestions=tuple(
                flag_suggestions(
                    state.available_flags,
                    state.used_flags,
                    prefix,
                    replace_start,
                    replace_end,
                )
            ),
            context_kind=ContextKind.FLAG_NAME,
        )

    suggestions, context_kind = node_suggestions(
        state.current_nodes, prefix, replace_start, replace_end, context, providers
    )
    if not prefix:
        suggestions.extend(
            flag_suggestions(
                state.available_flags,
                state.used_flags,
                "",
                replace_start,
                replace_end,
                penalty=FLAG_SCORE_PENALTY,
            )
        )

    return CompletionResult(
        suggestions=tuple(suggestions),
        ghost_text=ghost_text,
        context_kind=context_kind if suggestions else ContextKind.NONE,
    )


def apply_suggestion(text: str, suggestion: CompletionSuggestion) -> AppliedSuggestion:
    """
    Splice `suggestion` into `text`.

    Replaces `[replace_start, replace_end)` with the insert text plus a single
    trailing space, drops leading whitespace from the remainder, and puts the
    cursor right after the inserted space so the next token can be typed.
    """
    before = text[: suggestion.replace_start]
    after = text[suggestion.replace_end :].lstrip()
    inserted = f"{suggestion.insert_text} "
    return AppliedSuggestion(value=f"{before}{inserted}{after}", cursor=len(before) + len(inserted))
