"""
Slashkit Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import (
    EMPTY_RESULT,
    AppliedSuggestion,
    CompletionResult,
    apply_suggestion,
    resolve_completion,
)
from .ghost_text import compute_ghost_text
from .providers import (
    CallableProvider,
    DynamicProvider,
    ProviderContext,
    ProviderRegistry,
    resolve_provider_values,
)
from .scorer import fuzzy_score, score_candidate
from .session import CompletionSession
from .suggestions import CompletionSuggestion, ContextKind, SuggestionKind
from .tokenizer import CursorTokenInfo, Token, get_cursor_token_info, tokenize
from .walker import WalkState, initial_state, walk_token, walk_tokens

__all__ = [
    "AppliedSuggestion",
    "CallableProvider",
    "CompletionResult",
    "CompletionSession",
    "CompletionSuggestion",
    "ContextKind",
    "CursorTokenInfo",
    "DynamicProvider",
    "EMPTY_RESULT",
    "ProviderContext",
    "ProviderRegistry",
    "SuggestionKind",
    "Token",
    "WalkState",
    "apply_suggestion",
    "compute_ghost_text",
    "fuzzy_score",
    "get_cursor_token_info",
    "initial_state",
    "resolve_completion",
    "resolve_provider_values",
    "score_candidate",
    "tokenize",
    "walk_token",
    "walk_tokens",
]
