# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Caller-side completion state for an input widget.

`resolve_completion()` keeps nothing between calls. `CompletionSession` holds
the little state an input surface needs on top of it: the current input, the
last result, the highlighted suggestion, and whether the popup was dismissed.
Accepting a suggestion re-resolves at the new cursor so completions chain.
"""
from __future__ import annotations

from slashkit.completion.engine import (
    COMMAND_PREFIX,
    EMPTY_RESULT,
    AppliedSuggestion,
    CompletionResult,
    apply_suggestion,
    resolve_completion,
)
from slashkit.completion.providers import ProviderContext, ProviderRegistry
from slashkit.completion.suggestions import CompletionSuggestion
from slashkit.grammar.registry import CommandRegistry


class CompletionSession:
    """
    Tracks completion results and selection for one input line.

    Args:
        context (ProviderContext | None): Snapshot for dynamic values.
        registry (CommandRegistry | None): Grammar; defaults to the built-in table.
        providers (ProviderRegistry | None): Provider lookup override.
    """

    def __init__(
        self,
        context: ProviderContext | None = None,
        registry: CommandRegistry | None = None,
        providers: ProviderRegistry | None = None,
    ) -> None:
        self.context = context or ProviderContext()
        self.registry = registry
        self.providers = providers
        self.text: str = ""
        self.result: CompletionResult = EMPTY_RESULT
        self.selected_index: int = 0
        self.dismissed: bool = False

    def _resolve(self, text: str, cursor: int) -> CompletionResult:
        return resolve_completion(
            text, cursor, self.context, self.registry, self.providers
        )

    def _reset(self, result: CompletionResult) -> None:
        self.result = result
        self.selected_index = 0
        self.dismissed = False

    @property
    def is_open(self) -> bool:
        return not self.dismissed and bool(self.result.suggestions)

    @property
    def ghost_text(self) -> str | None:
        return self.result.ghost_text

    @property
    def selected(self) -> CompletionSuggestion | None:
        suggestions = self.result.suggestions
        if not suggestions:
            return None
        return suggestions[max(0, min(self.selected_index, len(suggestions) - 1))]

    def update(self, text: str, cursor: int | None = None) -> CompletionResult:
        """Recompute completions for `text`; the cursor defaults to end of input."""
        self.text = text
        if not text.lstrip().startswith(COMMAND_PREFIX):
            self._reset(EMPTY_RESULT)
        else:
            self._reset(self._resolve(text, len(text) if cursor is None else cursor))
        return self.result

    def move_selection(self, delta: int) -> None:
        """
        Move the highlight by `delta`. Stepping past either end jumps to the
        opposite end.
        """
        total = len(self.result.suggestions)
        if total == 0:
            return
        index = self.selected_index + delta
        if index < 0:
            index = total - 1
        elif index >= total:
            index = 0
        self.selected_index = index

    def accept_selected(self) -> AppliedSuggestion | None:
        """Apply the highlighted suggestion and resolve again at the new cursor."""
        suggestion = self.selected
        if suggestion is None:
            return None
        applied = apply_suggestion(self.text, suggestion)
        self.text = applied.value
        self._reset(self._resolve(applied.value, applied.cursor))
        return applied

    def dismiss(self) -> None:
        self.dismissed = True
        self.selected_index = 0
