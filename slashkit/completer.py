# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Prompt Toolkit adapters for the Slashkit completion engine.

- `SlashCompleter` turns `resolve_completion()` suggestions into
  `Completion` objects, keeping their rank order.
- `GhostTextAutoSuggest` shows the engine's ghost text (e.g. `<model-name>`)
  as an inline auto-suggestion after the cursor.

Both keep a `ProviderContext` supplier rather than a fixed snapshot, so the
application can refresh model or theme lists between keystrokes.
"""
from __future__ import annotations

from typing import Callable, Iterable

from prompt_toolkit.auto_suggest import AutoSuggest, Suggestion
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from slashkit.completion.engine import CompletionResult, resolve_completion
from slashkit.completion.providers import ProviderContext
from slashkit.grammar.registry import CommandRegistry

ContextSupplier = Callable[[], ProviderContext]


def _static_context(context: ProviderContext | None) -> ContextSupplier:
    snapshot = context or ProviderContext()
    return lambda: snapshot


class _EngineAdapter:
    def __init__(
        self,
        context: ProviderContext | ContextSupplier | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        if callable(context):
            self._get_context: ContextSupplier = context
        else:
            self._get_context = _static_context(context)
        self.registry = registry

    def resolve(self, document: Document) -> CompletionResult:
        return resolve_completion(
            document.text,
            document.cursor_position,
            self._get_context(),
            self.registry,
        )


class SlashCompleter(_EngineAdapter, Completer):
    """
    Prompt Toolkit completer for slash-command input.

    Suggestions are yielded in engine rank order. Each completion replaces the
    part of the active token left of the cursor; completions containing
    whitespace are quoted so they stay a single token.

    Args:
        context (ProviderContext | Callable[[], ProviderContext] | None):
            Provider snapshot, or a function returning a fresh one per keystroke.
        registry (CommandRegistry | None): Grammar; defaults to the built-in table.
    """

    def get_completions(
        self, document: Document, complete_event: CompleteEvent | None
    ) -> Iterable[Completion]:
        result = self.resolve(document)
        cursor = document.cursor_position
        for suggestion in result.suggestions:
            start = min(suggestion.replace_start, cursor)
            yield Completion(
                self._ensure_quote(suggestion.insert_text),
                start_position=start - cursor,
                display=suggestion.label,
                display_meta=suggestion.detail or "",
            )

    def _ensure_quote(self, text: str) -> str:
        """Quote `text` if it contains whitespace."""
        if any(char.isspace() for char in text):
            escaped = text.replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return text


class GhostTextAutoSuggest(_EngineAdapter, AutoSuggest):
    """Inline auto-suggestion showing the placeholder for the next token."""

    def get_suggestion(self, buffer, document: Document) -> Suggestion | None:
        if not document.is_cursor_at_the_end:
            return None
        ghost_text = self.resolve(document).ghost_text
        if ghost_text is None:
            return None
        return Suggestion(ghost_text)
