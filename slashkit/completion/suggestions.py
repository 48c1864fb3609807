# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Suggestion synthesis for each completion context.

Every generator scores candidates with `score_candidate()`, drops the ones that
do not match, and returns suggestions sorted ascending by score with ties
broken by label. Each suggestion carries the range to replace on acceptance.

Contexts:
- command names:        `command_name_suggestions()`
- flag names:           `flag_suggestions()`
- flag values:          `flag_value_suggestions()`
- subcommands/values:   `node_suggestions()`
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Sequence

from slashkit.completion.providers import ProviderContext, ProviderRegistry, resolve_provider_values
from slashkit.completion.scorer import score_candidate
from slashkit.grammar.arg_kind import ArgKind, FlagKind
from slashkit.grammar.schema import ArgumentNode, CommandNode, CommandSpec, FlagSpec, LiteralNode

FLAG_SCORE_PENALTY = 100


class SuggestionKind(Enum):
    """What a suggestion completes."""

    COMMAND = "command"
    SUBCOMMAND = "subcommand"
    ARGUMENT = "argument"
    FLAG = "flag"
    FLAG_VALUE = "flag-value"

    def __str__(self) -> str:
        return self.value


class ContextKind(Enum):
    """The kind of token the cursor is completing."""

    NONE = "none"
    COMMAND_NAME = "command-name"
    SUBCOMMAND = "subcommand"
    ARGUMENT = "argument"
    FLAG_NAME = "flag-name"
    FLAG_VALUE = "flag-value"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CompletionSuggestion:
    """
    A ranked completion candidate.

    Attributes:
        label (str): Text shown in the completion list.
        insert_text (str): Text inserted on acceptance.
        kind (SuggestionKind): What the suggestion completes.
        score (float): Rank, lower is better.
        replace_start (int): Start of the input range replaced on acceptance.
        replace_end (int): End of the input range replaced on acceptance.
        detail (str | None): Description shown next to the label.
    """

    label: str
    insert_text: str
    kind: SuggestionKind
    score: float
    replace_start: int
    replace_end: int
    detail: str | None = None


def sort_suggestions(suggestions: Iterable[CompletionSuggestion]) -> list[CompletionSuggestion]:
    return sorted(suggestions, key=lambda suggestion: (suggestion.score, suggestion.label))


def command_name_suggestions(
    specs: Iterable[CommandSpec],
    prefix: str,
    replace_start: int,
    replace_end: int,
) -> list[CompletionSuggestion]:
    """
    Score every primary command name against `prefix`.

    Aliases are never offered as separate suggestions; users always complete to
    the canonical name.
    """
    suggestions = []
    for spec in specs:
        score = score_candidate(prefix, spec.name)
        if score is None:
            continue
        suggestions.append(
            CompletionSuggestion(
                label=f"/{spec.name}",
                insert_text=f"/{spec.name}",
                kind=SuggestionKind.COMMAND,
                score=score,
                replace_start=replace_start,
                replace_end=replace_end,
                detail=spec.description,
            )
        )
    return sort_suggestions(suggestions)


def value_suggestions(
    candidates: Iterable[str],
    prefix: str,
    kind: SuggestionKind,
    replace_start: int,
    replace_end: int,
    describe: Callable[[str], str | None] | None = None,
) -> list[CompletionSuggestion]:
    """Score plain string candidates such as enum or provider values."""
    suggestions = []
    for candidate in candidates:
        score = score_candidate(prefix, candidate)
        if score is None:
            continue
        suggestions.append(
            CompletionSuggestion(
                label=candidate,
                insert_text=candidate,
                kind=kind,
                score=score,
                replace_start=replace_start,
                replace_end=replace_end,
                detail=describe(candidate) if describe else None,
            )
        )
    return sort_suggestions(suggestions)


def node_suggestions(
    nodes: Sequence[CommandNode],
    prefix: str,
    replace_start: int,
    replace_end: int,
    context: ProviderContext,
    providers: ProviderRegistry | None = None,
) -> tuple[list[CompletionSuggestion], ContextKind]:
    """
    Suggest literal nodes as subcommands and enum arguments as values.

    Returns the suggestions with the context kind: `SUBCOMMAND` as soon as a
    literal node is present, otherwise `ARGUMENT`. String, integer, path and
    free-text arguments have nothing to suggest.
    """
    suggestions: list[CompletionSuggestion] = []
    context_kind = ContextKind.ARGUMENT

    for node in nodes:
        if not isinstance(node, LiteralNode):
            continue
        context_kind = ContextKind.SUBCOMMAND
        score = score_candidate(prefix, node.value)
        if score is not None:
            suggestions.append(
                CompletionSuggestion(
                    label=node.value,
                    insert_text=node.value,
                    kind=SuggestionKind.SUBCOMMAND,
                    score=score,
                    replace_start=replace_start,
                    replace_end=replace_end,
                    detail=node.description,
                )
            )

    for node in nodes:
        if not isinstance(node, ArgumentNode):
            continue
        arg = node.arg
        if arg.kind is ArgKind.ENUM and arg.enum_values:
            values: Sequence[str] = arg.enum_values
        elif arg.kind is ArgKind.DYNAMIC_ENUM and arg.provider_id:
            values = resolve_provider_values(arg.provider_id, context, providers)
        else:
            continue
        suggestions.extend(
            value_suggestions(
                values,
                prefix,
                SuggestionKind.ARGUMENT,
                replace_start,
                replace_end,
                lambda _, description=arg.description: description,
            )
        )

    return sort_suggestions(suggestions), context_kind


def flag_suggestions(
    flags: Iterable[FlagSpec],
    used_flags: frozenset[str],
    prefix: str,
    replace_start: int,
    replace_end: int,
    penalty: float = 0,
) -> list[CompletionSuggestion]:
    """Suggest flag names, skipping non-repeatable flags that were already used."""
    suggestions = []
    seen: set[str] = set()
    for flag in flags:
        name = flag.name.lower()
        if name in seen or (name in used_flags and not flag.repeatable):
            continue
        seen.add(name)
        score = score_candidate(prefix, flag.name)
        if score is None:
            continue
        suggestions.append(
            CompletionSuggestion(
                label=flag.name,
                insert_text=flag.name,
                kind=SuggestionKind.FLAG,
                score=score + penalty,
                replace_start=replace_start,
                replace_end=replace_end,
                detail=flag.description,
            )
        )
    return sort_suggestions(suggestions)


def flag_value_suggestions(
    flag: FlagSpec,
    prefix: str,
    replace_start: int,
    replace_end: int,
    context: ProviderContext,
    providers: ProviderRegistry | None = None,
) -> list[CompletionSuggestion]:
    """Suggest values for a pending enum or dynamic-enum flag."""
    if flag.kind is FlagKind.ENUM and flag.enum_values:
        values: Sequence[str] = flag.enum_values
    elif flag.kind is FlagKind.DYNAMIC_ENUM and flag.provider_id:
        values = resolve_provider_values(flag.provider_id, context, providers)
    else:
        return []
    return value_suggestions(
        values,
        prefix,
        SuggestionKind.FLAG_VALUE,
        replace_start,
        replace_end,
        lambda _: flag.description,
    )
