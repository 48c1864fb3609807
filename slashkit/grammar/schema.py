# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Brigadier-style command argument schema.

Each slash command gets a declarative `CommandSpec` describing its argument
tree as a sequence of nodes. The completion engine walks this tree to decide
what may be typed next.

Node types:
- `LiteralNode`: a fixed keyword such as `list` or `show`.
- `ArgumentNode`: a value slot described by an `ArgSpec`.

All schema objects are frozen dataclasses. Sequences passed in as lists are
stored as tuples, and string kinds are coerced to their enum, so a grammar can
be written by hand or produced from a config file with the same result.

Example:
    CommandSpec(
        name="model",
        aliases=("m",),
        description="Switch the active model.",
        usage="/model <model-name>",
        root=(
            ArgumentNode(
                ArgSpec(
                    name="model-name",
                    kind=ArgKind.DYNAMIC_ENUM,
                    provider_id="models",
                    placeholder="<model-name>",
                )
            ),
        ),
    )
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from slashkit.exceptions import InvalidGrammarError
from slashkit.grammar.arg_kind import ArgKind, FlagKind


def _freeze(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if value is None:
        object.__setattr__(obj, name, ())
    elif not isinstance(value, tuple):
        object.__setattr__(obj, name, tuple(value))


def _freeze_optional(obj: object, name: str) -> None:
    value = getattr(obj, name)
    if value is not None and not isinstance(value, tuple):
        object.__setattr__(obj, name, tuple(value))


@dataclass(frozen=True)
class FlagSpec:
    """
    Represents a flag accepted by a command or node.

    Attributes:
        name (str): Flag name including its prefix, e.g. `--type`.
        kind (FlagKind): Value kind. Boolean flags take no value.
        aliases (tuple[str, ...]): Short aliases, e.g. `("-t",)`.
        enum_values (tuple[str, ...] | None): Static values for enum flags.
        provider_id (str | None): Provider id for dynamic-enum flags.
        repeatable (bool): Whether the flag may appear more than once.
        description (str | None): Text shown in completion detail.
    """

    name: str
    kind: FlagKind = FlagKind.BOOLEAN
    aliases: tuple[str, ...] = ()
    enum_values: tuple[str, ...] | None = None
    provider_id: str | None = None
    repeatable: bool = False
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", FlagKind(self.kind))
        _freeze(self, "aliases")
        _freeze_optional(self, "enum_values")
        if not self.name.startswith("-") or len(self.name) < 2:
            raise InvalidGrammarError(
                f"Flag name '{self.name}' must start with '-' and have a body."
            )
        for alias in self.aliases:
            if not alias.startswith("-") or len(alias) < 2:
                raise InvalidGrammarError(
                    f"Alias '{alias}' of flag '{self.name}' must start with '-'."
                )
        if self.kind is FlagKind.ENUM and not self.enum_values:
            raise InvalidGrammarError(f"Enum flag '{self.name}' needs enum_values.")
        if self.kind is FlagKind.DYNAMIC_ENUM and not self.provider_id:
            raise InvalidGrammarError(
                f"Dynamic-enum flag '{self.name}' needs a provider_id."
            )

    @property
    def takes_value(self) -> bool:
        return self.kind.takes_value

    def matches(self, token: str) -> bool:
        """Return True if `token` names this flag or one of its aliases."""
        lowered = token.lower()
        if self.name.lower() == lowered:
            return True
        return any(alias.lower() == lowered for alias in self.aliases)


@dataclass(frozen=True)
class ArgSpec:
    """
    Describes the value an `ArgumentNode` expects.

    Attributes:
        name (str): Display name, e.g. `model-name`.
        kind (ArgKind): Value kind. `ArgKind.LITERAL` is reserved for literal nodes.
        optional (bool): Whether the argument can be omitted.
        enum_values (tuple[str, ...] | None): Static values for enum arguments.
        provider_id (str | None): Provider id for dynamic-enum arguments.
        placeholder (str | None): Ghost text, e.g. `<model-name>`.
        description (str | None): Text shown in completion detail.
    """

    name: str
    kind: ArgKind = ArgKind.STRING
    optional: bool = False
    enum_values: tuple[str, ...] | None = None
    provider_id: str | None = None
    placeholder: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ArgKind(self.kind))
        _freeze_optional(self, "enum_values")
        if self.kind is ArgKind.LITERAL:
            raise InvalidGrammarError(
                f"Argument '{self.name}' cannot be literal; use a LiteralNode."
            )
        if self.kind is ArgKind.ENUM and not self.enum_values:
            raise InvalidGrammarError(f"Enum argument '{self.name}' needs enum_values.")
        if self.kind is ArgKind.DYNAMIC_ENUM and not self.provider_id:
            raise InvalidGrammarError(
                f"Dynamic-enum argument '{self.name}' needs a provider_id."
            )


@dataclass(frozen=True)
class LiteralNode:
    """A fixed keyword, matched case-insensitively."""

    value: str
    children: tuple[CommandNode, ...] = ()
    flags: tuple[FlagSpec, ...] = ()
    description: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "children")
        _freeze(self, "flags")


@dataclass(frozen=True)
class ArgumentNode:
    """A value slot in the argument tree."""

    arg: ArgSpec
    children: tuple[CommandNode, ...] = ()
    flags: tuple[FlagSpec, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "children")
        _freeze(self, "flags")

    @property
    def description(self) -> str | None:
        return self.arg.description


CommandNode = Union[LiteralNode, ArgumentNode]


@dataclass(frozen=True)
class CommandSpec:
    """
    Declarative specification of a slash command.

    Attributes:
        name (str): Primary command name, without the leading `/`.
        description (str): Human description.
        usage (str): Usage string, e.g. `/model <model-name>`.
        aliases (tuple[str, ...]): Alternative names.
        root (tuple[CommandNode, ...]): First-level nodes after the command token.
        flags (tuple[FlagSpec, ...]): Command-level flags, valid everywhere.
    """

    name: str
    description: str
    usage: str = ""
    aliases: tuple[str, ...] = ()
    root: tuple[CommandNode, ...] = ()
    flags: tuple[FlagSpec, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "aliases")
        _freeze(self, "root")
        _freeze(self, "flags")
        if not self.name or self.name.startswith("/") or any(
            char.isspace() for char in self.name
        ):
            raise InvalidGrammarError(
                f"Command name '{self.name}' must be non-empty, without '/' or spaces."
            )
        if not self.usage:
            object.__setattr__(self, "usage", f"/{self.name}")

    @property
    def names(self) -> tuple[str, ...]:
        """Primary name followed by aliases."""
        return (self.name, *self.aliases)

    def iter_nodes(self) -> Iterator[CommandNode]:
        """Yield every node of the argument tree, depth first."""
        stack = list(reversed(self.root))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
