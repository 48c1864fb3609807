# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parses a submitted slash-command line into its command, positional arguments
and flags.

Unlike the completion tokenizer, which must tolerate half-typed input, this
parser is strict: an unterminated quote or a malformed flag raises
`CommandParseError` with a `ParseErrorCode` so callers can report it.

Flag forms:
- `--name`           → {"name": True}
- `--name=value`     → {"name": "value"}
- `-k=value`         → {"k": "value"}
- `-abc`             → {"a": True, "b": True, "c": True}

Flag keys are lowercased and later flags override earlier ones. Argument
semantics (e.g. that a model exists) are not checked here.

Example:
    parsed = parse_slash_command("/memory list --type=fact -v")
    parsed.command.name     # "memory"
    parsed.positional       # ("list",)
    parsed.flags            # {"type": "fact", "v": True}
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from slashkit.exceptions import CommandParseError
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.schema import CommandSpec
from slashkit.grammar.specs import DEFAULT_REGISTRY

FlagValue = str | bool


class ParseErrorCode(Enum):
    EMPTY_INPUT = "EMPTY_INPUT"
    NOT_A_COMMAND = "NOT_A_COMMAND"
    MISSING_COMMAND = "MISSING_COMMAND"
    UNKNOWN_COMMAND = "UNKNOWN_COMMAND"
    UNTERMINATED_QUOTE = "UNTERMINATED_QUOTE"
    INVALID_FLAG = "INVALID_FLAG"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParsedCommand:
    """A successfully parsed slash command."""

    raw_input: str
    raw_command: str
    command: CommandSpec
    positional: tuple[str, ...] = ()
    flags: dict[str, FlagValue] = field(default_factory=dict)


def split_command_line(text: str) -> list[str]:
    """
    Split `text` into tokens.

    Backslash escapes the next character anywhere; a trailing lone backslash is
    kept literally.

    Raises:
        CommandParseError: If a quote is left open.
    """
    tokens: list[str] = []
    current: list[str] = []
    quote: str | None = None
    escaping = False

    for char in text:
        if escaping:
            current.append(char)
            escaping = False
            continue
        if char == "\\":
            escaping = True
            continue
        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
            continue
        if char in ('"', "'"):
            quote = char
            continue
        if char.isspace():
            if current:
                tokens.append("".join(current))
                current = []
            continue
        current.append(char)

    if quote is not None:
        raise CommandParseError(
            ParseErrorCode.UNTERMINATED_QUOTE,
            "Command input contains an unterminated quote.",
        )
    if escaping:
        current.append("\\")
    if current:
        tokens.append("".join(current))
    return tokens


def _invalid_flag(message: str) -> CommandParseError:
    return CommandParseError(ParseErrorCode.INVALID_FLAG, message)


def parse_flag_token(token: str) -> dict[str, FlagValue]:
    """Parse one flag-shaped token into a mapping of lowercase keys to values."""
    if token.startswith("--"):
        body = token[2:]
        if not body:
            raise _invalid_flag("Long flag cannot be empty.")
        key, separator, value = body.partition("=")
        if separator:
            key = key.strip().lower()
            if not key:
                raise _invalid_flag(f"Invalid flag token '{token}'.")
            return {key: value}
        return {body.lower(): True}

    body = token[1:]
    if not body:
        raise _invalid_flag("Short flag cannot be empty.")
    separator_index = body.find("=")
    if separator_index == 1:
        return {body[0].lower(): body[2:]}
    if separator_index > -1:
        raise _invalid_flag(f"Invalid short flag token '{token}'.")
    return {key.lower(): True for key in body}


def parse_slash_command(
    text: str, registry: CommandRegistry | None = None
) -> ParsedCommand:
    """
    Parse a submitted slash command.

    Raises:
        CommandParseError: With the matching `ParseErrorCode` when the input is
            empty, not a command, missing or naming an unknown command, has an
            open quote, or contains a malformed flag.
    """
    registry = registry or DEFAULT_REGISTRY
    trimmed = text.lstrip()
    if not trimmed:
        raise CommandParseError(ParseErrorCode.EMPTY_INPUT, "Input is empty.")
    if not trimmed.startswith("/"):
        raise CommandParseError(
            ParseErrorCode.NOT_A_COMMAND, "Input does not start with '/'."
        )

    tokens = split_command_line(trimmed)
    raw_command = (tokens[0] if tokens else "/")[1:].strip()
    if not raw_command:
        raise CommandParseError(
            ParseErrorCode.MISSING_COMMAND, "Missing command name after '/'."
        )

    command = registry.get(raw_command)
    if command is None:
        raise CommandParseError(
            ParseErrorCode.UNKNOWN_COMMAND,
            f"Unknown command '/{raw_command.lower()}'.",
        )

    positional: list[str] = []
    flags: dict[str, FlagValue] = {}
    for token in tokens[1:]:
        if token.startswith("-") and len(token) > 1:
            flags.update(parse_flag_token(token))
        else:
            positional.append(token)

    return ParsedCommand(
        raw_input=text,
        raw_command=raw_command,
        command=command,
        positional=tuple(positional),
        flags=flags,
    )
