# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Cursor-aware tokenizer for command completion.

Splits input into tokens while preserving their character ranges, so the
completion engine knows exactly which token the cursor is in and which range
to replace when a suggestion is accepted.

Quoting follows shell-like rules:
- Single and double quotes group whitespace into one token.
- A backslash escapes the next character only inside a quote.
- A closing quote does not end the token: `"foo"bar` is `foobar`.
- An unterminated trailing quote is tolerated and runs to end of input.
"""
from __future__ import annotations

from dataclasses import dataclass

QUOTES = ('"', "'")


@dataclass(frozen=True)
class Token:
    """A token and its half-open `[start, end)` range in the original input."""

    text: str
    start: int
    end: int
    quoted: bool = False


@dataclass(frozen=True)
class CursorTokenInfo:
    """
    Cursor context within tokenized input.

    Attributes:
        tokens (tuple[Token, ...]): All tokens parsed from the input.
        active_token_index (int): Index of the token the cursor is within or
            immediately after. -1 when the cursor sits in a whitespace gap.
        active_prefix (str): Partial text of the active token up to the cursor.
        replace_start (int): Start of the range to replace on acceptance.
        replace_end (int): End of the range to replace on acceptance.
    """

    tokens: tuple[Token, ...]
    active_token_index: int
    active_prefix: str
    replace_start: int
    replace_end: int

    @property
    def in_gap(self) -> bool:
        return self.active_token_index == -1


def tokenize(text: str) -> list[Token]:
    """Tokenize `text`, tracking character ranges."""
    tokens: list[Token] = []
    current: list[str] = []
    token_start = -1
    quote: str | None = None
    escaping = False
    was_quoted = False

    for index, char in enumerate(text):
        if escaping:
            current.append(char)
            escaping = False
            continue

        if char == "\\" and quote is not None:
            escaping = True
            continue

        if quote is not None:
            if char == quote:
                quote = None
            else:
                current.append(char)
            continue

        if char in QUOTES:
            if not current and token_start < 0:
                token_start = index
            quote = char
            was_quoted = True
            continue

        if char.isspace():
            if current or was_quoted:
                tokens.append(Token("".join(current), token_start, index, was_quoted))
            current = []
            token_start = -1
            was_quoted = False
            continue

        if token_start < 0:
            token_start = index
        current.append(char)

    if current or quote is not None or was_quoted:
        tokens.append(
            Token(
                "".join(current),
                token_start if token_start >= 0 else len(text),
                len(text),
                was_quoted,
            )
        )

    return tokens


def get_cursor_token_info(text: str, cursor: int) -> CursorTokenInfo:
    """
    Determine the cursor context within the tokenized input.

    A cursor right after a token's last character still belongs to that token,
    so continued typing extends it. A cursor at a token's first character is a
    gap. Cursor values outside `[0, len(text)]` are clamped.
    """
    cursor = max(0, min(cursor, len(text)))
    tokens = tuple(tokenize(text))

    for index, token in enumerate(tokens):
        if token.start < cursor <= token.end:
            prefix = text[token.start : cursor]
            if prefix[:1] in QUOTES:
                prefix = prefix[1:]
            return CursorTokenInfo(
                tokens=tokens,
                active_token_index=index,
                active_prefix=prefix,
                replace_start=token.start,
                replace_end=token.end,
            )

    return CursorTokenInfo(
        tokens=tokens,
        active_token_index=-1,
        active_prefix="",
        replace_start=cursor,
        replace_end=cursor,
    )
