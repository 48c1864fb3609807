# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgKind` and `FlagKind`, the enums describing what kind of value a
grammar node or flag expects.

Both enums accept loose string spellings so grammars declared in YAML or TOML
can use config-friendly values.

Example:
    ArgKind("dynamic-enum") → ArgKind.DYNAMIC_ENUM
    ArgKind("Dynamic_Enum") → ArgKind.DYNAMIC_ENUM
    ArgKind("text")         → ArgKind.FREE_TEXT (via alias)
    FlagKind("bool")        → FlagKind.BOOLEAN (via alias)
"""
from __future__ import annotations

from enum import Enum


class _LenientEnum(Enum):
    """Enum base resolving members from normalized strings and aliases."""

    @classmethod
    def _get_alias(cls, value: str) -> str:
        return value

    @classmethod
    def _missing_(cls, value: object):
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("_", "-")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value


class ArgKind(_LenientEnum):
    """
    The kind of value an argument node expects.

    Members:
        LITERAL: Fixed keyword (subcommand-like). Only used by literal nodes.
        STRING: Arbitrary single token.
        ENUM: One of a fixed set of values.
        DYNAMIC_ENUM: One of a set resolved at completion time via a provider.
        INTEGER: Numeric value.
        PATH: Filesystem-ish token.
        FREE_TEXT: Consumes all remaining tokens.

    Aliases:
        - "text" → "free-text"
        - "int" → "integer"
        - "dynamic" → "dynamic-enum"
    """

    LITERAL = "literal"
    STRING = "string"
    ENUM = "enum"
    DYNAMIC_ENUM = "dynamic-enum"
    INTEGER = "integer"
    PATH = "path"
    FREE_TEXT = "free-text"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "text": "free-text",
            "freetext": "free-text",
            "int": "integer",
            "dynamic": "dynamic-enum",
        }
        return aliases.get(value, value)


class FlagKind(_LenientEnum):
    """
    The kind of value a flag expects. Boolean flags take no value.

    Aliases:
        - "bool" / "flag" → "boolean"
        - "int" → "integer"
        - "dynamic" → "dynamic-enum"
    """

    BOOLEAN = "boolean"
    ENUM = "enum"
    DYNAMIC_ENUM = "dynamic-enum"
    STRING = "string"
    INTEGER = "integer"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "flag": "boolean",
            "int": "integer",
            "dynamic": "dynamic-enum",
        }
        return aliases.get(value, value)

    @property
    def takes_value(self) -> bool:
        """Whether a flag of this kind consumes the following token."""
        return self is not FlagKind.BOOLEAN
