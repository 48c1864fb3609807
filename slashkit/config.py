# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads additional slash-command grammars from YAML or TOML files.

Example (YAML):
    commands:
      - name: deploy
        aliases: [dp]
        description: Deploy a service.
        usage: /deploy <service> [--env prod|dev]
        flags:
          - name: --env
            kind: enum
            enum_values: [prod, dev]
        root:
          - argument:
              name: service
              kind: string
              placeholder: <service>
          - literal: rollback
            description: Roll back the last deploy
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from slashkit.exceptions import ConfigError, InvalidGrammarError
from slashkit.grammar.arg_kind import ArgKind, FlagKind
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.schema import (
    ArgSpec,
    ArgumentNode,
    CommandNode,
    CommandSpec,
    FlagSpec,
    LiteralNode,
)
from slashkit.grammar.specs import DEFAULT_REGISTRY
from slashkit.logger import logger


def _coerce_kind(enum_type, value: str, owner: str):
    try:
        return enum_type(value)
    except ValueError as error:
        raise ConfigError(f"{owner}: {error}") from None


class RawFlag(BaseModel):
    """Raw flag model for grammar configuration."""

    name: str
    kind: str = "boolean"
    aliases: list[str] = Field(default_factory=list)
    enum_values: list[str] | None = None
    provider_id: str | None = None
    repeatable: bool = False
    description: str | None = None

    def to_flag(self) -> FlagSpec:
        return FlagSpec(
            name=self.name,
            kind=_coerce_kind(FlagKind, self.kind, f"flag '{self.name}'"),
            aliases=tuple(self.aliases),
            enum_values=self.enum_values,
            provider_id=self.provider_id,
            repeatable=self.repeatable,
            description=self.description,
        )


class RawArgument(BaseModel):
    """Raw argument model for grammar configuration."""

    name: str
    kind: str = "string"
    optional: bool = False
    enum_values: list[str] | None = None
    provider_id: str | None = None
    placeholder: str | None = None
    description: str | None = None

    def to_arg(self) -> ArgSpec:
        return ArgSpec(
            name=self.name,
            kind=_coerce_kind(ArgKind, self.kind, f"argument '{self.name}'"),
            optional=self.optional,
            enum_values=self.enum_values,
            provider_id=self.provider_id,
            placeholder=self.placeholder,
            description=self.description,
        )


class RawNode(BaseModel):
    """A tree node: exactly one of `literal` or `argument` must be set."""

    literal: str | None = None
    argument: RawArgument | None = None
    description: str | None = None
    children: list[RawNode] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_node_type(self) -> RawNode:
        if (self.literal is None) == (self.argument is None):
            raise ValueError("Each node needs exactly one of 'literal' or 'argument'.")
        return self

    def to_node(self) -> CommandNode:
        children = tuple(child.to_node() for child in self.children)
        flags = tuple(flag.to_flag() for flag in self.flags)
        if self.literal is not None:
            return LiteralNode(
                self.literal,
                children=children,
                flags=flags,
                description=self.description,
            )
        if self.argument is not None:
            return ArgumentNode(self.argument.to_arg(), children=children, flags=flags)
        raise ConfigError("Each node needs exactly one of 'literal' or 'argument'.")


RawNode.model_rebuild()


class RawCommand(BaseModel):
    """Raw command model for grammar configuration."""

    name: str
    description: str
    usage: str = ""
    aliases: list[str] = Field(default_factory=list)
    root: list[RawNode] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)

    def to_spec(self) -> CommandSpec:
        return CommandSpec(
            name=self.name.removeprefix("/"),
            description=self.description,
            usage=self.usage,
            aliases=tuple(self.aliases),
            root=tuple(node.to_node() for node in self.root),
            flags=tuple(flag.to_flag() for flag in self.flags),
        )


class GrammarConfig(BaseModel):
    """Slashkit grammar configuration model."""

    commands: list[RawCommand] = Field(default_factory=list)

    def to_specs(self) -> list[CommandSpec]:
        return [command.to_spec() for command in self.commands]


def find_grammar_config() -> Path | None:
    candidates = [
        Path.cwd() / "slashkit.yaml",
        Path.cwd() / "slashkit.toml",
        Path(os.environ.get("SLASHKIT_CONFIG", "slashkit.yaml")),
        Path.home() / ".config" / "slashkit" / "slashkit.yaml",
        Path.home() / ".config" / "slashkit" / "slashkit.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'deploy'\n"
            "    description: 'Deploy a service'"
        )
    return raw_config


def loader(file_path: Path | str, include_builtin: bool = True) -> CommandRegistry:
    """
    Load slash-command grammars from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.
        include_builtin (bool): Append the loaded commands to the built-in
            table instead of replacing it.

    Returns:
        CommandRegistry: A registry holding the loaded commands.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the document is not a mapping.
        ConfigError: If the document does not describe valid commands, or a
            command grammar is structurally invalid.
        CommandAlreadyExistsError: If a command name or alias is taken.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = read_config_file(path)
    try:
        config = GrammarConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid grammar config '{path}':\n{error}") from error

    try:
        specs = config.to_specs()
    except InvalidGrammarError as error:
        raise ConfigError(f"Invalid grammar in '{path}': {error}") from error
    logger.debug("Loaded %d command grammars from '%s'.", len(specs), path)
    if include_builtin:
        return DEFAULT_REGISTRY.merged(specs)
    return CommandRegistry(specs)
