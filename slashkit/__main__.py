"""
Slashkit Completion Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Interactive demo shell: type slash commands with live completion, ghost text
and validation. Submitted commands are parsed and echoed, never executed.
"""

import asyncio
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Any

from prompt_toolkit import PromptSession
from prompt_toolkit.shortcuts import CompleteStyle
from rich.markup import escape
from rich.table import Table

from slashkit.completer import GhostTextAutoSuggest, SlashCompleter
from slashkit.completion.providers import ProviderContext
from slashkit.config import find_grammar_config, loader
from slashkit.console import console
from slashkit.exceptions import CommandParseError, SlashkitError
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.specs import DEFAULT_REGISTRY
from slashkit.logger import logger
from slashkit.parser import parse_slash_command
from slashkit.utils import setup_logging
from slashkit.validators import SlashCommandValidator

QUIT_COMMAND = "quit"
HELP_COMMAND = "help"


def get_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="slashkit",
        description="Interactive slash-command shell with live completion.",
    )
    parser.add_argument("-c", "--config", type=Path, help="Grammar config (YAML or TOML).")
    parser.add_argument(
        "--log-mode", choices=["cli", "json"], default=None, help="Logging output mode."
    )
    parser.add_argument(
        "--log-file", default=None, help="Write debug logs to this file."
    )
    parser.add_argument(
        "--model", dest="models", action="append", default=[], help="Model name to offer."
    )
    parser.add_argument(
        "--theme", dest="themes", action="append", default=[], help="Theme name to offer."
    )
    parser.add_argument(
        "--env",
        dest="environments",
        action="append",
        default=[],
        help="Environment name to offer.",
    )
    return parser


def build_registry(config_path: Path | None) -> CommandRegistry:
    if config_path is None:
        return DEFAULT_REGISTRY
    return loader(config_path)


def render_help(registry: CommandRegistry, name: str | None = None) -> None:
    """Print the command table, or the usage of a single command."""
    if name:
        spec = registry.get(name.removeprefix("/"))
        if spec is None:
            console.print(f"[error]Unknown command:[/] /{escape(name)}")
            return
        console.print(f"[command]/{spec.name}[/] {escape(spec.description)}")
        console.print(f"Usage: {escape(spec.usage)}")
        if spec.aliases:
            console.print(f"Aliases: {', '.join('/' + alias for alias in spec.aliases)}")
        return

    table = Table(title="Slash Commands", show_header=True, box=None)
    table.add_column("Command", style="command")
    table.add_column("Aliases")
    table.add_column("Usage", style="placeholder")
    table.add_column("Description")
    for spec in registry:
        table.add_row(
            f"/{spec.name}",
            ", ".join(spec.aliases),
            escape(spec.usage),
            escape(spec.description),
        )
    console.print(table)


def handle_line(line: str, registry: CommandRegistry) -> bool:
    """Parse and echo one submitted line. Returns False when the shell should exit."""
    if not line.strip():
        return True
    if not line.lstrip().startswith("/"):
        console.print(f"[placeholder]message:[/] {escape(line)}")
        return True

    try:
        parsed = parse_slash_command(line, registry)
    except CommandParseError as error:
        logger.debug("Rejected input %r: %s", line, error.code)
        console.print(f"[error]{error.code}:[/] {escape(error.message)}")
        return True

    if parsed.command.name == QUIT_COMMAND:
        return False
    if parsed.command.name == HELP_COMMAND:
        render_help(registry, parsed.positional[0] if parsed.positional else None)
        return True

    console.print(f"[command]/{parsed.command.name}[/]")
    if parsed.positional:
        console.print(f"  positional: {escape(repr(list(parsed.positional)))}")
    for key, value in parsed.flags.items():
        console.print(f"  [flag]--{escape(key)}[/] = {escape(repr(value))}")
    return True


def build_session(args: Namespace, registry: CommandRegistry) -> PromptSession:
    context = ProviderContext.from_registry(
        registry,
        models=args.models,
        themes=args.themes,
        environments=args.environments,
    )
    return PromptSession(
        message="> ",
        multiline=False,
        completer=SlashCompleter(context, registry),
        auto_suggest=GhostTextAutoSuggest(context, registry),
        complete_style=CompleteStyle.COLUMN,
        complete_while_typing=True,
        validator=SlashCommandValidator(registry),
        validate_while_typing=False,
    )


async def run_shell(session: PromptSession, registry: CommandRegistry) -> None:
    console.print("Type [command]/help[/] for commands, [command]/quit[/] to exit.")
    while True:
        try:
            line = await session.prompt_async()
        except (EOFError, KeyboardInterrupt):
            break
        if not handle_line(line, registry):
            break


def main(argv: list[str] | None = None) -> Any:
    args = get_parser().parse_args(argv)
    setup_logging(mode=args.log_mode, log_filename=args.log_file)
    config_path = args.config or find_grammar_config()
    try:
        registry = build_registry(config_path)
    except (OSError, ValueError, SlashkitError) as error:
        console.print(f"[error]Could not load grammar config:[/] {escape(str(error))}")
        sys.exit(1)
    return asyncio.run(run_shell(build_session(args, registry), registry))


if __name__ == "__main__":
    main()
