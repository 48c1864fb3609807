# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Built-in declarative command specifications.

Each spec defines the argument tree the completion engine walks to generate
context-aware suggestions. The table is assembled once into
`DEFAULT_REGISTRY` at import time.
"""
from __future__ import annotations

from slashkit.grammar.arg_kind import ArgKind, FlagKind
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.schema import (
    ArgSpec,
    ArgumentNode,
    CommandSpec,
    FlagSpec,
    LiteralNode,
)


def _simple(name: str, aliases: tuple[str, ...], description: str) -> CommandSpec:
    return CommandSpec(name=name, aliases=aliases, description=description)


NEW_SPEC = _simple("new", ("n",), "Start a new conversation.")
CLEAR_SPEC = _simple("clear", ("cls",), "Clear the current conversation.")
CONNECT_SPEC = _simple("connect", ("provider",), "Open provider setup flow.")
STATUS_SPEC = _simple("status", ("st",), "Show daemon and session status.")
SETTINGS_SPEC = _simple("settings", ("prefs",), "Open settings.")
SEARCH_SETTINGS_SPEC = _simple(
    "search-settings", ("ss",), "Configure web search provider and API keys."
)
QUIT_SPEC = _simple("quit", ("exit", "q"), "Exit the TUI.")
SETUP_SPEC = _simple(
    "setup", ("onboarding", "personality"), "Re-run the onboarding setup wizard."
)
INTEGRATIONS_SPEC = _simple("integrations", ("int",), "Open integrations panel.")
SKILLS_SPEC = _simple("skills", ("sk",), "Open skills management panel.")

HELP_SPEC = CommandSpec(
    name="help",
    aliases=("h",),
    description="List available commands and their usage.",
    usage="/help [command]",
    root=(
        ArgumentNode(
            ArgSpec(
                name="command",
                kind=ArgKind.DYNAMIC_ENUM,
                provider_id="commands",
                optional=True,
                placeholder="[command]",
                description="Command name to get help for",
            )
        ),
    ),
)

MODEL_SPEC = CommandSpec(
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
                description="Model to activate",
            )
        ),
    ),
)

THEME_SPEC = CommandSpec(
    name="theme",
    aliases=("t",),
    description="Switch the active theme.",
    usage="/theme <theme-name>",
    root=(
        ArgumentNode(
            ArgSpec(
                name="theme-name",
                kind=ArgKind.DYNAMIC_ENUM,
                provider_id="themes",
                placeholder="<theme-name>",
                description="Theme to activate",
            )
        ),
    ),
)

ENV_SPEC = CommandSpec(
    name="env",
    aliases=("environment",),
    description="Switch or list environments.",
    usage="/env [name]",
    root=(
        ArgumentNode(
            ArgSpec(
                name="name",
                kind=ArgKind.DYNAMIC_ENUM,
                provider_id="environments",
                optional=True,
                placeholder="[name]",
                description="Environment to switch to",
            )
        ),
    ),
)

COMPACT_SPEC = CommandSpec(
    name="compact",
    aliases=("dense",),
    description="Toggle compact rendering mode.",
    usage="/compact [on|off]",
    root=(
        ArgumentNode(
            ArgSpec(
                name="mode",
                kind=ArgKind.ENUM,
                enum_values=("on", "off"),
                optional=True,
                placeholder="[on|off]",
                description="Enable or disable compact mode",
            )
        ),
    ),
)

EXPORT_SPEC = CommandSpec(
    name="export",
    aliases=("save",),
    description="Export the current conversation.",
    usage="/export [path]",
    root=(
        ArgumentNode(
            ArgSpec(
                name="path",
                kind=ArgKind.PATH,
                optional=True,
                placeholder="[path]",
                description="File path to export to",
            )
        ),
    ),
)

MEMORY_TYPE_FLAG = FlagSpec(
    name="--type",
    kind=FlagKind.ENUM,
    enum_values=(
        "fact",
        "preference",
        "decision",
        "episode",
        "skill",
        "entity",
        "document_chunk",
    ),
    description="Filter by memory type",
)
MEMORY_LAYER_FLAG = FlagSpec(
    name="--layer",
    kind=FlagKind.ENUM,
    enum_values=("stm", "ltm"),
    description="Filter by memory layer",
)
MEMORY_LIMIT_FLAG = FlagSpec(
    name="--limit",
    kind=FlagKind.INTEGER,
    description="Maximum number of results",
)
MEMORY_FILTER_FLAGS = (MEMORY_TYPE_FLAG, MEMORY_LAYER_FLAG, MEMORY_LIMIT_FLAG)

MEMORY_SPEC = CommandSpec(
    name="memory",
    aliases=("mem",),
    description="List, inspect, or search memory entries.",
    usage="/memory <list|show|search|settings|setup|reindex> [options]",
    root=(
        LiteralNode(
            "list",
            description="List memory entries",
            flags=MEMORY_FILTER_FLAGS,
        ),
        LiteralNode(
            "show",
            description="Show a specific memory entry",
            children=(
                ArgumentNode(
                    ArgSpec(
                        name="id",
                        placeholder="<id>",
                        description="Memory entry ID",
                    )
                ),
            ),
        ),
        LiteralNode(
            "search",
            description="Search memory entries",
            children=(
                ArgumentNode(
                    ArgSpec(
                        name="query",
                        kind=ArgKind.FREE_TEXT,
                        placeholder="<query>",
                        description="Search query",
                    )
                ),
            ),
            flags=MEMORY_FILTER_FLAGS,
        ),
        LiteralNode("settings", description="Manage proactive memory settings"),
        LiteralNode("setup", description="Configure embedding provider"),
        LiteralNode("reindex", description="Re-index memory embeddings"),
    ),
)

REMEMBER_SPEC = CommandSpec(
    name="remember",
    aliases=("rem",),
    description="Save an explicit memory entry.",
    usage="/remember [--type fact|preference|decision|note] [--tags a,b] <text>",
    root=(
        ArgumentNode(
            ArgSpec(
                name="text",
                kind=ArgKind.FREE_TEXT,
                placeholder="<text>",
                description="Memory content to save",
            )
        ),
    ),
    flags=(
        FlagSpec(
            name="--type",
            kind=FlagKind.ENUM,
            enum_values=("fact", "preference", "decision", "note"),
            description="Memory type",
        ),
        FlagSpec(name="--tags", kind=FlagKind.STRING, description="Comma-separated tags"),
    ),
)


def _profile_name(description: str) -> ArgSpec:
    return ArgSpec(name="name", placeholder="<name>", description=description)


DAEMON_SPEC = CommandSpec(
    name="daemon",
    aliases=("d",),
    description="Manage daemon connections and profiles.",
    usage="/daemon [add|switch|remove|status|token] [options]",
    root=(
        LiteralNode(
            "add",
            description="Add a new daemon profile",
            children=(
                ArgumentNode(
                    _profile_name("Profile name"),
                    children=(
                        ArgumentNode(
                            ArgSpec(
                                name="url",
                                placeholder="<url>",
                                description="Daemon URL",
                            )
                        ),
                    ),
                ),
            ),
        ),
        LiteralNode(
            "switch",
            description="Switch to a daemon profile",
            children=(ArgumentNode(_profile_name("Profile name to switch to")),),
        ),
        LiteralNode(
            "remove",
            description="Remove a daemon profile",
            children=(ArgumentNode(_profile_name("Profile name to remove")),),
        ),
        LiteralNode("status", description="Show daemon connection status"),
        LiteralNode(
            "token",
            description="Manage daemon auth tokens",
            children=(
                ArgumentNode(
                    ArgSpec(
                        name="action",
                        kind=ArgKind.ENUM,
                        enum_values=("show", "rotate"),
                        optional=True,
                        placeholder="[show|rotate]",
                        description="Token action",
                    )
                ),
            ),
        ),
    ),
)

CHANNEL_PLATFORMS = ("telegram", "discord")


def _platform(description: str, *children: ArgumentNode) -> ArgumentNode:
    return ArgumentNode(
        ArgSpec(
            name="platform",
            kind=ArgKind.ENUM,
            enum_values=CHANNEL_PLATFORMS,
            placeholder="<telegram|discord>",
            description=description,
        ),
        children=children,
    )


CHANNELS_SPEC = CommandSpec(
    name="channels",
    aliases=("ch",),
    description="Manage external chat channel integrations.",
    usage="/channels [add|remove|enable|disable|status] [platform]",
    root=(
        LiteralNode(
            "add",
            description="Add a new chat channel",
            children=(
                _platform(
                    "Platform to add",
                    ArgumentNode(
                        ArgSpec(
                            name="token",
                            optional=True,
                            placeholder="[bot-token]",
                            description="Bot token (or prompted interactively)",
                        )
                    ),
                ),
            ),
        ),
        LiteralNode(
            "remove",
            description="Remove a configured channel",
            children=(_platform("Platform to remove"),),
        ),
        LiteralNode(
            "enable",
            description="Enable a channel",
            children=(_platform("Platform to enable"),),
        ),
        LiteralNode(
            "disable",
            description="Disable a channel",
            children=(_platform("Platform to disable"),),
        ),
        LiteralNode("status", description="Show all channel statuses"),
    ),
)

BROWSER_SPEC = CommandSpec(
    name="browser",
    aliases=("br",),
    description="Control the browser: navigate, screenshot, and monitor pages.",
    usage="/browser [headed | headless | screenshot | close]",
    root=(
        LiteralNode("headed", description="Switch to headed (visible window) mode"),
        LiteralNode("headless", description="Switch to headless (background) mode"),
        LiteralNode("screenshot", description="Take a screenshot of the current page"),
        LiteralNode("close", description="Close the browser"),
    ),
)

COMMAND_SPECS: tuple[CommandSpec, ...] = (
    HELP_SPEC,
    MODEL_SPEC,
    THEME_SPEC,
    CONNECT_SPEC,
    STATUS_SPEC,
    ENV_SPEC,
    NEW_SPEC,
    CLEAR_SPEC,
    EXPORT_SPEC,
    COMPACT_SPEC,
    SETTINGS_SPEC,
    SEARCH_SETTINGS_SPEC,
    QUIT_SPEC,
    REMEMBER_SPEC,
    MEMORY_SPEC,
    DAEMON_SPEC,
    CHANNELS_SPEC,
    SETUP_SPEC,
    INTEGRATIONS_SPEC,
    SKILLS_SPEC,
    BROWSER_SPEC,
)

DEFAULT_REGISTRY = CommandRegistry(COMMAND_SPECS)


def get_command_spec(name_or_alias: str) -> CommandSpec | None:
    """Resolve a built-in spec by name or alias (case-insensitive)."""
    return DEFAULT_REGISTRY.get(name_or_alias)
