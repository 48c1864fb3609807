# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Dynamic value providers for command completion.

Providers supply runtime values (model names, theme names, environment names,
command names) to the completion engine so suggestions stay in sync with
application state.

The engine never awaits: a `ProviderContext` is a synchronous snapshot the
caller builds before resolving completions. Anything backed by real I/O must
be fetched and cached by the caller first.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, Protocol, Sequence, runtime_checkable

from slashkit.logger import logger

if TYPE_CHECKING:
    from slashkit.grammar.registry import CommandRegistry


def _no_themes() -> Sequence[str]:
    return ()


@dataclass(frozen=True)
class ProviderContext:
    """
    Data the completion engine needs from the application to resolve
    dynamic values.

    Attributes:
        models (Sequence[str]): Available model identifiers.
        themes (Callable[[], Sequence[str]]): Lists available theme names.
        environments (Sequence[str]): Available environment names.
        commands (Sequence[str]): Command names, for `/help` completion.
    """

    models: Sequence[str] = ()
    themes: Callable[[], Sequence[str]] = _no_themes
    environments: Sequence[str] = ()
    commands: Sequence[str] = ()

    @classmethod
    def from_registry(
        cls,
        registry: CommandRegistry,
        models: Sequence[str] = (),
        themes: Callable[[], Sequence[str]] | Sequence[str] = _no_themes,
        environments: Sequence[str] = (),
    ) -> ProviderContext:
        """Build a context whose `commands` are the registry's primary names."""
        if not callable(themes):
            theme_names = tuple(themes)
            themes = lambda: theme_names  # noqa: E731
        return cls(
            models=tuple(models),
            themes=themes,
            environments=tuple(environments),
            commands=tuple(registry.names()),
        )


@runtime_checkable
class DynamicProvider(Protocol):
    """Resolves the current values for one provider id."""

    id: str

    def get_values(self, context: ProviderContext) -> Sequence[str]: ...


@dataclass(frozen=True)
class CallableProvider:
    """A `DynamicProvider` backed by a plain function."""

    id: str
    resolver: Callable[[ProviderContext], Sequence[str]]

    def get_values(self, context: ProviderContext) -> Sequence[str]:
        return self.resolver(context)


@dataclass
class ProviderRegistry:
    """Maps provider ids to `DynamicProvider` instances."""

    providers: dict[str, DynamicProvider] = field(default_factory=dict)

    def register(self, provider: DynamicProvider) -> None:
        if not isinstance(provider, DynamicProvider):
            raise TypeError(f"{provider!r} is not a DynamicProvider")
        self.providers[provider.id] = provider

    def register_all(self, providers: Iterable[DynamicProvider]) -> None:
        for provider in providers:
            self.register(provider)

    def resolve(self, provider_id: str, context: ProviderContext) -> list[str]:
        """Resolve values for `provider_id`. Unknown ids yield an empty list."""
        provider = self.providers.get(provider_id)
        if provider is None:
            logger.debug("No completion provider registered for '%s'.", provider_id)
            return []
        return list(provider.get_values(context))


DEFAULT_PROVIDERS = ProviderRegistry()
DEFAULT_PROVIDERS.register_all(
    [
        CallableProvider("models", lambda context: context.models),
        CallableProvider("themes", lambda context: context.themes()),
        CallableProvider("environments", lambda context: context.environments),
        CallableProvider("commands", lambda context: context.commands),
    ]
)


def resolve_provider_values(
    provider_id: str,
    context: ProviderContext,
    providers: ProviderRegistry | None = None,
) -> list[str]:
    """
    Resolve dynamic values for a given provider id.

    Returns an empty list if the provider is not found.
    """
    return (providers or DEFAULT_PROVIDERS).resolve(provider_id, context)
