# Slashkit Completion Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `CommandRegistry`, the case-insensitive lookup table mapping command
names and aliases to their `CommandSpec`.

A registry is built once from a sequence of specs and never mutated afterwards.
Alias entries point at the same spec object as the primary name, so
`registry.get("m") is registry.get("model")`.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from slashkit.exceptions import CommandAlreadyExistsError
from slashkit.grammar.schema import CommandSpec
from slashkit.logger import logger
from slashkit.utils import CaseInsensitiveDict


class CommandRegistry:
    """
    Immutable, case-insensitive table of command specifications.

    Args:
        specs (Iterable[CommandSpec]): Specs in display order.

    Raises:
        CommandAlreadyExistsError: If two specs share a name or alias,
            compared case-insensitively.
    """

    def __init__(self, specs: Iterable[CommandSpec] = ()) -> None:
        self._specs: tuple[CommandSpec, ...] = tuple(specs)
        self._lookup: CaseInsensitiveDict = CaseInsensitiveDict()
        for spec in self._specs:
            self._register(spec)
        logger.debug(
            "Built command registry with %d commands (%d names).",
            len(self._specs),
            len(self._lookup),
        )

    def _register(self, spec: CommandSpec) -> None:
        for name in spec.names:
            existing = self._lookup.get(name)
            if existing is not None:
                raise CommandAlreadyExistsError(
                    f"Command name '{name}' of '/{spec.name}' is already registered "
                    f"by '/{existing.name}'."
                )
            self._lookup[name] = spec

    def get(self, name_or_alias: str) -> CommandSpec | None:
        """Resolve a spec by name or alias (case-insensitive)."""
        normalized = name_or_alias.strip()
        if not normalized:
            return None
        return self._lookup.get(normalized)

    @property
    def specs(self) -> tuple[CommandSpec, ...]:
        return self._specs

    def names(self) -> list[str]:
        """Primary command names in registration order."""
        return [spec.name for spec in self._specs]

    def merged(self, specs: Iterable[CommandSpec]) -> CommandRegistry:
        """Return a new registry holding this registry's specs followed by `specs`."""
        return CommandRegistry((*self._specs, *specs))

    def __contains__(self, name_or_alias: object) -> bool:
        return isinstance(name_or_alias, str) and self.get(name_or_alias) is not None

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"CommandRegistry({', '.join(self.names())})"
