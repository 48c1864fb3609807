import pytest

from slashkit.exceptions import CommandAlreadyExistsError
from slashkit.grammar.registry import CommandRegistry
from slashkit.grammar.schema import CommandSpec
from slashkit.grammar.specs import COMMAND_SPECS, DEFAULT_REGISTRY, get_command_spec


def test_builtin_table_size():
    assert len(DEFAULT_REGISTRY) == 21
    assert DEFAULT_REGISTRY.names()[:3] == ["help", "model", "theme"]
    assert tuple(DEFAULT_REGISTRY) == COMMAND_SPECS


@pytest.mark.parametrize("spec", COMMAND_SPECS, ids=lambda spec: spec.name)
def test_aliases_resolve_to_same_spec(spec):
    for name in spec.names:
        assert get_command_spec(name) is spec
        assert get_command_spec(name.upper()) is spec


def test_lookup_is_trimmed_and_case_insensitive():
    model = get_command_spec("model")
    assert get_command_spec("  MoDeL ") is model
    assert get_command_spec("m") is model


def test_unknown_and_empty_lookups():
    assert get_command_spec("nope") is None
    assert get_command_spec("") is None
    assert get_command_spec("   ") is None
    assert "nope" not in DEFAULT_REGISTRY
    assert "exit" in DEFAULT_REGISTRY
    assert 42 not in DEFAULT_REGISTRY


def test_duplicate_name_rejected():
    with pytest.raises(CommandAlreadyExistsError, match="deploy"):
        CommandRegistry(
            [
                CommandSpec(name="deploy", description="One."),
                CommandSpec(name="Deploy", description="Two."),
            ]
        )


def test_duplicate_alias_rejected():
    with pytest.raises(CommandAlreadyExistsError):
        CommandRegistry(
            [
                CommandSpec(name="deploy", aliases=("d",), description="One."),
                CommandSpec(name="destroy", aliases=("D",), description="Two."),
            ]
        )


def test_merged_returns_new_registry():
    extra = CommandSpec(name="deploy", aliases=("dp",), description="Deploy.")
    merged = DEFAULT_REGISTRY.merged([extra])
    assert len(merged) == 22
    assert merged.get("dp") is extra
    assert DEFAULT_REGISTRY.get("dp") is None
    assert merged.names()[-1] == "deploy"


def test_merged_rejects_builtin_collision():
    with pytest.raises(CommandAlreadyExistsError):
        DEFAULT_REGISTRY.merged([CommandSpec(name="status", description="Again.")])


def test_empty_registry():
    registry = CommandRegistry()
    assert len(registry) == 0
    assert registry.get("help") is None
    assert repr(registry) == "CommandRegistry()"
