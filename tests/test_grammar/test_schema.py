import pytest

from slashkit.exceptions import InvalidGrammarError
from slashkit.grammar.arg_kind import ArgKind, FlagKind
from slashkit.grammar.schema import ArgSpec, ArgumentNode, CommandSpec, FlagSpec, LiteralNode
from slashkit.grammar.specs import DAEMON_SPEC, MEMORY_SPEC, QUIT_SPEC


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("dynamic-enum", ArgKind.DYNAMIC_ENUM),
        ("Dynamic_Enum", ArgKind.DYNAMIC_ENUM),
        (" free_text ", ArgKind.FREE_TEXT),
        ("text", ArgKind.FREE_TEXT),
        ("int", ArgKind.INTEGER),
        ("dynamic", ArgKind.DYNAMIC_ENUM),
    ],
)
def test_arg_kind_lenient(raw, expected):
    assert ArgKind(raw) is expected


@pytest.mark.parametrize(
    "raw, expected",
    [("bool", FlagKind.BOOLEAN), ("FLAG", FlagKind.BOOLEAN), ("int", FlagKind.INTEGER)],
)
def test_flag_kind_lenient(raw, expected):
    assert FlagKind(raw) is expected


def test_invalid_kind():
    with pytest.raises(ValueError, match="Must be one of"):
        ArgKind("number")
    with pytest.raises(ValueError):
        FlagKind(3)


def test_flag_kind_takes_value():
    assert not FlagKind.BOOLEAN.takes_value
    assert all(kind.takes_value for kind in FlagKind if kind is not FlagKind.BOOLEAN)
    assert str(FlagKind.DYNAMIC_ENUM) == "dynamic-enum"


def test_specs_coerce_strings_and_lists():
    flag = FlagSpec(name="--type", kind="enum", enum_values=["a", "b"], aliases=["-t"])
    assert flag.kind is FlagKind.ENUM
    assert flag.enum_values == ("a", "b")
    assert flag.aliases == ("-t",)

    node = LiteralNode("list", children=[ArgumentNode(ArgSpec(name="id"))], flags=[flag])
    assert isinstance(node.children, tuple)
    assert node.flags == (flag,)

    arg = ArgSpec(name="mode", kind="enum", enum_values=["on", "off"])
    assert arg.kind is ArgKind.ENUM
    assert arg.enum_values == ("on", "off")


def test_flag_matches_name_and_alias():
    flag = FlagSpec(name="--type", aliases=("-t",), kind="string")
    assert flag.matches("--TYPE")
    assert flag.matches("-t")
    assert not flag.matches("--types")
    assert flag.takes_value


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "type"},
        {"name": "-"},
        {"name": "--type", "aliases": ("t",)},
        {"name": "--type", "kind": "enum"},
        {"name": "--model", "kind": "dynamic-enum"},
    ],
)
def test_invalid_flags(kwargs):
    with pytest.raises(InvalidGrammarError):
        FlagSpec(**kwargs)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"name": "sub", "kind": "literal"},
        {"name": "mode", "kind": "enum"},
        {"name": "model", "kind": "dynamic-enum"},
    ],
)
def test_invalid_args(kwargs):
    with pytest.raises(InvalidGrammarError):
        ArgSpec(**kwargs)


@pytest.mark.parametrize("name", ["", "/model", "two words"])
def test_invalid_command_names(name):
    with pytest.raises(InvalidGrammarError):
        CommandSpec(name=name, description="Bad.")


def test_usage_defaults_to_command():
    assert CommandSpec(name="ping", description="Ping.").usage == "/ping"
    assert QUIT_SPEC.usage == "/quit"
    assert QUIT_SPEC.names == ("quit", "exit", "q")


def test_iter_nodes_depth_first():
    nodes = list(DAEMON_SPEC.iter_nodes())
    assert len(nodes) == 10
    assert nodes[0].value == "add"
    assert nodes[1].arg.name == "name"
    assert nodes[2].arg.name == "url"
    assert nodes[3].value == "switch"


def test_argument_node_description():
    show = MEMORY_SPEC.root[1]
    assert show.value == "show"
    assert show.children[0].description == "Memory entry ID"


def test_specs_are_frozen():
    with pytest.raises(AttributeError):
        QUIT_SPEC.name = "leave"
