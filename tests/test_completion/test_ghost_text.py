from slashkit.completion.ghost_text import compute_ghost_text
from slashkit.completion.walker import WalkState, initial_state, walk_tokens
from slashkit.grammar.arg_kind import ArgKind, FlagKind
from slashkit.grammar.schema import ArgSpec, ArgumentNode, FlagSpec, LiteralNode
from slashkit.grammar.specs import (
    BROWSER_SPEC,
    DAEMON_SPEC,
    EXPORT_SPEC,
    MEMORY_SPEC,
    MODEL_SPEC,
    REMEMBER_SPEC,
)


def test_five_literals_are_listed_in_full():
    assert compute_ghost_text(initial_state(DAEMON_SPEC)) == (
        "<add|switch|remove|status|token>"
    )


def test_more_than_five_literals_are_truncated():
    assert compute_ghost_text(initial_state(MEMORY_SPEC)) == (
        "<list|show|search|settings|...>"
    )


def test_four_literals():
    assert compute_ghost_text(initial_state(BROWSER_SPEC)) == (
        "<headed|headless|screenshot|close>"
    )


def test_argument_placeholder():
    assert compute_ghost_text(initial_state(MODEL_SPEC)) == "<model-name>"
    assert compute_ghost_text(initial_state(EXPORT_SPEC)) == "[path]"
    assert compute_ghost_text(initial_state(REMEMBER_SPEC)) == "<text>"


def test_pending_enum_flag_lists_values():
    state = walk_tokens(MEMORY_SPEC, ["list", "--layer"])
    assert compute_ghost_text(state) == "<stm|ltm>"


def test_pending_non_enum_flag_is_value():
    assert compute_ghost_text(walk_tokens(MEMORY_SPEC, ["list", "--limit"])) == "<value>"
    assert compute_ghost_text(walk_tokens(REMEMBER_SPEC, ["--tags"])) == "<value>"


def test_pending_dynamic_flag_is_value():
    flag = FlagSpec(name="--model", kind=FlagKind.DYNAMIC_ENUM, provider_id="models")
    assert compute_ghost_text(WalkState(pending_flag_value=flag)) == "<value>"


def test_free_text_has_no_ghost():
    assert compute_ghost_text(walk_tokens(REMEMBER_SPEC, ["hello"])) is None


def test_exhausted_tree_has_no_ghost():
    assert compute_ghost_text(walk_tokens(MEMORY_SPEC, ["settings"])) is None
    assert compute_ghost_text(WalkState()) is None


def test_argument_without_placeholder_has_no_ghost():
    state = WalkState(current_nodes=(ArgumentNode(ArgSpec(name="value")),))
    assert compute_ghost_text(state) is None


def test_mixed_nodes_use_first_argument_placeholder():
    state = WalkState(
        current_nodes=(
            LiteralNode("all"),
            ArgumentNode(
                ArgSpec(name="count", kind=ArgKind.INTEGER, placeholder="<count>")
            ),
        )
    )
    assert compute_ghost_text(state) == "<count>"
