from slashkit.completion.engine import EMPTY_RESULT
from slashkit.completion.providers import ProviderContext
from slashkit.completion.session import CompletionSession
from slashkit.completion.suggestions import ContextKind


def test_new_session_is_closed():
    session = CompletionSession()
    assert session.text == ""
    assert session.result == EMPTY_RESULT
    assert not session.is_open
    assert session.selected is None
    assert session.ghost_text is None


def test_update_opens_popup():
    session = CompletionSession()
    result = session.update("/mod")
    assert result is session.result
    assert session.is_open
    assert session.selected.label == "/model"


def test_non_command_text_closes_popup():
    session = CompletionSession()
    session.update("/mod")
    session.update("hello")
    assert session.result == EMPTY_RESULT
    assert not session.is_open


def test_move_selection_jumps_to_opposite_end():
    session = CompletionSession()
    session.update("/")
    session.move_selection(-1)
    assert session.selected.label == "/theme"
    session.move_selection(1)
    assert session.selected.label == "/browser"
    session.move_selection(5)
    assert session.selected_index == 5
    session.move_selection(30)
    assert session.selected_index == 0
    session.move_selection(-3)
    assert session.selected_index == 20


def test_move_selection_without_suggestions():
    session = CompletionSession()
    session.move_selection(3)
    assert session.selected_index == 0


def test_update_resets_selection_and_dismissal():
    session = CompletionSession()
    session.update("/")
    session.move_selection(2)
    session.dismiss()
    assert not session.is_open
    assert session.selected_index == 0

    session.update("/m")
    assert session.is_open
    assert session.selected_index == 0


def test_accept_selected_chains():
    session = CompletionSession()
    session.update("/mem")
    applied = session.accept_selected()
    assert applied == ("/memory ", 8)
    assert session.text == "/memory "
    assert session.result.context_kind is ContextKind.SUBCOMMAND
    assert session.ghost_text == "<list|show|search|settings|...>"

    session.accept_selected()
    assert session.text == "/memory list "
    assert session.result.context_kind is ContextKind.ARGUMENT


def test_accept_selected_uses_context():
    session = CompletionSession(ProviderContext(models=["gpt-4o", "claude-3"]))
    session.update("/mo")
    session.accept_selected()
    assert [s.label for s in session.result.suggestions] == ["claude-3", "gpt-4o"]
    assert session.ghost_text == "<model-name>"

    session.move_selection(1)
    assert session.accept_selected() == ("/model gpt-4o ", 14)
    assert not session.is_open


def test_accept_without_selection():
    session = CompletionSession()
    session.update("plain text")
    assert session.accept_selected() is None
    assert session.text == "plain text"


def test_update_with_explicit_cursor():
    session = CompletionSession()
    session.update("/memory li --limit 5", 10)
    assert session.selected.label == "list"
    assert session.accept_selected() == ("/memory list --limit 5", 13)
