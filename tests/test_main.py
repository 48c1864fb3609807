import io

import pytest
from rich.console import Console

from slashkit.__main__ import build_registry, get_parser, handle_line, main, render_help
from slashkit.console import SLASHKIT_THEME
from slashkit.grammar.specs import DEFAULT_REGISTRY


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    console = Console(file=buffer, theme=SLASHKIT_THEME, width=120)
    monkeypatch.setattr("slashkit.__main__.console", console)
    return buffer


def test_get_parser_defaults():
    args = get_parser().parse_args([])
    assert args.config is None
    assert args.log_mode is None
    assert args.models == []


def test_get_parser_collects_values():
    args = get_parser().parse_args(
        ["--model", "gpt-4o", "--model", "claude-3", "--theme", "dark", "--env", "prod"]
    )
    assert args.models == ["gpt-4o", "claude-3"]
    assert args.themes == ["dark"]
    assert args.environments == ["prod"]


def test_build_registry_defaults_to_builtins():
    assert build_registry(None) is DEFAULT_REGISTRY


def test_quit_stops_shell():
    assert handle_line("/quit", DEFAULT_REGISTRY) is False
    assert handle_line("/q", DEFAULT_REGISTRY) is False


def test_blank_and_plain_lines(output):
    assert handle_line("   ", DEFAULT_REGISTRY) is True
    assert handle_line("hi there", DEFAULT_REGISTRY) is True
    assert "hi there" in output.getvalue()


def test_help_lists_commands(output):
    assert handle_line("/help", DEFAULT_REGISTRY) is True
    text = output.getvalue()
    assert "Slash Commands" in text
    assert "/remember" in text


def test_help_for_one_command(output):
    handle_line("/help memory", DEFAULT_REGISTRY)
    text = output.getvalue()
    assert "/memory" in text
    assert "Aliases: /mem" in text


def test_help_for_unknown_command(output):
    render_help(DEFAULT_REGISTRY, "nope")
    assert "Unknown command:" in output.getvalue()


def test_parse_error_is_reported(output):
    assert handle_line("/nope", DEFAULT_REGISTRY) is True
    assert "UNKNOWN_COMMAND" in output.getvalue()


def test_command_is_echoed(output):
    handle_line("/memory list --type=fact", DEFAULT_REGISTRY)
    text = output.getvalue()
    assert "/memory" in text
    assert "--type" in text
    assert "'fact'" in text


def test_main_rejects_bad_config(tmp_path, monkeypatch):
    monkeypatch.setattr("slashkit.__main__.setup_logging", lambda **kwargs: None)
    path = tmp_path / "grammar.json"
    path.write_text("{}", encoding="UTF-8")
    with pytest.raises(SystemExit) as exc_info:
        main(["--config", str(path), "--log-mode", "cli"])
    assert exc_info.value.code == 1
