import logging

import pytest
from rich.logging import RichHandler

from slashkit.utils import CaseInsensitiveDict, setup_logging


@pytest.fixture
def root_handlers():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_case_insensitive_dict():
    lookup = CaseInsensitiveDict()
    lookup["Model"] = 1
    assert lookup["MODEL"] == 1
    assert "model" in lookup
    assert lookup.get("mOdEl") == 1
    lookup["THEME"] = 2
    assert sorted(lookup) == ["model", "theme"]
    assert lookup.get("missing") is None


def test_setup_logging_cli(root_handlers):
    setup_logging(mode="cli", log_filename=None)
    assert len(root_handlers.handlers) == 1
    assert isinstance(root_handlers.handlers[0], RichHandler)
    assert root_handlers.handlers[0].level == logging.WARNING


def test_setup_logging_json_with_file(root_handlers, tmp_path):
    log_file = tmp_path / "slashkit.log"
    setup_logging(mode="json", log_filename=str(log_file), json_log_to_file=True)
    assert len(root_handlers.handlers) == 2
    logging.getLogger("slashkit").debug("hello")
    for handler in root_handlers.handlers:
        handler.flush()
    assert '"message": "hello"' in log_file.read_text(encoding="UTF-8")


def test_setup_logging_env_mode(root_handlers, monkeypatch):
    monkeypatch.setenv("SLASHKIT_LOG_MODE", "json")
    setup_logging(log_filename=None)
    assert not isinstance(root_handlers.handlers[0], RichHandler)


def test_setup_logging_invalid_mode(root_handlers):
    with pytest.raises(ValueError, match="Invalid log mode"):
        setup_logging(mode="xml", log_filename=None)
