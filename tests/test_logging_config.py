import logging

import pytest

from recipe_api.app.core.logging_config import setup_logging


@pytest.fixture()
def bare_root(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    # pytest attaches a capture handler per test phase; start each test
    # body without it.
    yield root
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()


def test_console_and_file_handlers(bare_root, tmp_path) -> None:
    bare_root.handlers.clear()
    logfile = tmp_path / "api.log"
    setup_logging("debug", str(logfile))

    assert bare_root.level == logging.DEBUG
    assert [type(h) for h in bare_root.handlers] == [logging.StreamHandler, logging.FileHandler]

    logging.getLogger("recipe_api.test").info("stored recipe %s", 1)
    bare_root.handlers[1].flush()
    assert "[INFO] recipe_api.test: stored recipe 1" in logfile.read_text(encoding="utf-8")


def test_unknown_level_means_info(bare_root) -> None:
    bare_root.handlers.clear()
    setup_logging("chatty")
    assert bare_root.level == logging.INFO


def test_configures_only_once(bare_root) -> None:
    bare_root.handlers.clear()
    setup_logging()
    setup_logging("debug")
    assert len(bare_root.handlers) == 1
    assert bare_root.level == logging.INFO
