"""Tests for the logging configuration helpers."""

from __future__ import annotations

import json
import logging
import logging.handlers
import sys
from pathlib import Path

import pytest

from pysketch.utils import logging_config
from pysketch.utils.logging_config import (
    ContextFormatter,
    install_excepthook,
    pop_context,
    push_context,
    set_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    pop_context()
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    pop_context()


def _record(msg: str = "hello", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("pysketch.test", level, __file__, 1, msg, None, None)


class TestContextFormatter:
    def test_human_includes_context(self) -> None:
        push_context(app="pysketch", project="cat")
        line = ContextFormatter("human", use_color=False).format(_record())
        assert "| INFO" in line
        assert "app=pysketch project=cat |" in line
        assert line.endswith("hello")

    def test_human_without_context(self) -> None:
        line = ContextFormatter("human", use_color=False).format(_record())
        assert "=" not in line
        assert line.endswith("| hello")

    def test_json_line(self) -> None:
        push_context(command="compile")
        data = json.loads(ContextFormatter("json").format(_record("done")))
        assert data["lvl"] == "INFO"
        assert data["msg"] == "done"
        assert data["command"] == "compile"

    def test_pop_selected_keys(self) -> None:
        push_context(app="pysketch", project="cat")
        pop_context(["project"])
        line = ContextFormatter("human", use_color=False).format(_record())
        assert "app=pysketch" in line
        assert "project=" not in line


class TestSetupLogging:
    def test_level_and_handlers(self) -> None:
        info = setup_logging("WARNING", context={"app": "pysketch"})
        assert logging.getLogger().level == logging.WARNING
        assert len(info["handlers"]) == 1

    def test_idempotent(self) -> None:
        setup_logging("INFO")
        setup_logging("INFO")
        ours = [
            h for h in logging.getLogger().handlers
            if isinstance(h.formatter, ContextFormatter)
        ]
        assert len(ours) == 1

    def test_json_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "pysketch.log"
        setup_logging("DEBUG", str(log_file), json=True, to_stderr=False,
                      context={"app": "pysketch"})
        logging.getLogger("pysketch.test").info("compiled")
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["msg"] == "compiled"
        assert entry["app"] == "pysketch"

    def test_rotating_file(self, tmp_path: Path) -> None:
        info = setup_logging(
            "INFO", str(tmp_path / "p.log"), to_stderr=False,
            rotate={"mode": "size", "max_bytes": 1000, "backup_count": 1},
        )
        assert isinstance(info["handlers"][0], logging.handlers.RotatingFileHandler)

    def test_unknown_rotation(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="rotation mode"):
            setup_logging("INFO", str(tmp_path / "p.log"), to_stderr=False,
                          rotate={"mode": "weekly"})

    def test_set_level(self) -> None:
        setup_logging("INFO")
        set_level("error")
        assert logging.getLogger().level == logging.ERROR


class TestExcepthook:
    def test_logs_uncaught(self, caplog: pytest.LogCaptureFixture) -> None:
        install_excepthook()
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            exc_info = sys.exc_info()
        with caplog.at_level(logging.CRITICAL, logger=logging_config.__name__):
            sys.excepthook(*exc_info)
        assert "Uncaught exception" in caplog.text
