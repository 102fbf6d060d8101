"""Tests for program delivery: file names, file writes and the clipboard."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from pysketch.delivery import export
from pysketch.delivery.export import (
    DeliveryError,
    copy_to_clipboard,
    program_filename,
    write_program,
)

CODE = "import turtle\n\nturtle.done()"


# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------


class TestProgramFilename:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("My Cat!", "my_cat_.py"),
            ("Sunset", "sunset.py"),
            ("a-b.c", "a_b_c.py"),
            ("Ünïcode", "_n_code.py"),
            ("", "drawing.py"),
        ],
    )
    def test_sanitized(self, name: str, expected: str) -> None:
        assert program_filename(name) == expected


# ---------------------------------------------------------------------------
# File writes
# ---------------------------------------------------------------------------


class TestWriteProgram:
    def test_explicit_path(self, tmp_path: Path) -> None:
        target = tmp_path / "out" / "cat.py"
        assert write_program(CODE, target) == target
        assert target.read_text(encoding="utf-8") == CODE

    def test_directory_and_default_name(self, tmp_path: Path) -> None:
        out = write_program(CODE, directory=tmp_path)
        assert out == tmp_path / "drawing.py"
        assert out.read_text(encoding="utf-8") == CODE

    def test_custom_filename(self, tmp_path: Path) -> None:
        out = write_program(CODE, directory=tmp_path, filename="sunset.py")
        assert out.name == "sunset.py"

    def test_overwrites(self, tmp_path: Path) -> None:
        target = tmp_path / "cat.py"
        target.write_text("old", encoding="utf-8")
        write_program(CODE, target)
        assert target.read_text(encoding="utf-8") == CODE

    def test_no_tmp_file_left(self, tmp_path: Path) -> None:
        write_program(CODE, tmp_path / "cat.py")
        assert [p.name for p in tmp_path.iterdir()] == ["cat.py"]

    def test_unwritable_target(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(DeliveryError):
            write_program(CODE, blocker / "cat.py")


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------


class TestClipboard:
    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs["input"]))
            return subprocess.CompletedProcess(cmd, 0)

        monkeypatch.setattr(export.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(export.subprocess, "run", fake_run)

        assert copy_to_clipboard(CODE) is True
        assert calls == [(("pbcopy",), CODE.encode("utf-8"))]

    def test_first_available_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls = []
        monkeypatch.setattr(
            export.shutil, "which",
            lambda name: "/usr/bin/xclip" if name == "xclip" else None,
        )
        monkeypatch.setattr(
            export.subprocess, "run",
            lambda cmd, **kw: calls.append(cmd) or subprocess.CompletedProcess(cmd, 0),
        )

        assert copy_to_clipboard(CODE) is True
        assert calls == [("xclip", "-selection", "clipboard")]

    def test_no_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(export.shutil, "which", lambda name: None)
        assert copy_to_clipboard(CODE) is False

    def test_command_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(cmd, **kwargs):
            raise subprocess.CalledProcessError(1, cmd)

        monkeypatch.setattr(export.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(export.subprocess, "run", fail)
        assert copy_to_clipboard(CODE) is False

    def test_command_times_out(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def hang(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(export.shutil, "which", lambda name: f"/usr/bin/{name}")
        monkeypatch.setattr(export.subprocess, "run", hang)
        assert copy_to_clipboard(CODE) is False

    def test_clip_only_on_windows(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            export.shutil, "which",
            lambda name: "C:/clip.exe" if name == "clip" else None,
        )
        monkeypatch.setattr(export.sys, "platform", "linux")
        assert export._find_clipboard_command() is None

        monkeypatch.setattr(export.sys, "platform", "win32")
        assert export._find_clipboard_command() == ("clip",)
