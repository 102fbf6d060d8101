"""Tests for the configuration loader.

Validates that the shipped sketch.yaml loads, and that missing keys and
out-of-range values fail with ConfigError.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from pysketch.configs.loader import ConfigError, SketchConfig, load_config


def _write(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "sketch.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


@pytest.fixture()
def raw() -> dict:
    return {
        "canvas": {"width": 640, "height": 480},
        "compile": {
            "speed": 3,
            "background_color": "#112233",
            "simplify_tolerance": 1.5,
        },
        "output": {"default_filename": "sketch.py"},
        "logging": {"level": "DEBUG", "json": True, "file": None},
    }


# ---------------------------------------------------------------------------
# Default config
# ---------------------------------------------------------------------------


class TestDefaultConfig:
    def test_loads(self) -> None:
        assert isinstance(load_config(), SketchConfig)

    def test_canvas_positive(self) -> None:
        cfg = load_config()
        assert cfg.canvas.width > 0
        assert cfg.canvas.height > 0

    def test_speed_in_range(self) -> None:
        assert 0 <= load_config().compile.speed <= 10

    def test_default_filename_is_python(self) -> None:
        assert load_config().output.default_filename.endswith(".py")

    def test_frozen(self) -> None:
        cfg = load_config()
        with pytest.raises(AttributeError):
            cfg.canvas = None  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Custom files
# ---------------------------------------------------------------------------


class TestCustomConfig:
    def test_values_read(self, tmp_path: Path, raw: dict) -> None:
        cfg = load_config(_write(tmp_path, raw))
        assert cfg.canvas.width == 640.0
        assert cfg.compile.speed == 3
        assert cfg.compile.background_color == "#112233"
        assert cfg.compile.simplify_tolerance == 1.5
        assert cfg.output.default_filename == "sketch.py"
        assert cfg.logging.json is True
        assert cfg.logging.file is None

    def test_optional_sections(self, tmp_path: Path, raw: dict) -> None:
        del raw["output"]
        del raw["logging"]
        cfg = load_config(_write(tmp_path, raw))
        assert cfg.output.default_filename == "drawing.py"
        assert cfg.logging.level == "INFO"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigError, match="Empty"):
            load_config(path)

    def test_missing_section(self, tmp_path: Path, raw: dict) -> None:
        del raw["canvas"]
        with pytest.raises(ConfigError, match="canvas"):
            load_config(_write(tmp_path, raw))

    def test_non_numeric_value(self, tmp_path: Path, raw: dict) -> None:
        raw["canvas"]["width"] = "wide"
        with pytest.raises(ConfigError, match="Invalid value"):
            load_config(_write(tmp_path, raw))


class TestValidation:
    @pytest.mark.parametrize(
        "section, key, value, message",
        [
            ("canvas", "width", 0, "canvas.width"),
            ("canvas", "height", -10, "canvas.height"),
            ("compile", "speed", 11, "compile.speed"),
            ("compile", "background_color", "black", "background_color"),
            ("compile", "simplify_tolerance", -0.1, "simplify_tolerance"),
            ("output", "default_filename", "drawing.txt", "default_filename"),
            ("logging", "level", "LOUD", "logging.level"),
        ],
    )
    def test_rejects(
        self,
        tmp_path: Path,
        raw: dict,
        section: str,
        key: str,
        value: object,
        message: str,
    ) -> None:
        raw[section][key] = value
        with pytest.raises(ConfigError, match=message):
            load_config(_write(tmp_path, raw))
