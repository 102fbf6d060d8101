"""Configuration loader for pysketch.

Loads and validates ``sketch.yaml`` into typed, frozen dataclasses.
Canvas size, compile defaults and output naming come from the config
so the CLI has no hardcoded values of its own.

Usage::

    from pysketch.configs.loader import load_config
    cfg = load_config()                      # default path
    cfg = load_config("/custom/sketch.yaml") # explicit path
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pysketch.utils.fs import load_yaml

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing-surface size in pixels (top-left origin, +Y down)."""

    width: float
    height: float


@dataclass(frozen=True)
class CompileDefaults:
    """Defaults applied when neither the project nor the CLI sets a value."""

    speed: int
    background_color: str
    simplify_tolerance: float


@dataclass(frozen=True)
class OutputConfig:
    """Naming of written programs."""

    default_filename: str


@dataclass(frozen=True)
class LoggingConfig:
    """Arguments forwarded to ``setup_logging``."""

    level: str
    json: bool
    file: str | None = None


@dataclass(frozen=True)
class SketchConfig:
    """Complete, validated pysketch configuration."""

    canvas: CanvasConfig
    compile: CompileDefaults
    output: OutputConfig
    logging: LoggingConfig


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _validate_config(cfg: SketchConfig) -> None:
    """Check value ranges.  Raises ``ConfigError`` on the first violation."""
    for name, value in (("width", cfg.canvas.width), ("height", cfg.canvas.height)):
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f"canvas.{name} must be a positive number, got {value}")

    c = cfg.compile
    if not 0 <= c.speed <= 10:
        raise ConfigError(f"compile.speed must be in [0, 10], got {c.speed}")
    if not _HEX_COLOR.match(c.background_color):
        raise ConfigError(
            f"compile.background_color must look like '#RRGGBB', "
            f"got {c.background_color!r}"
        )
    if not math.isfinite(c.simplify_tolerance) or c.simplify_tolerance < 0:
        raise ConfigError(
            f"compile.simplify_tolerance must be >= 0, got {c.simplify_tolerance}"
        )

    if not cfg.output.default_filename.endswith(".py"):
        raise ConfigError(
            f"output.default_filename must end with '.py', "
            f"got {cfg.output.default_filename!r}"
        )

    if cfg.logging.level.upper() not in _LOG_LEVELS:
        raise ConfigError(
            f"logging.level must be one of {', '.join(_LOG_LEVELS)}, "
            f"got {cfg.logging.level!r}"
        )


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> SketchConfig:
    """Load and validate pysketch configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to ``sketch.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    SketchConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If any field is missing or fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    if path is None:
        path = Path(__file__).parent / "sketch.yaml"
    else:
        path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.debug("Loading configuration from %s", path)

    data: dict[str, Any] = load_yaml(path)
    if data is None:
        raise ConfigError(f"Empty configuration file: {path}")

    try:
        cv = data["canvas"]
        canvas = CanvasConfig(
            width=float(cv["width"]),
            height=float(cv["height"]),
        )

        cd = data["compile"]
        compile_defaults = CompileDefaults(
            speed=int(cd["speed"]),
            background_color=str(cd.get("background_color", "#000000")),
            simplify_tolerance=float(cd.get("simplify_tolerance", 2.0)),
        )

        od = data.get("output") or {}
        output = OutputConfig(
            default_filename=str(od.get("default_filename", "drawing.py")),
        )

        ld = data.get("logging") or {}
        log_file = ld.get("file")
        logging_cfg = LoggingConfig(
            level=str(ld.get("level", "INFO")),
            json=bool(ld.get("json", False)),
            file=str(log_file) if log_file else None,
        )
    except KeyError as e:
        raise ConfigError(f"Missing required config key {e} in {path}") from e
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {path}: {e}") from e

    cfg = SketchConfig(
        canvas=canvas,
        compile=compile_defaults,
        output=output,
        logging=logging_cfg,
    )
    _validate_config(cfg)
    return cfg
