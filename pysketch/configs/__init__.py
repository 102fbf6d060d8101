"""Default settings loading and validation."""

from pysketch.configs.loader import (
    CanvasConfig,
    CompileDefaults,
    ConfigError,
    LoggingConfig,
    OutputConfig,
    SketchConfig,
    load_config,
)

__all__ = [
    "CanvasConfig",
    "CompileDefaults",
    "ConfigError",
    "LoggingConfig",
    "OutputConfig",
    "SketchConfig",
    "load_config",
]
