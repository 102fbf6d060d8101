#!/usr/bin/env python3
"""
Compile a saved sketch project to a Python turtle program.

Usage:
    pysketch compile drawing.json                  # writes <project name>.py
    pysketch compile drawing.json -o out/cat.py
    pysketch compile drawing.json --stdout --tolerance 1.5
    pysketch compile drawing.json --clipboard
    pysketch new "My Sketch" -o my_sketch.json

Value precedence for compile settings:
    command-line flag > project settings > sketch.yaml defaults
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pysketch.codegen.generator import TurtleCompiler
from pysketch.configs.loader import ConfigError, SketchConfig, load_config
from pysketch.delivery.export import (
    DeliveryError,
    copy_to_clipboard,
    program_filename,
    write_program,
)
from pysketch.project.models import (
    CompileOptions,
    Project,
    ProjectError,
    load_project,
    new_project,
)
from pysketch.utils.fs import atomic_write_text
from pysketch.utils.logging_config import (
    install_excepthook,
    push_context,
    setup_logging,
    shutdown,
)

logger = logging.getLogger(__name__)

SPEED_LABELS = {
    0: "Instant",
    1: "Slowest",
    3: "Slow",
    6: "Normal",
    10: "Fast",
}


def build_options(
    project: Project,
    config: SketchConfig,
    args: argparse.Namespace,
) -> CompileOptions:
    """Merge CLI flags, project settings and config defaults."""
    if "settings" in project.model_fields_set:
        speed = project.settings.speed
        background = project.settings.background_color
    else:
        speed = config.compile.speed
        background = config.compile.background_color

    return CompileOptions(
        canvas_width=args.width if args.width is not None else config.canvas.width,
        canvas_height=args.height if args.height is not None else config.canvas.height,
        speed=args.speed if args.speed is not None else speed,
        background_color=args.background or background,
        simplify_tolerance=(
            args.tolerance
            if args.tolerance is not None
            else config.compile.simplify_tolerance
        ),
    )


def cmd_compile(args: argparse.Namespace, config: SketchConfig) -> int:
    project = load_project(args.project)
    push_context(project=project.name)

    options = build_options(project, config, args)
    logger.info(
        "Compiling %d strokes on %d layers (speed %d %s, tolerance %s)",
        len(project.strokes),
        len(project.layers),
        options.speed,
        SPEED_LABELS.get(options.speed, "custom"),
        options.simplify_tolerance,
    )

    code = TurtleCompiler(options).compile(project.strokes, project.layers)

    if args.stdout:
        sys.stdout.write(code + "\n")
    else:
        if args.output:
            out = write_program(code, args.output)
        else:
            name = program_filename(project.name) if project.name else config.output.default_filename
            out = write_program(code, filename=name)
        print(f"Program written to: {out}")

    if args.clipboard:
        if copy_to_clipboard(code):
            print("Program copied to clipboard.")
        else:
            print("Could not copy to clipboard.")

    return 0


def cmd_new(args: argparse.Namespace, config: SketchConfig) -> int:
    project = new_project(args.name)
    out = Path(args.output) if args.output else Path(
        program_filename(project.name)[: -len(".py")] + ".json"
    )
    try:
        atomic_write_text(out, project.to_json())
    except RuntimeError as e:
        raise DeliveryError(str(e)) from e
    print(f"Project written to: {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pysketch",
        description="Compile freehand sketches to Python turtle programs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Speed presets: "
        + ", ".join(f"{k}={v}" for k, v in SPEED_LABELS.items()),
    )
    parser.add_argument("--config", "-c", type=str, help="Configuration file path")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    comp = sub.add_parser("compile", help="Compile a project JSON file")
    comp.add_argument("project", type=str, help="Project JSON file")
    comp.add_argument("--output", "-o", type=str,
                      help="Output .py path (default: derived from project name)")
    comp.add_argument("--width", type=float, help="Canvas width in pixels")
    comp.add_argument("--height", type=float, help="Canvas height in pixels")
    comp.add_argument("--speed", type=int, choices=range(0, 11),
                      metavar="{0..10}", help="Turtle animation speed")
    comp.add_argument("--background", type=str, help="Background colour '#RRGGBB'")
    comp.add_argument("--tolerance", type=float,
                      help="Path simplification tolerance (pixels)")
    comp.add_argument("--stdout", action="store_true",
                      help="Print the program instead of writing a file")
    comp.add_argument("--clipboard", action="store_true",
                      help="Also copy the program to the clipboard")
    comp.set_defaults(handler=cmd_compile)

    new = sub.add_parser("new", help="Create an empty project file")
    new.add_argument("name", type=str, help="Project name")
    new.add_argument("--output", "-o", type=str, help="Output JSON path")
    new.set_defaults(handler=cmd_new)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (ConfigError, FileNotFoundError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(
        log_level="DEBUG" if args.verbose else config.logging.level,
        log_file=config.logging.file,
        json=config.logging.json,
        context={"app": "pysketch", "command": args.command},
    )
    install_excepthook()

    try:
        return args.handler(args, config)
    except (ProjectError, DeliveryError, FileNotFoundError, ValueError) as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    finally:
        shutdown()


if __name__ == "__main__":
    sys.exit(main())
