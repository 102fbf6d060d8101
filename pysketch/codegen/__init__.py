"""
Turtle code generation module.

Converts layered strokes to Python turtle-graphics source with the
canvas-to-turtle coordinate transform and redundant state elision.
"""

from pysketch.codegen.formatting import format_literal, format_number
from pysketch.codegen.generator import (
    SEGMENT_DEADBAND,
    TurtleCompiler,
    compile_to_turtle,
    to_turtle_coords,
)

__all__ = [
    "SEGMENT_DEADBAND",
    "TurtleCompiler",
    "compile_to_turtle",
    "format_literal",
    "format_number",
    "to_turtle_coords",
]
