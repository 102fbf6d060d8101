"""
PySketch Package.

Compiles layered freehand sketches into Python turtle-graphics programs.
Strokes are simplified, transformed from canvas space (top-left origin,
+Y down) to turtle space (centre origin, +Y up) and emitted as heading /
distance instructions.

Subpackages:
    project: Input data model (points, strokes, layers, projects)
    simplify: Ramer-Douglas-Peucker path simplification
    program_ir: Intermediate representation for turtle instructions
    codegen: Turtle program generation from the project model
    delivery: Writing and copying generated programs
    configs: Default settings loading and validation
    utils: Logging and filesystem helpers
"""

__version__ = "0.3.0"

__all__ = [
    "project",
    "simplify",
    "program_ir",
    "codegen",
    "delivery",
    "configs",
    "utils",
]
