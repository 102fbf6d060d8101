"""
Project data model.

Defines points, strokes, layers, settings and compile options as
validated pydantic models, plus JSON loading of saved projects.

All coordinates are canvas pixels, top-left origin, +Y down.
"""

from pysketch.project.models import (
    CompileOptions,
    Layer,
    Point,
    Project,
    ProjectError,
    ProjectSettings,
    Stroke,
    generate_id,
    load_project,
    new_project,
    parse_project,
)

__all__ = [
    "CompileOptions",
    "Layer",
    "Point",
    "Project",
    "ProjectError",
    "ProjectSettings",
    "Stroke",
    "generate_id",
    "load_project",
    "new_project",
    "parse_project",
]
