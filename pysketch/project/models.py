"""Project data model -- the contract between the drawing surface and the compiler.

All models are pydantic ``BaseModel``s so that documents arriving from the
editor (or from disk) are validated once, at the boundary.  Field aliases
mirror the persisted camelCase JSON shape (``layerId``, ``lastModified``,
``backgroundColor``); Python code uses the snake_case attribute names.

Coordinates are canvas pixels: origin at the top-left corner, +Y down.

Ordering
--------
``Project.layers`` order is paint and compile order, bottom to top.
``Project.strokes`` order is drawing order within a layer.  Neither list
is ever re-sorted by this package.
"""

from __future__ import annotations

import json
import time
import uuid
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

_HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class ProjectError(Exception):
    """Raised when a project document cannot be read or validated."""

    pass


def generate_id() -> str:
    """Return a new random identifier for a project, layer or stroke."""
    return uuid.uuid4().hex


def _now_ms() -> int:
    return int(time.time() * 1000)


# ============================================================================
# GEOMETRY
# ============================================================================

class Point(BaseModel):
    """2-D point; a value with no identity beyond its coordinates."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float


# ============================================================================
# DRAWING CONTENT
# ============================================================================

class Layer(BaseModel):
    """Named, toggleable drawing bucket."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Unique layer identifier")
    name: str = Field(..., description="Display name, emitted as a comment")
    visible: bool = Field(True, description="Hidden layers are not compiled")


class Stroke(BaseModel):
    """One freehand gesture: ordered points plus pen metadata.

    ``layer_id`` is a lookup reference only.  A stroke whose layer no
    longer exists is kept but never drawn.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1, description="Unique stroke identifier")
    layer_id: str = Field(..., alias="layerId", description="Owning layer id")
    color: str = Field(..., pattern=_HEX_COLOR, description="Pen colour '#RRGGBB'")
    width: float = Field(..., gt=0.0, description="Pen width in pixels")
    speed: int = Field(6, ge=0, le=10, description="Animation speed at capture time")
    points: tuple[Point, ...] = Field(default=(), description="Sampled canvas points")


# ============================================================================
# COMPILE SETTINGS
# ============================================================================

class CompileOptions(BaseModel):
    """Per-call render settings; never persisted."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    canvas_width: float = Field(..., gt=0.0, alias="canvasWidth")
    canvas_height: float = Field(..., gt=0.0, alias="canvasHeight")
    speed: int = Field(..., ge=0, le=10, description="0 = instant, 10 = fast")
    background_color: str = Field("#000000", pattern=_HEX_COLOR, alias="backgroundColor")
    simplify_tolerance: float = Field(2.0, ge=0.0, alias="simplifyTolerance")


class ProjectSettings(BaseModel):
    """Settings persisted with a project."""
    model_config = ConfigDict(populate_by_name=True)

    speed: int = Field(6, ge=0, le=10)
    background_color: str = Field("#0a0a0a", pattern=_HEX_COLOR, alias="backgroundColor")


# ============================================================================
# PROJECT
# ============================================================================

class Project(BaseModel):
    """A saved sketch: ordered layers, strokes and settings."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=generate_id)
    name: str = "Untitled Project"
    last_modified: int = Field(default_factory=_now_ms, alias="lastModified")
    layers: list[Layer] = Field(default_factory=list)
    strokes: list[Stroke] = Field(default_factory=list)
    settings: ProjectSettings = Field(default_factory=ProjectSettings)

    def compile_options(
        self,
        canvas_width: float,
        canvas_height: float,
        simplify_tolerance: float = 2.0,
    ) -> CompileOptions:
        """Build compile options from this project's settings."""
        return CompileOptions(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            speed=self.settings.speed,
            background_color=self.settings.background_color,
            simplify_tolerance=simplify_tolerance,
        )

    def remove_layer(self, layer_id: str) -> Project:
        """Return a copy without *layer_id* and without the strokes on it."""
        return self.model_copy(
            update={
                "layers": [l for l in self.layers if l.id != layer_id],
                "strokes": [s for s in self.strokes if s.layer_id != layer_id],
                "last_modified": _now_ms(),
            }
        )

    def to_json(self) -> str:
        """Serialise using the persisted camelCase field names."""
        return self.model_dump_json(by_alias=True, indent=2)


def new_project(name: str = "Untitled Project") -> Project:
    """Create an empty project with a single visible layer."""
    return Project(
        name=name,
        layers=[Layer(id=generate_id(), name="Layer 1", visible=True)],
    )


# ============================================================================
# PUBLIC API
# ============================================================================

def parse_project(data: dict[str, Any]) -> Project:
    """Validate a decoded project document.

    Raises
    ------
    ProjectError
        If validation fails (message lists the offending fields).
    """
    if not isinstance(data, dict):
        raise ProjectError(
            f"Project document must be a JSON object, got {type(data).__name__}"
        )
    try:
        return Project.model_validate(data)
    except ValidationError as e:
        raise ProjectError(f"Project validation failed: {e}") from e


def load_project(path: str | Path) -> Project:
    """Load and validate a project JSON file.

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ProjectError
        If the file is not valid JSON or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Project file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ProjectError(f"Project file {path} is not valid JSON: {e}") from e

    return parse_project(data)
