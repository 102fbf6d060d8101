"""Turtle program IR -- the vocabulary between sketch data and program text.

Every instruction the generator can emit is an immutable, slotted
dataclass.  Instructions use **turtle** coordinates (origin at the
screen centre, +Y up) and degrees; the canvas-to-turtle transform has
already been applied by the time an operation exists.

Grouping
--------
A *StrokePlan* is the list of operations that draw one stroke (pen up,
go to start, optional colour/width changes, pen down, heading/forward
pairs).  A *Program* is the flat list rendered line-by-line.
"""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

StrokePlan = list["Operation"]
"""Operations that draw one stroke."""

Program = list["Operation"]
"""A complete program, rendered in order."""

# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Operation(ABC):
    """Base class for all program operations."""

    pass


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ImportTurtle(Operation):
    """``import turtle``."""

    pass


@dataclass(frozen=True, slots=True)
class SetupScreen(Operation):
    """Create the screen, paint its background and size the window.

    Parameters
    ----------
    width, height : float
        Window size in pixels (the canvas size).
    background_color : str
        Any colour string turtle accepts, usually ``"#RRGGBB"``.
    """

    width: float
    height: float
    background_color: str


@dataclass(frozen=True, slots=True)
class CreateTurtle(Operation):
    """Create the hidden drawing cursor.

    Parameters
    ----------
    speed : int
        Animation speed, 0 (instant) to 10 (fast).
    """

    speed: int


@dataclass(frozen=True, slots=True)
class Comment(Operation):
    """Single ``#`` comment line."""

    text: str


@dataclass(frozen=True, slots=True)
class Blank(Operation):
    """Empty separator line."""

    pass


@dataclass(frozen=True, slots=True)
class Done(Operation):
    """Keep the window open until the user closes it."""

    pass


# ---------------------------------------------------------------------------
# Pen state
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class PenUp(Operation):
    """Lift the pen: subsequent moves draw nothing."""

    pass


@dataclass(frozen=True, slots=True)
class PenDown(Operation):
    """Lower the pen: subsequent moves draw."""

    pass


@dataclass(frozen=True, slots=True)
class PenColor(Operation):
    """Change the pen colour.

    Parameters
    ----------
    color : str
        ``"#RRGGBB"`` colour string.
    """

    color: str


@dataclass(frozen=True, slots=True)
class PenSize(Operation):
    """Change the pen width (pixels)."""

    width: float


# ---------------------------------------------------------------------------
# Motion  (turtle coordinates: centre origin, +Y up)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class GoTo(Operation):
    """Absolute move to ``(x, y)``."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class SetHeading(Operation):
    """Point the turtle at *angle* degrees (0 = east, counter-clockwise)."""

    angle: float


@dataclass(frozen=True, slots=True)
class Forward(Operation):
    """Move *distance* pixels along the current heading."""

    distance: float


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def count_operations(program: Program, kind: type[Operation]) -> int:
    """Number of operations of type *kind* in *program*."""
    return sum(1 for op in program if isinstance(op, kind))


def split_strokes(program: Program) -> list[StrokePlan]:
    """Split a program into stroke plans.

    A stroke plan starts at each ``PenUp`` and runs up to (but not
    including) the next ``Blank``.  Preamble and epilogue operations
    are not part of any plan.
    """
    plans: list[StrokePlan] = []
    current: StrokePlan | None = None

    for op in program:
        if isinstance(op, PenUp):
            current = [op]
        elif current is not None:
            if isinstance(op, Blank):
                plans.append(current)
                current = None
            else:
                current.append(op)

    return plans
