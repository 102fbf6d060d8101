"""
Turtle program intermediate representation.

Defines every emitted instruction as an immutable dataclass.  This
vocabulary is the contract between stroke planning and text rendering.

All coordinates are turtle pixels: centre origin, +Y up.
"""

from pysketch.program_ir.operations import (
    Blank,
    Comment,
    CreateTurtle,
    Done,
    Forward,
    GoTo,
    ImportTurtle,
    Operation,
    PenColor,
    PenDown,
    PenSize,
    PenUp,
    Program,
    SetHeading,
    SetupScreen,
    StrokePlan,
    count_operations,
    split_strokes,
)

__all__ = [
    "Blank",
    "Comment",
    "CreateTurtle",
    "Done",
    "Forward",
    "GoTo",
    "ImportTurtle",
    "Operation",
    "PenColor",
    "PenDown",
    "PenSize",
    "PenUp",
    "Program",
    "SetHeading",
    "SetupScreen",
    "StrokePlan",
    "count_operations",
    "split_strokes",
]
