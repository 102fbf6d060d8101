"""Turtle compiler -- layered strokes to Python turtle-graphics source.

Compilation is two passes over the IR in ``pysketch.program_ir``:

1. ``plan`` walks visible layers bottom to top and, within each layer,
   strokes in drawing order.  Each stroke is simplified, converted to
   turtle coordinates and turned into pen / heading / forward operations.
2. ``render`` turns every operation into one or more source lines.

Coordinate frame:
    Canvas input uses a top-left origin with +Y pointing down.  Turtle
    uses a centre origin with +Y pointing up::

        turtle_x = x - canvas_width / 2
        turtle_y = canvas_height / 2 - y

Redundant state changes:
    ``pencolor`` and ``pensize`` are emitted only when the value differs
    from the last one emitted anywhere in the program.  That running
    state lives in an ``_EmitterState`` created per ``plan`` call, so a
    ``TurtleCompiler`` is safe to share between threads.

Deadband:
    Segments of length <= ``SEGMENT_DEADBAND`` emit nothing.  The turtle
    is not resynchronised afterwards, so its position may trail the
    logical path by the skipped amount.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pysketch.codegen.formatting import format_literal, format_number
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
)
from pysketch.project.models import CompileOptions, Layer, Point, Stroke
from pysketch.simplify.rdp import distance, heading, simplify

logger = logging.getLogger(__name__)

SEGMENT_DEADBAND = 0.5
"""Segments this short or shorter are dropped as jitter (pixels)."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def to_turtle_coords(point: Point, canvas_width: float, canvas_height: float) -> Point:
    """Map a canvas point (top-left, +Y down) to turtle space (centre, +Y up)."""
    return Point(
        x=point.x - canvas_width / 2,
        y=canvas_height / 2 - point.y,
    )


def _one_line(text: str) -> str:
    return " ".join(text.splitlines())


@dataclass
class _EmitterState:
    """Running state for one compile call."""

    current_color: str = ""
    current_width: float = 0.0
    layers_emitted: int = 0
    strokes_emitted: int = 0
    strokes_skipped: int = 0
    segments_suppressed: int = 0


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------


class TurtleCompiler:
    """Convert strokes and layers to a turtle-graphics program.

    Parameters
    ----------
    options : CompileOptions
        Canvas size, animation speed, background colour and
        simplification tolerance.

    Notes
    -----
    Neither ``plan`` nor ``compile`` raises for any stroke or layer
    input: empty layers, dangling ``layer_id`` references and strokes
    that simplify to fewer than two points simply produce less output.
    """

    def __init__(self, options: CompileOptions) -> None:
        self._opts = options

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compile(self, strokes: Sequence[Stroke], layers: Sequence[Layer]) -> str:
        """Generate program text.

        Parameters
        ----------
        strokes : Sequence[Stroke]
            All strokes of the project, in drawing order.
        layers : Sequence[Layer]
            All layers, bottom to top.

        Returns
        -------
        str
            Complete program, lines joined with ``"\\n"`` and no trailing
            newline.
        """
        return self.render(self.plan(strokes, layers))

    def plan(self, strokes: Sequence[Stroke], layers: Sequence[Layer]) -> Program:
        """Build the operation list for a whole program."""
        state = _EmitterState()
        program: Program = []

        self._plan_header(program)

        for layer in layers:
            if not layer.visible:
                continue
            layer_strokes = [s for s in strokes if s.layer_id == layer.id]
            if not layer_strokes:
                continue

            program.append(Comment(layer.name))
            state.layers_emitted += 1

            for stroke in layer_strokes:
                stroke_ops = self._plan_stroke(stroke, state)
                if stroke_ops is None:
                    state.strokes_skipped += 1
                    continue
                program.extend(stroke_ops)
                program.append(Blank())
                state.strokes_emitted += 1

        self._plan_footer(program)

        logger.debug(
            "Planned %d layers, %d strokes (%d skipped), %d segments under deadband",
            state.layers_emitted,
            state.strokes_emitted,
            state.strokes_skipped,
            state.segments_suppressed,
        )
        return program

    def render(self, program: Program) -> str:
        """Render operations to source text."""
        lines: list[str] = []
        for op in program:
            self._render_op(op, lines)
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def _plan_header(self, program: Program) -> None:
        opts = self._opts
        program.extend(
            [
                ImportTurtle(),
                Blank(),
                Comment("Setup"),
                SetupScreen(
                    width=opts.canvas_width,
                    height=opts.canvas_height,
                    background_color=opts.background_color,
                ),
                Blank(),
                CreateTurtle(speed=opts.speed),
                Blank(),
            ]
        )

    def _plan_footer(self, program: Program) -> None:
        program.append(Comment("Keep window open"))
        program.append(Done())

    def _plan_stroke(self, stroke: Stroke, state: _EmitterState) -> StrokePlan | None:
        """Operations for one stroke, or ``None`` when nothing is drawable."""
        opts = self._opts
        simplified = simplify(stroke.points, opts.simplify_tolerance)
        if len(simplified) < 2:
            return None

        pts = [
            to_turtle_coords(p, opts.canvas_width, opts.canvas_height)
            for p in simplified
        ]

        ops: StrokePlan = [PenUp(), GoTo(x=pts[0].x, y=pts[0].y)]

        if stroke.color != state.current_color:
            ops.append(PenColor(color=stroke.color))
            state.current_color = stroke.color

        if stroke.width != state.current_width:
            ops.append(PenSize(width=stroke.width))
            state.current_width = stroke.width

        ops.append(PenDown())

        for prev, curr in zip(pts, pts[1:]):
            dist = distance(prev, curr)
            if dist > SEGMENT_DEADBAND:
                ops.append(SetHeading(angle=heading(prev, curr)))
                ops.append(Forward(distance=dist))
            else:
                state.segments_suppressed += 1

        return ops

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _render_op(self, op: Operation, lines: list[str]) -> None:
        if isinstance(op, ImportTurtle):
            lines.append("import turtle")
        elif isinstance(op, Blank):
            lines.append("")
        elif isinstance(op, Comment):
            lines.append(f"# {_one_line(op.text)}")
        elif isinstance(op, SetupScreen):
            lines.append("screen = turtle.Screen()")
            lines.append(f'screen.bgcolor("{op.background_color}")')
            lines.append(
                f"screen.setup({format_literal(op.width)}, {format_literal(op.height)})"
            )
        elif isinstance(op, CreateTurtle):
            lines.append("t = turtle.Turtle()")
            lines.append(f"t.speed({op.speed})")
            lines.append("t.hideturtle()")
        elif isinstance(op, PenUp):
            lines.append("t.penup()")
        elif isinstance(op, PenDown):
            lines.append("t.pendown()")
        elif isinstance(op, GoTo):
            lines.append(f"t.goto({format_number(op.x)}, {format_number(op.y)})")
        elif isinstance(op, PenColor):
            lines.append(f't.pencolor("{op.color}")')
        elif isinstance(op, PenSize):
            lines.append(f"t.pensize({format_literal(op.width)})")
        elif isinstance(op, SetHeading):
            lines.append(f"t.setheading({format_number(op.angle)})")
        elif isinstance(op, Forward):
            lines.append(f"t.forward({format_number(op.distance)})")
        elif isinstance(op, Done):
            lines.append("turtle.done()")
        else:
            logger.warning("Unsupported operation: %s", type(op).__name__)


def compile_to_turtle(
    strokes: Sequence[Stroke],
    layers: Sequence[Layer],
    options: CompileOptions,
) -> str:
    """Compile strokes and layers to turtle source with *options*."""
    return TurtleCompiler(options).compile(strokes, layers)
