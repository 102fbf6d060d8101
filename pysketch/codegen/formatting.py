"""Number rendering for generated turtle source.

Coordinates, headings and distances are rounded to two decimals and
printed in their shortest form (``3.00`` → ``3``, ``3.14159`` →
``3.14``).  Rounding is half away from zero on the exact binary value of
the float, so ``0.125`` (exactly representable) becomes ``0.13`` while
``1.005`` (stored as 1.00499999...) becomes ``1``.  Negative zero
prints as ``0``.

Non-finite input is not validated upstream.  It renders as a
``float('nan')`` / ``float('inf')`` expression so the program at least
stays syntactically valid Python.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

_CENTS = Decimal("0.01")

# Wide enough for the integer part of any finite double plus two decimals.
_CONTEXT = Context(prec=400)


def _non_finite(value: float) -> str:
    if math.isnan(value):
        return "float('nan')"
    return "float('inf')" if value > 0 else "float('-inf')"


def format_literal(value: float) -> str:
    """Render *value* unrounded, without a trailing ``.0`` for integers."""
    value = float(value)
    if not math.isfinite(value):
        return _non_finite(value)
    if value == 0:
        return "0"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_number(value: float) -> str:
    """Round *value* to two decimals and render its shortest form.

    Examples
    --------
    >>> format_number(3.0)
    '3'
    >>> format_number(-0.001)
    '0'
    >>> format_number(-2.5)
    '-2.5'
    """
    value = float(value)
    if not math.isfinite(value):
        return _non_finite(value)

    rounded = Decimal(value).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_CONTEXT)
    return format_literal(float(rounded))
