"""
Path simplification.

Reduces noisy freehand point sequences to the few vertices needed to
preserve their shape, and provides the distance / heading helpers used
by the code generator.
"""

from pysketch.simplify.rdp import distance, heading, perpendicular_distance, simplify

__all__ = ["distance", "heading", "perpendicular_distance", "simplify"]
