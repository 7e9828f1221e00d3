"""Bézier curves built by nesting linear interpolations.

See `Bézier curve at Wikipedia <http://en.wikipedia.org/wiki/B%C3%A9zier_curve>`_.
Any value :func:`~interpolation.lerp.lerp` accepts can be used as a control
point.
"""

from __future__ import annotations

from .lerp import lerp


def quad_bez(x0, x1, x2, t):
    """Quadratic Bézier interpolation through control points ``x0..x2``."""
    x_0_1 = lerp(x0, x1, t)
    x_1_2 = lerp(x1, x2, t)
    return lerp(x_0_1, x_1_2, t)


def cub_bez(x0, x1, x2, x3, t):
    """Cubic Bézier interpolation, a blend of two quadratic curves."""
    x_0_2 = quad_bez(x0, x1, x2, t)
    x_1_3 = quad_bez(x1, x2, x3, t)
    return lerp(x_0_2, x_1_3, t)
