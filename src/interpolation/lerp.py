"""Linear interpolation.

A linear interpolation blends two states ``a`` and ``b`` with a weight ``t``.
When ``t`` is zero ``a`` has full weight, when ``t`` is one ``b`` has full
weight.  ``t`` is not clamped; values outside ``[0, 1]`` extrapolate.

:func:`lerp` is a :func:`functools.singledispatch` function keyed on the type
of ``a``.  Integer values are interpolated in their scalar type (see
:mod:`interpolation.scalars`), rounded half away from zero and saturated to
the range of their type.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction
from functools import singledispatch
from typing import Protocol, runtime_checkable

import numpy as np

from .scalars import (
    dtype_scalar, int_steps, round_half_away, saturate, saturate_array, scalar_type,
)
from .spatial import Spatial, as_array_like, check_same_length, rebuild

logger = logging.getLogger(__name__)


@runtime_checkable
class Lerp(Protocol):
    """A type that can linearly interpolate between two of its values."""

    def lerp(self, other, scalar):
        """Return the point ``scalar`` of the way from ``self`` to ``other``."""
        ...


@singledispatch
def lerp(a, b, t):
    """Return ``a + (b - a) * t``.

    Types without a registered implementation are handled through their own
    ``lerp`` method, or through ``add``/``sub``/``scale`` when they only
    implement :class:`~interpolation.spatial.Spatial`.
    """
    if isinstance(a, Lerp):
        return a.lerp(b, t)
    if isinstance(a, Spatial):
        logger.debug("Deriving lerp for %s from spatial ops", type(a).__name__)
        return a.add(b.sub(a).scale(t))
    raise TypeError(f"lerp() not supported for {type(a).__name__}")


@lerp.register(float)
@lerp.register(np.floating)
def _lerp_real(a, b, t):
    return a + (b - a) * scalar_type(a)(t)


@lerp.register(int)
def _lerp_int(a, b, t):
    t = float(t)
    if not math.isfinite(t):
        return a + round_half_away((b - a) * t)
    # Exact product, so differences past 2**53 keep their low bits
    return a + round_half_away((b - a) * Fraction(t))


@lerp.register(np.signedinteger)
def _lerp_signed(a, b, t):
    st = scalar_type(a)
    # Difference in Python ints so int8(-100) -> int8(100) cannot wrap
    step = round_half_away(st(int(b) - int(a)) * st(t))
    return saturate(int(a) + step, type(a))


@lerp.register(np.unsignedinteger)
def _lerp_unsigned(a, b, t):
    st = scalar_type(a)
    if a <= b:
        step = round_half_away(st(int(b) - int(a)) * st(t))
        return saturate(int(a) + step, type(a))
    step = round_half_away(st(int(a) - int(b)) * st(t))
    return saturate(int(a) - step, type(a))


@lerp.register(tuple)
@lerp.register(list)
def _lerp_sequence(a, b, t):
    check_same_length(a, b)
    return rebuild(a, [lerp(x, y, t) for x, y in zip(a, b)])


@lerp.register(np.ndarray)
def _lerp_array(a, b, t):
    b = as_array_like(a, b)
    st = dtype_scalar(a.dtype)
    t = st(t)
    if np.issubdtype(a.dtype, np.floating):
        return a + (b - a) * t
    # Sums are taken in Python ints and saturated back into a.dtype
    wide_a = a.astype(object)
    wide_b = b.astype(object)
    if np.issubdtype(a.dtype, np.unsignedinteger):
        forward = a <= b
        dist = np.where(forward, wide_b - wide_a, wide_a - wide_b).astype(st)
        step = int_steps(dist * t)
        return saturate_array(np.where(forward, wide_a + step, wide_a - step), a.dtype)
    diff = (wide_b - wide_a).astype(st)
    return saturate_array(wide_a + int_steps(diff * t), a.dtype)
