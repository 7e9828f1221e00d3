"""Vector style arithmetic over interpolatable values.

``add``, ``sub`` and ``scale`` are :func:`functools.singledispatch` functions.
Built-in support covers floats, Python and NumPy integers, tuples, lists and
NumPy arrays.  Other types either implement the :class:`Spatial` protocol or
register their own implementation::

    @spatial.add.register(MyPoint)
    def _(a, b):
        return MyPoint(a.x + b.x, a.y + b.y)

Unsigned integers have no negative values, so ``sub`` returns the absolute
difference for them.  ``sub(a, b)`` followed by ``add(b, ...)`` therefore does
not give back ``a`` when ``a < b``.  Scaling a fixed-width integer saturates
at the range of its type, so a negative scale of an unsigned value gives 0.
"""

from __future__ import annotations

import math
from fractions import Fraction
from functools import singledispatch
from typing import Protocol, runtime_checkable

import numpy as np

from .scalars import (
    dtype_scalar, int_steps, round_half_away, saturate, saturate_array, scalar_type,
)


@runtime_checkable
class Spatial(Protocol):
    """Anything supporting vector addition, subtraction and scaling."""

    def add(self, other): ...

    def sub(self, other): ...

    def scale(self, scalar): ...


def check_same_length(a, b) -> None:
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} != {len(b)}")


def rebuild(template, items):
    """Return ``items`` packed in the same container type as ``template``."""
    if hasattr(template, "_make"):
        return template._make(items)
    return type(template)(items)


def as_array_like(a: np.ndarray, b) -> np.ndarray:
    b = np.asarray(b, dtype=a.dtype)
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} != {b.shape}")
    return b


def _unsupported(op: str, value):
    return TypeError(f"{op}() not supported for {type(value).__name__}")


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------

@singledispatch
def add(a, b):
    """Return ``a + b``."""
    if isinstance(a, Spatial):
        return a.add(b)
    raise _unsupported("add", a)


@add.register(float)
@add.register(int)
@add.register(np.floating)
@add.register(np.integer)
def _add_number(a, b):
    return a + b


@add.register(tuple)
@add.register(list)
def _add_sequence(a, b):
    check_same_length(a, b)
    return rebuild(a, [add(x, y) for x, y in zip(a, b)])


@add.register(np.ndarray)
def _add_array(a, b):
    return a + as_array_like(a, b)


# ---------------------------------------------------------------------------
# sub
# ---------------------------------------------------------------------------

@singledispatch
def sub(a, b):
    """Return ``a - b`` (the absolute difference for unsigned integers)."""
    if isinstance(a, Spatial):
        return a.sub(b)
    raise _unsupported("sub", a)


@sub.register(float)
@sub.register(int)
@sub.register(np.floating)
@sub.register(np.signedinteger)
def _sub_number(a, b):
    return a - b


@sub.register(np.unsignedinteger)
def _sub_unsigned(a, b):
    if a >= b:
        return type(a)(a - b)
    return type(a)(b - a)


@sub.register(tuple)
@sub.register(list)
def _sub_sequence(a, b):
    check_same_length(a, b)
    return rebuild(a, [sub(x, y) for x, y in zip(a, b)])


@sub.register(np.ndarray)
def _sub_array(a, b):
    b = as_array_like(a, b)
    if np.issubdtype(a.dtype, np.unsignedinteger):
        return np.where(a >= b, a - b, b - a)
    return a - b


# ---------------------------------------------------------------------------
# scale
# ---------------------------------------------------------------------------

@singledispatch
def scale(a, s):
    """Return ``a`` multiplied by the scalar ``s``."""
    if isinstance(a, Spatial):
        return a.scale(s)
    raise _unsupported("scale", a)


@scale.register(float)
@scale.register(np.floating)
def _scale_real(a, s):
    return a * scalar_type(a)(s)


@scale.register(int)
def _scale_int(a, s):
    s = float(s)
    if not math.isfinite(s):
        return round_half_away(a * s)
    return round_half_away(a * Fraction(s))


@scale.register(np.integer)
def _scale_fixed_int(a, s):
    st = scalar_type(a)
    return saturate(round_half_away(st(a) * st(s)), type(a))


@scale.register(tuple)
@scale.register(list)
def _scale_sequence(a, s):
    return rebuild(a, [scale(x, s) for x in a])


@scale.register(np.ndarray)
def _scale_array(a, s):
    st = dtype_scalar(a.dtype)
    scaled = a.astype(st) * st(s)
    if np.issubdtype(a.dtype, np.integer):
        return saturate_array(int_steps(scaled), a.dtype)
    return scaled
