"""Real scalar helpers shared by :mod:`lerp` and :mod:`spatial`.

Every value type that can be interpolated has an associated *scalar* type
used for the interpolation weight:

* floats use their own type;
* Python ``int`` uses ``float``;
* NumPy integers up to 32 bits use ``numpy.float32`` and 64-bit integers use
  ``numpy.float64``.

Integer results are rounded half away from zero, so ``2.5`` becomes ``3`` and
``-2.5`` becomes ``-3``.  This differs from Python's built-in :func:`round`
(half to even) and is what keeps integer interpolation symmetric when the
endpoints are swapped.

Results that do not fit a fixed-width integer type saturate at its minimum
or maximum instead of wrapping, and NaN becomes 0.
"""

from __future__ import annotations

import math
import numbers
import sys

import numpy as np

# Integer width (bytes) -> float scalar used for the weight
_INT_SCALARS = {
    1: np.float32,
    2: np.float32,
    4: np.float32,
    8: np.float64,
}


def scalar_type(value):
    """Return the scalar type used to weight ``value`` in interpolation."""
    if isinstance(value, np.floating):
        return type(value)
    if isinstance(value, np.integer):
        return _INT_SCALARS[value.dtype.itemsize]
    if isinstance(value, np.ndarray):
        return dtype_scalar(value.dtype)
    if isinstance(value, (int, float)):
        return float
    raise TypeError(f"No scalar type for {type(value).__name__}")


def dtype_scalar(dtype: np.dtype):
    """Return the scalar type for a NumPy ``dtype``."""
    if np.issubdtype(dtype, np.floating):
        return dtype.type
    if np.issubdtype(dtype, np.integer):
        return _INT_SCALARS[dtype.itemsize]
    raise TypeError(f"No scalar type for dtype {dtype}")


def round_half_away(x) -> int:
    """Round ``x`` to the nearest integer, ties away from zero.

    Rationals (``int``, :class:`fractions.Fraction`) are rounded exactly.
    NaN rounds to 0 and infinities to a Python int beyond every fixed-width
    range, so :func:`saturate` can clamp the result.
    """
    if not isinstance(x, numbers.Rational):
        x = float(x)
        if math.isnan(x):
            return 0
        if math.isinf(x):
            x = math.copysign(sys.float_info.max, x)
    a = abs(x)
    r = math.floor(a)
    # a - r is exact, so no double rounding on values just below .5
    if a - r >= 0.5:
        r += 1
    return -r if x < 0 else r


def round_half_away_array(x: np.ndarray) -> np.ndarray:
    """Vectorised :func:`round_half_away` returning a float array."""
    a = np.abs(x)
    r = np.floor(a)
    r = np.where(a - r >= 0.5, r + 1, r)
    return np.copysign(r, x)


def saturate(value: int, kind):
    """Convert the Python int ``value`` to ``kind``, clamped to its range."""
    info = np.iinfo(kind)
    return kind(min(max(value, info.min), info.max))


# Any step this large saturates every fixed-width integer type
_STEP_LIMIT = 2.0 ** 65
_to_int = np.frompyfunc(int, 1, 1)


def int_steps(x: np.ndarray) -> np.ndarray:
    """Round ``x`` half away from zero into an object array of Python ints.

    NaN becomes 0 and huge or infinite values are capped at ``±2**65``.
    """
    x = np.nan_to_num(x, nan=0.0, posinf=_STEP_LIMIT, neginf=-_STEP_LIMIT)
    x = np.clip(x, -_STEP_LIMIT, _STEP_LIMIT)
    return _to_int(round_half_away_array(x)).astype(object)


def saturate_array(values: np.ndarray, dtype) -> np.ndarray:
    """Clamp an object array of Python ints to ``dtype`` and convert it."""
    info = np.iinfo(dtype)
    return np.minimum(np.maximum(values, info.min), info.max).astype(dtype)
