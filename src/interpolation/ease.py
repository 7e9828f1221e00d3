"""Easing functions.

Every function takes a progress value ``p`` and returns the eased progress.
A value below 0.0 is interpreted as 0.0 and a value above 1.0 as 1.0 before
anything else is computed.  The result has the same type as the clamped
input: ``float`` for Python numbers, the input's own type for NumPy floating
scalars (``numpy.float32`` math stays in single precision).

The back and elastic families overshoot ``[0, 1]`` on purpose.
"""

from __future__ import annotations

import functools
import math
from enum import Enum
from typing import Callable, Dict, Union, assert_never

import numpy as np

PI = math.pi
HALF_PI = math.pi / 2


def normalized(p: float) -> float:
    """Clamp ``p`` to ``[0, 1]``; non-float numbers are converted to ``float``."""
    if not isinstance(p, (float, np.floating)):
        p = float(p)
    if p > 1:
        return type(p)(1)
    if p < 0:
        return type(p)(0)
    return p


def _clamped(func):
    @functools.wraps(func)
    def wrapper(p):
        p = normalized(p)
        return type(p)(func(p))

    return wrapper


@_clamped
def quadratic_in(p: float) -> float:
    """``p²``"""
    return p * p


@_clamped
def quadratic_out(p: float) -> float:
    """``-p(p - 2)``"""
    return -(p * (p - 2))


@_clamped
def quadratic_in_out(p: float) -> float:
    """Quadratic ease in for the first half, ease out for the second."""
    if p < 0.5:
        return 2 * p * p
    return (-2 * p * p) + (4 * p) - 1


@_clamped
def cubic_in(p: float) -> float:
    """``p³``"""
    return p * p * p


@_clamped
def cubic_out(p: float) -> float:
    """``(p - 1)³ + 1``"""
    f = p - 1
    return f * f * f + 1


@_clamped
def cubic_in_out(p: float) -> float:
    """Cubic ease in, then ease out."""
    if p < 0.5:
        return 4 * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f + 1


@_clamped
def quartic_in(p: float) -> float:
    """``p⁴``"""
    return p * p * p * p


@_clamped
def quartic_out(p: float) -> float:
    """``1 - (p - 1)⁴``"""
    f = p - 1
    return f * f * f * (1 - p) + 1


@_clamped
def quartic_in_out(p: float) -> float:
    """Quartic ease in, then ease out."""
    if p < 0.5:
        return 8 * p * p * p * p
    f = p - 1
    return -8 * f * f * f * f + 1


@_clamped
def quintic_in(p: float) -> float:
    """``p⁵``"""
    return p * p * p * p * p


@_clamped
def quintic_out(p: float) -> float:
    """``(p - 1)⁵ + 1``"""
    f = p - 1
    return f * f * f * f * f + 1


@_clamped
def quintic_in_out(p: float) -> float:
    """Quintic ease in, then ease out."""
    if p < 0.5:
        return 16 * p * p * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f * f * f + 1


@_clamped
def sine_in(p: float) -> float:
    """Quarter sine wave, slow start."""
    return np.sin((p - 1) * HALF_PI) + 1


@_clamped
def sine_out(p: float) -> float:
    """Quarter sine wave, slow end."""
    return np.sin(p * HALF_PI)


@_clamped
def sine_in_out(p: float) -> float:
    """Half cosine wave."""
    return 0.5 * (1 - np.cos(p * PI))


@_clamped
def circular_in(p: float) -> float:
    """Quarter circle, slow start."""
    return 1 - np.sqrt(1 - p * p)


@_clamped
def circular_out(p: float) -> float:
    """Quarter circle, slow end."""
    return np.sqrt((2 - p) * p)


@_clamped
def circular_in_out(p: float) -> float:
    """Two quarter circles joined at 0.5."""
    if p < 0.5:
        return 0.5 * (1 - np.sqrt(1 - 4 * (p * p)))
    return 0.5 * (np.sqrt(-((2 * p) - 3) * ((2 * p) - 1)) + 1)


@_clamped
def exponential_in(p: float) -> float:
    """``2^(10(p - 1))``, exactly 0 at ``p == 0``."""
    if p == 0:
        return p
    return np.exp2(10 * (p - 1))


@_clamped
def exponential_out(p: float) -> float:
    """``1 - 2^(-10p)``, exactly 1 at ``p == 1``."""
    if p == 1:
        return p
    return 1 - np.exp2(-10 * p)


@_clamped
def exponential_in_out(p: float) -> float:
    """Exponential ease in, then ease out; exact at both ends."""
    if p == 0 or p == 1:
        return p
    if p < 0.5:
        return 0.5 * np.exp2((20 * p) - 10)
    return -0.5 * np.exp2((-20 * p) + 10) + 1


# Damped sine with 3.25 oscillations over the unit interval
_ELASTIC = 13 * HALF_PI


@_clamped
def elastic_in(p: float) -> float:
    """Damped sine wave growing towards 1."""
    return np.sin(_ELASTIC * p) * np.exp2(10 * (p - 1))


@_clamped
def elastic_out(p: float) -> float:
    """Damped sine wave settling on 1."""
    return np.sin(-_ELASTIC * (p + 1)) * np.exp2(-10 * p) + 1


@_clamped
def elastic_in_out(p: float) -> float:
    """Elastic ease in, then ease out."""
    if p < 0.5:
        return 0.5 * np.sin(_ELASTIC * (2 * p)) * np.exp2(10 * ((2 * p) - 1))
    return 0.5 * (np.sin(-_ELASTIC * ((2 * p - 1) + 1)) * np.exp2(-10 * (2 * p - 1)) + 2)


@_clamped
def back_in(p: float) -> float:
    """Pulls back below 0 before accelerating to 1."""
    return p * p * p - p * np.sin(p * PI)


@_clamped
def back_out(p: float) -> float:
    """Overshoots past 1 before settling."""
    f = 1 - p
    return 1 - (f * f * f - f * np.sin(f * PI))


@_clamped
def back_in_out(p: float) -> float:
    """Back ease in, then ease out."""
    if p < 0.5:
        f = 2 * p
        return 0.5 * (f * f * f - f * np.sin(f * PI))
    f = 1 - (2 * p - 1)
    return 0.5 * (1 - (f * f * f - f * np.sin(f * PI))) + 0.5


@_clamped
def bounce_in(p: float) -> float:
    """``1 - bounce_out(1 - p)``"""
    return 1 - bounce_out(1 - p)


@_clamped
def bounce_out(p: float) -> float:
    """Four decaying parabolic bounces ending at 1."""
    if p < 4 / 11:
        return (121 * p * p) / 16
    if p < 8 / 11:
        return (363 / 40 * p * p) - (99 / 10 * p) + 17 / 5
    if p < 9 / 10:
        return (4356 / 361 * p * p) - (35442 / 1805 * p) + 16061 / 1805
    return (54 / 5 * p * p) - (513 / 25 * p) + 268 / 25


@_clamped
def bounce_in_out(p: float) -> float:
    """Bounce ease in, then ease out."""
    if p < 0.5:
        return 0.5 * bounce_in(p * 2)
    return 0.5 * bounce_out(p * 2 - 1) + 0.5


class EaseFunction(Enum):
    """All easing curves, valued by their kebab-case name."""

    QUADRATIC_IN = "quadratic-in"
    QUADRATIC_OUT = "quadratic-out"
    QUADRATIC_IN_OUT = "quadratic-in-out"

    CUBIC_IN = "cubic-in"
    CUBIC_OUT = "cubic-out"
    CUBIC_IN_OUT = "cubic-in-out"

    QUARTIC_IN = "quartic-in"
    QUARTIC_OUT = "quartic-out"
    QUARTIC_IN_OUT = "quartic-in-out"

    QUINTIC_IN = "quintic-in"
    QUINTIC_OUT = "quintic-out"
    QUINTIC_IN_OUT = "quintic-in-out"

    SINE_IN = "sine-in"
    SINE_OUT = "sine-out"
    SINE_IN_OUT = "sine-in-out"

    CIRCULAR_IN = "circular-in"
    CIRCULAR_OUT = "circular-out"
    CIRCULAR_IN_OUT = "circular-in-out"

    EXPONENTIAL_IN = "exponential-in"
    EXPONENTIAL_OUT = "exponential-out"
    EXPONENTIAL_IN_OUT = "exponential-in-out"

    ELASTIC_IN = "elastic-in"
    ELASTIC_OUT = "elastic-out"
    ELASTIC_IN_OUT = "elastic-in-out"

    BACK_IN = "back-in"
    BACK_OUT = "back-out"
    BACK_IN_OUT = "back-in-out"

    BOUNCE_IN = "bounce-in"
    BOUNCE_OUT = "bounce-out"
    BOUNCE_IN_OUT = "bounce-in-out"

    @property
    def function(self) -> Callable:
        """The easing function this member stands for."""
        match self:
            case EaseFunction.QUADRATIC_IN:
                return quadratic_in
            case EaseFunction.QUADRATIC_OUT:
                return quadratic_out
            case EaseFunction.QUADRATIC_IN_OUT:
                return quadratic_in_out
            case EaseFunction.CUBIC_IN:
                return cubic_in
            case EaseFunction.CUBIC_OUT:
                return cubic_out
            case EaseFunction.CUBIC_IN_OUT:
                return cubic_in_out
            case EaseFunction.QUARTIC_IN:
                return quartic_in
            case EaseFunction.QUARTIC_OUT:
                return quartic_out
            case EaseFunction.QUARTIC_IN_OUT:
                return quartic_in_out
            case EaseFunction.QUINTIC_IN:
                return quintic_in
            case EaseFunction.QUINTIC_OUT:
                return quintic_out
            case EaseFunction.QUINTIC_IN_OUT:
                return quintic_in_out
            case EaseFunction.SINE_IN:
                return sine_in
            case EaseFunction.SINE_OUT:
                return sine_out
            case EaseFunction.SINE_IN_OUT:
                return sine_in_out
            case EaseFunction.CIRCULAR_IN:
                return circular_in
            case EaseFunction.CIRCULAR_OUT:
                return circular_out
            case EaseFunction.CIRCULAR_IN_OUT:
                return circular_in_out
            case EaseFunction.EXPONENTIAL_IN:
                return exponential_in
            case EaseFunction.EXPONENTIAL_OUT:
                return exponential_out
            case EaseFunction.EXPONENTIAL_IN_OUT:
                return exponential_in_out
            case EaseFunction.ELASTIC_IN:
                return elastic_in
            case EaseFunction.ELASTIC_OUT:
                return elastic_out
            case EaseFunction.ELASTIC_IN_OUT:
                return elastic_in_out
            case EaseFunction.BACK_IN:
                return back_in
            case EaseFunction.BACK_OUT:
                return back_out
            case EaseFunction.BACK_IN_OUT:
                return back_in_out
            case EaseFunction.BOUNCE_IN:
                return bounce_in
            case EaseFunction.BOUNCE_OUT:
                return bounce_out
            case EaseFunction.BOUNCE_IN_OUT:
                return bounce_in_out
            case _:
                assert_never(self)

    def calc(self, p):
        """Calculate the eased value of ``p`` (clamped to ``[0, 1]``)."""
        return self.function(p)

    __call__ = calc


EASING_FUNCTIONS: Dict[str, Callable] = {
    kind.value: kind.function for kind in EaseFunction
}


def get_ease(ease: Union[str, EaseFunction, Callable]) -> Callable:
    """Resolve ``ease`` to an easing callable.

    ``ease`` may be an :class:`EaseFunction`, a name such as
    ``"bounce-out"`` (``"bounce_out"`` and ``"BOUNCE_OUT"`` work too) or any
    callable, which is returned unchanged.
    """
    if isinstance(ease, EaseFunction):
        return ease.function
    if isinstance(ease, str):
        key = ease.strip().lower().replace("_", "-")
        if key not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{ease}'")
        return EASING_FUNCTIONS[key]
    if callable(ease):
        return ease
    raise TypeError(f"Cannot use {type(ease).__name__} as an easing")


__all__ = [
    "normalized",
    "quadratic_in", "quadratic_out", "quadratic_in_out",
    "cubic_in", "cubic_out", "cubic_in_out",
    "quartic_in", "quartic_out", "quartic_in_out",
    "quintic_in", "quintic_out", "quintic_in_out",
    "sine_in", "sine_out", "sine_in_out",
    "circular_in", "circular_out", "circular_in_out",
    "exponential_in", "exponential_out", "exponential_in_out",
    "elastic_in", "elastic_out", "elastic_in_out",
    "back_in", "back_out", "back_in_out",
    "bounce_in", "bounce_out", "bounce_in_out",
    "EaseFunction",
    "EASING_FUNCTIONS",
    "get_ease",
]
