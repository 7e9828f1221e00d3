"""Interpolation algorithms.

Interpolation is used in animation, to describe smooth shapes and to make
transitions.  Any object that fulfils certain mathematical properties can be
interpolated: floats, integers, fixed length sequences, NumPy arrays,
pygame vectors and colours, or any type implementing :class:`Lerp` or
:class:`Spatial`.
"""

import logging

from .scalars import scalar_type, round_half_away
from .spatial import Spatial, add, sub, scale
from .lerp import Lerp, lerp
from .bezier import quad_bez, cub_bez
from .ease import (
    normalized,
    quadratic_in, quadratic_out, quadratic_in_out,
    cubic_in, cubic_out, cubic_in_out,
    quartic_in, quartic_out, quartic_in_out,
    quintic_in, quintic_out, quintic_in_out,
    sine_in, sine_out, sine_in_out,
    circular_in, circular_out, circular_in_out,
    exponential_in, exponential_out, exponential_in_out,
    elastic_in, elastic_out, elastic_in_out,
    back_in, back_out, back_in_out,
    bounce_in, bounce_out, bounce_in_out,
    EaseFunction, EASING_FUNCTIONS, get_ease,
)
from . import vectors  # noqa: F401  registers pygame types

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'scalar_type', 'round_half_away',
    'Spatial', 'add', 'sub', 'scale',
    'Lerp', 'lerp',
    'quad_bez', 'cub_bez',
    'normalized',
    'quadratic_in', 'quadratic_out', 'quadratic_in_out',
    'cubic_in', 'cubic_out', 'cubic_in_out',
    'quartic_in', 'quartic_out', 'quartic_in_out',
    'quintic_in', 'quintic_out', 'quintic_in_out',
    'sine_in', 'sine_out', 'sine_in_out',
    'circular_in', 'circular_out', 'circular_in_out',
    'exponential_in', 'exponential_out', 'exponential_in_out',
    'elastic_in', 'elastic_out', 'elastic_in_out',
    'back_in', 'back_out', 'back_in_out',
    'bounce_in', 'bounce_out', 'bounce_in_out',
    'EaseFunction', 'EASING_FUNCTIONS', 'get_ease',
]
