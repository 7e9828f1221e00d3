"""Lerp and spatial support for pygame's vector and colour types.

``pygame.math.Vector2.lerp`` rejects weights outside ``[0, 1]``; the
implementations registered here extrapolate like every other :func:`lerp`.
``pygame.Color`` channels are interpolated as integers and clamped to
``0..255`` since a colour cannot hold anything else.
"""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402
from pygame.math import Vector2, Vector3  # noqa: E402

from .lerp import lerp  # noqa: E402
from .scalars import round_half_away  # noqa: E402
from .spatial import add, scale, sub  # noqa: E402


def _channel(value: int) -> int:
    return max(0, min(255, value))


# Vectors ---------------------------------------------------------------

@lerp.register(Vector2)
@lerp.register(Vector3)
def _lerp_vector(a, b, t):
    return a + (b - a) * float(t)


@add.register(Vector2)
@add.register(Vector3)
def _add_vector(a, b):
    return a + b


@sub.register(Vector2)
@sub.register(Vector3)
def _sub_vector(a, b):
    return a - b


@scale.register(Vector2)
@scale.register(Vector3)
def _scale_vector(a, s):
    return a * float(s)


# Colours ---------------------------------------------------------------

@lerp.register(pygame.Color)
def _lerp_color(a, b, t):
    b = pygame.Color(b)
    return pygame.Color(*(_channel(lerp(int(x), int(y), t)) for x, y in zip(a, b)))


@add.register(pygame.Color)
def _add_color(a, b):
    # pygame saturates at 255
    return a + pygame.Color(b)


@sub.register(pygame.Color)
def _sub_color(a, b):
    b = pygame.Color(b)
    return pygame.Color(*(abs(int(x) - int(y)) for x, y in zip(a, b)))


@scale.register(pygame.Color)
def _scale_color(a, s):
    return pygame.Color(*(_channel(round_half_away(int(x) * float(s))) for x in a))
