"""Scalar interpolation between two values.

Every function takes ``(step, steps, val1, val2)`` and returns the value at
``step`` of a ``steps``-long journey from ``val1`` to ``val2``, so they are
interchangeable wherever a bleed needs an easing curve.
"""

import math
import random
from typing import Callable, Optional, Protocol


class Interpolator(Protocol):
    """Signature shared by the interpolation functions."""

    def __call__(self, step: float, steps: float, val1: float, val2: float) -> float: ...


class RandomSource(Protocol):
    """Anything with ``random()``, e.g. ``random.Random`` or the module itself."""

    def random(self) -> float: ...


def linear_interpolate(step: float, steps: float, val1: float, val2: float) -> float:
    """Travel from val1 to val2 in equal increments."""
    return (val2 - val1) * (step / steps) + val1


def sine_interpolate(step: float, steps: float, val1: float, val2: float) -> float:
    """Travel from val1 to val2 along the sine curve between -pi/2 and pi/2.

    Slow at both ends and fast in the middle, which reads as breathing.
    """
    angle = (step / steps) * math.pi - (math.pi / 2)
    interpolate_val = (math.sin(angle) + 1) / 2
    return (val2 - val1) * interpolate_val + val1


def random_interpolate(
    step: float,
    steps: float,
    val1: float,
    val2: float,
    rng: Optional[RandomSource] = None,
) -> float:
    """A uniformly random value between val1 and val2; step is ignored."""
    source = rng if rng is not None else random
    return (val2 - val1) * source.random() + val1


def seeded_random_interpolate(rng: RandomSource) -> Callable[[float, float, float, float], float]:
    """Bind a random source to random_interpolate.

    Example:
        >>> import random
        >>> from kiianigen.animation import color_bleed
        >>> from kiianigen.models.color import BLACK, WHITE
        >>> interpolate = seeded_random_interpolate(random.Random(7))
        >>> len(color_bleed(BLACK, WHITE, 10, interpolate=interpolate))
        11
    """
    def interpolate(step: float, steps: float, val1: float, val2: float) -> float:
        return random_interpolate(step, steps, val1, val2, rng=rng)

    return interpolate
