"""Color bleeds: gradual per-channel transitions between colors."""

import logging
from collections.abc import Sequence
from typing import Optional, Union, overload

from kiianigen.models.color import Color, clamp_channel

from .interpolation import Interpolator, linear_interpolate

logger = logging.getLogger(__name__)

ColorLike = Union[Color, Sequence[float]]


@overload
def color_bleed(
    orig_color: ColorLike,
    dest_color: ColorLike,
    steps: Optional[float] = ...,
    step: None = ...,
    interpolate: Optional[Interpolator] = ...,
) -> list[Color]: ...


@overload
def color_bleed(
    orig_color: ColorLike,
    dest_color: ColorLike,
    steps: Optional[float] = ...,
    step: int = ...,
    interpolate: Optional[Interpolator] = ...,
) -> Optional[Color]: ...


def color_bleed(orig_color, dest_color, steps=2, step=None, interpolate=None):
    """
    Bleed from one color to another.

    The result holds ``floor(steps) + 1`` colors: index 0 is the origin and,
    for whole step counts, index ``steps`` is the destination. Each channel
    is interpolated independently, then rounded and clamped to 0-255.

    Asking for fewer than 2 steps (or none) returns the single midpoint
    color, i.e. ``steps=2, step=1``.

    Args:
        orig_color: Color to bleed from
        dest_color: Color to bleed to
        steps: Number of steps in the bleed (minimum 2). Fractional step
            counts are allowed and keep their exact denominator.
        step: If given, return only the color at this index
        interpolate: Interpolation function (default: linear)

    Returns:
        The full list of colors, or the color at ``step``. An out of range
        ``step`` returns None.

    Example:
        >>> color_bleed([0, 0, 0], [255, 255, 255], 2)
        [Color(r=0, g=0, b=0), Color(r=128, g=128, b=128), Color(r=255, g=255, b=255)]
    """
    if steps is None or steps < 2:
        steps = 2
        step = 1
    if interpolate is None:
        interpolate = linear_interpolate

    orig = Color.coerce(orig_color).to_rgb_tuple()
    dest = Color.coerce(dest_color).to_rgb_tuple()

    colors = []
    for s in range(int(steps) + 1):
        channels = [
            clamp_channel(interpolate(s, steps, orig_channel, dest_channel))
            for orig_channel, dest_channel in zip(orig, dest)
        ]
        colors.append(Color(r=channels[0], g=channels[1], b=channels[2]))

    if step is not None:
        if 0 <= step < len(colors):
            return colors[step]
        logger.debug(f"Bleed step {step} outside 0..{len(colors) - 1}")
        return None
    return colors


def multi_color_bleed(
    frames_per_color: float,
    interpolate: Optional[Interpolator],
    colors: Sequence[ColorLike],
) -> list[Color]:
    """
    Bleed through a list of colors treated as a cycle.

    Segment i bleeds ``colors[i] -> colors[i + 1]`` and the last segment
    bleeds back to the first color. Shared boundary colors appear once and
    the final color (equal to the first) is dropped, so the result loops
    seamlessly.

    Args:
        frames_per_color: Steps from one color to the next
        interpolate: Interpolation function (None for linear)
        colors: Colors to cycle through

    Returns:
        The looped color sequence. For a whole step count ``n`` and ``k``
        colors its length is ``k * n``.

    Example:
        >>> len(multi_color_bleed(4, None, [[0, 0, 0], [255, 255, 255], [0, 0, 255]]))
        12
    """
    if not colors:
        raise ValueError("multi_color_bleed needs at least one color")

    # Fewer than 2 steps collapses each segment to its midpoint color
    if frames_per_color is None or frames_per_color < 2:
        return [
            color_bleed(orig, colors[(i + 1) % len(colors)], interpolate=interpolate, steps=None)
            for i, orig in enumerate(colors)
        ]

    sequence: list[Color] = []
    for i, orig in enumerate(colors):
        dest = colors[(i + 1) % len(colors)]
        fade = color_bleed(orig, dest, frames_per_color, None, interpolate)
        if i > 0:
            fade = fade[1:]
        sequence.extend(fade)

    sequence.pop()
    return sequence


def scale_color(color: ColorLike, intensity: float) -> Color:
    """Dim or boost a color by a factor, rounding and clamping each channel."""
    return Color.coerce(color).scaled(intensity)
