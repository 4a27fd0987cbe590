"""Parameter defaults shared by the generators.

Generators are invoked with positional parameters straight from the command
line or a conf file, so every parameter may be missing or None and colors
arrive as ``[r, g, b]`` lists.
"""

from collections.abc import Sequence
from typing import Any, Optional

from kiianigen.models.color import BLUE, GREEN, Color


def color_or(value: Any, default: Color) -> Color:
    """The given color, or the default when missing."""
    if value is None:
        return default
    return Color.coerce(value)


def number_or(value: Any, default: float) -> float:
    """The given number, or the default when missing."""
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Expected a number, got {value!r}")
    return value


def positive_or(value: Any, default: float) -> float:
    """The given number, or the default when missing, zero or negative."""
    number = number_or(value, default)
    return number if number > 0 else default


def palette_or(
    colors: Optional[Sequence[Any]],
    defaults: Sequence[Color] = (GREEN, BLUE),
) -> list[Color]:
    """The given palette with missing leading entries filled from defaults.

    A single color ``[c]`` becomes ``[c, defaults[1]]`` so a palette always
    has at least as many colors as the defaults.
    """
    palette: list[Any] = list(colors) if colors is not None else []
    if palette and isinstance(palette[0], (int, float)):
        # A bare [r, g, b] instead of a list of colors
        palette = [palette]
    while len(palette) < len(defaults):
        palette.append(None)
    return [
        color_or(c, defaults[i]) if i < len(defaults) else Color.coerce(c)
        for i, c in enumerate(palette)
    ]


def rotated(items: Sequence[Any], offset: int) -> list[Any]:
    """Rotate left by ``offset``: ``rotated([a, b, c], 1) == [b, c, a]``."""
    if not items:
        return []
    offset %= len(items)
    return list(items[offset:]) + list(items[:offset])
