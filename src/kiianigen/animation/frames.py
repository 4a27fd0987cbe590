"""Pixel command encoding and frame/animation assembly."""

from collections.abc import Iterable
from typing import Optional, Union

from kiianigen.models.animation import Animation, AnimationSettings, Frame
from kiianigen.models.color import Color
from kiianigen.models.pixel import Coordinate, PixelCommand, Position

from .bleed import ColorLike


def encode_pixel(position: Position, color: ColorLike) -> str:
    """Serialize one color assignment, e.g. ``P[c:-2%](0,0,255)``."""
    return PixelCommand(position=position, color=Color.coerce(color)).encode()


def pixel(
    color: ColorLike,
    row: Optional[Coordinate] = None,
    col: Optional[Coordinate] = None,
    pixel_id: Optional[int] = None,
) -> PixelCommand:
    """Build a pixel command from loose addressing arguments.

    Example:
        >>> pixel([0, 0, 255], col="-2%").encode()
        'P[c:-2%](0,0,255)'
        >>> pixel([0, 0, 255], pixel_id=42).encode()
        'P[42](0,0,255)'
    """
    position = Position(row=row, col=col, pixel_id=pixel_id)
    return PixelCommand(position=position, color=Color.coerce(color))


def led(pixel_id: int, color: ColorLike) -> PixelCommand:
    """Pixel command addressed by id."""
    return pixel(color, pixel_id=pixel_id)


def column(col: Coordinate, color: ColorLike) -> PixelCommand:
    """Pixel command addressing a whole column."""
    return pixel(color, col=col)


def build_animation(
    settings: Union[AnimationSettings, str],
    frames: Iterable[Union[Frame, str]],
) -> Animation:
    """Assemble an animation from replay settings and frames.

    Frames may be Frame objects or already serialized strings.
    """
    serialized = [f if isinstance(f, str) else f.serialize() for f in frames]
    return Animation(settings=str(settings), frames=serialized)
