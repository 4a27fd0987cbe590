"""Whole-keyboard color pulses and breaths.

Each frame paints two off-board columns (-1% and 101%); with
``pfunc:interp`` the firmware fills everything in between, so two pixel
commands color the entire keyboard.
"""

from collections.abc import Sequence
from typing import Optional

from kiianigen.models.animation import Animation, Frame, stretched_loop
from kiianigen.models.color import BLACK, BLUE, GREEN, RED, WHITE, YELLOW, Color
from kiianigen.models.geometry import DeviceGeometry

from ..bleed import ColorLike, multi_color_bleed
from ..frames import build_animation, column
from ..interpolation import Interpolator, RandomSource, linear_interpolate, sine_interpolate
from .params import color_or, positive_or

BREATH_FRAME_DELAY = 3
PULSE_FRAME_DELAY = 3


def steps_per_inhale(breaths_per_minute: float, frame_delay: float) -> float:
    """Steps from one color to the next so that one inhale takes half a breath.

    Frame delay is in 10ms ticks, hence the factor of 100.
    """
    seconds_per_breath = 60 / breaths_per_minute
    return (seconds_per_breath * 100 / frame_delay) / 2


def _full_board_frames(colors: Sequence[Color]) -> list[Frame]:
    return [Frame([column("-1%", color), column("101%", color)]) for color in colors]


def _pulse(
    frames_per_color: float,
    interpolate: Interpolator,
    colors: Sequence[ColorLike],
    frame_delay: int,
) -> Animation:
    sequence = multi_color_bleed(frames_per_color, interpolate, colors)
    return build_animation(stretched_loop(frame_delay), _full_board_frames(sequence))


def color_pulse(frames_per_color: float, colors: Sequence[ColorLike]) -> Animation:
    """Pulse the entire keyboard linearly through ``colors``."""
    return _pulse(frames_per_color, linear_interpolate, colors, PULSE_FRAME_DELAY)


def color_breathe(breaths_per_minute: float, colors: Sequence[ColorLike]) -> Animation:
    """Pulse the entire keyboard through ``colors`` with a breath-like cadence."""
    steps = steps_per_inhale(breaths_per_minute, BREATH_FRAME_DELAY)
    return _pulse(steps, sine_interpolate, colors, BREATH_FRAME_DELAY)


def mac_sleep_breath(
    geometry: DeviceGeometry,
    hi_color: Optional[ColorLike] = None,
    lo_color: Optional[ColorLike] = None,
    breaths_per_minute: Optional[float] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """Breathe the keyboard like a sleeping laptop."""
    return color_breathe(
        positive_or(breaths_per_minute, 12),
        [color_or(hi_color, WHITE), color_or(lo_color, Color(r=1, g=1, b=1))],
    )


def blue_green_breath(
    geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None
) -> Animation:
    """Breathe the keyboard between green and blue."""
    return color_breathe(12, [GREEN, BLUE])


def red_pulse(geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None) -> Animation:
    """Pulse the keyboard red."""
    return color_pulse(240, [Color(r=255, g=25, b=0), BLACK])


def linear_pulse(
    geometry: DeviceGeometry,
    hi_color: Optional[ColorLike] = None,
    lo_color: Optional[ColorLike] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """Pulse the keyboard linearly between two colors."""
    return color_pulse(
        240, [color_or(hi_color, Color(r=255, g=25, b=0)), color_or(lo_color, BLACK)]
    )


def blue_yellow_pulse(
    geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None
) -> Animation:
    """Pulse the keyboard blue to yellow."""
    return color_pulse(240, [BLUE, YELLOW])


def rgb_pulse(geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None) -> Animation:
    """Pulse the keyboard red to green to blue."""
    return color_pulse(120, [RED, GREEN, BLUE])


def rgb_zebra_pulse(
    geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None
) -> Animation:
    """Pulse the keyboard red, green and blue with white in between."""
    return color_pulse(120, [RED, WHITE, GREEN, WHITE, BLUE, WHITE])
