"""Zone-aware effects: top keys vs. base ring, key groups, LED kinds.

The top zone is painted with two commands on its first and last LED; with
``pfunc:interp`` the firmware interpolates every key in between. The base
ring is painted LED by LED so it can carry a gradient.
"""

from collections.abc import Sequence
from typing import Optional

from kiianigen.models.animation import Animation, Frame, plain_loop, stretched_loop
from kiianigen.models.color import BLUE, GREEN, Color, round_half_up
from kiianigen.models.geometry import DeviceGeometry

from ..bleed import ColorLike, multi_color_bleed, scale_color
from ..frames import build_animation, led
from ..interpolation import RandomSource, sine_interpolate
from .params import color_or, number_or, palette_or, positive_or, rotated


def top_frame(geometry: DeviceGeometry, color: Color) -> Frame:
    """A frame coloring the whole top zone through its two anchor LEDs."""
    return Frame([led(geometry.top_first_id, color), led(geometry.top_last_id, color)])


def spinning_base(geometry: DeviceGeometry, color: Color, offset: int) -> list:
    """Base ring fading from dark to ``color``, rotated right by ``offset`` LEDs.

    Position j in the ring gets intensity ``j / ring_length``; the LED at
    position j is ``ring[(j - offset) mod ring_length]``.
    """
    ring = geometry.base_ring
    length = len(ring)
    return [
        led(ring[(j - offset) % length], scale_color(color, j / length))
        for j in range(length)
    ]


def base_top_breath(
    geometry: DeviceGeometry,
    color1: Optional[ColorLike] = None,
    color2: Optional[ColorLike] = None,
    breaths_per_minute: Optional[float] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """Breathe the top keys and the base in opposite phase between two colors."""
    first = color_or(color1, GREEN)
    second = color_or(color2, BLUE)
    frame_delay = 3
    seconds_per_breath = round_half_up(60 / positive_or(breaths_per_minute, 12))
    steps_per_inhale = (seconds_per_breath * 100 / frame_delay) / 2

    top_colors = multi_color_bleed(steps_per_inhale, sine_interpolate, [first, second])
    base_colors = multi_color_bleed(steps_per_inhale, sine_interpolate, [second, first])

    frames = []
    for top_color, base_color in zip(top_colors, base_colors):
        frame = top_frame(geometry, top_color)
        frame.add(led(geometry.base_first_id, base_color))
        frame.add(led(geometry.base_last_id, base_color))
        frames.append(frame)

    return build_animation(stretched_loop(frame_delay), frames)


def blue_green_base_top_breath_spin(
    geometry: DeviceGeometry,
    colors: Optional[Sequence[ColorLike]] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Breathe top and base out of phase while a brightness gradient spins
    around the base.

    The top zone cycles through ``colors``; the base cycles through the same
    colors shifted by one and is dimmed by position in the ring, with the
    ring rotated one LED further every frame.

    Args:
        geometry: Device geometry (top anchors and base ring)
        colors: Palette (default green, blue)
    """
    palette = palette_or(colors)
    frame_delay = 10
    seconds_per_breath = 6.4
    steps_per_inhale = (seconds_per_breath * 100 / frame_delay) / 2

    top_colors = multi_color_bleed(steps_per_inhale, sine_interpolate, palette)
    base_colors = multi_color_bleed(steps_per_inhale, sine_interpolate, rotated(palette, 1))

    frames = []
    for i, (top_color, base_color) in enumerate(zip(top_colors, base_colors)):
        frame = top_frame(geometry, top_color)
        frame.extend(spinning_base(geometry, base_color, i + 1))
        frames.append(frame)

    return build_animation(stretched_loop(frame_delay), frames)


def key_group_cycler(
    geometry: DeviceGeometry,
    steps_per_color: Optional[float] = None,
    colors: Optional[Sequence[ColorLike]] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Cycle every key group through the palette, each group one color ahead
    of the previous one, giving a staggered wave across the zones.

    Args:
        geometry: Device geometry (key groups and scan code map)
        steps_per_color: Steps from one color to the next (default 16)
        colors: Palette (default green, blue)
    """
    steps = number_or(steps_per_color, 16)
    palette = palette_or(colors)

    groups = []
    for index, group in enumerate(geometry.key_groups):
        sequence = multi_color_bleed(steps, sine_interpolate, rotated(palette, index))
        groups.append((geometry.group_led_ids(group), sequence))

    frame_count = min((len(sequence) for _, sequence in groups), default=0)
    frames = []
    for i in range(frame_count):
        frame = Frame()
        for led_ids, sequence in groups:
            frame.extend(led(led_id, sequence[i]) for led_id in led_ids)
        frames.append(frame)

    return build_animation(stretched_loop(10, interpolate=False), frames)


def top_and_bottom(geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None) -> Animation:
    """Light LEDs without keys green and LEDs under keys blue."""
    frame = Frame(led(led_id, GREEN) for led_id in geometry.blank_led_ids)
    frame.extend(led(led_id, BLUE) for led_id in geometry.keyed_led_ids)
    return build_animation(plain_loop(5), [frame])


def top_and_bottom2(geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None) -> Animation:
    """Green top with a blue gradient spinning once around the base."""
    frames = []
    for i in range(len(geometry.base_ring)):
        frame = top_frame(geometry, GREEN)
        frame.extend(spinning_base(geometry, BLUE, i + 1))
        frames.append(frame)

    return build_animation(plain_loop(5, interpolate=True), frames)
