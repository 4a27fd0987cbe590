"""Random effects: blinking pixels and TV static.

These are the only generators whose output depends on a random source;
pass a seeded ``random.Random`` as ``rng`` for reproducible frames.
"""

import math
import random
from typing import Optional

from kiianigen.models.animation import Animation, Frame, plain_loop
from kiianigen.models.color import WHITE, Color, round_half_up
from kiianigen.models.geometry import DeviceGeometry

from ..bleed import ColorLike
from ..frames import build_animation, led, pixel
from ..interpolation import RandomSource
from .params import color_or, number_or, positive_or

NOISE_MAX_INTENSITY = 153


def dodgy_pixel(
    geometry: DeviceGeometry,
    hi_color: Optional[ColorLike] = None,
    bg_color: Optional[ColorLike] = None,
    max_frames: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Blink random keys, like a faulty pixel.

    The first frame paints the whole grid with the background. Each
    following frame returns the previously lit cell to the background and
    lights a new random cell.

    Args:
        geometry: Device geometry (grid extent)
        hi_color: Blink color (default white)
        bg_color: Background color (default dark gray)
        max_frames: Number of blink frames after the background frame
    """
    source = rng if rng is not None else random
    hi = color_or(hi_color, WHITE)
    bg = color_or(bg_color, Color(r=25, g=25, b=25))
    max_frames = max(0, int(number_or(max_frames, 50)))

    background = Frame(
        pixel(bg, row=row, col=col)
        for row in range(geometry.max_row + 1)
        for col in range(geometry.max_col + 1)
    )
    frames = [background]

    previous: Optional[tuple[int, int]] = None
    for _ in range(max_frames):
        row = round_half_up(source.random() * geometry.max_row)
        col = round_half_up(source.random() * geometry.max_col)
        frame = Frame()
        if previous is not None:
            frame.add(pixel(bg, row=previous[0], col=previous[1]))
        frame.add(pixel(hi, row=row, col=col))
        frames.append(frame)
        previous = (row, col)

    return build_animation(plain_loop(1), frames)


def white_noise(
    geometry: DeviceGeometry,
    max_frames: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Animate the entire keyboard with TV static.

    Every frame gives each LED an independent random gray level below
    NOISE_MAX_INTENSITY; there is no coherence between frames.

    Args:
        geometry: Device geometry (LED count)
        max_frames: Number of frames (default 20)
    """
    source = rng if rng is not None else random
    max_frames = max(1, int(positive_or(max_frames, 20)))

    frames = []
    for _ in range(max_frames):
        frame = Frame()
        for pixel_id in range(1, geometry.led_count + 1):
            intensity = math.floor(source.random() * NOISE_MAX_INTENSITY)
            frame.add(led(pixel_id, (intensity, intensity, intensity)))
        frames.append(frame)

    return build_animation(plain_loop(1), frames)


def escape_test(geometry: DeviceGeometry, *, rng: Optional[RandomSource] = None) -> Animation:
    """Flash random reds on pixels 1 and 16 (escape and pause on the KType)."""
    source = rng if rng is not None else random

    frames = []
    for _ in range(10):
        frames.append(Frame([
            led(1, (math.floor(source.random() * 255), 0, 0)),
            led(16, (math.floor(source.random() * 255), 0, 0)),
        ]))

    return build_animation(plain_loop(1), frames)
