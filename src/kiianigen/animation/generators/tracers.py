"""Color breath with tracers racing around both sides of the base."""

import math
from collections.abc import Sequence
from typing import Optional

from kiianigen.models.animation import Animation, stretched_loop
from kiianigen.models.color import round_half_up
from kiianigen.models.geometry import DeviceGeometry

from ..bleed import ColorLike, multi_color_bleed, scale_color
from ..frames import build_animation, led
from ..interpolation import RandomSource, sine_interpolate
from .params import number_or, palette_or, rotated
from .zones import top_frame

TRACER_FRAME_DELAY = 5
TRACER_ON_INTENSITY = 1
TRACER_OFF_INTENSITY = 0.05
TRACER_LENGTH = 3


def synced_tracer_paths(
    left: Sequence[int], right: Sequence[int], steps: float, color_count: int
) -> tuple[list[Optional[int]], list[Optional[int]], float]:
    """
    Pad the tracer paths so the tracers complete whole laps during the pulse.

    The pulse lasts ``color_count * steps`` frames and the tracers advance
    one slot per frame. When that is not a whole number of laps, empty
    slots are appended to both paths and the step count is raised to match
    the padded lap length.

    Returns:
        The padded left path, the padded right path and the step count.
    """
    left_path: list[Optional[int]] = list(left)
    right_path: list[Optional[int]] = list(right)
    total = color_count * steps
    length = len(left_path)

    if total % length:
        loops = math.floor(total / length)
        padding = math.ceil((total - length * loops) / loops)
        left_path += [None] * padding
        right_path += [None] * padding
        if len(left_path) * loops > total:
            steps = round_half_up(len(left_path) * loops / color_count)

    return left_path, right_path, steps


def vertical_pulse_with_tracers(
    geometry: DeviceGeometry,
    steps_per_color: Optional[float] = None,
    colors: Optional[Sequence[ColorLike]] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Pulse the top and the base through the palette while bright tracers run
    from the front of the base around both sides to the back.

    Args:
        geometry: Device geometry (top anchors and base tracer paths)
        steps_per_color: Steps from one color to the next (default 32, at
            least the tracer path length)
        colors: Palette (default green, blue)
    """
    palette = palette_or(colors)
    steps = max(number_or(steps_per_color, 32), len(geometry.left_base_path))

    left_path, right_path, steps = synced_tracer_paths(
        geometry.left_base_path, geometry.right_base_path, steps, len(palette)
    )
    length = len(left_path)

    top_colors = multi_color_bleed(steps, sine_interpolate, palette)
    base_colors = multi_color_bleed(steps, sine_interpolate, rotated(palette, 1))

    frames = []
    for i, (top_color, base_color) in enumerate(zip(top_colors, base_colors)):
        frame = top_frame(geometry, top_color)
        on = scale_color(base_color, TRACER_ON_INTENSITY)
        off = scale_color(base_color, TRACER_OFF_INTENSITY)

        for j in range(length):
            left_id = left_path[(j + i) % length]
            if left_id is None:
                continue
            right_id = right_path[(j + i) % length]
            color = on if j > length - 1 - TRACER_LENGTH else off
            frame.add(led(left_id, color))
            # Both paths start and end on the same LED
            if right_id != left_id:
                frame.add(led(right_id, color))

        frames.append(frame.sort_by_pixel_id())

    return build_animation(stretched_loop(TRACER_FRAME_DELAY), frames)
