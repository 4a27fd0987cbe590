"""Chase effects that sweep a highlight across the board and back."""

from typing import Optional

from kiianigen.models.animation import Animation, Frame, stretched_loop
from kiianigen.models.color import BLACK, RED, Color
from kiianigen.models.geometry import DeviceGeometry
from kiianigen.models.pixel import percent

from ..bleed import ColorLike, color_bleed
from ..frames import build_animation, column, pixel
from ..interpolation import RandomSource
from .params import color_or, number_or

TRACK_STEPS = 50
TRACK_END = 102  # percent; runs just past the right edge


def _track(steps: int = TRACK_STEPS, end: float = TRACK_END) -> list[float]:
    """Column percentages from 0 to ``end`` in ``100 / steps`` increments."""
    step = 100 / steps
    columns = []
    position = 0.0
    while position <= end:
        columns.append(position)
        position += step
    return columns


def kitt2000(
    geometry: DeviceGeometry,
    hi_color: Optional[ColorLike] = None,
    bg_color: Optional[ColorLike] = None,
    width: Optional[int] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """
    Sweep a highlight with a fading trail left to right and back, like KITT.

    Each frame only carries the handful of column commands describing the
    moving gradient: the head, the column where the trail meets the
    background, and background anchors at the edges. The firmware
    interpolates between them. Near either end of the track the parts of the
    trail that would fall off the board are replaced by an edge command.

    Args:
        geometry: Device geometry (unused, columns are percentages)
        hi_color: Highlight color (default red)
        bg_color: Background color (default black)
        width: Columns over which the highlight bleeds into the background
    """
    hi = color_or(hi_color, RED)
    bg = color_or(bg_color, BLACK)
    width = int(number_or(width, 5))

    bleed = color_bleed(hi, bg, width)
    # trail[0] is the head color, the last entry the background color
    trail = bleed[1:] if isinstance(bleed, list) else [bleed]
    trail_reversed = trail[::-1]
    trail_length = len(trail_reversed)

    columns = _track()
    column_count = len(columns)

    def chase_frame(i: int) -> Frame:
        frame = Frame([column("-2%", bg)])

        # Left edge: part of the trail is still off the board
        lead = trail_length - i
        if 0 <= lead < trail_length:
            frame.add(column("0%", trail_reversed[lead]))
        elif lead < 0:
            frame.add(column("0%", bg))
            frame.add(column(percent(columns[i - trail_length]), trail_reversed[0]))

        frame.add(column(percent(columns[i]), trail[0]))

        # Right edge
        tail = column_count - i + 1
        if 0 <= tail < trail_length:
            frame.add(column("100%", trail_reversed[tail]))
        elif i + trail_length < column_count:
            frame.add(column(percent(columns[i + trail_length]), trail_reversed[0]))
            frame.add(column("100%", bg))

        frame.add(column("102%", bg))
        return frame

    frames = [chase_frame(i) for i in range(column_count)]
    frames += [chase_frame(i) for i in range(column_count - 2, 1, -1)]

    return build_animation(stretched_loop(2), frames)


def bluewipe(
    geometry: DeviceGeometry,
    hi_color: Optional[ColorLike] = None,
    bg_color: Optional[ColorLike] = None,
    *,
    rng: Optional[RandomSource] = None,
) -> Animation:
    """Wipe a highlighted row from top to bottom and back."""
    hi = color_or(hi_color, Color(r=0, g=26, b=255))
    bg = color_or(bg_color, Color(r=93, g=93, b=93))

    step = 100 / TRACK_STEPS
    overflow = 1

    def wipe_frame(i: int) -> Frame:
        return Frame([
            pixel(bg, row="-2%"),
            pixel(hi, row=percent((i - overflow) * step)),
            pixel(bg, row="102%"),
        ])

    frames = [wipe_frame(i) for i in range(-overflow, TRACK_STEPS + overflow + 1)]
    frames += [wipe_frame(i) for i in range(TRACK_STEPS + overflow + 1, -overflow - 1, -1)]

    return build_animation(stretched_loop(3), frames)
