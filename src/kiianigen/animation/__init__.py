"""Animation building: interpolation, color bleeds, frames and generators."""

from .bleed import color_bleed, multi_color_bleed, scale_color
from .frames import build_animation, column, encode_pixel, led, pixel
from .interpolation import (
    linear_interpolate,
    random_interpolate,
    seeded_random_interpolate,
    sine_interpolate,
)
from .registry import GeneratorName, GeneratorRegistry, get_registry

__all__ = [
    "GeneratorName",
    "GeneratorRegistry",
    "build_animation",
    "color_bleed",
    "column",
    "encode_pixel",
    "get_registry",
    "led",
    "linear_interpolate",
    "multi_color_bleed",
    "pixel",
    "random_interpolate",
    "scale_color",
    "seeded_random_interpolate",
    "sine_interpolate",
]
