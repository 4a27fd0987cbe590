"""Built-in animation generators.

Every generator takes the device geometry followed by optional positional
parameters, and a keyword-only ``rng`` used by the random effects.
"""

from .chase import bluewipe, kitt2000
from .noise import dodgy_pixel, escape_test, white_noise
from .pulse import (
    blue_green_breath,
    blue_yellow_pulse,
    linear_pulse,
    mac_sleep_breath,
    red_pulse,
    rgb_pulse,
    rgb_zebra_pulse,
)
from .tracers import vertical_pulse_with_tracers
from .zones import (
    base_top_breath,
    blue_green_base_top_breath_spin,
    key_group_cycler,
    top_and_bottom,
    top_and_bottom2,
)

__all__ = [
    "base_top_breath",
    "blue_green_base_top_breath_spin",
    "blue_green_breath",
    "blue_yellow_pulse",
    "bluewipe",
    "dodgy_pixel",
    "escape_test",
    "key_group_cycler",
    "kitt2000",
    "linear_pulse",
    "mac_sleep_breath",
    "red_pulse",
    "rgb_pulse",
    "rgb_zebra_pulse",
    "top_and_bottom",
    "top_and_bottom2",
    "vertical_pulse_with_tracers",
    "white_noise",
]
