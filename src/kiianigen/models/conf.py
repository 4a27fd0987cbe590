"""Batch generation file (``kiianiconf.json``) model."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def sanitize_animation_name(name: str) -> str:
    """Make a display name usable as a configurator animation name.

    The configurator only accepts single-word names: whitespace runs become
    underscores and remaining non-word characters are dropped.

    Example:
        >>> sanitize_animation_name("KARR 1.0")
        'KARR_10'
    """
    return re.sub(r"\W+", "", re.sub(r"\s+", "_", name))


class AnimationSpec(BaseModel):
    """Which generator to run for a named animation, and with what parameters."""

    generator: str = Field(description="Registered generator name")
    params: list[Any] = Field(default_factory=list, description="Positional generator parameters")

    @model_validator(mode="before")
    @classmethod
    def null_params(cls, data: Any) -> Any:
        """Treat ``"params": null`` as no parameters."""
        if isinstance(data, dict) and data.get("params") is None:
            data = {k: v for k, v in data.items() if k != "params"}
        return data


class GenerationConf(BaseModel):
    """A set of named animations and the ones to generate."""

    model_config = ConfigDict(populate_by_name=True)

    animations: dict[str, AnimationSpec] = Field(
        default_factory=dict, description="Animation specs by display name"
    )
    active_animations: list[str] = Field(
        default_factory=list,
        alias="activeAnimations",
        description="Display names to generate, in order",
    )

    @model_validator(mode="after")
    def check_active(self) -> "GenerationConf":
        """Every active animation must be defined."""
        missing = [name for name in self.active_animations if name not in self.animations]
        if missing:
            raise ValueError(f"Active animations not defined: {', '.join(missing)}")
        return self

    def active_specs(self) -> list[tuple[str, AnimationSpec]]:
        """Active (display name, spec) pairs in order."""
        return [(name, self.animations[name]) for name in self.active_animations]

    def to_json(self, indent: int = 4) -> str:
        """Serialize with the configurator's camelCase keys."""
        return self.model_dump_json(indent=indent, by_alias=True)

    @classmethod
    def demo(cls) -> "GenerationConf":
        """The conf written when none exists yet."""
        return cls.model_validate(DEMO_CONF)


DEMO_CONF: dict[str, Any] = {
    "animations": {
        "KARR 1.0": {"generator": "kitt2000", "params": [[255, 102, 0]]},
        "KITT 2000": {"generator": "kitt2000", "params": []},
        "White Noise": {"generator": "whiteNoise"},
        "Turquoise Hexagon Sun": {
            "generator": "baseTopBreath",
            "params": [[0, 255, 0], [0, 0, 255]],
        },
        "Iced Cooly": {"generator": "dodgyPixel", "params": [[204, 204, 204], [0, 0, 255]]},
        "Quick RGB with Tracers": {
            "generator": "verticalPulseWithTracers",
            "params": [17, [[255, 0, 0], [0, 255, 0], [0, 0, 255]]],
        },
    },
    "activeAnimations": [
        "KARR 1.0",
        "KITT 2000",
        "Turquoise Hexagon Sun",
        "Iced Cooly",
        "White Noise",
        "Quick RGB with Tracers",
    ],
}
