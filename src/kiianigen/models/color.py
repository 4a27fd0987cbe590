"""Color model for LED animation frames."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, -0.5 -> 0)."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round a channel value and clamp it to the 8-bit range."""
    return max(0, min(255, round_half_up(value)))


class Color(BaseModel):
    """Standard 8-bit RGB color.

    Channels are never rejected: any numeric input is rounded and clamped
    to 0-255, so every interpolation result can be turned into a Color
    without range checks at the call site.

    The model is frozen so colors can be shared between frames and used
    as dict keys.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(default=0, description="Red (0-255)")
    g: int = Field(default=0, description="Green (0-255)")
    b: int = Field(default=0, description="Blue (0-255)")

    @model_validator(mode="before")
    @classmethod
    def accept_sequences(cls, data: Any) -> Any:
        """Allow ``[r, g, b]`` lists and tuples as input."""
        if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
            if len(data) != 3:
                raise ValueError(f"Color needs exactly 3 channels, got {len(data)}")
            return {"r": data[0], "g": data[1], "b": data[2]}
        return data

    @field_validator("r", "g", "b", mode="before")
    @classmethod
    def clamp_rgb(cls, v: Any) -> int:
        """Round then clamp the channel into 0-255."""
        if v is None:
            return 0
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(f"Color channel must be a number, got {v!r}")
        return clamp_channel(v)

    @classmethod
    def coerce(cls, value: "Color | Sequence[float] | Mapping[str, float]") -> "Color":
        """Build a Color from a Color, an ``[r, g, b]`` sequence or a mapping."""
        if isinstance(value, Color):
            return value
        return cls.model_validate(value)

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def scaled(self, intensity: float) -> "Color":
        """Multiply every channel by ``intensity`` (rounded and clamped)."""
        return Color(r=self.r * intensity, g=self.g * intensity, b=self.b * intensity)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


# Palette shared by the built-in generators
BLACK = Color(r=0, g=0, b=0)
WHITE = Color(r=255, g=255, b=255)
RED = Color(r=255, g=0, b=0)
GREEN = Color(r=0, g=255, b=0)
BLUE = Color(r=0, g=0, b=255)
YELLOW = Color(r=255, g=255, b=0)
