"""Animation, frame and replay settings models."""

import logging
from collections.abc import Iterable
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .pixel import PixelCommand

logger = logging.getLogger(__name__)


class AnimationSettings(BaseModel):
    """Replay settings of an animation.

    Serialized as the configurator's comma separated micro-language, e.g.
    ``framedelay:3, framestretch, loop, replace:all, pfunc:interp``. Flags
    carry no value: they are either present or absent.
    """

    model_config = ConfigDict(frozen=True)

    frame_delay: int | None = Field(default=None, ge=0, description="Frame ticks per frame")
    frame_stretch: bool = Field(default=False, description="Interpolate between frames")
    loop: bool = Field(default=False, description="Repeat indefinitely")
    replace_all: bool = Field(default=False, description="Overwrite all pixels each cycle")
    interpolate: bool = Field(default=False, description="Interpolate between listed pixels")

    def to_setting_string(self) -> str:
        """Render the settings string."""
        tokens = []
        if self.frame_delay is not None:
            tokens.append(f"framedelay:{self.frame_delay}")
        if self.frame_stretch:
            tokens.append("framestretch")
        if self.loop:
            tokens.append("loop")
        if self.replace_all:
            tokens.append("replace:all")
        if self.interpolate:
            tokens.append("pfunc:interp")
        return ", ".join(tokens)

    @classmethod
    def parse(cls, text: str) -> "AnimationSettings":
        """Parse a settings string. Unknown tokens are logged and ignored."""
        values: dict = {}
        for token in (t.strip() for t in text.split(",")):
            if not token:
                continue
            key, _, value = token.partition(":")
            key = key.strip()
            value = value.strip()
            if key == "framedelay":
                values["frame_delay"] = int(value)
            elif key == "framestretch":
                values["frame_stretch"] = True
            elif key == "loop":
                values["loop"] = True
            elif key == "replace" and value == "all":
                values["replace_all"] = True
            elif key == "pfunc" and value == "interp":
                values["interpolate"] = True
            else:
                logger.debug(f"Ignoring unknown animation setting: {token}")
        return cls(**values)

    def __str__(self) -> str:
        return self.to_setting_string()


# Setting presets used by the built-in generators
def stretched_loop(frame_delay: int, interpolate: bool = True) -> AnimationSettings:
    """Looping, frame-stretched animation that replaces every pixel."""
    return AnimationSettings(
        frame_delay=frame_delay,
        frame_stretch=True,
        loop=True,
        replace_all=True,
        interpolate=interpolate,
    )


def plain_loop(frame_delay: int, interpolate: bool = False) -> AnimationSettings:
    """Looping animation without frame stretching."""
    return AnimationSettings(
        frame_delay=frame_delay,
        loop=True,
        replace_all=True,
        interpolate=interpolate,
    )


class Frame:
    """An ordered list of pixel commands.

    Frames are built up by a generator and serialized once; they are never
    modified after being added to an animation.
    """

    def __init__(self, commands: Iterable[PixelCommand] = ()):
        self.commands: list[PixelCommand] = list(commands)

    def add(self, command: PixelCommand) -> "Frame":
        """Append a pixel command."""
        self.commands.append(command)
        return self

    def extend(self, commands: Iterable[PixelCommand]) -> "Frame":
        """Append several pixel commands."""
        self.commands.extend(commands)
        return self

    def sort_by_pixel_id(self) -> "Frame":
        """Stable sort by pixel id.

        Raises:
            ValueError: If a command is addressed by row/column
        """
        if any(c.position.pixel_id is None for c in self.commands):
            raise ValueError("Only frames addressed by pixel id can be sorted")
        self.commands.sort(key=lambda c: c.position.pixel_id)
        return self

    def serialize(self) -> str:
        """Join the encoded commands with commas."""
        return ",".join(c.encode() for c in self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __str__(self) -> str:
        return self.serialize()


class Animation(BaseModel):
    """A named animation as stored in the device config."""

    settings: str = Field(description="Replay settings string")
    type: Literal["animation"] = Field(default="animation", description="Entry type")
    frames: list[str] = Field(default_factory=list, description="Serialized frames")

    @property
    def frame_count(self) -> int:
        """Number of frames."""
        return len(self.frames)

    def parsed_settings(self) -> AnimationSettings:
        """Settings as a model."""
        return AnimationSettings.parse(self.settings)
