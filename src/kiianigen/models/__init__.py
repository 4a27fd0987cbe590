"""Data models for kiianigen."""

from .animation import Animation, AnimationSettings, Frame
from .color import Color
from .conf import AnimationSpec, GenerationConf, sanitize_animation_name
from .config import AppConfig
from .device import DeviceConfig, Led, MatrixKey, PixelMap
from .geometry import DeviceGeometry, KeyGroup
from .pixel import PixelCommand, Position

__all__ = [
    # Animation
    "Animation",
    "AnimationSettings",
    "AnimationSpec",
    "AppConfig",
    "Color",
    # Device documents
    "DeviceConfig",
    "DeviceGeometry",
    "Frame",
    "GenerationConf",
    "KeyGroup",
    "Led",
    "MatrixKey",
    "PixelCommand",
    "PixelMap",
    "Position",
    "sanitize_animation_name",
]
