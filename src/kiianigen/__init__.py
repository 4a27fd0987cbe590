"""Kiianigen: LED animation generator for the KType keyboard."""

__version__ = "0.1.0"

from .animation import GeneratorName, get_registry
from .services import GenerationService

__all__ = [
    "GenerationService",
    "GeneratorName",
    "get_registry",
]
