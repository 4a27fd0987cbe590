"""CLI commands for kiianigen."""

from .config import config
from .generate import generate
from .list import list_generators
from .preview import preview

__all__ = ["config", "generate", "list_generators", "preview"]
