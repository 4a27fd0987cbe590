"""Generic utility modules for kiianigen.

- persistence: Pydantic model JSON load/save helpers
- clipboard: Copy generated files to the clipboard
"""

from .clipboard import clipboard_supported, copy_file_to_clipboard
from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence", "clipboard_supported", "copy_file_to_clipboard"]
