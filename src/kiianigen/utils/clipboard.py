"""Clipboard convenience for generated config files."""

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def clipboard_supported() -> bool:
    """Only macOS (pbcopy) is supported."""
    return sys.platform == "darwin"


def copy_file_to_clipboard(path: Path) -> bool:
    """Copy a text file's contents to the clipboard.

    Args:
        path: File to copy

    Returns:
        True if the contents were copied, False if unsupported or failed
    """
    if not clipboard_supported():
        logger.debug(f"Clipboard copy not supported on {sys.platform}")
        return False

    try:
        subprocess.run(
            ["pbcopy"],
            input=path.read_bytes(),
            check=True,
            timeout=10,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.warning(f"Could not copy {path} to clipboard: {e}")
        return False

    logger.info(f"Copied {path} to clipboard")
    return True
