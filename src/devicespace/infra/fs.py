from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path resolution for persistent application data and the text
loading used to read command transcripts from disk.
"""

import logging
import os

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DeviceSpace"
UNIX_APP_DIR_NAME = ".devicespace"
DEFAULT_INPUT_FILE = os.path.join("input", "day7input.txt")

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/DeviceSpace
    - Linux/Mac: ~/.devicespace

    The directory is not created here; writers call ensure_parent_dir.

    Returns:
        str: Absolute path to the application data directory.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.join(base, APP_DIR_NAME)

    return os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy for a target file if missing."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)

# -----------------------------------------------------------------------------
# INPUT LOADING
# -----------------------------------------------------------------------------

def read_input_text(path: str) -> str:
    """
    Read a transcript file with newlines preserved.

    Args:
        path: Path to the input file.

    Returns:
        str: Whole file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    logger.debug(f"Loaded {len(content)} characters from {path}")
    return content
