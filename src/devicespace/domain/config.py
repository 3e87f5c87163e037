from __future__ import annotations

"""
Configuration Domain Management.

Default solver settings and JSON-file loading. The device constants
(capacity, space needed for the update, part 1 threshold) live here so the
solver core never hard-codes them.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from devicespace.infra.fs import DEFAULT_INPUT_FILE

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_SIZE_THRESHOLD = 100000
DEFAULT_TOTAL_SPACE = 70000000
DEFAULT_SPACE_REQUIRED = 30000000

CONFIG_KEYS = (
    "input_path",
    "size_threshold",
    "total_space",
    "space_required",
    "print_tree",
)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "input_path": DEFAULT_INPUT_FILE,
        "size_threshold": DEFAULT_SIZE_THRESHOLD,
        "total_space": DEFAULT_TOTAL_SPACE,
        "space_required": DEFAULT_SPACE_REQUIRED,
        "print_tree": False,
    }


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    Unknown keys are dropped. A missing, unreadable or malformed file yields
    the defaults.

    Args:
        path: JSON file location. None returns the defaults.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.debug(f"Config file not found at {path}. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load config from {path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file {path}. Using defaults.")
        return config

    config.update({k: v for k, v in data.items() if k in CONFIG_KEYS})
    return config
