from __future__ import annotations

"""
Configuration Domain Management.

Handles the persisted formatter preferences (mode, indentation, statistics,
token model) as a flat JSON document in the user data directory, with
default fallback when the file is missing or unreadable.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from scriptfmt.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_INDENT_SIZE, DEFAULT_MODEL
from scriptfmt.domain.format_models import FormatMode
from scriptfmt.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths ('' means standard input / output)
        "input_path": "",
        "output_path": "",

        # Rendering
        "mode": FormatMode.BEAUTIFY.value,
        "indent_size": DEFAULT_INDENT_SIZE,

        # Reporting
        "show_stats": False,
        "target_model": DEFAULT_MODEL,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load persisted preferences merged over the defaults.

    Unknown keys are ignored; a missing or corrupted file yields defaults.

    Args:
        path: Config file to read; defaults to the user data directory.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist preferences to disk with a version stamp.

    Args:
        config: Configuration to save (persistent keys only are written).
        path: Destination; defaults to the user data directory.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()
    state = {k: config.get(k, v) for k, v in defaults.items() if k not in ("input_path", "output_path")}
    state["version"] = CURRENT_CONFIG_VERSION

    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_path}")
    return True
