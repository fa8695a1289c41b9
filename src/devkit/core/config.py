#!/usr/bin/env python3
"""
devkit configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final

from devkit.core.utils import merge_dicts, load_json_file, is_truthy_flag

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "omnibus_root": None,
    "sanity_check": True,
    "commands": {},
    "logging": {"level": "WARNING"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "devkit" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "devkit.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load devkit configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/devkit/config.json)
        3. Project config (./devkit.json)
        4. Environment overrides:
           - DEVKIT_OMNIBUS_ROOT
           - DEVKIT_SANITY_CHECK ('0', 'false', 'no', 'off' disable the check)
           - DEVKIT_LOG_LEVEL

    Returns:
        A merged configuration dictionary.

    Raises:
        ValueError: if a config file exists but is not a valid JSON object.
    """
    # 1) start with defaults
    config = dict(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    omnibus_root_env = os.getenv("DEVKIT_OMNIBUS_ROOT")
    if omnibus_root_env:
        config["omnibus_root"] = omnibus_root_env

    sanity_env = os.getenv("DEVKIT_SANITY_CHECK")
    if sanity_env is not None:
        config["sanity_check"] = is_truthy_flag(sanity_env)

    log_level_env = os.getenv("DEVKIT_LOG_LEVEL")
    if log_level_env:
        config["logging"] = merge_dicts(config.get("logging", {}), {"level": log_level_env})

    return config
