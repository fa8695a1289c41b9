#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as flag parsing,
    dictionary merge, path-list splitting and file I/O helpers for devkit.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from devkit.core.constants import DEFAULT_TEXT_ENCODING


# --- Validation Helpers --- #

def is_truthy_flag(value: str) -> bool:
    """Interpret an environment-style flag; '0', 'false', 'no', 'off' and '' are False."""
    return value.strip().lower() not in {"", "0", "false", "no", "off"}


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def split_path_list(value: str, separator: str) -> List[str]:
    """
    Split a search-path string on `separator`, dropping empty entries.

    Entries are otherwise kept verbatim (no trimming, no expansion), so
    callers compare exactly what the shell would see.

    Example:
        split_path_list("/opt/dk/bin::/usr/bin", ":") -> ["/opt/dk/bin", "/usr/bin"]
    """
    if not value:
        return []
    return [p for p in value.split(separator) if p]


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON, or does not
            contain a JSON object.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {str(path)!r}, got {type(data).__name__}")
    return data
