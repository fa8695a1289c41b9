#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for devkit's
    Pydantic models such as command names and lazy command targets.
"""

from typing import Any, Annotated, Optional
from pydantic import BeforeValidator

from devkit.core.constants import COMMAND_NAME_ALLOWED_RE, COMMAND_TARGET_RE


# --- Normalizers --- #

def _validate_command_name(v: Any) -> str:
    """
    Validate a command name:
    - must be a non-empty string
    - case is preserved (lookup is case-sensitive)
    - validated via fullmatch against COMMAND_NAME_ALLOWED_RE
    """
    if not isinstance(v, str) or not v:
        raise ValueError("Invalid command name: must be a non-empty string")
    if not COMMAND_NAME_ALLOWED_RE.fullmatch(v):
        raise ValueError(
            f"Invalid command name: {v!r}. Allowed pattern: {COMMAND_NAME_ALLOWED_RE.pattern!r}"
        )
    return v


def _normalize_description(v: Any) -> str:
    """None -> ''; otherwise coerce to str and trim surrounding whitespace."""
    return "" if v is None else str(v).strip()


def _validate_command_target(v: Any) -> Optional[str]:
    """
    Validate a lazy import target of the form 'package.module:Attribute'.
    None stays None.
    """
    if v is None:
        return None
    text = str(v).strip()
    if not COMMAND_TARGET_RE.fullmatch(text):
        raise ValueError(f"Invalid command target: {text!r}. Expected 'package.module:Attribute'")
    return text


# --- Reusable Annotated types --- #

CommandName = Annotated[str, BeforeValidator(_validate_command_name)]
CommandDescription = Annotated[str, BeforeValidator(_normalize_description)]
CommandTarget = Annotated[Optional[str], BeforeValidator(_validate_command_target)]
