#!/usr/bin/env python3
"""
Core constants used across devkit.

- Product identity: program name, product name, version.
- Install layout: directory names of an omnibus (self-contained) install.
- Regular expressions: compiled patterns used by validators.
"""

import re
from typing import Final

from devkit import __version__

# --- Product identity --- #

# Executable name shown in usage text and advisory messages
PROG_NAME: Final[str] = "devkit"

# Human-readable product name used by the version banner
PRODUCT_NAME: Final[str] = "Developer Kit"

# Current release of the kit
DEVKIT_VERSION: Final[str] = __version__

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Top-level flags --- #

HELP_FLAGS: Final[frozenset[str]] = frozenset({"-h", "--help"})
VERSION_FLAGS: Final[frozenset[str]] = frozenset({"-v", "--version"})


# --- Omnibus install layout --- #
#
#   <root>/bin                       -> BIN_DIRNAME
#   <root>/embedded/bin/<python>     -> the running interpreter
#   <root>/embedded/apps/devkit      -> install marker
#
EMBEDDED_DIRNAME: Final[str] = "embedded"
BIN_DIRNAME: Final[str] = "bin"
APPS_DIRNAME: Final[str] = "apps"
APP_MARKER_NAME: Final[str] = "devkit"

# Environment variable holding the executable search path
PATH_ENV_KEY: Final[str] = "PATH"


# --- Regular Expressions --- #

# Command names: leading letter/digit, then letters, digits, dot, underscore, hyphen
COMMAND_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

# Lazy command targets: "package.module:Attribute"
COMMAND_TARGET_RE: re.Pattern[str] = re.compile(
    r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*:[A-Za-z_][A-Za-z0-9_]*$"
)

# Matches strict SemVer strings (e.g., 1.2.3 only)
STRICT_SEMVER_RE: re.Pattern[str] = re.compile(r"^\d+\.\d+\.\d+$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if not STRICT_SEMVER_RE.fullmatch(DEVKIT_VERSION):
        raise RuntimeError(
            f"DEVKIT_VERSION must be strict semver (x.y.z), got {DEVKIT_VERSION!r}"
        )

validate_constants()
