#!/usr/bin/env python3
"""
Purpose:
    Checks the executable search path of an omnibus install.

    An omnibus install bundles a private interpreter whose `embedded/bin`
    directory also holds generic tools. If that directory precedes the kit's
    own `bin` directory on PATH, the generic tools shadow the kit's commands.
    This module detects that ordering (and a missing outer `bin`) and returns
    an advisory verdict. Nothing here ever blocks execution or raises.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from devkit.core.constants import PATH_ENV_KEY, PROG_NAME
from devkit.core.environment import RuntimeEnvironment
from devkit.core.omnibus import OmnibusLayout
from devkit.core.utils import split_path_list

logger = logging.getLogger(__name__)


class SanityVerdict(str, Enum):
    """
    Outcome of the PATH sanity check.

    - ok                    : nothing to warn about
    - warn_wrong_order      : embedded bin precedes the outer bin
    - warn_missing_embedded : only the embedded bin is on PATH
    - skipped_no_install    : not an omnibus install; check not applicable
    """

    OK = "ok"
    WARN_WRONG_ORDER = "warn_wrong_order"
    WARN_MISSING_EMBEDDED = "warn_missing_embedded"
    SKIPPED_NO_INSTALL = "skipped_no_install"


class SanityResult(BaseModel):
    """Result of one sanity check. All current verdicts are advisory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    verdict: SanityVerdict
    message: Optional[str] = Field(default=None, description="Text for standard output.")
    blocking: bool = Field(default=False, description="Stop before running the command.")
    exit_code: int = Field(default=0, description="Exit code when blocking.")

    @classmethod
    def ok(cls) -> SanityResult:
        return cls(verdict=SanityVerdict.OK)

    @classmethod
    def skipped(cls) -> SanityResult:
        return cls(verdict=SanityVerdict.SKIPPED_NO_INSTALL)


# --- Messages --- #

def wrong_order_message(layout: OmnibusLayout, prog: str = PROG_NAME) -> str:
    return (
        f"WARN: {layout.embedded_bin_dir} is before {layout.bin_dir} in your "
        f"{PATH_ENV_KEY}, please reverse that order.\n"
        f"Consider using `{prog} shell-init <shell>` in your shell startup file.\n"
    )


def missing_bin_message(layout: OmnibusLayout, prog: str = PROG_NAME) -> str:
    return (
        f"WARN: only {layout.embedded_bin_dir} is present in your {PATH_ENV_KEY}, "
        f"you must add {layout.bin_dir} before that directory.\n"
        f"Consider using `{prog} shell-init <shell>` in your shell startup file.\n"
    )


# --- Checker --- #

class EnvironmentSanityChecker:
    """
    Classifies the search-path ordering of an omnibus install.

    Args:
        environment: process snapshot; the live process is captured at
            check time when omitted.
        omnibus_root: explicit install root (configuration override).
        prog: program name used in advice text.
    """

    def __init__(
        self,
        environment: Optional[RuntimeEnvironment] = None,
        *,
        omnibus_root: Optional[str] = None,
        prog: str = PROG_NAME,
    ):
        self._environment = environment
        self._omnibus_root = omnibus_root
        self._prog = prog

    @property
    def environment(self) -> RuntimeEnvironment:
        return self._environment or RuntimeEnvironment.current()

    def layout(self, env: Optional[RuntimeEnvironment] = None) -> Optional[OmnibusLayout]:
        """Return the omnibus layout, or None when it cannot be determined."""
        try:
            return OmnibusLayout.detect(env or self.environment, root=self._omnibus_root)
        except Exception as e:
            # Detection failure means "not an omnibus install", never an error.
            logger.debug("Not an omnibus install: %s", e)
            return None

    def check(self) -> SanityResult:
        env = self.environment
        layout = self.layout(env)
        if layout is None:
            return SanityResult.skipped()
        return self.classify(self.search_path(env), layout, windows=env.windows)

    def search_path(self, env: Optional[RuntimeEnvironment] = None) -> List[str]:
        """Search-path entries in order, as read from the environment."""
        env = env or self.environment
        return split_path_list(env.search_path_value() or "", env.path_separator)

    def classify(self, entries: List[str], layout: OmnibusLayout, *, windows: bool = False) -> SanityResult:
        """
        Classify `entries` against the layout's bin and embedded-bin directories.

        Comparison is exact; on Windows both sides are canonicalized for
        separator style and case first.
        """
        canon = _canonical_windows_path if windows else (lambda p: p)
        normalized = [canon(p) for p in entries]
        bin_index = _index_of(normalized, canon(layout.bin_dir))
        embedded_index = _index_of(normalized, canon(layout.embedded_bin_dir))
        logger.debug("PATH positions: bin=%s embedded_bin=%s", bin_index, embedded_index)

        if embedded_index is None:
            return SanityResult.ok()
        if bin_index is None:
            return SanityResult(
                verdict=SanityVerdict.WARN_MISSING_EMBEDDED,
                message=missing_bin_message(layout, self._prog),
            )
        if embedded_index < bin_index:
            return SanityResult(
                verdict=SanityVerdict.WARN_WRONG_ORDER,
                message=wrong_order_message(layout, self._prog),
            )
        return SanityResult.ok()


# --- Internals --- #

def _index_of(entries: List[str], target: str) -> Optional[int]:
    try:
        return entries.index(target)
    except ValueError:
        return None


def _canonical_windows_path(path: str) -> str:
    """
    'C:\\Tools\\Bin' -> 'c:/tools/bin'. Windows paths are case-insensitive
    and accept either separator.
    """
    return path.replace("\\", "/").casefold()
