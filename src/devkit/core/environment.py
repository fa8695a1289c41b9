#!/usr/bin/env python3
"""
Purpose:
    Isolates everything devkit reads from the live process (environment
    variables, the running interpreter, platform path conventions and the
    filesystem) behind one small value object, so checks can be fed fixed
    values in tests without mutating real process state.
"""
from __future__ import annotations

import ntpath
import os
import posixpath
import sys
from dataclasses import dataclass, field
from types import ModuleType
from typing import Callable, Mapping, Optional

from devkit.core.constants import PATH_ENV_KEY


@dataclass(frozen=True)
class RuntimeEnvironment:
    """
    Snapshot of the process-level inputs used by the sanity checker.

    - environ: environment variables
    - executable: absolute path of the running interpreter
    - path_separator: separator between search-path entries (':' or ';')
    - windows: True when paths follow Windows conventions
    - path_exists: filesystem existence check
    """
    environ: Mapping[str, str]
    executable: str
    path_separator: str = os.pathsep
    windows: bool = False
    path_exists: Callable[[str], bool] = field(default=os.path.exists)

    @classmethod
    def current(cls) -> RuntimeEnvironment:
        """Capture the running process."""
        return cls(
            environ=dict(os.environ),
            executable=sys.executable,
            path_separator=os.pathsep,
            windows=sys.platform.startswith("win"),
            path_exists=os.path.exists,
        )

    @property
    def pathmod(self) -> ModuleType:
        """`ntpath` or `posixpath`, matching the platform flavor."""
        return ntpath if self.windows else posixpath

    def search_path_value(self) -> Optional[str]:
        """
        Return the raw search-path variable, or None if unset.
        Windows environment keys are case-insensitive ('Path', 'PATH', ...).
        """
        if PATH_ENV_KEY in self.environ:
            return self.environ[PATH_ENV_KEY]
        if self.windows:
            for key, value in self.environ.items():
                if key.upper() == PATH_ENV_KEY:
                    return value
        return None
