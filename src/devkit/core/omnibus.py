#!/usr/bin/env python3
"""
Purpose:
    Derives the directories of an omnibus (self-contained, bundled) devkit
    install from the location of the running interpreter.

    <root>/
      bin/                  # kit commands; must come first on PATH
      embedded/
        bin/python          # the bundled interpreter (= sys.executable)
        apps/devkit/        # install marker
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from devkit.core.constants import (
    APP_MARKER_NAME,
    APPS_DIRNAME,
    BIN_DIRNAME,
    EMBEDDED_DIRNAME,
)
from devkit.core.environment import RuntimeEnvironment

logger = logging.getLogger(__name__)


class OmnibusInstallNotFound(LookupError):
    """Raised when the running devkit is not part of an omnibus install."""

    def __init__(self, marker: Optional[str] = None):
        self.marker = marker
        detail = f" (no install marker at {marker!r})" if marker else ""
        super().__init__(f"devkit is not running from an omnibus install{detail}")


@dataclass(frozen=True)
class OmnibusLayout:
    """Directories of an omnibus install, in the platform's path flavor."""
    root: str
    apps_dir: str
    marker_dir: str
    bin_dir: str
    embedded_bin_dir: str

    # --- Factories --- #

    @classmethod
    def from_root(cls, root: str, environment: RuntimeEnvironment) -> OmnibusLayout:
        """Build the layout below `root` without touching the filesystem."""
        join = environment.pathmod.join
        embedded = join(root, EMBEDDED_DIRNAME)
        apps_dir = join(embedded, APPS_DIRNAME)
        return cls(
            root=root,
            apps_dir=apps_dir,
            marker_dir=join(apps_dir, APP_MARKER_NAME),
            bin_dir=join(root, BIN_DIRNAME),
            embedded_bin_dir=join(embedded, BIN_DIRNAME),
        )

    @classmethod
    def derive_root(cls, environment: RuntimeEnvironment) -> str:
        """
        Return the directory three levels above the interpreter:
        '<root>/embedded/bin/python' -> '<root>'.
        """
        if not environment.executable:
            raise OmnibusInstallNotFound()
        pm = environment.pathmod
        root = pm.normpath(pm.join(pm.dirname(environment.executable), pm.pardir, pm.pardir))
        return root

    @classmethod
    def detect(
        cls,
        environment: Optional[RuntimeEnvironment] = None,
        *,
        root: Optional[str] = None,
    ) -> OmnibusLayout:
        """
        Locate the omnibus install the current process runs from.

        Args:
            environment: process snapshot; defaults to the live process.
            root: explicit omnibus root (configuration override); derived
                from the interpreter location when omitted.

        Raises:
            OmnibusInstallNotFound: if the install marker does not exist.
        """
        env = environment or RuntimeEnvironment.current()
        layout = cls.from_root(root or cls.derive_root(env), env)
        if not env.path_exists(layout.marker_dir):
            logger.debug("No omnibus marker at %s", layout.marker_dir)
            raise OmnibusInstallNotFound(layout.marker_dir)
        return layout
