#!/usr/bin/env python3
"""`devkit env`: report the install layout and the PATH sanity verdict."""
from __future__ import annotations

import argparse
import json
from typing import Any, Dict, Optional, Sequence

from devkit.core.app import get_context
from devkit.core.app_context import AppContext
from devkit.core.constants import DEVKIT_VERSION, PRODUCT_NAME, PROG_NAME
from devkit.core.environment import RuntimeEnvironment
from devkit.core.sanity import EnvironmentSanityChecker


class EnvCommand:
    """Show the install layout and PATH status of this Developer Kit."""

    def __init__(self, ctx: Optional[AppContext] = None, environment: Optional[RuntimeEnvironment] = None):
        self.ctx = ctx or get_context()
        self.environment = environment

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=f"{PROG_NAME} env", description=EnvCommand.__doc__)
        parser.add_argument("--json", action="store_true", help="JSON output")
        return parser

    def collect(self) -> Dict[str, Any]:
        checker = EnvironmentSanityChecker(self.environment, omnibus_root=self.ctx.config.get("omnibus_root"))
        env = checker.environment
        layout = checker.layout(env)
        info: Dict[str, Any] = {
            "product": PRODUCT_NAME,
            "version": DEVKIT_VERSION,
            "executable": env.executable,
            "omnibus_install": layout is not None,
            "omnibus_root": layout.root if layout else None,
            "bin_dir": layout.bin_dir if layout else None,
            "embedded_bin_dir": layout.embedded_bin_dir if layout else None,
            "path": checker.search_path(env),
            "path_check": checker.check().verdict.value,
        }
        return info

    def run(self, args: Sequence[str]) -> int:
        ns = self.build_parser().parse_args(list(args))
        info = self.collect()

        if ns.json:
            print(json.dumps(info, indent=2))
            return 0

        print(f"{info['product']} Version: {info['version']}")
        print(f"Interpreter: {info['executable']}")
        if not info["omnibus_install"]:
            print("Omnibus install: no")
        else:
            print("Omnibus install: yes")
            print(f"  root:         {info['omnibus_root']}")
            print(f"  bin:          {info['bin_dir']}")
            print(f"  embedded bin: {info['embedded_bin_dir']}")
        print(f"PATH check: {info['path_check']}")
        return 0
