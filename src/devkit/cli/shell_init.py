#!/usr/bin/env python3
"""
`devkit shell-init <shell>`: print shell code that puts the omnibus `bin`
directory, then `embedded/bin`, at the front of PATH.

    eval "$(devkit shell-init bash)"
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from jinja2 import DictLoader, Environment, StrictUndefined

from devkit.core.app import get_context
from devkit.core.app_context import AppContext
from devkit.core.constants import PROG_NAME
from devkit.core.environment import RuntimeEnvironment
from devkit.core.omnibus import OmnibusInstallNotFound, OmnibusLayout

# --- Templates --- #

_POSIX = 'export PATH="{{ bin_dir }}:{{ embedded_bin_dir }}:$PATH"\n'

SHELL_TEMPLATES = {
    "sh": _POSIX,
    "bash": _POSIX,
    "zsh": _POSIX,
    "fish": 'set -gx PATH "{{ bin_dir }}" "{{ embedded_bin_dir }}" $PATH;\n',
    "powershell": '$env:PATH = "{{ bin_dir }};{{ embedded_bin_dir }};" + $env:PATH\n',
}


def _build_env() -> Environment:
    return Environment(
        loader=DictLoader(SHELL_TEMPLATES),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )


class ShellInitCommand:
    """Emit PATH setup code for a supported shell."""

    def __init__(self, ctx: Optional[AppContext] = None, environment: Optional[RuntimeEnvironment] = None):
        self.ctx = ctx or get_context()
        self.environment = environment
        self.env = _build_env()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=f"{PROG_NAME} shell-init",
            description="Print shell code that adds the Developer Kit to your PATH.",
        )
        parser.add_argument("shell", choices=sorted(SHELL_TEMPLATES), help="Target shell")
        return parser

    def render(self, shell: str, layout: OmnibusLayout) -> str:
        template = self.env.get_template(shell)
        return template.render(bin_dir=layout.bin_dir, embedded_bin_dir=layout.embedded_bin_dir)

    def run(self, args: Sequence[str]) -> int:
        ns = self.build_parser().parse_args(list(args))
        try:
            layout = OmnibusLayout.detect(self.environment, root=self.ctx.config.get("omnibus_root"))
        except OmnibusInstallNotFound as e:
            print(f"{PROG_NAME} shell-init is only supported in an omnibus install: {e}", file=sys.stderr)
            return 1

        sys.stdout.write(self.render(ns.shell, layout))
        return 0
