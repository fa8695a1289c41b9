#!/usr/bin/env python3
"""
Help and version text for the top-level dispatcher.

The help layout is a fixed contract (two blank lines before the command list,
four-space indents, names padded to the widest name plus two spaces).
"""
from __future__ import annotations

from typing import Iterable

from devkit.core.commands_map import CommandSpec


# --- Public API --- #

def render_usage(prog: str) -> str:
    """Return the usage block, ending in a newline."""
    return (
        "Usage:\n"
        f"    {prog} -h/--help\n"
        f"    {prog} -v/--version\n"
        f"    {prog} command [arguments...] [options...]\n"
    )


def render_commands(commands: Iterable[CommandSpec]) -> str:
    """
    Return the 'Available Commands' block, listing commands in the given order.

    Example:
        Available Commands:
            verify   Test the embedded applications
            example  Example subcommand
    """
    specs = list(commands)
    lines = ["Available Commands:"]
    width = max((len(s.name) for s in specs), default=0) + 2
    for spec in specs:
        lines.append(f"    {spec.name.ljust(width)}{spec.description}".rstrip())
    return "\n".join(lines) + "\n"


def render_help(prog: str, commands: Iterable[CommandSpec]) -> str:
    """Full help text: usage, two blank lines, then the command listing."""
    return render_usage(prog) + "\n\n" + render_commands(commands)


def render_version(product: str, version: str) -> str:
    """'<product> Version: <version>' plus newline."""
    return f"{product} Version: {version}\n"
