#!/usr/bin/env python3
"""
Purpose:
    Wires together the devkit application context by merging configuration
    and populating the command registry with built-in and configured commands.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from devkit.core.commands_map import CommandsMap
from devkit.core.config import load_config
from devkit.core.environment import RuntimeEnvironment
from devkit.core.sanity import EnvironmentSanityChecker


# --- Built-in commands (registration order == help order) --- #

BUILTIN_COMMANDS: tuple[tuple[str, str, str], ...] = (
    (
        "env",
        "devkit.cli.env:EnvCommand",
        "Show the install layout and PATH status of this Developer Kit",
    ),
    (
        "shell-init",
        "devkit.cli.shell_init:ShellInitCommand",
        "Print shell code that puts the Developer Kit bin directories on your PATH",
    ),
)


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and the command registry."""
    config: Dict[str, Any]
    commands: CommandsMap

    def sanity_checker(self, environment: Optional[RuntimeEnvironment] = None) -> Optional[EnvironmentSanityChecker]:
        """The configured PATH checker, or None when disabled by config."""
        if not self.config.get("sanity_check", True):
            return None
        return EnvironmentSanityChecker(environment, omnibus_root=self.config.get("omnibus_root"))


# --- Factory --- #

def register_builtin_commands(commands: CommandsMap) -> CommandsMap:
    for name, target, desc in BUILTIN_COMMANDS:
        commands.builtin(name, target, desc)
    return commands


def register_configured_commands(commands: CommandsMap, entries: Dict[str, Any]) -> CommandsMap:
    """
    Register extra commands declared under config['commands']:

        {"lint": {"target": "mytools.lint:LintCommand", "description": "Run linters"}}

    Raises:
        ValueError: if `entries` is not an object, or an entry is not an
            object with a 'target'.
    """
    if entries is None:
        entries = {}
    if not isinstance(entries, dict):
        raise ValueError(f"'commands' in config must be an object, got {type(entries).__name__}")
    for name, entry in entries.items():
        if not isinstance(entry, dict) or not entry.get("target"):
            raise ValueError(f"Command {name!r} in config must be an object with a 'target'")
        commands.builtin(name, entry["target"], entry.get("description", ""))
    return commands


def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    commands: Optional[CommandsMap] = None,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        commands:
            Pre-populated registry used as-is. If omitted, a registry with the
            built-in commands followed by `config['commands']` is built.

    Returns:
        AppContext: immutable bundle of config and command registry.
    """
    cfg = config if config is not None else load_config()

    if commands is None:
        commands = register_builtin_commands(CommandsMap())
        register_configured_commands(commands, cfg.get("commands", {}))

    return AppContext(config=cfg, commands=commands)
