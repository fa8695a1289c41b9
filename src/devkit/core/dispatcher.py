#!/usr/bin/env python3
"""
Purpose:
    Top-level control of the `devkit` command: parses argv, shows help or
    version, rejects invalid options and unknown commands, runs the PATH
    sanity check, and delegates to the registered subcommand.

    Every outcome is an integer exit code plus text on the injected output
    streams. Exiting the process is left to the caller.
"""
from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, TextIO, Tuple

from devkit.core.commands_map import CommandsMap
from devkit.core.constants import (
    DEVKIT_VERSION,
    HELP_FLAGS,
    PRODUCT_NAME,
    PROG_NAME,
    VERSION_FLAGS,
)
from devkit.core.help import render_help, render_version
from devkit.core.sanity import EnvironmentSanityChecker

logger = logging.getLogger(__name__)


# --- Data model --- #

class InvocationMode(str, Enum):
    HELP = "help"
    VERSION = "version"
    RUN_COMMAND = "run_command"
    INVALID_OPTION = "invalid_option"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class ParsedInvocation:
    """
    What argv asks for.
    - command_name: the command (or, for INVALID_OPTION, the offending token)
    - remaining_args: arguments forwarded verbatim to the command
    """
    mode: InvocationMode
    command_name: Optional[str] = None
    remaining_args: Tuple[str, ...] = ()


def parse_argv(argv: Sequence[str], commands: CommandsMap) -> ParsedInvocation:
    """
    Decide what to do with `argv` (process arguments without the program name).

    Only the first token is interpreted; everything after a command name is
    forwarded untouched, including tokens that look like options.
    """
    if not argv or argv[0] in HELP_FLAGS:
        return ParsedInvocation(InvocationMode.HELP)
    first, rest = argv[0], tuple(argv[1:])
    if first in VERSION_FLAGS:
        return ParsedInvocation(InvocationMode.VERSION)
    if first.startswith("-"):
        return ParsedInvocation(InvocationMode.INVALID_OPTION, command_name=first)
    if first not in commands:
        return ParsedInvocation(InvocationMode.UNKNOWN_COMMAND, command_name=first, remaining_args=rest)
    return ParsedInvocation(InvocationMode.RUN_COMMAND, command_name=first, remaining_args=rest)


# --- Dispatcher --- #

class Dispatcher:
    """
    Routes argv to a registered command.

    Args:
        commands: the command registry (read-only here).
        stdout / stderr: output sinks; the process streams current at call
            time are used when omitted.
        sanity_checker: run before delegating to a command; None disables it.
        prog / product / version: identity shown in help and version text.
    """

    def __init__(
        self,
        commands: CommandsMap,
        *,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        sanity_checker: Optional[EnvironmentSanityChecker] = None,
        prog: str = PROG_NAME,
        product: str = PRODUCT_NAME,
        version: str = DEVKIT_VERSION,
    ):
        self.commands = commands
        self._stdout = stdout
        self._stderr = stderr
        self.sanity_checker = sanity_checker
        self.prog = prog
        self.product = product
        self.version = version

    # --- Streams --- #

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def msg(self, text: str) -> None:
        self.stdout.write(text)

    def err(self, text: str) -> None:
        self.stderr.write(text)

    # --- Public API --- #

    def help_text(self) -> str:
        return render_help(self.prog, self.commands.specs())

    def run(self, argv: Sequence[str]) -> int:
        """Handle one invocation and return its exit code."""
        inv = parse_argv(list(argv), self.commands)
        logger.debug("Parsed invocation: %s", inv)

        if inv.mode is InvocationMode.HELP:
            self.msg(self.help_text())
            return 0

        if inv.mode is InvocationMode.VERSION:
            self.msg(render_version(self.product, self.version))
            return 0

        if inv.mode is InvocationMode.INVALID_OPTION:
            self.err(f"invalid option: {inv.command_name}\n")
            self.msg(self.help_text())
            return 1

        if inv.mode is InvocationMode.UNKNOWN_COMMAND:
            self.err(f"Unknown command `{inv.command_name}'.\n")
            self.msg(self.help_text())
            return 1

        return self.run_command(inv.command_name, list(inv.remaining_args))

    def run_command(self, name: str, args: list[str]) -> int:
        """Sanity-check the environment, then run `name` with `args`."""
        if self.sanity_checker is not None:
            result = self.sanity_checker.check()
            logger.debug("Sanity check verdict: %s", result.verdict.value)
            if result.message:
                self.msg(result.message)
            if result.blocking:
                return result.exit_code

        spec = self.commands.require(name)
        try:
            command = spec.instantiate()
            return command.run(args)
        except SystemExit as e:
            return self._exit_code_from(e)
        except Exception as e:
            logger.debug("Command %r failed", name, exc_info=True)
            self.err(f"Error running command `{name}': {e}\n")
            return 1

    # --- Internals --- #

    def _exit_code_from(self, exc: SystemExit) -> int:
        """Map a subcommand's SystemExit to an exit code the way the interpreter would."""
        code = exc.code
        if code is None:
            return 0
        if isinstance(code, int):
            return code
        self.err(f"{code}\n")
        return 1
