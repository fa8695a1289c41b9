#!/usr/bin/env python3
"""
Shared fixtures.

- commands_map: a registry we control, so tests don't track the built-in list
- example_command: records what the dispatcher handed it and returns 23
- omnibus_env: builds a RuntimeEnvironment for a fake omnibus install
"""
import io
from typing import Callable, Dict, Optional

import pytest

from devkit.core.commands_map import CommandsMap
from devkit.core.dispatcher import Dispatcher
from devkit.core.environment import RuntimeEnvironment
from devkit.core.sanity import EnvironmentSanityChecker


BASE_HELP_MESSAGE = """\
Usage:
    devkit -h/--help
    devkit -v/--version
    devkit command [arguments...] [options...]


Available Commands:
    verify   Test the embedded Developer Kit applications
    gem      Runs the `gem` command in context of the embedded interpreter
    example  Example subcommand for testing
"""


class ExampleCommand:
    """Subcommand double: remembers its params and exits 23."""

    results: list = []

    def run(self, args):
        ExampleCommand.results.append({"status": "success", "params": list(args)})
        return 23


class _Unused:
    def run(self, args):  # never dispatched in these tests
        raise AssertionError("unexpected dispatch")


@pytest.fixture
def example_results():
    ExampleCommand.results = []
    return ExampleCommand.results


@pytest.fixture
def commands_map() -> CommandsMap:
    cmds = CommandsMap()
    cmds.register("verify", _Unused, "Test the embedded Developer Kit applications")
    cmds.register("gem", _Unused, "Runs the `gem` command in context of the embedded interpreter")
    cmds.register("example", ExampleCommand, "Example subcommand for testing")
    return cmds


@pytest.fixture
def base_help_message() -> str:
    return BASE_HELP_MESSAGE


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def omnibus_env() -> Callable[..., RuntimeEnvironment]:
    """
    Factory: omnibus_env(path, executable=..., installed=True, windows=False).
    The install marker 'exists' only when `installed` is True.
    """
    def make(
        path: Optional[str],
        *,
        executable: str = "/opt/devkit/embedded/bin/python",
        marker: str = "/opt/devkit/embedded/apps/devkit",
        installed: bool = True,
        windows: bool = False,
        path_key: str = "PATH",
    ) -> RuntimeEnvironment:
        environ: Dict[str, str] = {} if path is None else {path_key: path}
        existing = {marker} if installed else set()
        return RuntimeEnvironment(
            environ=environ,
            executable=executable,
            path_separator=";" if windows else ":",
            windows=windows,
            path_exists=lambda p: p in existing,
        )
    return make


@pytest.fixture
def make_dispatcher(commands_map, streams):
    """Factory: make_dispatcher(environment=None) -> (dispatcher, stdout_io, stderr_io)."""
    def make(environment: Optional[RuntimeEnvironment] = None, **kwargs):
        out, err = streams
        checker = EnvironmentSanityChecker(environment) if environment is not None else None
        d = Dispatcher(commands_map, stdout=out, stderr=err, sanity_checker=checker, **kwargs)
        return d, out, err
    return make
