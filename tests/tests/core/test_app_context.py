#!/usr/bin/env python3
import pytest

from devkit.core.app_context import (
    AppContext,
    BUILTIN_COMMANDS,
    build_context,
    register_configured_commands,
)
from devkit.core.commands_map import CommandsMap
from devkit.core.config import DEFAULT_CONFIG
from devkit.core.sanity import EnvironmentSanityChecker


def test_build_context_registers_builtins_in_order():
    ctx = build_context(config=dict(DEFAULT_CONFIG))
    assert isinstance(ctx, AppContext)
    assert ctx.commands.names() == [name for name, _target, _desc in BUILTIN_COMMANDS]
    assert ctx.commands.get("shell-init").target == "devkit.cli.shell_init:ShellInitCommand"


def test_build_context_appends_configured_commands():
    config = dict(DEFAULT_CONFIG, commands={
        "lint": {"target": "mytools.lint:LintCommand", "description": "Run linters"},
    })
    ctx = build_context(config=config)
    assert ctx.commands.names()[-1] == "lint"
    assert ctx.commands.get("lint").description == "Run linters"


def test_build_context_uses_given_registry():
    cmds = CommandsMap()
    ctx = build_context(config={}, commands=cmds)
    assert ctx.commands is cmds
    assert ctx.config == {}


def test_build_context_loads_config_when_omitted(monkeypatch):
    import devkit.core.app_context as app_context

    monkeypatch.setattr(app_context, "load_config", lambda: {"sanity_check": False, "commands": {}})
    ctx = build_context()
    assert ctx.config["sanity_check"] is False


@pytest.mark.parametrize("entry", ["mytools:Lint", {}, {"description": "no target"}])
def test_configured_commands_require_target(entry):
    with pytest.raises(ValueError, match="must be an object with a 'target'"):
        register_configured_commands(CommandsMap(), {"lint": entry})


def test_configured_command_cannot_shadow_builtin():
    config = dict(DEFAULT_CONFIG, commands={"env": {"target": "x.y:Z"}})
    with pytest.raises(ValueError, match="already registered"):
        build_context(config=config)


def test_sanity_checker_follows_config():
    enabled = build_context(config=dict(DEFAULT_CONFIG, omnibus_root="/srv/kit"))
    checker = enabled.sanity_checker()
    assert isinstance(checker, EnvironmentSanityChecker)

    disabled = build_context(config=dict(DEFAULT_CONFIG, sanity_check=False))
    assert disabled.sanity_checker() is None


@pytest.mark.parametrize("entries,kind", [(["lint"], "list"), ("lint", "str"), (3, "int")])
def test_configured_commands_must_be_an_object(entries, kind):
    with pytest.raises(ValueError, match=f"'commands' in config must be an object, got {kind}"):
        register_configured_commands(CommandsMap(), entries)


def test_configured_commands_none_registers_nothing():
    cmds = CommandsMap()
    register_configured_commands(cmds, None)
    assert cmds.names() == []
