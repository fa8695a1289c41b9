#!/usr/bin/env python3
import json
from pathlib import Path
import pytest

import devkit.core.config as cfg


# --- Helpers --- #

def _write_json(path: Path, payload) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    for var in ("DEVKIT_OMNIBUS_ROOT", "DEVKIT_SANITY_CHECK", "DEVKIT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


# --- load_config: defaults only --- #

def test_load_config_defaults_only(tmp_path: Path, clean_env):
    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "no/such/config.json", raising=False)
    clean_env.chdir(tmp_path)

    result = cfg.load_config()

    assert result == cfg.DEFAULT_CONFIG


# --- Precedence: global < project < env --- #

def test_load_config_global_and_project_precedence(tmp_path: Path, clean_env):
    global_cfg = tmp_path / ".config/devkit/config.json"
    project_dir = tmp_path / "proj"

    _write_json(global_cfg, {
        "logging": {"level": "DEBUG"},
        "omnibus_root": "/global/devkit",
        "commands": {"lint": {"target": "tools.lint:Lint"}},
    })
    _write_json(project_dir / "devkit.json", {
        "logging": {"level": "INFO"},
        "omnibus_root": "/project/devkit",
    })

    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", global_cfg, raising=False)
    clean_env.chdir(project_dir)

    result = cfg.load_config()

    # Project overrides global
    assert result["logging"]["level"] == "INFO"
    assert result["omnibus_root"] == "/project/devkit"
    # Values only in global propagate through
    assert result["commands"] == {"lint": {"target": "tools.lint:Lint"}}
    assert result["sanity_check"] is True


# --- Env overrides --- #

def test_load_config_env_overrides(tmp_path: Path, clean_env):
    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    clean_env.chdir(tmp_path)
    _write_json(tmp_path / "devkit.json", {"omnibus_root": "/project/devkit"})

    clean_env.setenv("DEVKIT_OMNIBUS_ROOT", "/env/devkit")
    clean_env.setenv("DEVKIT_SANITY_CHECK", "off")
    clean_env.setenv("DEVKIT_LOG_LEVEL", "DEBUG")

    result = cfg.load_config()

    assert result["omnibus_root"] == "/env/devkit"
    assert result["sanity_check"] is False
    assert result["logging"]["level"] == "DEBUG"


def test_load_config_env_does_not_mutate_defaults(tmp_path: Path, clean_env):
    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    clean_env.chdir(tmp_path)
    clean_env.setenv("DEVKIT_LOG_LEVEL", "ERROR")

    cfg.load_config()

    assert cfg.DEFAULT_CONFIG["logging"]["level"] == "WARNING"


@pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("0", False), ("False", False)])
def test_load_config_sanity_check_flag(tmp_path: Path, clean_env, value, expected):
    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    clean_env.chdir(tmp_path)
    clean_env.setenv("DEVKIT_SANITY_CHECK", value)

    assert cfg.load_config()["sanity_check"] is expected


# --- Errors --- #

def test_load_config_invalid_json_raises(tmp_path: Path, clean_env):
    clean_env.setattr(cfg, "GLOBAL_CONFIG_PATH", tmp_path / "missing.json", raising=False)
    clean_env.chdir(tmp_path)
    (tmp_path / "devkit.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON"):
        cfg.load_config()
