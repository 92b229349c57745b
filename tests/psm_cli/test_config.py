# tests/psm_cli/test_config.py
import json

import pytest

from psm_cli.config import DEFAULTS, ShellConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PSM_CLI_PORT", raising=False)
    monkeypatch.delenv("PSM_CLI_COMPLETION", raising=False)


def test_defaults_when_file_missing(tmp_path):
    cfg = ShellConfig(str(tmp_path / "missing.json"))
    assert cfg.default_port == 3994
    assert cfg.completion_mode == "cycle"
    assert cfg.filter_prefixes == ["("]
    assert cfg.styled_help is True
    assert cfg.log_level == "WARNING"


def test_user_values_override_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_port": 4000, "completion_mode": "menu"}))

    cfg = ShellConfig(str(path))
    assert cfg.default_port == 4000
    assert cfg.completion_mode == "menu"
    # untouched keys come from the defaults
    assert cfg.filter_prefixes == DEFAULTS["filter_prefixes"]


def test_invalid_json_is_ignored(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("this is not json")

    cfg = ShellConfig(str(path))
    assert cfg.default_port == 3994
    assert any("Invalid JSON" in r.message for r in caplog.records)


def test_environment_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_port": 4000}))
    monkeypatch.setenv("PSM_CLI_PORT", "5000")
    monkeypatch.setenv("PSM_CLI_COMPLETION", "menu")

    cfg = ShellConfig(str(path))
    assert cfg.default_port == 5000
    assert cfg.completion_mode == "menu"


def test_invalid_environment_value_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("PSM_CLI_PORT", "lots")
    cfg = ShellConfig(str(tmp_path / "config.json"))
    assert cfg.default_port == 3994


def test_unknown_completion_mode_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"completion_mode": "fuzzy"}))
    assert ShellConfig(str(path)).completion_mode == "cycle"


def test_loading_never_writes_the_file(tmp_path, monkeypatch):
    path = tmp_path / "sub" / "config.json"
    monkeypatch.setenv("PSM_CLI_PORT", "5000")

    cfg = ShellConfig(str(path))

    assert cfg.default_port == 5000
    assert not path.exists()
