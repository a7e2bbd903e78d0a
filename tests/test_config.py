"""Tests for addonpack.config: models and YAML loader."""

import os
import pytest
from unittest.mock import patch
from pydantic import ValidationError

import yaml

from addonpack.config.models import (
    DEFAULT_PORT,
    AddonPackConfig,
    ServerConfig,
    SyncConfig,
    TreeConfig,
)
from addonpack.config.loader import DEFAULT_CONFIG_TEMPLATE, load_config, _expand_env_vars


# ── AddonPackConfig defaults ───────────────────────────────────────


class TestAddonPackConfigDefaults:
    def test_default_log_level(self, sample_config):
        assert sample_config.log_level == "info"

    def test_default_log_format(self, sample_config):
        assert sample_config.log_format == "text"

    def test_default_port(self, sample_config):
        assert sample_config.server.port == DEFAULT_PORT == 15015

    def test_default_tree_limits(self, sample_config):
        assert sample_config.tree.max_depth == 64
        assert sample_config.tree.escaped_contents is True

    def test_default_hash_workers(self, sample_config):
        assert sample_config.sync.hash_workers == 1


# ── Individual config model validations ─────────────────────────────


class TestServerConfig:
    def test_custom_port(self):
        assert ServerConfig(port=8080).port == 8080

    @pytest.mark.parametrize("port", [0, -1, 70000])
    def test_invalid_port_rejected(self, port):
        with pytest.raises(ValidationError):
            ServerConfig(port=port)


class TestTreeConfig:
    def test_zero_depth_rejected(self):
        with pytest.raises(ValidationError):
            TreeConfig(max_depth=0)


class TestSyncConfig:
    def test_zero_workers_rejected(self):
        with pytest.raises(ValidationError):
            SyncConfig(hash_workers=0)


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        AddonPackConfig(log_level="verbose")


def test_template_parses_to_defaults():
    assert AddonPackConfig(**yaml.safe_load(DEFAULT_CONFIG_TEMPLATE)) == AddonPackConfig()


# ── _expand_env_vars ────────────────────────────────────────────────


class TestExpandEnvVars:
    def test_expands_string_variable(self):
        with patch.dict(os.environ, {"ADDON_HOST": "example.org"}):
            assert _expand_env_vars("${ADDON_HOST}") == "example.org"

    def test_missing_var_becomes_empty(self):
        env = {k: v for k, v in os.environ.items() if k != "ADDONPACK_NOT_SET"}
        with patch.dict(os.environ, env, clear=True):
            assert _expand_env_vars("x${ADDONPACK_NOT_SET}y") == "xy"

    def test_expands_nested_structures(self):
        with patch.dict(os.environ, {"A": "alpha", "B": "beta"}):
            result = _expand_env_vars({"k": ["${A}", {"n": "${B}"}]})
        assert result == {"k": ["alpha", {"n": "beta"}]}

    def test_non_string_passthrough(self):
        assert _expand_env_vars(42) == 42
        assert _expand_env_vars(None) is None


# ── load_config ─────────────────────────────────────────────────────


class TestLoadConfig:
    @pytest.fixture(autouse=True)
    def _no_env_config(self, monkeypatch):
        monkeypatch.delenv("ADDONPACK_CONFIG", raising=False)

    def test_returns_defaults_when_no_file_exists(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        config = load_config()
        assert config == AddonPackConfig()

    def test_loads_valid_yaml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text(
            "server:\n  port: 16016\ntree:\n  max_depth: 8\nlog_level: debug\n"
        )
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        config = load_config()
        assert config.server.port == 16016
        assert config.tree.max_depth == 8
        assert config.log_level == "debug"

    def test_raises_on_invalid_yaml(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("  bad:\nyaml: [unterminated")
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config()

    def test_raises_on_invalid_config_values(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("sync:\n  hash_workers: 0\n")
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        with pytest.raises(ValueError, match="Invalid config"):
            load_config()

    def test_cli_path_takes_priority(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("server:\n  port: 1111\n")
        cli_file = tmp_path / "custom.yaml"
        cli_file.write_text("server:\n  port: 2222\n")
        assert load_config(cli_path=str(cli_file)).server.port == 2222

    def test_user_global_config_used_as_fallback(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        fake_home = tmp_path / "fakehome"
        (fake_home / ".addonpack").mkdir(parents=True)
        (fake_home / ".addonpack" / "config.yaml").write_text("log_format: json\n")
        monkeypatch.setattr("pathlib.Path.home", lambda: fake_home)
        assert load_config().log_format == "json"

    def test_empty_file_falls_through_to_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("")
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        assert load_config() == AddonPackConfig()

    def test_env_vars_expanded_in_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ADDON_BIND", "127.0.0.1")
        (tmp_path / "addonpack.yaml").write_text('server:\n  host: "${ADDON_BIND}"\n')
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        assert load_config().server.host == "127.0.0.1"

    def test_env_var_path_used_before_project_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("server:\n  port: 1111\n")
        env_file = tmp_path / "from-env.yaml"
        env_file.write_text("server:\n  port: 3333\n")
        monkeypatch.setenv("ADDONPACK_CONFIG", str(env_file))
        assert load_config().server.port == 3333

    def test_top_level_list_rejected(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").write_text("- server\n- tree\n")
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        with pytest.raises(ValueError, match="top level must be a mapping"):
            load_config()

    def test_directory_candidate_skipped(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "addonpack.yaml").mkdir()
        fake_home = tmp_path / "fakehome"
        (fake_home / ".addonpack").mkdir(parents=True)
        (fake_home / ".addonpack" / "config.yaml").write_text("server:\n  port: 4444\n")
        monkeypatch.setattr("pathlib.Path.home", lambda: fake_home)
        assert load_config().server.port == 4444
