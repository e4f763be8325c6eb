"""Unit tests for config loading, env interpolation, and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from oracle_program.config import (
    DEFAULT_BASE_URL,
    AppConfig,
    DataSourceConfig,
    _interpolate_env,
    load_config,
)


class TestInterpolateEnv:
    def test_simple_substitution(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MY_VAR", "hello")
        assert _interpolate_env("${MY_VAR}") == "hello"

    def test_missing_var_becomes_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert _interpolate_env("${NONEXISTENT_VAR_XYZ}") == ""

    def test_nested_dict(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOK", "secret")
        result = _interpolate_env({"key": "${TOK}", "plain": "text"})
        assert result == {"key": "secret", "plain": "text"}

    def test_non_string_passthrough(self) -> None:
        assert _interpolate_env(42) == 42


class TestDefaults:
    def test_data_source_defaults(self) -> None:
        cfg = DataSourceConfig()
        assert cfg.base_url == DEFAULT_BASE_URL
        assert cfg.timeout_seconds == 10.0
        assert cfg.headers == {}

    def test_app_config_defaults(self) -> None:
        assert AppConfig().data_source == DataSourceConfig()


class TestLoadConfig:
    def test_loads_valid_yaml(
        self, sample_yaml_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ORACLE_TEST_API_KEY", "abc123")
        cfg = load_config(sample_yaml_path)
        assert isinstance(cfg, AppConfig)
        assert cfg.data_source.base_url == "https://prices.example.com/api/v3/ticker/price"
        assert cfg.data_source.timeout_seconds == 5.0
        assert cfg.data_source.headers == {
            "X-API-Key": "abc123",
            "X-Client": "oracle-tests",
        }

    def test_unset_header_dropped(
        self, sample_yaml_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("ORACLE_TEST_API_KEY", raising=False)
        cfg = load_config(sample_yaml_path)
        assert cfg.data_source.headers == {"X-Client": "oracle-tests"}

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nonexistent.yaml")

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("")
        assert load_config(cfg_file) == AppConfig()

    def test_empty_base_url_rejected(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text('data_source:\n  base_url: ""\n')
        with pytest.raises(ValueError, match="base_url"):
            load_config(cfg_file)

    def test_non_positive_timeout_rejected(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "config.yaml"
        cfg_file.write_text("data_source:\n  timeout_seconds: 0\n")
        with pytest.raises(ValueError, match="timeout_seconds"):
            load_config(cfg_file)

    def test_repository_config_loads(self) -> None:
        cfg = load_config()
        assert cfg.data_source.base_url == DEFAULT_BASE_URL
