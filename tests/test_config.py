"""Tests for tapr.config."""

from __future__ import annotations

import json

import pytest

from tapr.config import Config, config_from_dict, load_config


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("TAPR_CONFIG_DIR", str(tmp_path))
        assert load_config() == Config()

    def test_reads_values(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("TAPR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.json").write_text(json.dumps({"line_sampling": 5, "header": True}))
        config = load_config()
        assert config.line_sampling == 5
        assert config.header is True
        assert config.color is True

    def test_malformed_file_falls_back(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TAPR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.json").write_text("{not json")
        assert load_config() == Config()
        assert "Error reading config" in capsys.readouterr().err


class TestConfigFromDict:
    def test_unknown_keys_ignored(self) -> None:
        assert config_from_dict({"width": 40, "bogus": 1}) == Config(width=40)

    def test_wrong_types_rejected(self) -> None:
        for data in (
            {"line_sampling": "5"},
            {"line_sampling": True},
            {"line_sampling": -1},
            {"header": "yes"},
            {"width": 0},
            [1, 2],
        ):
            with pytest.raises(ValueError):
                config_from_dict(data)

    def test_wrong_type_in_file_falls_back(self, tmp_path, monkeypatch, capsys) -> None:
        monkeypatch.setenv("TAPR_CONFIG_DIR", str(tmp_path))
        (tmp_path / "config.json").write_text('{"line_sampling": "5"}')
        assert load_config() == Config()
        assert "invalid value for line_sampling" in capsys.readouterr().err
