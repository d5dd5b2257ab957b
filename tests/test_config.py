"""
Tests for configuration loading and validation.
"""

import textwrap

import pytest

from graphmetrics.utils.config import (DEFAULT_SETTINGS, ConfigValidationError,
                                       get_engine_settings, load_config)


def _write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return path


class TestConfigLoading:
    """Loading TOML files."""

    def test_bundled_config_loads(self):
        config = load_config()
        assert "graphmetrics" in config
        settings = get_engine_settings(config)
        assert settings["bfs_workers"] == 1
        assert settings["log_level"] == "info"

    def test_load_valid_config(self, tmp_path):
        path = _write(
            tmp_path,
            """
            [graphmetrics]
            log_level = "debug"
            bfs_workers = 4
            eigen_tie_tolerance = 1e-6
            """,
        )
        config = load_config(path)
        assert config["graphmetrics"]["bfs_workers"] == 4

        settings = get_engine_settings(config)
        assert settings["log_level"] == "debug"
        assert settings["eigen_tie_tolerance"] == 1e-6
        assert settings["eigen_imag_tolerance"] == DEFAULT_SETTINGS["eigen_imag_tolerance"]

    def test_missing_section_means_defaults(self, tmp_path):
        path = _write(tmp_path, "[other]\nvalue = 1\n")
        assert get_engine_settings(load_config(path)) == DEFAULT_SETTINGS

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.toml")

    def test_broken_toml(self, tmp_path):
        path = _write(tmp_path, "[graphmetrics\nbfs_workers = ")
        with pytest.raises(ConfigValidationError, match="Failed to parse TOML"):
            load_config(path)


class TestConfigValidation:
    """Type and range checks of the [graphmetrics] section."""

    @pytest.mark.parametrize(
        "section, message",
        [
            ({"bfs_workers": 0}, "bfs_workers must be at least 1"),
            ({"bfs_workers": "4"}, "must be int"),
            ({"bfs_workers": True}, "must be int"),
            ({"log_level": "verbose"}, "log_level must be one of"),
            ({"eigen_tie_tolerance": -1.0}, "must be non-negative"),
            ({"eigen_imag_tolerance": "small"}, "must be int or float"),
        ],
    )
    def test_invalid_values(self, section, message):
        with pytest.raises(ConfigValidationError, match=message):
            get_engine_settings({"graphmetrics": section})

    def test_invalid_file_rejected_on_load(self, tmp_path):
        path = _write(tmp_path, "[graphmetrics]\nbfs_workers = -2\n")
        with pytest.raises(ConfigValidationError):
            load_config(path)

    def test_none_config_gives_defaults(self):
        assert get_engine_settings(None) == DEFAULT_SETTINGS
