"""
Unit tests for configuration loading and validation.

Tests default handling, TOML parsing, value validation and the cached
singleton behavior of get_config().
"""

import logging
import tomllib

import pytest
import toml

from svadilfari.config import (
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    reset_config_path,
    set_config_path,
    validate_utils_config,
)
from svadilfari.models import UtilsConfig
from svadilfari.validation import ValidationError


@pytest.fixture
def config_file(temp_dir):
    """Write a config.toml from a dict and return its path."""

    def _write(data):
        path = temp_dir / "config.toml"
        with open(path, "w") as f:
            toml.dump(data, f)
        return path

    return _write


@pytest.mark.unit
class TestValidateUtilsConfig:
    """Test cases for validate_utils_config()."""

    def test_empty_config_uses_defaults(self):
        assert validate_utils_config({}) == UtilsConfig()

    def test_full_config(self):
        config = validate_utils_config(
            {
                "finder": {"sort_entries": True, "follow_symlinks": False},
                "directories": {"mode": "0700"},
                "clean": {"tool": "samu"},
                "logging": {"level": "debug"},
            }
        )

        assert config.sort_entries is True
        assert config.follow_symlinks is False
        assert config.directory_mode == 0o700
        assert config.clean_tool == "samu"
        assert config.log_level == "DEBUG"

    def test_integer_mode(self):
        assert validate_utils_config({"directories": {"mode": 0o750}}).directory_mode == 0o750

    @pytest.mark.parametrize(
        "data, field",
        [
            ({"finder": {"sort_entries": "yes"}}, "finder.sort_entries"),
            ({"finder": {"follow_symlinks": 1}}, "finder.follow_symlinks"),
            ({"directories": {"mode": "rwxr-xr-x"}}, "directories.mode"),
            ({"directories": {"mode": 0o17777}}, "directories.mode"),
            ({"clean": {"tool": ""}}, "clean.tool"),
            ({"logging": {"level": "LOUD"}}, "logging.level"),
            ({"finder": "sorted"}, "finder"),
        ],
    )
    def test_invalid_values(self, data, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_utils_config(data)

        assert exc_info.value.field_name == field

    def test_follow_symlinks_warns(self, caplog):
        validate_utils_config({"finder": {"follow_symlinks": True}})

        assert "symlink loops are not detected" in caplog.text


@pytest.mark.unit
class TestConfigManager:
    """Test cases for the configuration singleton."""

    def test_missing_default_file_uses_defaults(self):
        clear_config_cache()
        assert not is_config_loaded()

        assert get_config() == UtilsConfig()
        assert is_config_loaded()

    def test_explicit_path_is_loaded_and_cached(self, config_file):
        path = config_file({"clean": {"tool": "samu"}})

        set_config_path(path)
        first = get_config()

        assert first.clean_tool == "samu"
        assert get_config() is first
        info = get_config_info()
        assert info["config_loaded"] is True
        assert info["config_path"] == str(path)
        assert info["clean_tool"] == "samu"

    def test_explicit_missing_path_raises(self, temp_dir):
        set_config_path(temp_dir / "nope.toml")

        with pytest.raises(FileNotFoundError):
            get_config()

    def test_malformed_toml_raises(self, temp_dir):
        path = temp_dir / "config.toml"
        path.write_text("[finder\nsort_entries = ")
        set_config_path(path)

        with pytest.raises(tomllib.TOMLDecodeError):
            get_config()

    def test_load_failure_is_logged_once(self, temp_dir, caplog):
        path = temp_dir / "config.toml"
        path.write_text("[finder\nsort_entries = ")
        set_config_path(path)

        with pytest.raises(tomllib.TOMLDecodeError):
            get_config()

        assert len([r for r in caplog.records if r.levelno >= logging.ERROR]) == 1

    def test_unreadable_path_raises(self, temp_dir):
        set_config_path(temp_dir)

        with pytest.raises(OSError):
            get_config()

    def test_clear_cache_reloads(self, config_file):
        path = config_file({"clean": {"tool": "samu"}})
        set_config_path(path)
        assert get_config().clean_tool == "samu"

        config_file({"clean": {"tool": "ninja-1.12"}})
        assert get_config().clean_tool == "samu"

        clear_config_cache()
        assert get_config().clean_tool == "ninja-1.12"

    def test_reset_config_path(self, config_file):
        set_config_path(config_file({}))
        reset_config_path()

        assert get_config_info()["config_path_explicit"] is False
        assert not is_config_loaded()
