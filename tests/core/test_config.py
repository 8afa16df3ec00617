#!/usr/bin/env python3
"""Tests for the ConfigManager module."""

import os
from unittest.mock import patch

import pytest
import yaml

from filetools.core.config import (
    ConfigError,
    ConfigManager,
    ConfigSource,
    get_config_manager,
    set_global_config,
)
from filetools.core.constants import ErrorCode


class TestConfigSource:
    """Tests for ConfigSource enum."""

    def test_precedence_order(self):
        """Test config source precedence ordering."""
        sources = [
            ConfigSource.COMPILED_DEFAULTS,
            ConfigSource.USER_CONFIG,
            ConfigSource.ENVIRONMENT,
            ConfigSource.RUNTIME,
        ]

        for i in range(len(sources) - 1):
            assert sources[i].value < sources[i + 1].value


class TestConfigManager:
    """Tests for ConfigManager."""

    def test_defaults(self):
        config = ConfigManager(load_environment=False)
        assert config.get("filetools.listing.on_error") == "raise"
        assert config.get("filetools.listing.follow_symlinks") is True
        assert config.get("filetools.listing.max_depth") is None
        assert config.get("filetools.logging.level") == "WARNING"

    def test_missing_key_returns_default(self):
        config = ConfigManager(load_environment=False)
        assert config.get("filetools.nothing.here", default=7) == 7

    def test_load_file(self, temp_dir):
        config_file = temp_dir / "filetools.yaml"
        config_file.write_text(
            yaml.safe_dump({"filetools": {"listing": {"on_error": "collect", "max_depth": 2}}})
        )

        config = ConfigManager(str(config_file), load_environment=False)
        assert config.get("filetools.listing.on_error") == "collect"
        assert config.get("filetools.listing.max_depth") == 2
        # Untouched keys fall through to defaults
        assert config.get("filetools.listing.detect_cycles") is True

    def test_load_file_not_found(self, temp_dir):
        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError) as exc_info:
            config.load_file(str(temp_dir / "missing.yaml"))
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND

    def test_load_file_invalid_yaml(self, temp_dir):
        config_file = temp_dir / "broken.yaml"
        config_file.write_text("filetools: [unclosed")

        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError, match="YAML parse error"):
            config.load_file(str(config_file))

    def test_load_file_not_a_mapping(self, temp_dir):
        config_file = temp_dir / "list.yaml"
        config_file.write_text("- a\n- b\n")

        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError, match="Invalid config format"):
            config.load_file(str(config_file))

    def test_load_file_fails_validation(self, temp_dir):
        config_file = temp_dir / "bad.yaml"
        config_file.write_text(yaml.safe_dump({"filetools": {"listing": {"on_error": "retry"}}}))

        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError, match="Invalid error policy"):
            config.load_file(str(config_file))

    def test_environment_overrides_file(self, temp_dir):
        config_file = temp_dir / "filetools.yaml"
        config_file.write_text(yaml.safe_dump({"filetools": {"listing": {"on_error": "raise"}}}))

        env = {
            "FILETOOLS_LISTING__ON_ERROR": "collect",
            "FILETOOLS_LISTING__MAX_DEPTH": "4",
            "FILETOOLS_LISTING__FOLLOW_SYMLINKS": "false",
        }
        with patch.dict(os.environ, env):
            config = ConfigManager(str(config_file))

        assert config.get("filetools.listing.on_error") == "collect"
        assert config.get("filetools.listing.max_depth") == 4
        assert config.get("filetools.listing.follow_symlinks") is False

    @pytest.mark.parametrize(
        "name,value,message",
        [
            ("FILETOOLS_LISTING__MAX_DEPTH", "deep", "max_depth"),
            ("FILETOOLS_LISTING__ON_ERROR", "skip", "Invalid error policy"),
            ("FILETOOLS_LISTING__FOLLOW_SYMLINKS", "sometimes", "must be boolean"),
            ("FILETOOLS_LISTING__RECURSE", "true", "Unknown listing configuration fields"),
            ("FILETOOLS_LOGGING__LEVEL", "LOUD", "Invalid log level"),
        ],
    )
    def test_invalid_environment_rejected(self, name, value, message):
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(ConfigError, match=message) as exc_info:
                ConfigManager()
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT

    def test_environment_without_listing_variables(self):
        with patch.dict(os.environ, {"FILETOOLS_LOGGING__LEVEL": "debug"}):
            config = ConfigManager()
        assert config.get("filetools.logging.level") == "debug"
        assert config.get("filetools.listing.on_error") == "raise"

    def test_runtime_overrides_environment(self):
        with patch.dict(os.environ, {"FILETOOLS_LISTING__ON_ERROR": "collect"}):
            config = ConfigManager()
        config.set("filetools.listing.on_error", "raise")
        assert config.get("filetools.listing.on_error") == "raise"

    def test_set_creates_nested_keys(self):
        config = ConfigManager(load_environment=False)
        config.set("filetools.listing.sort_entries", False)
        assert config.get_all()["filetools"]["listing"]["sort_entries"] is False

    def test_get_all_does_not_leak_internal_state(self):
        config = ConfigManager(load_environment=False)
        merged = config.get_all()
        merged["filetools"]["listing"]["on_error"] = "collect"
        assert config.get("filetools.listing.on_error") == "raise"

    def test_validate(self):
        config = ConfigManager(load_environment=False)
        assert config.validate()
        config.set("filetools.listing.max_depth", -3)
        with pytest.raises(ConfigError, match="max_depth"):
            config.validate()

    def test_clear_keeps_defaults(self):
        config = ConfigManager(load_environment=False)
        config.set("filetools.listing.on_error", "collect")
        config.clear()
        assert config.get("filetools.listing.on_error") == "raise"

    def test_clear_single_source(self):
        config = ConfigManager(load_environment=False)
        config.set("filetools.listing.on_error", "collect")
        config.clear(ConfigSource.RUNTIME)
        assert config.get("filetools.listing.on_error") == "raise"


class TestGlobalConfig:
    """Tests for the global config manager."""

    def test_get_config_manager_is_singleton(self):
        assert get_config_manager() is get_config_manager()

    def test_set_global_config(self):
        custom = ConfigManager(load_environment=False)
        set_global_config(custom)
        assert get_config_manager() is custom
