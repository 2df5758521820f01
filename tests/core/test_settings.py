"""Tests for Settings."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from godocjson.settings import Settings, settings


class TestSettings:
    """Test Settings configuration."""

    def test_default_values(self):
        """Test default Settings values when env vars/files are not set."""
        with patch.dict(os.environ, clear=True):
            s = Settings(_env_file=None)

        assert s.exclude_pattern == ""
        assert s.indent == 2
        assert s.log_level == "WARNING"

    @patch.dict(
        os.environ,
        {
            "GODOCJSON_EXCLUDE_PATTERN": r"_test\.go$",
            "GODOCJSON_INDENT": "4",
            "GODOCJSON_LOG_LEVEL": "DEBUG",
        },
    )
    def test_env_variable_loading(self):
        """Test loading settings from prefixed environment variables."""
        s = Settings()
        assert s.exclude_pattern == r"_test\.go$"
        assert s.indent == 4
        assert s.log_level == "DEBUG"

    @patch.dict(os.environ, {"INDENT": "8", "GODOCJSON_UNKNOWN": "ignored"})
    def test_unprefixed_and_unknown_env_ignored(self):
        """Test that unprefixed and unknown variables are ignored."""
        s = Settings(_env_file=None)
        assert s.indent == 2
        assert not hasattr(s, "unknown")

    @patch.dict(os.environ, {"GODOCJSON_INDENT": "-1"})
    def test_negative_indent_rejected(self):
        with pytest.raises(ValidationError):
            Settings()

    def test_settings_singleton(self):
        """Test that the module provides a settings singleton."""
        assert isinstance(settings, Settings)

        from godocjson.settings import settings as settings2

        assert settings is settings2

    def test_env_file_loading(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading from .env file."""
        (tmp_path / ".env").write_text("GODOCJSON_EXCLUDE_PATTERN=zz_generated\nGODOCJSON_INDENT=0\n")
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, clear=True):
            s = Settings()

        assert s.exclude_pattern == "zz_generated"
        assert s.indent == 0

    @patch.dict(os.environ, {"GODOCJSON_INDENT": "3"})
    def test_env_var_overrides_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables override .env file."""
        (tmp_path / ".env").write_text("GODOCJSON_INDENT=6")
        monkeypatch.chdir(tmp_path)

        assert Settings().indent == 3

    def test_settings_immutable_config(self):
        """Test that Settings is frozen."""
        s = Settings()

        with pytest.raises(ValidationError) as exc_info:
            s.indent = 8
        assert "frozen" in str(exc_info.value).lower()

    def test_model_config_attributes(self):
        """Test that model_config is properly set."""
        assert Settings.model_config.get("env_file") == ".env"
        assert Settings.model_config.get("env_prefix") == "GODOCJSON_"
        assert Settings.model_config.get("frozen") is True
