"""
Unit tests for environment-driven settings.
"""

import pytest
from pydantic import ValidationError

from runtime_launcher.infrastructure.config.config import Settings, get_settings


@pytest.mark.unit
class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_format == "text"
        assert settings.java_home is None
        assert settings.runtime_home is None
        assert settings.runtime_command == "java"
        assert settings.entry_function == "main"

    def test_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("LAUNCHER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LAUNCHER_ENTRY_FUNCTION", "run")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.entry_function == "run"

    def test_java_home_is_read_unprefixed(self, monkeypatch):
        monkeypatch.setenv("JAVA_HOME", "/opt/jdk")

        settings = Settings()

        assert settings.java_home == "/opt/jdk"
        assert settings.runtime_home is None

    def test_runtime_home_is_separate_from_java_home(self, monkeypatch):
        monkeypatch.setenv("JAVA_HOME", "/opt/jdk")
        monkeypatch.setenv("LAUNCHER_RUNTIME_HOME", "/opt/jdk/jre")

        settings = Settings()

        assert settings.runtime_home == "/opt/jdk/jre"
        assert settings.java_home == "/opt/jdk"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LAUNCHER_LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
