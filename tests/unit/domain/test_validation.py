"""
Unit tests for launch spec validation services.
"""

import pytest

from runtime_launcher.domain.entities import LaunchSpec
from runtime_launcher.domain.errors import ConfigurationError
from runtime_launcher.domain.services import validate_forked, validate_in_process


@pytest.mark.unit
class TestValidateForked:

    def test_entry_point_only(self):
        validate_forked(LaunchSpec(entry_point_name="Main"))

    def test_archive_only(self):
        validate_forked(LaunchSpec(archive_path="app.jar"))

    def test_both_set(self):
        with pytest.raises(ConfigurationError, match="Only one of"):
            validate_forked(LaunchSpec(entry_point_name="Main", archive_path="app.jar"))

    def test_neither_set(self):
        with pytest.raises(ConfigurationError, match="must not be null"):
            validate_forked(LaunchSpec())


@pytest.mark.unit
class TestValidateInProcess:

    def test_entry_point_only(self):
        validate_in_process(LaunchSpec(entry_point_name="tool"))

    def test_missing_entry_point(self):
        with pytest.raises(ConfigurationError, match="must not be null"):
            validate_in_process(LaunchSpec())

    def test_archive_only(self):
        """An archive alone still lacks an entry point name."""
        with pytest.raises(ConfigurationError, match="must not be null"):
            validate_in_process(LaunchSpec(archive_path="app.jar"))

    def test_archive_with_entry_point(self):
        with pytest.raises(ConfigurationError, match="requires forked mode"):
            validate_in_process(LaunchSpec(entry_point_name="tool", archive_path="app.jar"))
