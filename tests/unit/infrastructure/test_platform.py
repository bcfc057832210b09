"""
Unit tests for the platform adapters.
"""

from pathlib import Path

import pytest

from runtime_launcher.domain.value_objects import OsFamily
from runtime_launcher.infrastructure.platform import PlatformOsFamily, join_path_list


@pytest.mark.unit
class TestPlatformOsFamily:
    """Tests for OS family classification with injected platform data."""

    def test_windows(self):
        classifier = PlatformOsFamily(platform_name="win32", path_separator=";", os_name="nt")

        assert classifier.is_family(OsFamily.WINDOWS)
        assert classifier.is_family(OsFamily.DOS)
        assert not classifier.is_family(OsFamily.UNIX)
        assert not classifier.is_family(OsFamily.NETWARE)

    def test_linux(self):
        classifier = PlatformOsFamily(platform_name="linux", path_separator=":", os_name="posix")

        assert classifier.is_family(OsFamily.UNIX)
        assert not classifier.is_family(OsFamily.WINDOWS)
        assert not classifier.is_family(OsFamily.DOS)
        assert not classifier.is_family(OsFamily.MAC)

    def test_macos_is_mac_and_unix(self):
        classifier = PlatformOsFamily(platform_name="darwin", path_separator=":", os_name="posix")

        assert classifier.is_family(OsFamily.MAC)
        assert classifier.is_family(OsFamily.UNIX)

    def test_netware_is_not_dos(self):
        classifier = PlatformOsFamily(platform_name="NetWare", path_separator=";", os_name="posix")

        assert classifier.is_family(OsFamily.NETWARE)
        assert not classifier.is_family(OsFamily.DOS)

    def test_os2(self):
        classifier = PlatformOsFamily(platform_name="os2emx", path_separator=";", os_name="os2")

        assert classifier.is_family(OsFamily.OS2)
        assert classifier.is_family(OsFamily.DOS)

    def test_nt_os_name_is_windows(self):
        """A Windows host is recognised by os.name even with an unfamiliar platform string."""
        classifier = PlatformOsFamily(platform_name="custom", path_separator=";", os_name="nt")

        assert classifier.is_family(OsFamily.WINDOWS)
        assert classifier.is_family(OsFamily.DOS)

    def test_posix_os_name_with_unknown_platform(self):
        classifier = PlatformOsFamily(platform_name="custom", path_separator=":", os_name="posix")

        assert classifier.is_family(OsFamily.UNIX)
        assert not classifier.is_family(OsFamily.WINDOWS)
        assert not classifier.is_family(OsFamily.OS2)

    def test_defaults_to_host(self):
        import os
        import sys

        classifier = PlatformOsFamily()

        assert classifier.os_name == os.name
        assert classifier.platform_name == sys.platform.lower()
        assert classifier.path_separator == os.pathsep


@pytest.mark.unit
class TestJoinPathList:

    def test_joins_in_order(self):
        assert join_path_list(["/b", "/a"], separator=":") == "/b:/a"

    def test_accepts_paths(self):
        assert join_path_list([Path("lib"), "classes"], separator=";") == f"{Path('lib')};classes"

    def test_empty(self):
        assert join_path_list([], separator=":") == ""
