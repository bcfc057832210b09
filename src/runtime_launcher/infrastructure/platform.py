"""
Host platform adapters.

OS family classification and path-list formatting.
"""

import os
import sys
from pathlib import Path
from typing import Iterable, Optional, Union

from runtime_launcher.domain.ports.os_family_port import IOsFamilyPort
from runtime_launcher.domain.value_objects import OsFamily


class PlatformOsFamily(IOsFamilyPort):
    """
    Classifies the host from ``os.name``, ``sys.platform`` and the path separator.

    All three inputs can be injected so other platforms can be emulated.
    """

    def __init__(
        self,
        platform_name: Optional[str] = None,
        path_separator: Optional[str] = None,
        os_name: Optional[str] = None,
    ):
        self.os_name = (os_name if os_name is not None else os.name).lower()
        self.platform_name = (platform_name if platform_name is not None else sys.platform).lower()
        self.path_separator = path_separator if path_separator is not None else os.pathsep

    def is_family(self, family: OsFamily) -> bool:
        name = self.platform_name
        if family == OsFamily.WINDOWS:
            return self.os_name == "nt" or name.startswith(("win", "cygwin", "msys"))
        if family == OsFamily.DOS:
            return self.path_separator == ";" and not self.is_family(OsFamily.NETWARE)
        if family == OsFamily.NETWARE:
            return "netware" in name
        if family == OsFamily.OS2:
            return self.os_name == "os2" or name.startswith("os2")
        if family == OsFamily.MAC:
            return name.startswith("darwin") or name.startswith("mac")
        if family == OsFamily.UNIX:
            return self.path_separator == ":" and not name.startswith(("openvms", "vms"))
        return False


def join_path_list(
    entries: Iterable[Union[str, Path]],
    separator: str = os.pathsep,
) -> str:
    """
    Join filesystem paths into a platform path-list string.

    Args:
        entries: Paths in search order
        separator: Path-list separator, ``os.pathsep`` by default

    Returns:
        The joined path list
    """
    return separator.join(str(entry) for entry in entries)
