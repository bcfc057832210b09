"""
Launcher Value Objects

Immutable value objects describing the host platform and where a
runtime executable lives on it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class OsFamily(str, Enum):
    """Operating system families the launcher distinguishes."""

    WINDOWS = "windows"
    DOS = "dos"
    NETWARE = "netware"
    OS2 = "os/2"
    MAC = "mac"
    UNIX = "unix"


@dataclass(frozen=True)
class RuntimeLayout:
    """
    How a runtime executable is laid out on an OS family.

    Attributes:
        executable_suffix: Appended to the command name to get the file name
        search_home: Whether the runtime homes are worth searching at all
    """

    executable_suffix: str = ""
    search_home: bool = True

    def executable_name(self, command: str) -> str:
        """File name of the runtime executable for ``command``."""
        return f"{command}{self.executable_suffix}"


DEFAULT_RUNTIME_LAYOUT = RuntimeLayout()

# Checked in order; the first family the classifier reports wins.
# NetWare may ship a runtime in its home directory, but it is almost
# never the one to run, so only the bare command name is used there.
RUNTIME_LAYOUTS: Tuple[Tuple[OsFamily, RuntimeLayout], ...] = (
    (OsFamily.NETWARE, RuntimeLayout(search_home=False)),
    (OsFamily.WINDOWS, RuntimeLayout(executable_suffix=".exe")),
    (OsFamily.DOS, RuntimeLayout(executable_suffix=".exe")),
)
