"""
Launcher Domain Layer

Launch configuration, platform value objects, errors and ports.
"""

from .entities import LaunchSpec
from .errors import (
    LauncherError,
    ConfigurationError,
    LoadError,
    TargetExecutionError,
    ProcessLaunchError,
    ProcessExitError,
)
from .value_objects import OsFamily, RuntimeLayout

__all__ = [
    "LaunchSpec",
    "LauncherError",
    "ConfigurationError",
    "LoadError",
    "TargetExecutionError",
    "ProcessLaunchError",
    "ProcessExitError",
    "OsFamily",
    "RuntimeLayout",
]
