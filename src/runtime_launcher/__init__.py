"""
Runtime Launcher

Runs a program either in-process or in a forked runtime.
"""

__version__ = "0.1.0"

from .domain.entities import LaunchSpec
from .domain.errors import (
    LauncherError,
    ConfigurationError,
    LoadError,
    TargetExecutionError,
    ProcessLaunchError,
    ProcessExitError,
)
from .application.services.launcher_service import LauncherService, launch

__all__ = [
    "LaunchSpec",
    "LauncherError",
    "ConfigurationError",
    "LoadError",
    "TargetExecutionError",
    "ProcessLaunchError",
    "ProcessExitError",
    "LauncherService",
    "launch",
]
