"""
Application Services

Services that locate the runtime, assemble commands and dispatch launches.
"""

from .runtime_locator import RuntimeLocator
from .invocation_builder import InvocationBuilder
from .launcher_service import LauncherService, launch

__all__ = [
    "RuntimeLocator",
    "InvocationBuilder",
    "LauncherService",
    "launch",
]
