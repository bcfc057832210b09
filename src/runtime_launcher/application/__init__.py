"""
Launcher Application Layer

Orchestrates domain objects and infrastructure adapters.
"""

from .services import InvocationBuilder, LauncherService, RuntimeLocator, launch

__all__ = [
    "InvocationBuilder",
    "LauncherService",
    "RuntimeLocator",
    "launch",
]
