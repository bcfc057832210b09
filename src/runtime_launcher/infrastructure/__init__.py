"""
Infrastructure Layer

Provides technical implementations for external concerns.
"""

from .isolation.module_loader import ModuleLoader
from .isolation.subprocess import SubprocessExecutor
from .platform import PlatformOsFamily, join_path_list

__all__ = ["ModuleLoader", "SubprocessExecutor", "PlatformOsFamily", "join_path_list"]
