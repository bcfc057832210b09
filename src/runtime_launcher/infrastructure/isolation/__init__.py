"""
Isolation Infrastructure

Forked subprocess execution and isolated in-process module loading.
"""

from .module_loader import IsolatedModuleScope, ModuleLoader
from .subprocess import SubprocessExecutor

__all__ = ["IsolatedModuleScope", "ModuleLoader", "SubprocessExecutor"]
