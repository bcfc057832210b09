"""
In-process module loading.

Loads the target unit into the running interpreter and calls its entry
point function with the program arguments. When a class path is given the
unit and its dependencies are resolved against those locations through an
``IsolatedModuleScope`` that lives for a single invocation.
"""

import importlib
import inspect
import shlex
import sys
import threading
from contextlib import nullcontext
from importlib.abc import MetaPathFinder
from importlib.machinery import PathFinder
from pathlib import Path
from types import ModuleType
from typing import Callable, Dict, Iterable, List, Optional, Set, Union

from runtime_launcher.domain.entities import LaunchSpec
from runtime_launcher.domain.errors import LoadError, TargetExecutionError
from runtime_launcher.domain.services import validate_in_process
from runtime_launcher.infrastructure.config.config import get_settings
from runtime_launcher.infrastructure.logging.logging_config import get_logger

_IGNORED_FIELD_WARNINGS = {
    "runtime_arguments": "Runtime arguments ignored when running in-process",
    "environment_properties": "Environment properties ignored when running in-process",
    "working_directory": "Working directory ignored when running in-process",
    "runtime_executable": "Runtime executable ignored when running in-process",
    "max_memory": "Max memory ignored when running in-process",
}

# sys.meta_path and sys.modules are process-wide.
_SCOPE_LOCK = threading.RLock()


class IsolatedModuleScope(MetaPathFinder):
    """
    Import scope resolving modules against an explicit list of locations.

    Directories and zip archives are both accepted, the same as on
    ``sys.path``. While the scope is entered it sits at the front of
    ``sys.meta_path``, so the unit and everything it imports from the
    class path (siblings, subpackages, relative imports) resolve against
    those locations first. Modules it loads are registered in
    ``sys.modules`` for the duration of the scope and removed on exit,
    together with the finder itself; ambient modules it shadowed are put
    back. Scopes are entered one at a time under a process-wide lock.
    """

    def __init__(self, search_path: Iterable[Union[str, Path]]):
        self.search_path: List[str] = [str(entry) for entry in search_path]
        self._loaded: Set[str] = set()
        self._shadowed: Dict[str, ModuleType] = {}
        self._active = False

    def __enter__(self) -> "IsolatedModuleScope":
        _SCOPE_LOCK.acquire()
        sys.meta_path.insert(0, self)
        self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self._active = False
            if self in sys.meta_path:
                sys.meta_path.remove(self)
            for name in self._loaded:
                sys.modules.pop(name, None)
            sys.modules.update(self._shadowed)
            self._loaded.clear()
            self._shadowed.clear()
        finally:
            _SCOPE_LOCK.release()

    def find_spec(self, fullname, path=None, target=None):
        if "." in fullname:
            # Only submodules of packages this scope loaded itself.
            if fullname.rpartition(".")[0] not in self._loaded or path is None:
                return None
            locations = list(path)
        else:
            locations = self.search_path
        spec = PathFinder.find_spec(fullname, locations)
        if spec is not None:
            self._loaded.add(fullname)
        return spec

    def load(self, name: str) -> ModuleType:
        """
        Import ``name`` from the search path.

        Raises:
            RuntimeError: If the scope has not been entered
            ModuleNotFoundError: If the unit is not on the search path
        """
        if not self._active:
            raise RuntimeError("Isolated module scope is not active")
        parts = name.split(".")
        if not all(parts):
            raise ModuleNotFoundError(f"Invalid module name {name!r}", name=name)
        if PathFinder.find_spec(parts[0], self.search_path) is None:
            raise ModuleNotFoundError(
                f"No module named {parts[0]!r} on {self.search_path}", name=parts[0]
            )

        # Ambient modules with the same names must not stand in for the unit.
        for index in range(1, len(parts) + 1):
            prefix = ".".join(parts[:index])
            if prefix in sys.modules and prefix not in self._loaded:
                self._shadowed[prefix] = sys.modules.pop(prefix)

        return importlib.import_module(name)


class ModuleLoader:
    """
    Runs a unit's entry point inside the current interpreter.

    The entry point is a module-level function, ``main`` by default, that
    takes the program arguments as a single list of strings.
    """

    def __init__(self, entry_function: Optional[str] = None, logger=None):
        self.entry_function = entry_function or get_settings().entry_function
        self.logger = logger or get_logger(__name__)

    def invoke_in_process(self, spec: LaunchSpec) -> None:
        """
        Load the unit named by ``spec`` and call its entry point.

        Args:
            spec: Launch spec; forked-only fields are ignored with a warning

        Raises:
            ConfigurationError: If the launch spec cannot run in-process
            LoadError: If the unit or its entry point cannot be resolved
            TargetExecutionError: If the entry point raised
        """
        validate_in_process(spec)

        for field_name in spec.ignored_in_process():
            self.logger.warning(_IGNORED_FIELD_WARNINGS[field_name], field=field_name)

        name = spec.entry_point_name
        args = list(spec.program_arguments)
        self.logger.debug("Running in-process", entry_point=name, arguments=shlex.join(args))

        scope = IsolatedModuleScope(spec.class_path) if spec.class_path else None
        # The entry point runs inside the scope so its lazy imports resolve too.
        with scope if scope is not None else nullcontext():
            module = self.load_module(name, scope)
            entry_point = self.resolve_entry_point(module, name, args)
            self._call(entry_point, name, args)

    def _call(self, entry_point: Callable[[List[str]], None], name: str, args: List[str]) -> None:
        try:
            entry_point(args)
        except SystemExit as e:
            if e.code is None or e.code == 0:
                return
            raise TargetExecutionError(
                f'Could not execute "{name}"', cause=e, exit_code=e.code
            ) from e
        except Exception as e:
            raise TargetExecutionError(f'Could not execute "{name}"', cause=e) from e

    def load_module(self, name: str, scope: Optional[IsolatedModuleScope] = None) -> ModuleType:
        """
        Load a module through ``scope``, or the regular import system without one.

        Raises:
            LoadError: Wrapping whatever prevented the module from loading
        """
        try:
            if scope is None:
                return importlib.import_module(name)
            return scope.load(name)
        except Exception as e:
            raise LoadError(f'Could not find unit "{name}"', cause=e, entry_point=name) from e

    def resolve_entry_point(
        self, module: ModuleType, name: str, args: List[str]
    ) -> Callable[[List[str]], None]:
        """
        Find the entry point function on a loaded module.

        Raises:
            LoadError: If it is missing, not callable, or cannot take ``args``
        """
        entry_point = getattr(module, self.entry_function, None)
        if entry_point is None or not callable(entry_point):
            raise LoadError(
                f'Unit "{name}" has no {self.entry_function}(args) entry point',
                entry_point=name,
            )
        try:
            inspect.signature(entry_point).bind(args)
        except TypeError as e:
            raise LoadError(
                f'Entry point {name}.{self.entry_function} does not accept an argument list',
                cause=e,
                entry_point=name,
            ) from e
        except ValueError:
            # No introspectable signature, e.g. some builtins.
            pass
        return entry_point
