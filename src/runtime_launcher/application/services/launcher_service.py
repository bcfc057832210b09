"""
Launcher Service

Public entry point: validates a launch spec and runs it either in the
current interpreter or in a forked runtime process.
"""

import os
import shlex
from typing import Callable, Optional

from runtime_launcher.application.services.invocation_builder import InvocationBuilder
from runtime_launcher.application.services.runtime_locator import RuntimeLocator
from runtime_launcher.domain.entities import LaunchSpec
from runtime_launcher.domain.ports.process_executor_port import IProcessExecutorPort
from runtime_launcher.domain.services import validate_forked
from runtime_launcher.infrastructure.isolation.module_loader import ModuleLoader
from runtime_launcher.infrastructure.isolation.subprocess import SubprocessExecutor
from runtime_launcher.infrastructure.logging.logging_config import get_logger
from runtime_launcher.infrastructure.platform import PlatformOsFamily


class LauncherService:
    """
    Dispatches a launch to the in-process loader or a forked runtime.

    Keeps no state between calls; every forked launch gets a fresh
    executor from ``executor_factory``.
    """

    def __init__(
        self,
        executor_factory: Callable[[], IProcessExecutorPort] = SubprocessExecutor,
        builder: Optional[InvocationBuilder] = None,
        loader: Optional[ModuleLoader] = None,
        logger=None,
    ):
        self.logger = logger or get_logger(__name__)
        self.executor_factory = executor_factory
        self.builder = builder or InvocationBuilder(
            RuntimeLocator(PlatformOsFamily(), logger=self.logger), path_separator=os.pathsep
        )
        self.loader = loader or ModuleLoader(logger=self.logger)

    def execute(self, spec: LaunchSpec) -> Optional[int]:
        """
        Run the launch described by ``spec``.

        Returns:
            Exit code of the forked runtime, None for in-process launches
        """
        if spec.forked:
            return self.execute_forked(spec)
        self.execute_in_process(spec)
        return None

    def execute_in_process(self, spec: LaunchSpec) -> None:
        """Run the launch spec's entry point inside this interpreter."""
        self.loader.invoke_in_process(spec)

    def execute_forked(self, spec: LaunchSpec) -> int:
        """
        Run the launch spec in a separate runtime process.

        Returns:
            Process exit code

        Raises:
            ConfigurationError: Before anything is started, if the launch spec is invalid
            ProcessLaunchError: If the executor cannot start the process
        """
        validate_forked(spec)

        command = self.builder.build(spec)
        self.logger.debug("Forking runtime", command=shlex.join(command))

        executor = self.executor_factory()
        executor.configure(spec.working_directory, spec.ignore_exit_code)
        executor.set_command(command)
        return executor.run()


def launch(spec: LaunchSpec) -> Optional[int]:
    """
    Convenience function running ``spec`` with the default collaborators.
    """
    return LauncherService().execute(spec)
