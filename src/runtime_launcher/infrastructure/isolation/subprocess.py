"""
Subprocess execution adapter.

Runs an assembled runtime command line as a child process that inherits
the launcher's standard streams, and blocks until it exits.
"""

import shlex
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Union

from runtime_launcher.domain.errors import ProcessExitError, ProcessLaunchError
from runtime_launcher.domain.ports.process_executor_port import IProcessExecutorPort
from runtime_launcher.infrastructure.logging.logging_config import get_logger


class SubprocessExecutor(IProcessExecutorPort):
    """
    Executes a command with ``subprocess.run``.

    Output is not captured; the child writes straight to the parent's
    stdout and stderr. No timeout is applied.
    """

    def __init__(self, logger=None):
        self.logger = logger or get_logger(__name__)
        self.working_directory: Optional[Path] = None
        self.ignore_exit_code = False
        self.command: List[str] = []

    def configure(
        self,
        working_directory: Optional[Union[str, Path]],
        ignore_exit_code: bool,
    ) -> None:
        self.working_directory = Path(working_directory) if working_directory is not None else None
        self.ignore_exit_code = ignore_exit_code

    def set_command(self, command: List[str]) -> None:
        self.command = list(command)

    def run(self) -> int:
        """
        Run the configured command.

        Returns:
            Process exit code

        Raises:
            ProcessLaunchError: If no command is set or the process cannot start
            ProcessExitError: If the exit code is non-zero and not ignored
        """
        if not self.command:
            raise ProcessLaunchError("No command to execute")

        start_time = time.perf_counter()
        self.logger.debug(
            "Executing command",
            command=shlex.join(self.command),
            cwd=str(self.working_directory) if self.working_directory else None,
        )

        try:
            result = subprocess.run(
                self.command,
                cwd=str(self.working_directory) if self.working_directory else None,
                check=False,
            )
        except OSError as e:
            self.logger.error(
                "Process could not be started",
                executable=self.command[0],
                error=str(e),
            )
            raise ProcessLaunchError(
                f"Could not launch {self.command[0]}", command=self.command, cause=e
            ) from e

        duration_ms = (time.perf_counter() - start_time) * 1000
        self.logger.info(
            "Process completed",
            executable=self.command[0],
            exit_code=result.returncode,
            duration_ms=duration_ms,
        )

        if result.returncode != 0 and not self.ignore_exit_code:
            raise ProcessExitError(result.returncode, command=self.command)
        return result.returncode
