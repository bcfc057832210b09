"""
Process Executor Port Interface

Defines the contract for running an assembled command line.
This is an output port - implemented by infrastructure layer (subprocess).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union


class IProcessExecutorPort(ABC):
    """
    Port interface for spawning a process and waiting for it.

    One instance serves exactly one launch.
    """

    @abstractmethod
    def configure(
        self,
        working_directory: Optional[Union[str, Path]],
        ignore_exit_code: bool,
    ) -> None:
        """
        Set the process working directory and exit code policy.

        Args:
            working_directory: Directory to run in, None for the current one
            ignore_exit_code: Whether a non-zero exit code is acceptable
        """
        pass

    @abstractmethod
    def set_command(self, command: List[str]) -> None:
        """
        Set the command to run.

        Args:
            command: Executable followed by its arguments
        """
        pass

    @abstractmethod
    def run(self) -> int:
        """
        Start the process and block until it exits.

        Returns:
            Process exit code

        Raises:
            ProcessLaunchError: If the process could not be started
        """
        pass
