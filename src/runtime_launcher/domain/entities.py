"""
Launch Entities

The configuration of a single launch, built incrementally and validated
only when it is handed to the launcher.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

PathLike = Union[str, Path]


@dataclass
class LaunchSpec:
    """
    Describes one program launch.

    Setting fields never fails; contradictory combinations (for example
    both an entry point and an archive) are rejected by the launcher at
    execution time. The launcher never mutates the launch spec.
    """

    entry_point_name: Optional[str] = None
    archive_path: Optional[PathLike] = None
    class_path: List[PathLike] = field(default_factory=list)
    program_arguments: List[str] = field(default_factory=list)
    runtime_arguments: List[str] = field(default_factory=list)
    environment_properties: Dict[str, str] = field(default_factory=dict)
    forked: bool = False
    working_directory: Optional[PathLike] = None
    runtime_executable: Optional[str] = None
    max_memory: Optional[str] = None
    ignore_exit_code: bool = False

    def add_class_path(self, *entries: PathLike) -> "LaunchSpec":
        """Append entries to the class path, keeping their order."""
        self.class_path.extend(entries)
        return self

    def add_program_arguments(self, *args: str) -> "LaunchSpec":
        self.program_arguments.extend(args)
        return self

    def add_runtime_arguments(self, *args: str) -> "LaunchSpec":
        self.runtime_arguments.extend(args)
        return self

    def set_property(self, name: str, value: str) -> "LaunchSpec":
        """Set a runtime property passed as ``-D<name>=<value>``."""
        self.environment_properties[name] = value
        return self

    def ignored_in_process(self) -> List[str]:
        """
        Names of the set fields that only apply to a forked runtime.

        Returns:
            Field names in declaration order, empty if none are set
        """
        ignored = []
        if self.runtime_arguments:
            ignored.append("runtime_arguments")
        if self.environment_properties:
            ignored.append("environment_properties")
        if self.working_directory is not None:
            ignored.append("working_directory")
        if self.runtime_executable is not None:
            ignored.append("runtime_executable")
        if self.max_memory is not None:
            ignored.append("max_memory")
        return ignored
