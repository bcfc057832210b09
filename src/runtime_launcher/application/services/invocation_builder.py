"""
Invocation Builder

Assembles the command line for a forked runtime.
"""

import os
from typing import List

from runtime_launcher.application.services.runtime_locator import RuntimeLocator
from runtime_launcher.domain.entities import LaunchSpec
from runtime_launcher.infrastructure.platform import join_path_list


class InvocationBuilder:
    """
    Builds the argument list for a forked launch.

    The order is fixed: runtime options must precede the target selector,
    otherwise the runtime hands them to the program as arguments.

        <runtime> <runtime args> [-Xmx<mem>] [-D<k>=<v>...]
            [-classpath <path list>] (-jar <archive> | <entry point>) <args>
    """

    def __init__(self, locator: RuntimeLocator, path_separator: str = os.pathsep):
        self.locator = locator
        self.path_separator = path_separator

    def build(self, spec: LaunchSpec) -> List[str]:
        """
        Build the command for ``spec``.

        The launch spec must already be validated; it is not modified.

        Args:
            spec: Launch spec with exactly one of entry point and archive set

        Returns:
            Flat list of command line strings
        """
        if spec.runtime_executable is not None:
            command = [spec.runtime_executable]
        else:
            command = [self.locator.resolve_runtime_executable()]

        command.extend(spec.runtime_arguments)

        if spec.max_memory is not None:
            command.append(f"-Xmx{spec.max_memory}")

        command.extend(property_flags(spec))

        if spec.class_path:
            command.append("-classpath")
            command.append(join_path_list(spec.class_path, self.path_separator))

        if spec.archive_path is not None:
            command.append("-jar")
            command.append(str(spec.archive_path))
        else:
            command.append(spec.entry_point_name)

        command.extend(spec.program_arguments)
        return command


def property_flags(spec: LaunchSpec) -> List[str]:
    """Format the launch spec's environment properties as ``-D<name>=<value>`` flags."""
    return [f"-D{name}={value}" for name, value in spec.environment_properties.items()]
