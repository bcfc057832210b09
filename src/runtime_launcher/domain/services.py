"""
Domain Services

Launch spec validation, performed at the launch boundary and never
by the launch spec's own setters.
"""

from runtime_launcher.domain.entities import LaunchSpec
from runtime_launcher.domain.errors import ConfigurationError


def validate_forked(spec: LaunchSpec) -> None:
    """
    Check that a spec can be run in a forked runtime.

    Raises:
        ConfigurationError: If both or neither of entry point and archive are set
    """
    if spec.entry_point_name is not None and spec.archive_path is not None:
        raise ConfigurationError(
            "Only one of entry point name and archive can be set",
            entry_point_name=spec.entry_point_name,
            archive_path=str(spec.archive_path),
        )
    if spec.entry_point_name is None and spec.archive_path is None:
        raise ConfigurationError("Entry point name must not be null")


def validate_in_process(spec: LaunchSpec) -> None:
    """
    Check that a spec can be run inside the current process.

    Raises:
        ConfigurationError: If no entry point is named or an archive is set
    """
    if spec.entry_point_name is None:
        raise ConfigurationError("Entry point name must not be null")
    if spec.archive_path is not None:
        raise ConfigurationError(
            "Archive execution requires forked mode",
            archive_path=str(spec.archive_path),
        )
