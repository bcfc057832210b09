"""
Launcher Errors

Error taxonomy shared by the in-process and forked execution paths.
"""

from typing import Any, Dict, List, Optional


class LauncherError(Exception):
    """Base error for the launcher with message, detail and extra context."""

    def __init__(
        self,
        message: str,
        detail: Optional[str] = None,
        **kwargs: Any
    ):
        self.message = message
        self.detail = detail
        self.extra = kwargs
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary format."""
        error_dict = {
            "error": type(self).__name__,
            "message": self.message,
            "detail": self.detail,
        }
        error_dict.update(self.extra)
        # Remove None values
        return {k: v for k, v in error_dict.items() if v is not None}

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message='{self.message}', detail='{self.detail}', extra={self.extra})"


class ConfigurationError(LauncherError):
    """
    The launch spec is self-contradictory or incomplete.

    Always raised before any process is started or any unit is loaded.
    """


class LoadError(LauncherError):
    """
    The target unit could not be located or loaded in-process,
    or it exposes no usable entry point.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None, **kwargs: Any):
        super().__init__(message, detail=str(cause) if cause is not None else None, **kwargs)
        self.cause = cause


class TargetExecutionError(LauncherError):
    """
    The target's entry point ran and raised.

    ``cause`` is the exception raised by the target itself.
    """

    def __init__(self, message: str, cause: BaseException, **kwargs: Any):
        super().__init__(message, detail=repr(cause), **kwargs)
        self.cause = cause


class ProcessLaunchError(LauncherError):
    """The runtime subprocess could not be started at all."""

    def __init__(
        self,
        message: str,
        command: Optional[List[str]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, detail=str(cause) if cause is not None else None)
        self.command = list(command or [])
        self.cause = cause


class ProcessExitError(LauncherError):
    """The runtime subprocess exited non-zero and exit codes are not ignored."""

    def __init__(self, exit_code: int, command: Optional[List[str]] = None):
        super().__init__(
            f"Process returned exit code {exit_code}",
            exit_code=exit_code,
        )
        self.exit_code = exit_code
        self.command = list(command or [])
