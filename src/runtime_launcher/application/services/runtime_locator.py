"""
Runtime Locator

Determines the runtime executable used for forked launches when the
launch spec does not name one explicitly.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from runtime_launcher.domain.ports.os_family_port import IOsFamilyPort
from runtime_launcher.domain.value_objects import (
    DEFAULT_RUNTIME_LAYOUT,
    RUNTIME_LAYOUTS,
    OsFamily,
    RuntimeLayout,
)
from runtime_launcher.infrastructure.config.config import get_settings
from runtime_launcher.infrastructure.logging.logging_config import get_logger


class RuntimeLocator:
    """
    Finds the runtime executable for the host OS family.

    Two installation layouts are searched, in order: ``<runtime home>/../bin``
    for a runtime home that sits inside a JDK (``jdk/jre``), then
    ``<JAVA_HOME>/bin``. Homes are not reliable on every platform, so when
    neither holds the executable the bare command name is returned and
    resolved via ``PATH`` at launch time. Resolution itself never fails.
    """

    def __init__(
        self,
        os_family: IOsFamilyPort,
        runtime_home: Optional[str] = None,
        command: Optional[str] = None,
        layouts: Sequence[Tuple[OsFamily, RuntimeLayout]] = RUNTIME_LAYOUTS,
        logger=None,
        java_home: Optional[str] = None,
    ):
        settings = get_settings()
        self.os_family = os_family
        self.runtime_home = runtime_home if runtime_home is not None else settings.runtime_home
        self.java_home = java_home if java_home is not None else settings.java_home
        self.command = command or settings.runtime_command
        self.layouts = tuple(layouts)
        self.logger = logger or get_logger(__name__)

    def layout(self) -> RuntimeLayout:
        """Layout of the first family in the table the host belongs to."""
        for family, layout in self.layouts:
            if self.os_family.is_family(family):
                return layout
        return DEFAULT_RUNTIME_LAYOUT

    def candidates(self, layout: RuntimeLayout) -> List[Path]:
        """Executable locations to check, most specific first."""
        name = layout.executable_name(self.command)
        found = []
        if self.runtime_home:
            found.append(Path(self.runtime_home).parent / "bin" / name)
        if self.java_home:
            found.append(Path(self.java_home) / "bin" / name)
        return found

    def resolve_runtime_executable(self) -> str:
        """
        Resolve the runtime executable.

        Returns:
            Absolute path of the first existing candidate, or the bare command name
        """
        layout = self.layout()
        if not layout.search_home:
            return self.command

        candidates = self.candidates(layout)
        for candidate in candidates:
            if candidate.exists():
                return str(candidate.absolute())
        if candidates:
            self.logger.debug(
                "Runtime not found under home, falling back to PATH",
                candidates=[str(c) for c in candidates],
                command=self.command,
            )
        return self.command
