"""Pytest configuration and fixtures."""

import sys
import textwrap
import uuid
from pathlib import Path
from typing import Callable, Iterable, Set
from unittest.mock import Mock

import pytest

from runtime_launcher.domain.ports.os_family_port import IOsFamilyPort
from runtime_launcher.domain.value_objects import OsFamily
from runtime_launcher.infrastructure.config.config import get_settings


class FakeOsFamily(IOsFamilyPort):
    """OS family classifier reporting a fixed set of families."""

    def __init__(self, families: Iterable[OsFamily] = ()):
        self.families: Set[OsFamily] = set(families)

    def is_family(self, family: OsFamily) -> bool:
        return family in self.families


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from runtime settings in the environment."""
    for name in (
        "JAVA_HOME",
        "LAUNCHER_RUNTIME_HOME",
        "LAUNCHER_RUNTIME_COMMAND",
        "LAUNCHER_ENTRY_FUNCTION",
        "LAUNCHER_LOG_LEVEL",
        "LAUNCHER_LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_logger() -> Mock:
    """Advisory logging sink."""
    return Mock()


@pytest.fixture
def unit_dir(tmp_path: Path) -> Path:
    """Directory used as the class path for generated target modules."""
    path = tmp_path / "units"
    path.mkdir()
    return path


@pytest.fixture
def write_unit(unit_dir: Path) -> Callable[[str, str], Path]:
    """Write a target module into ``unit_dir``; returns the module file."""

    def _write(name: str, source: str) -> Path:
        module_file = unit_dir.joinpath(*name.split(".")).with_suffix(".py")
        module_file.parent.mkdir(parents=True, exist_ok=True)
        module_file.write_text(textwrap.dedent(source), encoding="utf-8")
        return module_file

    return _write


@pytest.fixture
def unique_name() -> Callable[[str], str]:
    """Module names that never collide with anything already imported."""
    created = []

    def _name(prefix: str = "target") -> str:
        name = f"{prefix}_{uuid.uuid4().hex[:12]}"
        created.append(name)
        return name

    yield _name

    for name in created:
        for key in [k for k in sys.modules if k == name or k.startswith(name + ".")]:
            del sys.modules[key]


@pytest.fixture
def os_family() -> Callable[..., FakeOsFamily]:
    """Build a classifier reporting the given families."""

    def _build(*families: OsFamily) -> FakeOsFamily:
        return FakeOsFamily(families)

    return _build
