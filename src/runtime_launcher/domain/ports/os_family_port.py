"""
OS Family Port Interface

Defines the contract for classifying the host operating system.
"""

from abc import ABC, abstractmethod

from runtime_launcher.domain.value_objects import OsFamily


class IOsFamilyPort(ABC):
    """Port interface for operating system family detection."""

    @abstractmethod
    def is_family(self, family: OsFamily) -> bool:
        """
        Check whether the host belongs to an OS family.

        Args:
            family: Family to test for

        Returns:
            True if the host is a member of ``family``
        """
        pass
