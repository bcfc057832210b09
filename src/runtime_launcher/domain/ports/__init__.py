"""
Domain Ports

Port interfaces defining contracts between layers.
All dependencies on external systems are abstracted through ports.
"""

from .process_executor_port import IProcessExecutorPort
from .os_family_port import IOsFamilyPort

__all__ = [
    "IProcessExecutorPort",
    "IOsFamilyPort",
]
