"""Terminal rendering module."""

from .console import ConsoleOutput, ConsoleSection, plain_text
from .normalizer import normalize_output
from .regions import RegionManager
from .snapshot import SnapshotTracker, TaskSnapshot

__all__ = [
    "ConsoleOutput",
    "ConsoleSection",
    "plain_text",
    "normalize_output",
    "RegionManager",
    "SnapshotTracker",
    "TaskSnapshot",
]
