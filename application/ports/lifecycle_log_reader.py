from abc import ABC, abstractmethod
from typing import Any


class LifecycleLogReader(ABC):
    """Port for reading back and clearing the persisted lifecycle log."""

    @abstractmethod
    def read_entries(self) -> list[dict[str, Any]]:
        """Return every log entry, oldest first."""

    @abstractmethod
    def clear(self) -> int:
        """Delete every log file and return how many were removed."""
