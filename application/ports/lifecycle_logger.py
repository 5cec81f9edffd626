from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from domain.value_objects.severity import Severity


class LifecycleLogger(ABC):
    """Port for structured lifecycle events emitted at pipeline checkpoints."""

    @abstractmethod
    def log(self, event: str, payload: Mapping[str, Any], severity: Severity) -> None:
        """Emit one lifecycle event.

        Implementations must not raise back into the caller.

        Args:
            event: Event name, e.g. ``delete_title_called``
            payload: Key/value details of the event
            severity: ``Severity.INFO`` or ``Severity.ERROR``

        """
