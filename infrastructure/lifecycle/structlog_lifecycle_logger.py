from collections.abc import Mapping
from typing import Any

import structlog

from application.ports.lifecycle_logger import LifecycleLogger
from domain.value_objects.severity import Severity


class StructlogLifecycleLogger(LifecycleLogger):
    """Emit lifecycle events as structlog records on the ``lifecycle`` logger.

    The payload becomes the record's key/value pairs. With the JSON file
    handler installed by ``setup_logging`` every event is one JSON line.
    """

    def __init__(self, logger: Any = None) -> None:  # noqa: ANN401
        self._logger = logger or structlog.get_logger("lifecycle")

    def log(self, event: str, payload: Mapping[str, Any], severity: Severity) -> None:
        emit = self._logger.error if severity == Severity.ERROR else self._logger.info
        try:
            emit(event, lifecycle=True, **payload)
        except Exception as e:  # noqa: BLE001
            # Logging must never fail the operation being logged
            structlog.get_logger().warning(
                "lifecycle_event_dropped",
                lifecycle_event=event,
                error=str(e),
            )
