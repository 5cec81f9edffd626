from enum import Enum


class Severity(str, Enum):
    """Severity attached to a lifecycle event."""

    INFO = "info"
    ERROR = "error"
