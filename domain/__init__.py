"""Domain layer exports."""

from domain.entities import Actor, Title
from domain.exceptions import ActorStillLinkedError, DomainError, ValidationError
from domain.value_objects import Identity, Severity, TitleKind, UserRole

__all__ = [
    "Actor",
    "ActorStillLinkedError",
    "DomainError",
    "Identity",
    "Severity",
    "Title",
    "TitleKind",
    "UserRole",
    "ValidationError",
]
