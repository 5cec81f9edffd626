"""Domain exceptions for business rule violations."""


class DomainError(Exception):
    """Base exception for domain layer."""


class ValidationError(DomainError):
    """Raised when input validation fails."""


class AggregateNotFoundError(DomainError):
    """Raised when an entity is not found in the repository."""


class ConcurrencyError(DomainError):
    """Raised when a concurrency conflict occurs."""


class InfrastructureError(DomainError):
    """Raised when infrastructure operations fail (DB, filesystem, etc.)."""


class ActorStillLinkedError(DomainError):
    """Raised when an actor is removed while titles still reference it."""
