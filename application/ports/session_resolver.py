from abc import ABC, abstractmethod

from domain.value_objects.identity import Identity


class SessionResolver(ABC):
    """Port resolving the caller of the current request.

    Both methods may be called independently; an unauthenticated caller has no
    identity but may still report a role.
    """

    @abstractmethod
    async def current_identity(self) -> Identity | None:
        """Return the authenticated identity, or None for anonymous callers."""

    @abstractmethod
    async def current_role(self) -> str | None:
        """Return the caller's role as sent by the session, or None."""
