"""Repository interfaces (ports) for actors."""

from abc import ABC, abstractmethod

from domain.entities.actor import Actor
from domain.value_objects.title_kind import TitleKind


class ActorRepository(ABC):
    """Interface for actor persistence and association counting."""

    @abstractmethod
    async def find_by_id(self, actor_id: str) -> Actor | None:
        """Return the actor with the given ID, or None if it does not exist."""

    @abstractmethod
    async def count_associations(self, actor_id: str, kind: TitleKind) -> int:
        """Count the remaining associations of an actor to titles of one kind.

        Args:
            actor_id: ID of the actor
            kind: Only associations whose title has this kind are counted

        """

    @abstractmethod
    async def delete_by_id(self, actor_id: str) -> None:
        """Delete the actor."""

    @abstractmethod
    async def list_actor_ids(self) -> list[str]:
        """Return the IDs of every actor."""

    @abstractmethod
    async def list_actors(self) -> list[Actor]:
        """Return every actor ordered by name."""
