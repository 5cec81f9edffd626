"""Repository interfaces (ports) for catalog titles."""

from abc import ABC, abstractmethod

from domain.entities.title import Title


class TitleRepository(ABC):
    """Interface for title persistence.

    Implementations raise ``InfrastructureError`` when the datastore fails.
    Deleting a title also removes its actor associations.
    """

    @abstractmethod
    async def find_by_id(self, title_id: str) -> Title | None:
        """Return the title with the given ID, or None if it does not exist."""

    @abstractmethod
    async def delete_by_id(self, title_id: str) -> None:
        """Delete the title row and its actor associations."""

    @abstractmethod
    async def list_actor_ids(self, title_id: str) -> list[str]:
        """Return the IDs of the actors associated with the title."""
