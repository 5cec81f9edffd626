from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from application.ports.repositories.actor_repository import ActorRepository
from application.ports.repositories.title_repository import TitleRepository
from domain.entities.actor import Actor
from domain.entities.title import Title
from domain.exceptions import InfrastructureError
from domain.value_objects.title_kind import TitleKind
from infrastructure.config import Settings

logger = structlog.get_logger()


class MongoCatalogCollections:
    """Collections of the catalog database.

    Associations live in their own collection as ``{title_id, actor_id}``
    documents, mirroring a relational junction table.
    """

    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.titles = self.db[settings.mongo_titles_collection]
        self.actors = self.db[settings.mongo_actors_collection]
        self.title_actors = self.db[settings.mongo_title_actors_collection]
        self.titles_collection_name = settings.mongo_titles_collection


class MongoTitleRepository(TitleRepository):
    """Title adapter. Deleting a title also deletes its association documents."""

    def __init__(self, collections: MongoCatalogCollections) -> None:
        self.collections = collections

    async def find_by_id(self, title_id: str) -> Title | None:
        try:
            doc = await self.collections.titles.find_one({"title_id": title_id})
        except PyMongoError as e:
            msg = f"Failed to load title {title_id}: {e!s}"
            raise InfrastructureError(msg) from e
        if not doc:
            return None
        return Title(
            title_id=doc["title_id"],
            name=doc.get("name", ""),
            kind=TitleKind(doc.get("kind", TitleKind.MOVIE.value)),
            artifact_ref=doc.get("artifact_ref"),
        )

    async def delete_by_id(self, title_id: str) -> None:
        try:
            result = await self.collections.titles.delete_one({"title_id": title_id})
            cascade = await self.collections.title_actors.delete_many({"title_id": title_id})
        except PyMongoError as e:
            msg = f"Failed to delete title {title_id}: {e!s}"
            raise InfrastructureError(msg) from e
        logger.debug(
            "mongo_title_deleted",
            title_id=title_id,
            deleted=result.deleted_count,
            associations_deleted=cascade.deleted_count,
        )

    async def list_actor_ids(self, title_id: str) -> list[str]:
        try:
            cursor = self.collections.title_actors.find({"title_id": title_id}, {"actor_id": 1})
            return [doc["actor_id"] async for doc in cursor]
        except PyMongoError as e:
            msg = f"Failed to list actors of title {title_id}: {e!s}"
            raise InfrastructureError(msg) from e


class MongoActorRepository(ActorRepository):
    def __init__(self, collections: MongoCatalogCollections) -> None:
        self.collections = collections

    async def find_by_id(self, actor_id: str) -> Actor | None:
        try:
            doc = await self.collections.actors.find_one({"actor_id": actor_id})
        except PyMongoError as e:
            msg = f"Failed to load actor {actor_id}: {e!s}"
            raise InfrastructureError(msg) from e
        if not doc:
            return None
        return Actor(actor_id=doc["actor_id"], name=doc.get("name", ""))

    async def count_associations(self, actor_id: str, kind: TitleKind) -> int:
        # Join each association to its title and keep the ones of the requested kind
        pipeline: list[dict[str, Any]] = [
            {"$match": {"actor_id": actor_id}},
            {
                "$lookup": {
                    "from": self.collections.titles_collection_name,
                    "localField": "title_id",
                    "foreignField": "title_id",
                    "as": "title",
                },
            },
            {"$match": {"title.kind": kind.value}},
            {"$count": "count"},
        ]
        try:
            cursor = self.collections.title_actors.aggregate(pipeline)
            docs = await cursor.to_list(length=1)
        except PyMongoError as e:
            msg = f"Failed to count associations of actor {actor_id}: {e!s}"
            raise InfrastructureError(msg) from e
        return docs[0]["count"] if docs else 0

    async def delete_by_id(self, actor_id: str) -> None:
        try:
            await self.collections.actors.delete_one({"actor_id": actor_id})
        except PyMongoError as e:
            msg = f"Failed to delete actor {actor_id}: {e!s}"
            raise InfrastructureError(msg) from e

    async def list_actor_ids(self) -> list[str]:
        try:
            cursor = self.collections.actors.find({}, {"actor_id": 1})
            return [doc["actor_id"] async for doc in cursor]
        except PyMongoError as e:
            msg = f"Failed to list actors: {e!s}"
            raise InfrastructureError(msg) from e

    async def list_actors(self) -> list[Actor]:
        try:
            cursor = self.collections.actors.find().sort("name", 1)
            return [
                Actor(actor_id=doc["actor_id"], name=doc.get("name", "")) async for doc in cursor
            ]
        except PyMongoError as e:
            msg = f"Failed to list actors: {e!s}"
            raise InfrastructureError(msg) from e
