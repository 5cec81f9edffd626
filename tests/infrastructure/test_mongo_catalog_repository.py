"""Tests for the MongoDB catalog adapters against in-memory fake collections."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from domain.exceptions import InfrastructureError
from domain.value_objects.title_kind import TitleKind
from infrastructure.config import Settings
from infrastructure.repositories.mongo_catalog_repository import (
    MongoActorRepository,
    MongoCatalogCollections,
    MongoTitleRepository,
)


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self.docs = docs

    def sort(self, key: str, direction: int) -> FakeCursor:
        self.docs = sorted(self.docs, key=lambda d: d.get(key, ""), reverse=direction < 0)
        return self

    async def to_list(self, length: int | None = None) -> list[dict[str, Any]]:
        return self.docs[:length] if length else list(self.docs)

    def __aiter__(self) -> FakeCursor:
        self._iter = iter(self.docs)
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return next(self._iter)
        except StopIteration:
            raise StopAsyncIteration from None


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(doc.get(key) == value for key, value in query.items())


class FakeCollection:
    """Subset of the motor collection API used by the adapters."""

    def __init__(self, docs: list[dict[str, Any]] | None = None, fail: bool = False) -> None:
        self.docs = docs or []
        self.fail = fail
        self.pipelines: list[list[dict[str, Any]]] = []
        self.database: FakeDatabase | None = None

    def _check(self) -> None:
        if self.fail:
            msg = "no servers available"
            raise ServerSelectionTimeoutError(msg)

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        self._check()
        return next((dict(d) for d in self.docs if _matches(d, query)), None)

    def find(
        self,
        query: dict[str, Any] | None = None,
        projection: Any = None,  # noqa: ANN401
    ) -> FakeCursor:
        self._check()
        return FakeCursor([dict(d) for d in self.docs if _matches(d, query or {})])

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check()
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check()
        before = len(self.docs)
        self.docs = [d for d in self.docs if not _matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    def aggregate(self, pipeline: list[dict[str, Any]]) -> FakeCursor:
        """Evaluate the match/lookup/match/count pipeline used for association counts."""
        self._check()
        self.pipelines.append(pipeline)
        first_match, lookup, kind_match, _count = pipeline
        joined = []
        foreign = self.database[lookup["$lookup"]["from"]]
        for doc in self.docs:
            if not _matches(doc, first_match["$match"]):
                continue
            titles = [t for t in foreign.docs if t["title_id"] == doc["title_id"]]
            if any(t.get("kind") == kind_match["$match"]["title.kind"] for t in titles):
                joined.append(doc)
        return FakeCursor([{"count": len(joined)}] if joined else [])


class FakeDatabase(dict):
    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self:
            collection = FakeCollection()
            collection.database = self
            super().__setitem__(name, collection)
        return super().__getitem__(name)


class FakeClient:
    def __init__(self) -> None:
        self.databases: dict[str, FakeDatabase] = {}

    def __getitem__(self, name: str) -> FakeDatabase:
        return self.databases.setdefault(name, FakeDatabase())


@pytest.fixture
def collections() -> MongoCatalogCollections:
    settings = Settings()
    catalog = MongoCatalogCollections(client=FakeClient(), settings=settings)
    catalog.titles.docs = [
        {"title_id": "T1", "name": "First", "kind": "Movie", "artifact_ref": "abc"},
        {"title_id": "T2", "name": "Second", "kind": "Serie"},
    ]
    catalog.actors.docs = [
        {"actor_id": "A1", "name": "Zoe"},
        {"actor_id": "A2", "name": "Adam"},
    ]
    catalog.title_actors.docs = [
        {"title_id": "T1", "actor_id": "A1"},
        {"title_id": "T1", "actor_id": "A2"},
        {"title_id": "T2", "actor_id": "A2"},
    ]
    return catalog


class TestMongoTitleRepository:
    @pytest.mark.asyncio
    async def test_find_by_id(self, collections) -> None:
        title = await MongoTitleRepository(collections).find_by_id("T1")

        assert title is not None
        assert title.kind is TitleKind.MOVIE
        assert title.artifact_ref == "abc"

    @pytest.mark.asyncio
    async def test_find_missing(self, collections) -> None:
        assert await MongoTitleRepository(collections).find_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_list_actor_ids(self, collections) -> None:
        assert await MongoTitleRepository(collections).list_actor_ids("T1") == ["A1", "A2"]

    @pytest.mark.asyncio
    async def test_delete_cascades_associations(self, collections) -> None:
        await MongoTitleRepository(collections).delete_by_id("T1")

        assert [d["title_id"] for d in collections.titles.docs] == ["T2"]
        assert collections.title_actors.docs == [{"title_id": "T2", "actor_id": "A2"}]

    @pytest.mark.asyncio
    async def test_driver_errors_become_infrastructure_errors(self, collections) -> None:
        collections.titles.fail = True

        with pytest.raises(InfrastructureError):
            await MongoTitleRepository(collections).find_by_id("T1")


class TestMongoActorRepository:
    @pytest.mark.asyncio
    async def test_count_associations_per_kind(self, collections) -> None:
        repository = MongoActorRepository(collections)

        assert await repository.count_associations("A2", TitleKind.MOVIE) == 1
        assert await repository.count_associations("A2", TitleKind.SERIES) == 1
        assert await repository.count_associations("A1", TitleKind.SERIES) == 0

    @pytest.mark.asyncio
    async def test_count_joins_titles_collection(self, collections) -> None:
        await MongoActorRepository(collections).count_associations("A1", TitleKind.MOVIE)

        lookup = collections.title_actors.pipelines[0][1]["$lookup"]
        assert lookup["from"] == "titles"
        assert lookup["localField"] == lookup["foreignField"] == "title_id"

    @pytest.mark.asyncio
    async def test_counts_drop_after_title_delete(self, collections) -> None:
        await MongoTitleRepository(collections).delete_by_id("T1")
        repository = MongoActorRepository(collections)

        assert await repository.count_associations("A1", TitleKind.MOVIE) == 0
        assert await repository.count_associations("A1", TitleKind.SERIES) == 0

    @pytest.mark.asyncio
    async def test_list_actors_sorted_by_name(self, collections) -> None:
        actors = await MongoActorRepository(collections).list_actors()

        assert [a.name for a in actors] == ["Adam", "Zoe"]

    @pytest.mark.asyncio
    async def test_delete_and_find(self, collections) -> None:
        repository = MongoActorRepository(collections)

        await repository.delete_by_id("A1")

        assert await repository.find_by_id("A1") is None
        assert await repository.list_actor_ids() == ["A2"]
