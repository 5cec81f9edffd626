"""Tests for OrphanActorCollector."""

from __future__ import annotations

import pytest

from application.services.orphan_collector import OrphanActorCollector
from domain.entities.actor import Actor
from domain.entities.title import Title
from domain.value_objects.title_kind import TitleKind
from tests.mocks import MockActorRepository


class TestOrphanActorCollector:
    """Test the zero/zero collection rule."""

    @pytest.mark.asyncio
    async def test_deletes_only_unreferenced_actors(self, catalog) -> None:
        catalog.add_title(Title(title_id="m", kind=TitleKind.MOVIE), ["a-movie", "a-both"])
        catalog.add_title(Title(title_id="s", kind=TitleKind.SERIES), ["a-series", "a-both"])
        catalog.add_actor(Actor(actor_id="a-none"))
        collector = OrphanActorCollector(MockActorRepository(catalog))

        deleted = await collector.collect(["a-movie", "a-series", "a-both", "a-none"])

        assert deleted == ["a-none"]
        assert set(catalog.actors) == {"a-movie", "a-series", "a-both"}

    @pytest.mark.asyncio
    async def test_movie_reference_alone_keeps_actor(self, catalog) -> None:
        catalog.add_title(Title(title_id="m", kind=TitleKind.MOVIE), ["a1"])
        collector = OrphanActorCollector(MockActorRepository(catalog))

        assert await collector.collect(["a1"]) == []
        assert "a1" in catalog.actors

    @pytest.mark.asyncio
    async def test_series_reference_alone_keeps_actor(self, catalog) -> None:
        catalog.add_title(Title(title_id="s", kind=TitleKind.SERIES), ["a1"])
        collector = OrphanActorCollector(MockActorRepository(catalog))

        assert await collector.collect(["a1"]) == []
        assert "a1" in catalog.actors

    @pytest.mark.asyncio
    async def test_two_separate_counts_per_actor(self, catalog) -> None:
        catalog.add_actor(Actor(actor_id="a1"))
        collector = OrphanActorCollector(MockActorRepository(catalog))

        await collector.collect(["a1"])

        counts = [call for call in catalog.calls if call[0] == "count"]
        assert counts == [("count", "a1", TitleKind.MOVIE), ("count", "a1", TitleKind.SERIES)]

    @pytest.mark.asyncio
    async def test_duplicate_ids_visited_once(self, catalog) -> None:
        catalog.add_actor(Actor(actor_id="a1"))
        collector = OrphanActorCollector(MockActorRepository(catalog))

        assert await collector.collect(["a1", "a1"]) == ["a1"]
        assert catalog.calls.count(("delete_actor", "a1")) == 1

    @pytest.mark.asyncio
    async def test_failure_midway_keeps_earlier_deletions(self, catalog) -> None:
        for actor_id in ("a1", "a2", "a3"):
            catalog.add_actor(Actor(actor_id=actor_id))
        collector = OrphanActorCollector(MockActorRepository(catalog, fail_on_delete_of="a2"))

        with pytest.raises(RuntimeError):
            await collector.collect(["a1", "a2", "a3"])

        assert "a1" not in catalog.actors
        assert {"a2", "a3"} <= set(catalog.actors)

        # A second pass finishes the job
        assert await OrphanActorCollector(MockActorRepository(catalog)).collect(["a2", "a3"]) == [
            "a2",
            "a3",
        ]
