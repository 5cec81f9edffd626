"""Garbage collection of actors no longer linked to any title."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from domain.services.orphan_rule import ActorOrphanRule
from domain.value_objects.title_kind import TitleKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from application.ports.repositories.actor_repository import ActorRepository

logger = structlog.get_logger()


class OrphanActorCollector:
    """Delete the actors of a snapshot that have no association left.

    Each actor is checked and deleted on its own, in snapshot order. There is
    no transaction around the loop: if it fails midway the actors already
    deleted stay deleted, and running the collector again over the same ids
    finishes the job.
    """

    def __init__(self, actor_repository: ActorRepository) -> None:
        self._actor_repository = actor_repository

    async def collect(self, actor_ids: Iterable[str]) -> list[str]:
        """Delete every orphan among ``actor_ids`` and return the deleted ids."""
        deleted: list[str] = []

        for actor_id in dict.fromkeys(actor_ids):
            # Two separate per-kind counts; the actor goes only when both are zero
            movie_count = await self._actor_repository.count_associations(
                actor_id,
                TitleKind.MOVIE,
            )
            series_count = await self._actor_repository.count_associations(
                actor_id,
                TitleKind.SERIES,
            )

            if not ActorOrphanRule.is_orphan(movie_count, series_count):
                logger.debug(
                    "actor_still_referenced",
                    actor_id=actor_id,
                    movie_count=movie_count,
                    series_count=series_count,
                )
                continue

            await self._actor_repository.delete_by_id(actor_id)
            deleted.append(actor_id)
            logger.info("orphan_actor_deleted", actor_id=actor_id)

        return deleted
