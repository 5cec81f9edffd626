import structlog
from returns.result import Failure, Result, Success

from application.dtos.actor_dtos import (
    ACTOR_DELETE_FAILED,
    ACTOR_DELETED,
    ACTOR_NOT_FOUND,
    ACTOR_STILL_LINKED,
    SWEEP_FAILED,
    SweepReport,
)
from application.dtos.errors import AppError
from application.policies.admin_access_policy import AdminAccessPolicy
from application.ports.lifecycle_logger import LifecycleLogger
from application.ports.repositories.actor_repository import ActorRepository
from application.services.orphan_collector import OrphanActorCollector
from domain.exceptions import ActorStillLinkedError
from domain.services.orphan_rule import ActorOrphanRule
from domain.value_objects.severity import Severity
from domain.value_objects.title_kind import TitleKind

logger = structlog.get_logger()


class DeleteActorUseCase:
    """Delete a single actor, refusing while any title still links to it."""

    def __init__(
        self,
        actor_repository: ActorRepository,
        access_policy: AdminAccessPolicy,
        lifecycle_logger: LifecycleLogger,
    ) -> None:
        self.actor_repository = actor_repository
        self.access_policy = access_policy
        self.lifecycle_logger = lifecycle_logger

    async def execute(self, actor_id: str) -> Result[str, AppError]:
        access = await self.access_policy.authorize("delete_actor", {"actor_id": actor_id})
        if isinstance(access, Failure):
            return access
        user_id = access.unwrap().user_id

        self.lifecycle_logger.log(
            "delete_actor_called",
            {"user_id": user_id, "actor_id": actor_id},
            Severity.INFO,
        )

        try:
            actor = await self.actor_repository.find_by_id(actor_id)
            if actor is None:
                self.lifecycle_logger.log(
                    "delete_actor_not_found",
                    {"user_id": user_id, "actor_id": actor_id},
                    Severity.ERROR,
                )
                return Failure(AppError("not_found", ACTOR_NOT_FOUND))

            movie_count = await self.actor_repository.count_associations(actor_id, TitleKind.MOVIE)
            series_count = await self.actor_repository.count_associations(
                actor_id,
                TitleKind.SERIES,
            )
            if not ActorOrphanRule.is_orphan(movie_count, series_count):
                msg = f"Actor {actor_id} is linked to {movie_count} movies, {series_count} series"
                raise ActorStillLinkedError(msg)

            await self.actor_repository.delete_by_id(actor_id)
        except ActorStillLinkedError as e:
            self.lifecycle_logger.log(
                "delete_actor_linked",
                {"user_id": user_id, "actor_id": actor_id, "error": str(e)},
                Severity.ERROR,
            )
            return Failure(AppError("conflict", ACTOR_STILL_LINKED))
        except Exception as e:  # noqa: BLE001
            self.lifecycle_logger.log(
                "delete_actor_error",
                {"user_id": user_id, "actor_id": actor_id, "error": str(e)},
                Severity.ERROR,
            )
            return Failure(AppError("internal", ACTOR_DELETE_FAILED))

        self.lifecycle_logger.log(
            "delete_actor_success",
            {"user_id": user_id, "actor_id": actor_id},
            Severity.INFO,
        )
        return Success(ACTOR_DELETED)


class SweepOrphanActorsUseCase:
    """Collect every orphaned actor in the catalog.

    Repairs the state left behind when a title deletion failed during orphan
    collection. Safe to run any number of times.
    """

    def __init__(
        self,
        actor_repository: ActorRepository,
        access_policy: AdminAccessPolicy,
        orphan_collector: OrphanActorCollector,
        lifecycle_logger: LifecycleLogger,
    ) -> None:
        self.actor_repository = actor_repository
        self.access_policy = access_policy
        self.orphan_collector = orphan_collector
        self.lifecycle_logger = lifecycle_logger

    async def execute(self) -> Result[SweepReport, AppError]:
        access = await self.access_policy.authorize("sweep_orphan_actors", {})
        if isinstance(access, Failure):
            return access
        user_id = access.unwrap().user_id

        self.lifecycle_logger.log("sweep_orphan_actors_called", {"user_id": user_id}, Severity.INFO)

        try:
            actor_ids = await self.actor_repository.list_actor_ids()
            deleted = await self.orphan_collector.collect(actor_ids)
        except Exception as e:  # noqa: BLE001
            self.lifecycle_logger.log(
                "sweep_orphan_actors_error",
                {"user_id": user_id, "error": str(e)},
                Severity.ERROR,
            )
            return Failure(AppError("internal", SWEEP_FAILED))

        report = SweepReport(scanned=len(actor_ids), deleted_actor_ids=deleted)
        self.lifecycle_logger.log(
            "sweep_orphan_actors_success",
            {"user_id": user_id, "scanned": report.scanned, "deleted": len(deleted)},
            Severity.INFO,
        )
        return Success(report)
