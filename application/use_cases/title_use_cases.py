import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.title_dtos import TITLE_DELETE_FAILED, TITLE_DELETED, TITLE_NOT_FOUND
from application.policies.admin_access_policy import AdminAccessPolicy
from application.ports.lifecycle_logger import LifecycleLogger
from application.ports.repositories.title_repository import TitleRepository
from application.services.artifact_reclaimer import ArtifactReclaimer
from application.services.orphan_collector import OrphanActorCollector
from domain.value_objects.severity import Severity

logger = structlog.get_logger()


class DeleteTitleUseCase:
    """Delete a title, its media file and the actors it leaves orphaned.

    Runs guard, lookup, reclaim, delete and collect strictly in that order.
    The filesystem and the datastore share no transaction; everything after
    the guard sits behind a single error boundary.
    """

    def __init__(
        self,
        title_repository: TitleRepository,
        access_policy: AdminAccessPolicy,
        artifact_reclaimer: ArtifactReclaimer,
        orphan_collector: OrphanActorCollector,
        lifecycle_logger: LifecycleLogger,
    ) -> None:
        self.title_repository = title_repository
        self.access_policy = access_policy
        self.artifact_reclaimer = artifact_reclaimer
        self.orphan_collector = orphan_collector
        self.lifecycle_logger = lifecycle_logger

    async def execute(self, title_id: str) -> Result[str, AppError]:
        access = await self.access_policy.authorize("delete_title", {"title_id": title_id})
        if isinstance(access, Failure):
            return access
        grant = access.unwrap()

        self.lifecycle_logger.log(
            "delete_title_called",
            {"user_id": grant.user_id, "role": grant.role, "title_id": title_id},
            Severity.INFO,
        )

        try:
            title = await self.title_repository.find_by_id(title_id)
            if title is None:
                self.lifecycle_logger.log(
                    "delete_title_not_found",
                    {"user_id": grant.user_id, "title_id": title_id},
                    Severity.ERROR,
                )
                return Failure(AppError("not_found", TITLE_NOT_FOUND))

            if title.has_artifact:
                self.artifact_reclaimer.reclaim(title.artifact_ref, title.kind)

            # Associations cascade with the title row, so snapshot them first
            actor_ids = await self.title_repository.list_actor_ids(title_id)

            await self.title_repository.delete_by_id(title_id)

            deleted_actor_ids = await self.orphan_collector.collect(actor_ids)
            logger.info(
                "title_deleted",
                title_id=title_id,
                kind=title.kind.value,
                actors_checked=len(set(actor_ids)),
                actors_deleted=len(deleted_actor_ids),
            )
        except Exception as e:  # noqa: BLE001
            self.lifecycle_logger.log(
                "delete_title_error",
                {"user_id": grant.user_id, "title_id": title_id, "error": str(e)},
                Severity.ERROR,
            )
            return Failure(AppError("internal", TITLE_DELETE_FAILED))

        self.lifecycle_logger.log(
            "delete_title_success",
            {"user_id": grant.user_id, "title_id": title_id},
            Severity.INFO,
        )
        return Success(TITLE_DELETED)
