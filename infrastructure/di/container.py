from lagom import Container
from motor.motor_asyncio import AsyncIOMotorClient

from application.policies.admin_access_policy import AdminAccessPolicy
from application.ports.lifecycle_log_reader import LifecycleLogReader
from application.ports.lifecycle_logger import LifecycleLogger
from application.ports.media_store import MediaStore
from application.ports.repositories.actor_repository import ActorRepository
from application.ports.repositories.title_repository import TitleRepository
from application.ports.session_resolver import SessionResolver
from application.queries.actor_queries import ListActorsQuery
from application.services.artifact_reclaimer import ArtifactDirectories, ArtifactReclaimer
from application.services.orphan_collector import OrphanActorCollector
from application.use_cases.actor_use_cases import DeleteActorUseCase, SweepOrphanActorsUseCase
from application.use_cases.log_use_cases import ClearLifecycleLogUseCase, ReadLifecycleLogUseCase
from application.use_cases.title_use_cases import DeleteTitleUseCase
from infrastructure.config import settings
from infrastructure.lifecycle.json_lines_log_reader import JsonLinesLogReader
from infrastructure.lifecycle.structlog_lifecycle_logger import StructlogLifecycleLogger
from infrastructure.media_stores.fsspec_media_store import FsspecMediaStore
from infrastructure.repositories.mongo_catalog_repository import (
    MongoActorRepository,
    MongoCatalogCollections,
    MongoTitleRepository,
)
from infrastructure.session.context_session_resolver import ContextSessionResolver


def create_container() -> Container:
    container = Container()

    # Register MongoDB Client and Repositories
    def mongo_client_factory(_: object) -> AsyncIOMotorClient:
        return AsyncIOMotorClient(settings.mongo_uri)

    container[AsyncIOMotorClient] = mongo_client_factory
    container[MongoCatalogCollections] = lambda c: MongoCatalogCollections(
        client=c[AsyncIOMotorClient],
        settings=settings,
    )
    container[TitleRepository] = lambda c: MongoTitleRepository(c[MongoCatalogCollections])
    container[ActorRepository] = lambda c: MongoActorRepository(c[MongoCatalogCollections])

    # Media storage (fsspec)
    container[MediaStore] = FsspecMediaStore(storage_options=settings.media_storage_options)
    container[ArtifactDirectories] = ArtifactDirectories(
        movie_dir=settings.movie_folder,
        series_dir=settings.series_folder,
    )

    # Session and lifecycle logging
    container[SessionResolver] = ContextSessionResolver()
    container[LifecycleLogger] = StructlogLifecycleLogger()
    container[LifecycleLogReader] = lambda _: JsonLinesLogReader(settings.log_file)

    # Register Policies and Services
    container[AdminAccessPolicy] = lambda c: AdminAccessPolicy(
        session_resolver=c[SessionResolver],
        lifecycle_logger=c[LifecycleLogger],
    )
    container[ArtifactReclaimer] = lambda c: ArtifactReclaimer(
        media_store=c[MediaStore],
        directories=c[ArtifactDirectories],
    )
    container[OrphanActorCollector] = lambda c: OrphanActorCollector(
        actor_repository=c[ActorRepository],
    )

    # Register Use Cases
    # Title Use Cases
    container[DeleteTitleUseCase] = lambda c: DeleteTitleUseCase(
        title_repository=c[TitleRepository],
        access_policy=c[AdminAccessPolicy],
        artifact_reclaimer=c[ArtifactReclaimer],
        orphan_collector=c[OrphanActorCollector],
        lifecycle_logger=c[LifecycleLogger],
    )

    # Actor Use Cases
    container[DeleteActorUseCase] = lambda c: DeleteActorUseCase(
        actor_repository=c[ActorRepository],
        access_policy=c[AdminAccessPolicy],
        lifecycle_logger=c[LifecycleLogger],
    )
    container[SweepOrphanActorsUseCase] = lambda c: SweepOrphanActorsUseCase(
        actor_repository=c[ActorRepository],
        access_policy=c[AdminAccessPolicy],
        orphan_collector=c[OrphanActorCollector],
        lifecycle_logger=c[LifecycleLogger],
    )
    container[ListActorsQuery] = lambda c: ListActorsQuery(actor_repository=c[ActorRepository])

    # Log Use Cases
    container[ReadLifecycleLogUseCase] = lambda c: ReadLifecycleLogUseCase(
        log_reader=c[LifecycleLogReader],
        access_policy=c[AdminAccessPolicy],
    )
    container[ClearLifecycleLogUseCase] = lambda c: ClearLifecycleLogUseCase(
        log_reader=c[LifecycleLogReader],
        access_policy=c[AdminAccessPolicy],
        lifecycle_logger=c[LifecycleLogger],
    )

    return container
