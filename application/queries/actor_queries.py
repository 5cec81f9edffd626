from returns.result import Failure, Result, Success

from application.dtos.actor_dtos import ActorSummary
from application.ports.repositories.actor_repository import ActorRepository
from domain.exceptions import InfrastructureError
from domain.value_objects.title_kind import TitleKind


class ListActorsQuery:
    def __init__(self, actor_repository: ActorRepository) -> None:
        self.actor_repository = actor_repository

    async def execute(self) -> Result[list[ActorSummary], str]:
        try:
            summaries = []
            for actor in await self.actor_repository.list_actors():
                summaries.append(
                    ActorSummary(
                        actor_id=actor.actor_id,
                        name=actor.name,
                        movie_count=await self.actor_repository.count_associations(
                            actor.actor_id,
                            TitleKind.MOVIE,
                        ),
                        series_count=await self.actor_repository.count_associations(
                            actor.actor_id,
                            TitleKind.SERIES,
                        ),
                    ),
                )
            return Success(summaries)
        except InfrastructureError as e:
            return Failure(f"Data error: {e!s}")
