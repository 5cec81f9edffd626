from collections.abc import Container
from typing import Annotated

from fastapi import APIRouter, Depends, status

from application.dtos.actor_dtos import ActorSummary, SweepReport
from application.queries.actor_queries import ListActorsQuery
from application.use_cases.actor_use_cases import DeleteActorUseCase, SweepOrphanActorsUseCase
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

router = APIRouter(prefix="/actors", tags=["actors"])


@router.get("", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def list_actors(
    container: Annotated[Container, Depends(get_container)],
) -> list[ActorSummary]:
    """List every actor with its movie and series counts."""
    query = container[ListActorsQuery]
    return await query.execute()


@router.delete("/{actor_id}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def delete_actor(
    actor_id: str,
    container: Annotated[Container, Depends(get_container)],
) -> dict[str, str]:
    """Delete an actor that no title references any more.

    Returns:
        200 OK: Actor deleted
        401/403: Caller is not an authenticated administrator
        404 Not Found: Unknown actor
        409 Conflict: Actor is still linked to a movie or series

    """
    use_case = container[DeleteActorUseCase]
    result = await use_case.execute(actor_id=actor_id)
    return result.map(lambda message: {"success": message})


@router.post("/orphans/sweep", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def sweep_orphan_actors(
    container: Annotated[Container, Depends(get_container)],
) -> SweepReport:
    """Delete every actor left without titles, e.g. after an interrupted deletion."""
    use_case = container[SweepOrphanActorsUseCase]
    return await use_case.execute()
