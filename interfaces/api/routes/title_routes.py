from collections.abc import Container
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from returns.result import Success

from application.dtos.title_dtos import DeletionResult
from application.use_cases.title_use_cases import DeleteTitleUseCase
from interfaces.api.routes.helpers import status_code_for
from interfaces.dependencies import get_container

router = APIRouter(prefix="/titles", tags=["titles"])


@router.delete(
    "/{title_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeletionResult,
    response_model_exclude_none=True,
)
async def delete_title(
    title_id: str,
    container: Annotated[Container, Depends(get_container)],
) -> JSONResponse:
    """Delete a title, its media file and the actors left without titles.

    Returns:
        200 OK: ``{"success": "Movie deleted successfully!"}``
        401 Unauthorized: ``{"error": "Unauthorized!"}``
        403 Forbidden: ``{"error": "Not allowed Server Action!"}``
        404 Not Found: ``{"error": "Movie not found!"}``
        500 Internal Server Error: ``{"error": "Failed to delete movie!"}``

    """
    use_case = container[DeleteTitleUseCase]
    result = await use_case.execute(title_id=title_id)

    if isinstance(result, Success):
        body = DeletionResult(success=result.unwrap())
        status_code = status.HTTP_200_OK
    else:
        error = result.failure()
        body = DeletionResult(error=error.message)
        status_code = status_code_for(error)

    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )
