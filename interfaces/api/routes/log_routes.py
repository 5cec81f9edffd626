from collections.abc import Container
from typing import Annotated

from fastapi import APIRouter, Depends, status

from application.dtos.log_dtos import ClearLogsResponse, LifecycleLogResponse
from application.use_cases.log_use_cases import ClearLifecycleLogUseCase, ReadLifecycleLogUseCase
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

router = APIRouter(prefix="/logs", tags=["logs"])


@router.get("", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def read_logs(
    container: Annotated[Container, Depends(get_container)],
) -> LifecycleLogResponse:
    """Return the lifecycle log, one entry per line of the log file."""
    use_case = container[ReadLifecycleLogUseCase]
    return await use_case.execute()


@router.post("/clear", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def clear_logs(
    container: Annotated[Container, Depends(get_container)],
) -> ClearLogsResponse:
    """Delete the lifecycle log files."""
    use_case = container[ClearLifecycleLogUseCase]
    return await use_case.execute()
