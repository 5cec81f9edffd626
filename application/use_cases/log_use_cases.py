from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.log_dtos import ClearLogsResponse, LifecycleLogResponse
from application.policies.admin_access_policy import AdminAccessPolicy
from application.ports.lifecycle_log_reader import LifecycleLogReader
from application.ports.lifecycle_logger import LifecycleLogger
from domain.value_objects.severity import Severity


class ReadLifecycleLogUseCase:
    """Return the persisted lifecycle log to an administrator."""

    def __init__(
        self,
        log_reader: LifecycleLogReader,
        access_policy: AdminAccessPolicy,
    ) -> None:
        self.log_reader = log_reader
        self.access_policy = access_policy

    async def execute(self) -> Result[LifecycleLogResponse, AppError]:
        access = await self.access_policy.authorize("read_logs", {})
        if isinstance(access, Failure):
            return access

        try:
            entries = self.log_reader.read_entries()
        except OSError as e:
            return Failure(AppError("internal", f"Could not read log file: {e!s}"))

        return Success(LifecycleLogResponse(logs=entries))


class ClearLifecycleLogUseCase:
    """Delete the persisted lifecycle log files."""

    def __init__(
        self,
        log_reader: LifecycleLogReader,
        access_policy: AdminAccessPolicy,
        lifecycle_logger: LifecycleLogger,
    ) -> None:
        self.log_reader = log_reader
        self.access_policy = access_policy
        self.lifecycle_logger = lifecycle_logger

    async def execute(self) -> Result[ClearLogsResponse, AppError]:
        access = await self.access_policy.authorize("clear_logs", {})
        if isinstance(access, Failure):
            return access

        try:
            removed = self.log_reader.clear()
        except OSError as e:
            return Failure(AppError("internal", f"Could not clear log files: {e!s}"))

        self.lifecycle_logger.log(
            "clear_logs_success",
            {"user_id": access.unwrap().user_id, "removed": removed},
            Severity.INFO,
        )
        return Success(ClearLogsResponse(removed=removed))
