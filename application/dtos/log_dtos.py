from typing import Any

from pydantic import BaseModel, Field


class LifecycleLogResponse(BaseModel):
    """Response DTO listing lifecycle log entries, oldest first."""

    logs: list[dict[str, Any]] = Field(default_factory=list)


class ClearLogsResponse(BaseModel):
    """Response DTO of a log clearing request."""

    removed: int = Field(..., ge=0, description="Number of log files deleted")
