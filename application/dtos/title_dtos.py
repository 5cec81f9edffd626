from typing import Self

from pydantic import BaseModel, Field, model_validator

# Literal messages shared with existing callers of the deletion endpoint
TITLE_UNAUTHORIZED = "Unauthorized!"
TITLE_NOT_ALLOWED = "Not allowed Server Action!"
TITLE_NOT_FOUND = "Movie not found!"
TITLE_DELETE_FAILED = "Failed to delete movie!"
TITLE_DELETED = "Movie deleted successfully!"


class DeletionResult(BaseModel):
    """Response DTO of a deletion: a success message or an error message, never both."""

    success: str | None = Field(None, description="Message returned when the deletion completed")
    error: str | None = Field(
        None,
        description="User-facing message of a rejected or failed deletion",
    )

    @model_validator(mode="after")
    def check_exactly_one(self) -> Self:
        if (self.success is None) == (self.error is None):
            msg = "DeletionResult must carry exactly one of success or error"
            raise ValueError(msg)
        return self

    @property
    def is_success(self) -> bool:
        return self.success is not None
