from pydantic import BaseModel, field_validator


class Identity(BaseModel):
    """Value object representing the authenticated caller of an operation."""

    user_id: str
    """Identifier of the user account (required, cannot be blank)."""

    email: str | None = None

    @field_validator("user_id")
    @classmethod
    def validate_user_id(cls, v: str) -> str:
        """Validate that the user id is not blank."""
        if not v or not v.strip():
            msg = "user_id cannot be blank or empty"
            raise ValueError(msg)
        return v.strip()
