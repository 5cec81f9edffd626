from pydantic import BaseModel, Field


class Actor(BaseModel):
    """An actor linked to any number of titles of either kind."""

    actor_id: str = Field(..., description="Opaque identifier of the actor")
    name: str = Field(default="", description="Display name of the actor")
