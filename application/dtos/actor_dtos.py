from pydantic import BaseModel, Field

ACTOR_NOT_FOUND = "Actor not found!"
ACTOR_STILL_LINKED = "Actor is still linked to titles!"
ACTOR_DELETE_FAILED = "Failed to delete actor!"
ACTOR_DELETED = "Actor deleted successfully!"
SWEEP_FAILED = "Failed to sweep orphan actors!"


class ActorSummary(BaseModel):
    """Response DTO representing an actor with its per-kind title counts."""

    actor_id: str = Field(..., description="Unique identifier of the actor")
    name: str = Field(..., description="Display name of the actor")
    movie_count: int = Field(0, ge=0, description="Number of linked titles of kind Movie")
    series_count: int = Field(0, ge=0, description="Number of linked titles of kind Serie")


class SweepReport(BaseModel):
    """Response DTO summarizing an orphan sweep."""

    scanned: int = Field(..., ge=0, description="Number of actors examined")
    deleted_actor_ids: list[str] = Field(
        default_factory=list,
        description="Identifiers of the actors removed because no title references them",
    )
