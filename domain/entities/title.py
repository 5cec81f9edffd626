from pydantic import BaseModel, Field, field_validator

from domain.value_objects.title_kind import TitleKind


class Title(BaseModel):
    """A catalog title, either a movie or a series.

    Titles are created by the ingestion flow and are only ever removed by the
    title deletion pipeline. The ``artifact_ref`` is the logical file name of
    the attached media, without directory or extension.
    """

    title_id: str = Field(..., description="Opaque identifier of the title")
    name: str = Field(default="", description="Display name of the title")
    kind: TitleKind = Field(default=TitleKind.MOVIE, description="Catalog sub-type")
    artifact_ref: str | None = Field(
        default=None,
        description="Logical media file name; None when no media was attached",
    )

    @field_validator("title_id")
    @classmethod
    def validate_title_id(cls, v: str) -> str:
        if not v or not v.strip():
            msg = "title_id cannot be blank or empty"
            raise ValueError(msg)
        return v

    @property
    def has_artifact(self) -> bool:
        """Return True when the title references a media file."""
        return bool(self.artifact_ref)
