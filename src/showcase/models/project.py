"""Pydantic models for the Project entity and repository outcomes."""

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """A portfolio project. ``id`` is assigned by the store on save."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: int | None = None
    title: str | None = None
    description: str | None = None
    img_url: str | None = Field(None, alias="imgUrl")
    tech_used: str | None = Field(None, alias="techUsed")
    github_url: str | None = Field(None, alias="githubUrl")
    live_demo_link: str | None = Field(None, alias="liveDemoLink")


class SaveOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    success: bool
    insert_id: int | None = Field(None, alias="insertId")
    error: str | None = None


class UpdateResult(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    affected_rows: int = Field(..., ge=0, alias="affectedRows")


class DeleteOutcome(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    success: bool
    message: str | None = None
