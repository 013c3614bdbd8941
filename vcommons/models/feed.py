"""JSON feed model."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .project import Project


class ProjectFeed(BaseModel):
    """The downloadable project dataset."""

    model_config = ConfigDict(populate_by_name=True)

    projects: List[Project] = Field(default_factory=list, description="Merged projects")
    generated_at: datetime = Field(..., alias="generatedAt", description="When the feed was built")

    def to_json(self, indent: int = 2) -> str:
        """Serialize with the camelCase keys the site consumes."""
        return self.model_dump_json(by_alias=True, indent=indent)
