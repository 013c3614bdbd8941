"""GitHub repository metadata model."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RepositoryMetadata(BaseModel):
    """Live statistics for one repository.

    Either fully composed from a successful API response or absent
    altogether; there is no partially populated state.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    stars: int = Field(0, description="Stargazer count", ge=0)
    forks: int = Field(0, description="Fork count", ge=0)
    last_commit: str = Field("", alias="lastCommit", description="Last push timestamp (ISO-8601)")
    license: Optional[str] = Field(None, description="SPDX license identifier")
    languages: List[str] = Field(
        default_factory=list, description="Languages, largest byte count first"
    )
