"""Project record and merged project models."""

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from ..urls import validate_external_url, validate_github_url
from .github import RepositoryMetadata

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"

ScreenshotName = Annotated[str, StringConstraints(max_length=100)]


class Category(str, Enum):
    """Project categories."""

    WALLET = "wallet"
    APP = "app"
    DASHBOARD = "dashboard"
    TOOL = "tool"
    LIBRARY = "library"
    OTHER = "other"


class VerusFeature(str, Enum):
    """Verus protocol features a project can build on."""

    VERUS_ID = "VerusID"
    CURRENCIES = "Currencies"
    DEFI = "DeFi"
    CROSS_CHAIN = "Cross-chain"
    ZERO_KNOWLEDGE = "Zero-knowledge"
    MARKETPLACE = "Marketplace"
    DATA = "Data"
    BLOCKCHAIN = "Blockchain"
    STAKING = "Staking"
    MINING = "Mining"


class ProjectRecord(BaseModel):
    """One authored project entry, as read from the record store."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(..., description="Display name", min_length=1, max_length=100)
    slug: str = Field(
        ...,
        description="Unique identifier",
        min_length=1,
        max_length=100,
        pattern=SLUG_PATTERN,
    )
    description: str = Field(..., description="Short description", min_length=1, max_length=200)
    long_description: str = Field(
        ...,
        alias="longDescription",
        description="Long description",
        min_length=1,
        max_length=10000,
    )
    category: Category = Field(..., description="Project category")
    repo: str = Field(..., description="GitHub repository URL")
    verus_features: List[VerusFeature] = Field(
        ..., alias="verusFeatures", description="Verus features used", min_length=1
    )
    maintainer: Optional[str] = Field(None, description="Maintainer name", max_length=100)
    live_url: Optional[str] = Field(None, alias="liveUrl", description="Live site URL")
    docs_url: Optional[str] = Field(None, alias="docsUrl", description="Documentation URL")
    logo: Optional[str] = Field(None, description="Logo filename", max_length=100)
    screenshots: Optional[List[ScreenshotName]] = Field(
        None, description="Screenshot filenames", max_length=10
    )
    install_command: Optional[str] = Field(
        None, alias="installCommand", description="Package install command", max_length=200
    )
    primary_language: Optional[str] = Field(
        None, alias="primaryLanguage", description="Primary language override", max_length=50
    )

    @field_validator("repo")
    @classmethod
    def validate_repo(cls, v: str) -> str:
        """Require a safe github.com/owner/repo URL."""
        if validate_external_url(v) is None:
            raise ValueError("Invalid or unsafe URL")
        if validate_github_url(v) is None:
            raise ValueError("Invalid GitHub repository URL")
        return v

    @field_validator("live_url", "docs_url")
    @classmethod
    def validate_link(cls, v: Optional[str]) -> Optional[str]:
        """Reject unsafe optional links."""
        if v is not None and validate_external_url(v) is None:
            raise ValueError("Invalid or unsafe URL")
        return v


class Project(ProjectRecord):
    """A project record merged with (possibly absent) GitHub metadata."""

    maintainer: str = Field("Unknown", description="Resolved maintainer name", max_length=100)
    github: Optional[RepositoryMetadata] = Field(None, description="Live repository statistics")

    @property
    def stars(self) -> int:
        """Star count, 0 when metadata is unavailable."""
        return self.github.stars if self.github else 0

    @property
    def display_language(self) -> Optional[str]:
        """Declared primary language, else the largest GitHub language."""
        if self.primary_language:
            return self.primary_language
        if self.github and self.github.languages:
            return self.github.languages[0]
        return None
