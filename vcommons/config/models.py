"""Configuration models."""

from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.project import Category


class GitHubConfig(BaseModel):
    """GitHub API client configuration."""

    api_base: str = Field("https://api.github.com", description="GitHub REST API base URL")
    token_env: str = Field("GITHUB_TOKEN", description="Environment variable holding the API token")
    user_agent: str = Field("Verus-Commons-Website", description="User-Agent header sent to GitHub")
    timeout: float = Field(30.0, description="HTTP timeout in seconds", gt=0)
    cache_ttl_seconds: int = Field(3600, description="Freshness window for cached responses", ge=0)
    rate_limit_warning: int = Field(10, description="Warn when remaining quota drops below this", ge=0)
    max_concurrent: Optional[int] = Field(
        None, description="Bound on in-flight repositories (None = unbounded)", ge=1
    )


class FeaturedConfig(BaseModel):
    """Featured selection configuration."""

    count: int = Field(3, description="Number of featured projects", ge=0, le=20)
    categories: List[Category] = Field(
        default_factory=lambda: [Category.APP, Category.WALLET, Category.DASHBOARD],
        description="Categories eligible for the featured set",
    )


class FeedConfig(BaseModel):
    """JSON feed configuration."""

    freshness_seconds: int = Field(3600, description="How long a generated feed is reused", ge=0)


class ConfigModel(BaseModel):
    """Main configuration model."""

    data_dir: str = Field("data/projects", description="Directory of project YAML records")
    screenshots_dir: str = Field("public/screenshots", description="Directory of per-project screenshots")
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    featured: FeaturedConfig = Field(default_factory=FeaturedConfig)
    feed: FeedConfig = Field(default_factory=FeedConfig)
