"""Downloadable JSON feed of the merged project collection."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

import pendulum

from ..ingestion import TTLCache
from ..models import Project, ProjectFeed
from .aggregator import ProjectCatalog

logger = logging.getLogger(__name__)

FEED_CACHE_KEY = "projects.json"


def build_feed(projects: Sequence[Project], now: Optional[datetime] = None) -> ProjectFeed:
    """Wrap projects with a generation timestamp."""
    if now is None:
        now = pendulum.now("UTC")
    return ProjectFeed(projects=list(projects), generated_at=now)


class FeedService:
    """Serve the project feed, rebuilding it at most once per freshness window."""

    def __init__(
        self,
        catalog: ProjectCatalog,
        cache: Optional[TTLCache] = None,
        freshness_seconds: float = 3600,
    ) -> None:
        """Initialize feed service."""
        self.catalog = catalog
        self.cache = cache if cache is not None else TTLCache()
        self.freshness_seconds = freshness_seconds

    async def get_feed(self) -> ProjectFeed:
        """Return the cached feed while fresh, otherwise aggregate a new one."""
        cached = self.cache.get(FEED_CACHE_KEY)
        if cached is not None:
            return cached

        feed = build_feed(await self.catalog.get_all_projects())
        self.cache.put(FEED_CACHE_KEY, feed, self.freshness_seconds)
        logger.info("Generated project feed with %d projects", len(feed.projects))
        return feed


def save_feed(feed: ProjectFeed, output_path: Path) -> None:
    """Write the feed as JSON."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(feed.to_json(), encoding="utf-8")
