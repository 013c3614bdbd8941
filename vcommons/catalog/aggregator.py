"""Project aggregation: records from the store merged with GitHub data."""

import asyncio
import logging
from datetime import date
from typing import List, Optional

import httpx

from ..assets import FileAssetProbe
from ..config import Config
from ..ingestion import GitHubFetcher, LoadDiagnostic, RecordStore, TTLCache
from ..models import Project, ProjectRecord, RepositoryMetadata
from ..urls import parse_github_url
from .featured import FeaturedSelector
from .views import library_projects, projects_by_maintainer

logger = logging.getLogger(__name__)

UNKNOWN_MAINTAINER = "Unknown"


def resolve_maintainer(record: ProjectRecord) -> str:
    """Explicit maintainer, else the repository owner, else "Unknown"."""
    if record.maintainer:
        return record.maintainer

    parsed = parse_github_url(record.repo)
    if parsed is not None:
        return parsed.owner
    return UNKNOWN_MAINTAINER


def merge_project(record: ProjectRecord, github: Optional[RepositoryMetadata]) -> Project:
    """Combine a record with its (possibly absent) repository metadata."""
    fields = dict(record)
    fields["maintainer"] = resolve_maintainer(record)
    fields["github"] = github
    # Record fields were checked when the store was loaded
    return Project.model_construct(**fields)


class ProjectCatalog:
    """The in-memory project collection.

    Every call re-reads the store and re-fetches repository metadata; the
    fetcher's response cache is what keeps repeated calls cheap.
    """

    def __init__(
        self,
        store: RecordStore,
        fetcher: GitHubFetcher,
        featured: Optional[FeaturedSelector] = None,
        validate: bool = True,
    ) -> None:
        """
        Initialize project catalog.

        Args:
            store: Record store to read projects from
            fetcher: GitHub metadata fetcher
            featured: Featured selector (None disables featured selection)
            validate: Validate records while loading
        """
        self.store = store
        self.fetcher = fetcher
        self.featured = featured
        self.validate = validate
        self.diagnostics: List[LoadDiagnostic] = []

    @classmethod
    def from_config(
        cls,
        config: Config,
        cache: Optional[TTLCache] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ProjectCatalog":
        """Wire up store, fetcher and featured selector from configuration."""
        settings = config.config
        return cls(
            store=RecordStore(config.data_dir),
            fetcher=GitHubFetcher.from_config(config, cache=cache, transport=transport),
            featured=FeaturedSelector(
                FileAssetProbe(config.screenshots_dir),
                count=settings.featured.count,
                categories=settings.featured.categories,
            ),
        )

    def load_records(self) -> List[ProjectRecord]:
        """Load records from the store, remembering skipped files."""
        result = self.store.load(validate=self.validate)
        self.diagnostics = result.diagnostics
        return result.records

    async def get_all_projects(self) -> List[Project]:
        """
        Load every record and merge it with GitHub data.

        One lookup per record runs concurrently and the call returns once all
        of them have resolved. The output has exactly one project per loaded
        record, in store order; failed lookups leave ``github`` as None.
        """
        records = self.load_records()
        metadata = await self.fetcher.fetch_many([record.repo for record in records])

        projects = [merge_project(record, github) for record, github in zip(records, metadata)]
        logger.info(
            "Aggregated %d projects (%d without GitHub data)",
            len(projects),
            sum(1 for p in projects if p.github is None),
        )
        return projects

    async def get_project_by_slug(self, slug: str) -> Optional[Project]:
        """
        Load and merge a single project, or None if no record matches.

        The record is the one ``get_all_projects`` would return for the slug.
        """
        record = self.store.find(slug, validate=self.validate)
        if record is None:
            return None

        github = await self.fetcher.fetch_repository(record.repo)
        return merge_project(record, github)

    async def get_featured_projects(self, day: Optional[date] = None) -> List[Project]:
        """Featured projects for a UTC day (default: today)."""
        if self.featured is None:
            return []
        return self.featured.select(await self.get_all_projects(), day=day)

    async def get_library_projects(self, prefer_installable: bool = False) -> List[Project]:
        """Library and tool projects, most starred first."""
        return library_projects(await self.get_all_projects(), prefer_installable=prefer_installable)

    async def get_projects_by_maintainer(self, name: str) -> List[Project]:
        """Projects maintained by ``name`` (case-insensitive)."""
        return projects_by_maintainer(await self.get_all_projects(), name)

    def get_all_projects_sync(self) -> List[Project]:
        """Synchronous wrapper for get_all_projects."""
        return asyncio.run(self.get_all_projects())

    def get_project_by_slug_sync(self, slug: str) -> Optional[Project]:
        """Synchronous wrapper for get_project_by_slug."""
        return asyncio.run(self.get_project_by_slug(slug))
