"""Project aggregation, featured selection and derived listings."""

from .aggregator import ProjectCatalog, merge_project, resolve_maintainer
from .featured import FEATURED_CATEGORIES, FeaturedSelector, today_utc
from .feed import FeedService, build_feed, save_feed
from .shuffle import daily_seed, daily_seed_key, mulberry32, seeded_shuffle, string_hash
from .views import library_projects, maintainers, projects_by_category, projects_by_maintainer

__all__ = [
    "FEATURED_CATEGORIES",
    "FeaturedSelector",
    "FeedService",
    "ProjectCatalog",
    "build_feed",
    "daily_seed",
    "daily_seed_key",
    "library_projects",
    "maintainers",
    "merge_project",
    "mulberry32",
    "projects_by_category",
    "projects_by_maintainer",
    "resolve_maintainer",
    "save_feed",
    "seeded_shuffle",
    "string_hash",
    "today_utc",
]
