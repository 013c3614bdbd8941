"""Daily-rotating featured project selection."""

from datetime import date
from typing import Iterable, List, Optional, Sequence

import pendulum

from ..assets import AssetProbe
from ..models import Category, Project
from .shuffle import daily_seed, seeded_shuffle

FEATURED_CATEGORIES = (Category.APP, Category.WALLET, Category.DASHBOARD)
FEATURED_COUNT = 3


def today_utc() -> date:
    """Current calendar date in UTC."""
    return pendulum.now("UTC").date()


class FeaturedSelector:
    """Pick the homepage featured set.

    Only projects in a featured category that also ship a featured image are
    eligible. The eligible list is shuffled with a seed derived from the UTC
    date, so every caller sees the same selection for the whole day.
    """

    def __init__(
        self,
        asset_probe: AssetProbe,
        count: int = FEATURED_COUNT,
        categories: Iterable[Category] = FEATURED_CATEGORIES,
    ) -> None:
        """Initialize featured selector."""
        self.asset_probe = asset_probe
        self.count = count
        self.categories = tuple(Category(c) for c in categories)

    def is_eligible(self, project: Project) -> bool:
        """Whether a project may appear in the featured set."""
        if project.category not in self.categories:
            return False
        return self.asset_probe.has_featured_image(project.slug)

    def eligible(self, projects: Sequence[Project]) -> List[Project]:
        """Eligible projects, in input order."""
        return [p for p in projects if self.is_eligible(p)]

    def select(self, projects: Sequence[Project], day: Optional[date] = None) -> List[Project]:
        """
        Select the featured projects for a day.

        Args:
            projects: All aggregated projects
            day: UTC date to select for (default: today)

        Returns:
            Up to ``count`` projects in shuffled order
        """
        if day is None:
            day = today_utc()

        shuffled = seeded_shuffle(self.eligible(projects), daily_seed(day))
        return shuffled[: self.count]
