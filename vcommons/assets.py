"""Featured image lookup for project screenshots."""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence

from .models.project import SLUG_PATTERN

FEATURED_IMAGE_NAMES = ("featured.png", "featured.jpg", "featured.jpeg", "featured.webp")


class AssetProbe(ABC):
    """Answers whether a project has a featured banner image."""

    @abstractmethod
    def featured_image(self, slug: str) -> Optional[str]:
        """Return the featured image filename for ``slug``, if one exists."""
        pass

    def has_featured_image(self, slug: str) -> bool:
        return self.featured_image(slug) is not None


class FileAssetProbe(AssetProbe):
    """Look for a project's featured banner under ``<screenshots_dir>/<slug>/``."""

    def __init__(
        self,
        screenshots_dir: Path,
        image_names: Sequence[str] = FEATURED_IMAGE_NAMES,
    ) -> None:
        self.screenshots_dir = Path(screenshots_dir)
        self.image_names = tuple(image_names)

    def featured_image(self, slug: str) -> Optional[str]:
        if not re.fullmatch(SLUG_PATTERN, slug):
            return None

        project_dir = self.screenshots_dir / slug
        for name in self.image_names:
            if (project_dir / name).is_file():
                return name
        return None
