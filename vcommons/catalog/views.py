"""Derived listings over the aggregated projects."""

from typing import List, Optional, Sequence

from ..models import Category, Project

LIBRARY_CATEGORIES = (Category.LIBRARY, Category.TOOL)


def library_projects(projects: Sequence[Project], prefer_installable: bool = False) -> List[Project]:
    """
    Libraries and tools, most starred first.

    The sort is stable: equal star counts keep their input order. Projects
    without GitHub data count as zero stars. With ``prefer_installable``,
    projects that declare an install command come first.
    """
    libraries = [p for p in projects if p.category in LIBRARY_CATEGORIES]

    if prefer_installable:
        return sorted(libraries, key=lambda p: (not p.install_command, -p.stars))
    return sorted(libraries, key=lambda p: -p.stars)


def projects_by_maintainer(projects: Sequence[Project], name: str) -> List[Project]:
    """Projects whose maintainer matches ``name``, ignoring case."""
    wanted = name.lower()
    return [p for p in projects if p.maintainer.lower() == wanted]


def projects_by_category(projects: Sequence[Project], category: Optional[Category]) -> List[Project]:
    """Projects in ``category``, or all of them when it is None."""
    if category is None:
        return list(projects)
    return [p for p in projects if p.category == category]


def maintainers(projects: Sequence[Project]) -> List[str]:
    """Distinct maintainer names in first-seen order."""
    seen = {}
    for project in projects:
        seen.setdefault(project.maintainer, None)
    return list(seen)
