"""Data models for Verus Commons."""

from .feed import ProjectFeed
from .github import RepositoryMetadata
from .project import Category, Project, ProjectRecord, VerusFeature

__all__ = [
    "Category",
    "Project",
    "ProjectFeed",
    "ProjectRecord",
    "RepositoryMetadata",
    "VerusFeature",
]
