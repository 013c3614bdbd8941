"""Record validation and URL safety checks."""

from ..urls import parse_github_url, validate_external_url, validate_github_url
from .errors import DuplicateSlugError, FieldError, ProjectValidationError, StoreReadError
from .records import validate_project_record

__all__ = [
    "DuplicateSlugError",
    "FieldError",
    "ProjectValidationError",
    "StoreReadError",
    "parse_github_url",
    "validate_external_url",
    "validate_github_url",
    "validate_project_record",
]
