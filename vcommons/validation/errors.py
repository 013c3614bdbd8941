"""Errors raised while loading and validating project records."""

from typing import List, NamedTuple


class FieldError(NamedTuple):
    """A single field-level rule violation."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ProjectValidationError(ValueError):
    """A raw record violated one or more schema or URL safety rules."""

    def __init__(self, filename: str, errors: List[FieldError]) -> None:
        self.filename = filename
        self.errors = list(errors)
        details = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"Invalid project record in {filename}:\n{details}")

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation."""
        return [error.field for error in self.errors]


class StoreReadError(Exception):
    """A record file could not be read or parsed."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        self.reason = reason
        super().__init__(f"Failed to read {filename}: {reason}")


class DuplicateSlugError(ValueError):
    """Two record files declare the same slug."""

    def __init__(self, slug: str, filename: str, first_filename: str) -> None:
        self.slug = slug
        self.filename = filename
        self.first_filename = first_filename
        super().__init__(
            f"Duplicate slug '{slug}' in {filename} (already defined in {first_filename})"
        )
