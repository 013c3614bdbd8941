"""Schema validation for raw project records."""

from typing import Any, List

from pydantic import ValidationError

from ..models.project import ProjectRecord
from .errors import FieldError, ProjectValidationError


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for issue in exc.errors():
        location = ".".join(str(part) for part in issue["loc"]) or "<record>"
        message = issue["msg"]
        # pydantic prefixes errors raised from field validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        errors.append(FieldError(location, message))
    return errors


def validate_project_record(data: Any, filename: str) -> ProjectRecord:
    """
    Validate a parsed record against the project schema.

    Args:
        data: Untyped data decoded from a record file
        filename: Name of the originating file, used in error messages

    Returns:
        The validated record

    Raises:
        ProjectValidationError: listing every violated field, not just the first
    """
    if not isinstance(data, dict):
        raise ProjectValidationError(
            filename, [FieldError("<record>", f"Expected a mapping, got {type(data).__name__}")]
        )

    try:
        return ProjectRecord.model_validate(data)
    except ValidationError as e:
        raise ProjectValidationError(filename, _field_errors(e)) from e
