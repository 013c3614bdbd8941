"""File-based project record store."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import yaml

from ..models import Category, ProjectRecord, VerusFeature
from ..validation import (
    DuplicateSlugError,
    FieldError,
    ProjectValidationError,
    StoreReadError,
    validate_project_record,
)
from .models import LoadDiagnostic, RawRecord, StoreLoadResult

logger = logging.getLogger(__name__)

RECORD_SUFFIXES = (".yaml", ".yml")
TEMPLATE_PREFIX = "_"

OPTIONAL_TEXT_FIELDS = ("maintainer", "live_url", "docs_url", "logo", "install_command", "primary_language")


def _text(value: Any, default: Optional[str] = "") -> Optional[str]:
    return value if isinstance(value, str) else default


def _lenient_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize an unchecked record so every field the views read is usable.

    Keys may be camelCase or snake_case. Missing text falls back to the slug
    (name) or an empty string, unknown categories become ``other`` and
    unknown features are dropped. Lengths and URLs are left alone.
    """
    fields: Dict[str, Any] = {}
    for name, info in ProjectRecord.model_fields.items():
        if info.alias and info.alias in data:
            fields[name] = data[info.alias]
        elif name in data:
            fields[name] = data[name]

    fields["name"] = _text(fields.get("name")) or fields["slug"]
    fields["description"] = _text(fields.get("description"))
    fields["long_description"] = _text(fields.get("long_description"))
    for key in OPTIONAL_TEXT_FIELDS:
        fields[key] = _text(fields.get(key), None)

    try:
        fields["category"] = Category(fields.get("category"))
    except ValueError:
        fields["category"] = Category.OTHER

    features = fields.get("verus_features")
    known = tuple(feature.value for feature in VerusFeature)
    fields["verus_features"] = [
        VerusFeature(f) for f in (features if isinstance(features, list) else []) if f in known
    ]

    if not isinstance(fields.get("screenshots"), list):
        fields["screenshots"] = None
    return fields


class RecordStore:
    """Read project records from a directory of YAML files.

    Files are listed in directory order; no sort is applied. Names starting
    with the template prefix (``_template.yaml``) are skipped.
    """

    def __init__(self, projects_dir: Path, template_prefix: str = TEMPLATE_PREFIX) -> None:
        """Initialize record store."""
        self.projects_dir = Path(projects_dir)
        self.template_prefix = template_prefix

    def list_record_files(self) -> List[Path]:
        """List record files, excluding the template."""
        if not self.projects_dir.is_dir():
            logger.warning("Projects directory not found: %s", self.projects_dir)
            return []

        return [
            path
            for path in self.projects_dir.iterdir()
            if path.is_file()
            and path.suffix in RECORD_SUFFIXES
            and not path.name.startswith(self.template_prefix)
        ]

    def _read(self, path: Path) -> RawRecord:
        """Read and decode one record file."""
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StoreReadError(path.name, str(e)) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise StoreReadError(path.name, f"Invalid YAML: {e}") from e

        return RawRecord(filename=path.name, data=data)

    def iter_raw(self) -> Iterator[RawRecord]:
        """Lazily yield raw records. The first unreadable file aborts iteration."""
        for path in self.list_record_files():
            yield self._read(path)

    def find(self, slug: str, validate: bool = True) -> Optional[ProjectRecord]:
        """
        Find the record that ``load`` would keep for ``slug``.

        Files are walked in listing order and unreadable or invalid ones are
        skipped, so the first loadable file declaring the slug wins.
        """
        for path in self.list_record_files():
            try:
                record = self.parse(self._read(path), validate=validate)
            except (StoreReadError, ProjectValidationError) as e:
                logger.debug("Skipping %s: %s", path.name, e)
                continue
            if record.slug == slug:
                return record
        return None

    def parse(self, raw: RawRecord, validate: bool = True) -> ProjectRecord:
        """
        Turn a raw record into a typed one.

        With ``validate=False`` length and URL safety checks are skipped and
        missing or unusable fields get safe defaults. Only the join keys
        must exist.
        """
        if validate:
            return validate_project_record(raw.data, raw.filename)

        if not isinstance(raw.data, dict):
            raise ProjectValidationError(
                raw.filename, [FieldError("<record>", "Expected a mapping")]
            )
        missing = [key for key in ("slug", "repo") if not isinstance(raw.data.get(key), str)]
        if missing:
            raise ProjectValidationError(
                raw.filename, [FieldError(key, "Field required") for key in missing]
            )
        return ProjectRecord.model_construct(**_lenient_fields(raw.data))

    def load(self, validate: bool = True, strict: bool = False) -> StoreLoadResult:
        """
        Load every record in the store.

        Args:
            validate: Run schema and URL safety validation on each record
            strict: Raise on the first problem instead of skipping the file

        Returns:
            Loaded records in listing order, plus a diagnostic per skipped file
        """
        result = StoreLoadResult()
        seen: Dict[str, str] = {}

        for path in self.list_record_files():
            try:
                record = self.parse(self._read(path), validate=validate)
                if record.slug in seen:
                    raise DuplicateSlugError(record.slug, path.name, seen[record.slug])
            except (StoreReadError, ProjectValidationError, DuplicateSlugError) as e:
                if strict:
                    raise
                logger.warning("Skipping %s: %s", path.name, e)
                result.diagnostics.append(LoadDiagnostic(filename=path.name, message=str(e)))
                continue

            seen[record.slug] = path.name
            result.records.append(record)

        return result
