"""Data models for record ingestion."""

from typing import Any, List

from pydantic import BaseModel, Field

from ..models import ProjectRecord


class RawRecord(BaseModel):
    """Untyped data decoded from one record file."""

    filename: str = Field(..., description="Record file name")
    data: Any = Field(None, description="Decoded YAML document")


class LoadDiagnostic(BaseModel):
    """A record file that was skipped while loading the store."""

    filename: str = Field(..., description="Record file name")
    message: str = Field(..., description="Why the file was skipped")


class StoreLoadResult(BaseModel):
    """Records loaded from the store plus the problems met along the way."""

    records: List[ProjectRecord] = Field(default_factory=list, description="Loaded records")
    diagnostics: List[LoadDiagnostic] = Field(default_factory=list, description="Skipped files")

    @property
    def ok(self) -> bool:
        """Whether every record file loaded cleanly."""
        return not self.diagnostics
