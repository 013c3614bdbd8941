"""Record store reading and GitHub metadata fetching."""

from .cache import TTLCache
from .github_fetcher import GitHubFetcher
from .models import LoadDiagnostic, RawRecord, StoreLoadResult
from .record_store import RecordStore

__all__ = [
    "GitHubFetcher",
    "LoadDiagnostic",
    "RawRecord",
    "RecordStore",
    "StoreLoadResult",
    "TTLCache",
]
