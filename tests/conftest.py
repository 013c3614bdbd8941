"""Shared fixtures: record stores on disk and a fake GitHub API."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
import yaml

from vcommons.assets import FileAssetProbe
from vcommons.catalog import FeaturedSelector, ProjectCatalog
from vcommons.ingestion import GitHubFetcher, RecordStore, TTLCache


def make_record(slug: str, **overrides: Any) -> Dict[str, Any]:
    """A valid raw record, with camelCase keys as authored in YAML."""
    record = {
        "name": slug.replace("-", " ").title(),
        "slug": slug,
        "description": f"{slug} does things",
        "longDescription": f"A longer description of {slug}.",
        "category": "app",
        "repo": f"https://github.com/verus-dev/{slug}",
        "verusFeatures": ["VerusID"],
    }
    record.update(overrides)
    return record


@pytest.fixture
def record_factory() -> Callable[..., Dict[str, Any]]:
    return make_record


@pytest.fixture
def projects_dir(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "projects"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def screenshots_dir(tmp_path: Path) -> Path:
    path = tmp_path / "public" / "screenshots"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_record(projects_dir: Path) -> Callable[..., Path]:
    """Write a record dict (or raw text) to ``<name>.yaml``."""

    def _write(data: Any, filename: Optional[str] = None) -> Path:
        if filename is None:
            filename = f"{data['slug']}.yaml"
        path = projects_dir / filename
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def add_featured_image(screenshots_dir: Path) -> Callable[..., Path]:
    def _add(slug: str, name: str = "featured.png") -> Path:
        path = screenshots_dir / slug / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG")
        return path

    return _add


class FakeGitHub:
    """Programmable stand-in for the GitHub REST API.

    Repositories are registered by full name; anything unregistered answers
    404. Every request is recorded for assertions.
    """

    def __init__(self) -> None:
        self.repos: Dict[str, Dict[str, Any]] = {}
        self.languages: Dict[str, Any] = {}
        self.overrides: Dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.headers: Dict[str, str] = {}
        self.requests: List[httpx.Request] = []

    def add_repo(
        self,
        full_name: str,
        stars: int = 0,
        forks: int = 0,
        pushed_at: str = "2024-01-10T12:00:00Z",
        license_id: Optional[str] = "MIT",
        languages: Optional[Dict[str, int]] = None,
    ) -> None:
        self.repos[full_name] = {
            "full_name": full_name,
            "stargazers_count": stars,
            "forks_count": forks,
            "pushed_at": pushed_at,
            "license": {"spdx_id": license_id} if license_id else None,
        }
        self.languages[full_name] = languages if languages is not None else {"TypeScript": 1000}

    def override(self, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        """Answer requests for ``path`` (e.g. ``/repos/o/r/languages``) with ``handler``."""
        self.overrides[path] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path in self.overrides:
            return self.overrides[path](request)

        parts = path.strip("/").split("/")
        if len(parts) < 3 or parts[0] != "repos":
            return httpx.Response(404, json={"message": "Not Found"}, headers=self.headers)

        full_name = f"{parts[1]}/{parts[2]}"
        if full_name not in self.repos:
            return httpx.Response(404, json={"message": "Not Found"}, headers=self.headers)

        if len(parts) == 4 and parts[3] == "languages":
            return httpx.Response(
                200,
                content=json.dumps(self.languages[full_name]),
                headers={"Content-Type": "application/json", **self.headers},
            )
        return httpx.Response(200, json=self.repos[full_name], headers=self.headers)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()


@pytest.fixture
def fetcher(fake_github: FakeGitHub) -> GitHubFetcher:
    return GitHubFetcher(cache=None, transport=fake_github.transport)


@pytest.fixture
def catalog(
    projects_dir: Path,
    screenshots_dir: Path,
    fetcher: GitHubFetcher,
) -> ProjectCatalog:
    return ProjectCatalog(
        store=RecordStore(projects_dir),
        fetcher=fetcher,
        featured=FeaturedSelector(FileAssetProbe(screenshots_dir)),
    )


@pytest.fixture
def cache_clock() -> Callable[[], float]:
    """A controllable clock: call ``advance(seconds)`` to move it."""
    now = [1000.0]

    def clock() -> float:
        return now[0]

    def advance(seconds: float) -> None:
        now[0] += seconds

    clock.advance = advance
    return clock


@pytest.fixture
def ttl_cache(cache_clock) -> TTLCache:
    return TTLCache(clock=cache_clock)
