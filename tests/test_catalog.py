"""Tests for project aggregation and derived views."""

from datetime import date

import httpx
import pytest

from vcommons.assets import FileAssetProbe
from vcommons.catalog import (
    FeaturedSelector,
    ProjectCatalog,
    library_projects,
    maintainers,
    merge_project,
    projects_by_category,
    projects_by_maintainer,
    resolve_maintainer,
)
from vcommons.cli.render import project_panel, project_table
from vcommons.ingestion import RecordStore
from vcommons.models import Category, ProjectRecord, RepositoryMetadata
from vcommons.validation import validate_project_record


def _record(record_factory, slug, **overrides) -> ProjectRecord:
    return validate_project_record(record_factory(slug, **overrides), f"{slug}.yaml")


def _project(record_factory, slug, stars=None, **overrides):
    github = RepositoryMetadata(stars=stars) if stars is not None else None
    return merge_project(_record(record_factory, slug, **overrides), github)


def test_resolve_maintainer_prefers_explicit_value(record_factory):
    assert resolve_maintainer(_record(record_factory, "a", maintainer="Mike")) == "Mike"
    assert resolve_maintainer(_record(record_factory, "b")) == "verus-dev"


def test_resolve_maintainer_falls_back_to_unknown():
    record = ProjectRecord.model_construct(slug="x", repo="https://example.com/nothing")
    assert resolve_maintainer(record) == "Unknown"


@pytest.mark.asyncio
async def test_all_projects_keep_cardinality_and_order(catalog, write_record, record_factory, fake_github):
    write_record(record_factory("alpha", repo="https://github.com/org/alpha"))
    write_record(record_factory("beta", repo="https://github.com/org/beta"))
    write_record(record_factory("gamma", repo="https://github.com/org/gamma"))
    fake_github.add_repo("org/beta", stars=10)

    projects = await catalog.get_all_projects()
    listed = [p.stem for p in catalog.store.list_record_files()]

    assert [p.slug for p in projects] == listed
    by_slug = {p.slug: p for p in projects}
    assert by_slug["beta"].github.stars == 10
    assert by_slug["alpha"].github is None
    assert by_slug["gamma"].github is None


@pytest.mark.asyncio
async def test_all_projects_survive_total_outage(catalog, write_record, record_factory):
    for slug in ("alpha", "beta"):
        write_record(record_factory(slug))

    def down(request):
        raise httpx.ConnectError("down", request=request)

    catalog.fetcher.transport = httpx.MockTransport(down)

    projects = await catalog.get_all_projects()

    assert len(projects) == 2
    assert all(p.github is None for p in projects)


@pytest.mark.asyncio
async def test_diagnostics_are_exposed(catalog, write_record, record_factory):
    write_record(record_factory("alpha"))
    write_record("name: [unclosed", filename="bad.yaml")

    projects = await catalog.get_all_projects()

    assert [p.slug for p in projects] == ["alpha"]
    assert [d.filename for d in catalog.diagnostics] == ["bad.yaml"]


@pytest.mark.asyncio
async def test_project_by_slug(catalog, write_record, record_factory, fake_github):
    write_record(record_factory("alpha", repo="https://github.com/org/alpha"))
    fake_github.add_repo("org/alpha", stars=3, languages={"Go": 10, "Shell": 1})

    project = await catalog.get_project_by_slug("alpha")

    assert project.slug == "alpha"
    assert project.maintainer == "org"
    assert project.github.languages == ["Go", "Shell"]
    assert await catalog.get_project_by_slug("missing") is None


@pytest.mark.asyncio
async def test_project_by_slug_scans_when_filename_differs(catalog, write_record, record_factory):
    write_record(record_factory("alpha"), filename="renamed.yaml")

    project = await catalog.get_project_by_slug("alpha")

    assert project is not None
    assert project.slug == "alpha"


@pytest.mark.asyncio
async def test_project_by_slug_is_idempotent(catalog, write_record, record_factory, fake_github):
    write_record(record_factory("alpha", repo="https://github.com/org/alpha"))
    fake_github.add_repo("org/alpha", stars=3)

    first = await catalog.get_project_by_slug("alpha")
    second = await catalog.get_project_by_slug("alpha")

    assert first.model_dump() == second.model_dump()


@pytest.mark.asyncio
async def test_invalid_record_is_not_found_by_slug(catalog, write_record, record_factory):
    write_record(record_factory("alpha", repo="file:///etc/passwd"))

    assert await catalog.get_project_by_slug("alpha") is None


@pytest.mark.asyncio
async def test_project_by_slug_matches_listing_for_duplicate_slugs(catalog, write_record, record_factory):
    write_record(record_factory("alpha", name="From Other"), filename="aaa.yaml")
    write_record(record_factory("alpha", name="From Alpha"))
    write_record(record_factory("alpha", name="From B"), filename="b.yaml")

    [listed] = await catalog.get_all_projects()
    single = await catalog.get_project_by_slug("alpha")

    assert single.name == listed.name
    assert len(catalog.diagnostics) == 2


@pytest.mark.asyncio
async def test_unvalidated_partial_records_work_in_views(projects_dir, screenshots_dir, fetcher, write_record):
    write_record({"slug": "bare", "repo": "https://github.com/o/bare", "name": "Bare"}, filename="bare.yaml")
    write_record({"slug": "lib", "repo": "https://github.com/o/lib", "category": "library"}, filename="lib.yaml")
    catalog = ProjectCatalog(
        store=RecordStore(projects_dir),
        fetcher=fetcher,
        featured=FeaturedSelector(FileAssetProbe(screenshots_dir)),
        validate=False,
    )

    projects = await catalog.get_all_projects()

    assert [p.slug for p in library_projects(projects)] == ["lib"]
    assert await catalog.get_featured_projects(day=date(2024, 1, 15)) == []
    assert sorted(maintainers(projects)) == ["o"]
    assert project_table(projects, "All").row_count == 2
    bare = await catalog.get_project_by_slug("bare")
    assert bare.category == Category.OTHER
    assert project_panel(bare).title == "bare"


@pytest.mark.asyncio
async def test_catalog_views(catalog, write_record, record_factory, fake_github):
    write_record(record_factory("lib-a", category="library", maintainer="Alice", repo="https://github.com/o/lib-a"))
    write_record(record_factory("tool-b", category="tool", maintainer="alice", repo="https://github.com/o/tool-b"))
    write_record(record_factory("app-c", category="app", repo="https://github.com/o/app-c"))
    fake_github.add_repo("o/lib-a", stars=5)
    fake_github.add_repo("o/tool-b", stars=50)

    libraries = await catalog.get_library_projects()
    by_alice = await catalog.get_projects_by_maintainer("ALICE")

    assert [p.slug for p in libraries] == ["tool-b", "lib-a"]
    assert sorted(p.slug for p in by_alice) == ["lib-a", "tool-b"]


def test_library_listing_sorts_by_stars_and_keeps_ties_stable(record_factory):
    projects = [
        _project(record_factory, "no-data", category="library"),
        _project(record_factory, "app", stars=999, category="app"),
        _project(record_factory, "tie-1", stars=5, category="tool"),
        _project(record_factory, "top", stars=40, category="library"),
        _project(record_factory, "tie-2", stars=5, category="library"),
    ]

    assert [p.slug for p in library_projects(projects)] == ["top", "tie-1", "tie-2", "no-data"]


def test_library_listing_can_prefer_installable(record_factory):
    projects = [
        _project(record_factory, "popular", stars=100, category="library"),
        _project(record_factory, "installable", stars=1, category="tool", installCommand="pip install x"),
    ]

    ordered = library_projects(projects, prefer_installable=True)

    assert [p.slug for p in ordered] == ["installable", "popular"]


def test_maintainer_match_is_case_insensitive_only(record_factory):
    projects = [
        _project(record_factory, "a", maintainer="Verus Dev"),
        _project(record_factory, "b", maintainer="verus dev"),
        _project(record_factory, "c", maintainer="Verus  Dev"),
    ]

    assert [p.slug for p in projects_by_maintainer(projects, "VERUS DEV")] == ["a", "b"]


def test_category_filter_and_maintainer_list(record_factory):
    projects = [
        _project(record_factory, "a", category="wallet", maintainer="X"),
        _project(record_factory, "b", category="app", maintainer="Y"),
        _project(record_factory, "c", category="wallet", maintainer="X"),
    ]

    assert [p.slug for p in projects_by_category(projects, Category.WALLET)] == ["a", "c"]
    assert len(projects_by_category(projects, None)) == 3
    assert maintainers(projects) == ["X", "Y"]
