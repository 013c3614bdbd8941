"""Tests for the file-based record store."""

import pytest

from vcommons.ingestion import RecordStore
from vcommons.models import Category, VerusFeature
from vcommons.validation import DuplicateSlugError, ProjectValidationError, StoreReadError


def test_template_and_other_files_are_skipped(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha"))
    write_record(record_factory("beta"), filename="beta.yml")
    write_record(record_factory("template"), filename="_template.yaml")
    (projects_dir / "README.md").write_text("# not a record")

    store = RecordStore(projects_dir)

    assert sorted(p.name for p in store.list_record_files()) == ["alpha.yaml", "beta.yml"]


def test_missing_directory_lists_nothing(tmp_path):
    store = RecordStore(tmp_path / "nowhere")

    assert store.list_record_files() == []
    assert store.load().records == []


def test_iter_raw_yields_decoded_documents(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha"))

    raw = list(RecordStore(projects_dir).iter_raw())

    assert len(raw) == 1
    assert raw[0].filename == "alpha.yaml"
    assert raw[0].data["slug"] == "alpha"


def test_iter_raw_aborts_on_unparsable_file(projects_dir, write_record):
    write_record("name: [unclosed", filename="broken.yaml")

    with pytest.raises(StoreReadError) as exc_info:
        list(RecordStore(projects_dir).iter_raw())

    assert exc_info.value.filename == "broken.yaml"


def test_load_isolates_bad_files(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha"))
    write_record("name: [unclosed", filename="broken.yaml")
    write_record(record_factory("gamma", repo="javascript:alert(1)"))

    result = RecordStore(projects_dir).load()

    assert [r.slug for r in result.records] == ["alpha"]
    assert sorted(d.filename for d in result.diagnostics) == ["broken.yaml", "gamma.yaml"]
    assert not result.ok


def test_load_strict_raises(projects_dir, write_record, record_factory):
    write_record(record_factory("gamma", repo="javascript:alert(1)"))

    with pytest.raises(ProjectValidationError):
        RecordStore(projects_dir).load(strict=True)


def test_duplicate_slug_keeps_first(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha"), filename="alpha.yaml")
    write_record(record_factory("alpha", name="Impostor"), filename="alpha-copy.yaml")

    store = RecordStore(projects_dir)
    first_file = store.list_record_files()[0].name
    result = store.load()

    assert len(result.records) == 1
    assert len(result.diagnostics) == 1
    assert "Duplicate slug 'alpha'" in result.diagnostics[0].message
    assert result.diagnostics[0].filename != first_file

    with pytest.raises(DuplicateSlugError):
        store.load(strict=True)


def test_unvalidated_load_skips_schema_checks(projects_dir, write_record, record_factory):
    write_record(record_factory("loose", name="x" * 500, verusFeatures=[]))

    store = RecordStore(projects_dir)

    assert store.load().records == []
    records = store.load(validate=False).records
    assert [r.slug for r in records] == ["loose"]
    assert len(records[0].name) == 500


def test_unvalidated_load_still_needs_join_keys(projects_dir, write_record):
    write_record({"name": "No slug"}, filename="noslug.yaml")

    result = RecordStore(projects_dir).load(validate=False)

    assert result.records == []
    assert "slug" in result.diagnostics[0].message


def test_find_by_slug(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha"), filename="renamed.yaml")
    write_record("name: [unclosed\n", filename="bad.yaml")
    store = RecordStore(projects_dir)

    assert store.find("alpha").slug == "alpha"
    assert store.find("missing") is None


def test_find_agrees_with_load_on_duplicate_slugs(projects_dir, write_record, record_factory):
    write_record(record_factory("alpha", name="From Other"), filename="aaa.yaml")
    write_record(record_factory("alpha", name="From Alpha"))
    write_record(record_factory("alpha", name="From B"), filename="b.yaml")
    store = RecordStore(projects_dir)

    [kept] = store.load().records

    assert store.find("alpha") == kept


def test_unvalidated_partial_record_gets_defaults(projects_dir, write_record):
    write_record(
        {"slug": "bare", "repo": "https://github.com/o/bare", "category": "game", "verusFeatures": ["VerusID", "Teleport"]},
        filename="bare.yaml",
    )

    [record] = RecordStore(projects_dir).load(validate=False).records

    assert record.name == "bare"
    assert record.description == ""
    assert record.long_description == ""
    assert record.category == Category.OTHER
    assert record.verus_features == [VerusFeature.VERUS_ID]
    assert record.maintainer is None
    assert record.install_command is None
