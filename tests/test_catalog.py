"""Tests for catalog loading and validation."""

import pytest

from standfinder.core.catalog import DEFAULT_CATALOG_PATH, catalog_from_records, load_catalog
from standfinder.core.errors import CatalogError
from standfinder.core.models import CatalogEntry, StatAxis
from tests.helpers import make_levels, stand_record


class TestBundledCatalog:
    """The stands list shipped with the package."""

    def test_loads(self):
        catalog = load_catalog()
        assert len(catalog) > 0
        assert all(isinstance(entry, CatalogEntry) for entry in catalog)

    def test_cached(self):
        assert load_catalog() is load_catalog()
        assert load_catalog(DEFAULT_CATALOG_PATH) is load_catalog()

    def test_names_unique(self):
        names = [entry.name for entry in load_catalog()]
        assert len(names) == len(set(names))

    def test_levels_in_range(self):
        for entry in load_catalog():
            for axis in StatAxis:
                assert 0 <= entry.levels.get(axis) <= 5, entry.name

    def test_order_preserved(self):
        assert load_catalog()[0].name == "Star Platinum"


class TestCatalogFromRecords:
    def test_valid_records(self):
        catalog = catalog_from_records([stand_record("A", 1, 2, 3, 4, 5, 0), stand_record("B", 0, 0, 0, 0, 0, 0)])
        assert [e.name for e in catalog] == ["A", "B"]
        assert catalog[0].levels == make_levels(1, 2, 3, 4, 5, 0)

    def test_returns_tuple(self):
        assert isinstance(catalog_from_records([]), tuple)

    def test_extra_keys_ignored(self):
        record = {**stand_record("A", 1, 1, 1, 1, 1, 1), "user": "Jotaro"}
        assert catalog_from_records([record])[0].name == "A"

    def test_missing_axis(self):
        record = stand_record("A", 1, 1, 1, 1, 1, 1)
        del record["range"]
        with pytest.raises(CatalogError, match="missing range"):
            catalog_from_records([record])

    @pytest.mark.parametrize("name", [None, "", "   ", 3])
    def test_bad_name(self, name):
        record = stand_record("x", 1, 1, 1, 1, 1, 1)
        record["name"] = name
        with pytest.raises(CatalogError, match="no name"):
            catalog_from_records([record])

    @pytest.mark.parametrize("level", [-1, 6])
    def test_level_out_of_range(self, level):
        with pytest.raises(CatalogError) as exc_info:
            catalog_from_records([stand_record("A", level, 1, 1, 1, 1, 1)])
        assert exc_info.value.context["axis"] == "power"

    @pytest.mark.parametrize("level", ["A", 2.5, True, None])
    def test_level_not_int(self, level):
        with pytest.raises(CatalogError):
            catalog_from_records([stand_record("A", 1, level, 1, 1, 1, 1)])

    def test_record_not_object(self):
        with pytest.raises(CatalogError, match="not an object"):
            catalog_from_records([["A", 1, 1, 1, 1, 1, 1]])

    def test_error_reports_index(self):
        records = [stand_record("A", 1, 1, 1, 1, 1, 1), stand_record("B", 9, 1, 1, 1, 1, 1)]
        with pytest.raises(CatalogError) as exc_info:
            catalog_from_records(records)
        assert exc_info.value.context["index"] == 1


class TestLoadCatalogFile:
    def test_custom_file(self, catalog_file):
        path = catalog_file([stand_record("Custom", 2, 2, 2, 2, 2, 2)])
        catalog = load_catalog(path)
        assert [e.name for e in catalog] == ["Custom"]

    def test_str_path(self, catalog_file):
        path = catalog_file([stand_record("Custom", 2, 2, 2, 2, 2, 2)])
        assert load_catalog(str(path))[0].name == "Custom"

    def test_empty_list_loads(self, catalog_file):
        """An empty file is a valid catalog; the matcher reports it."""
        assert load_catalog(catalog_file([])) == ()

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(tmp_path / "nope.json")
        assert exc_info.value.user_message == "Stand catalog is missing"

    def test_corrupt_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError) as exc_info:
            load_catalog(path)
        assert exc_info.value.user_message == "Stand catalog is unreadable"

    def test_not_a_list(self, catalog_file):
        with pytest.raises(CatalogError, match="JSON list"):
            load_catalog(catalog_file({"name": "A"}))
