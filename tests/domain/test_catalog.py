"""Unit tests for the Catalog lookup table."""

import pytest

from facture.domain.exceptions import ValidationError
from facture.domain.model.catalog import Catalog, CatalogItem
from facture.domain.model.value_objects import Money
from tests.fakes import make_catalog


class TestCatalogLookup:

    def test_lookup_known_item(self):
        item = make_catalog().lookup("CI1")
        assert item is not None
        assert item.unit_price == Money(1100)

    def test_lookup_unknown_item(self):
        assert make_catalog().lookup("XX9") is None

    def test_lookup_empty_id(self):
        assert make_catalog().lookup("") is None

    def test_lookup_is_case_sensitive(self):
        assert make_catalog().lookup("ci1") is None

    def test_items_keep_declaration_order(self):
        ids = [item.id for item in make_catalog().items()]
        assert ids == ["CI1", "CE11", "CM1"]

    def test_len_and_contains(self):
        catalog = make_catalog()
        assert len(catalog) == 3
        assert "CE11" in catalog
        assert "CE12" not in catalog

    def test_items_returns_a_copy(self):
        catalog = make_catalog()
        catalog.items().clear()
        assert len(catalog) == 3


class TestCatalogValidation:

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate catalog item id 'CI1'"):
            make_catalog(("CI1", "A", 1100), ("CI1", "B", 1600))

    def test_blank_id_rejected(self):
        with pytest.raises(ValidationError, match="id is required"):
            CatalogItem(id=" ", title="A", unit_price=Money(1))

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError, match="has no title"):
            CatalogItem(id="CI1", title="", unit_price=Money(1))

    def test_empty_catalog_is_allowed(self):
        catalog = Catalog([])
        assert len(catalog) == 0
        assert catalog.lookup("CI1") is None
