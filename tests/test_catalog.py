"""Tests for the product catalog"""
import json

import pytest
from pydantic import ValidationError

from tienda.catalog import Catalog, Product, load_catalog
from tienda.errors import CatalogError


def test_product_is_immutable():
    product = Product(id=1, name="Galletas", price=12000)
    with pytest.raises(ValidationError):
        product.price = 1


def test_product_rejects_negative_price():
    with pytest.raises(ValidationError):
        Product(id=1, name="Galletas", price=-1)


def test_product_accepts_desc_alias():
    product = Product.model_validate({"id": 1, "name": "A", "price": 1, "desc": "texto"})
    assert product.description == "texto"


def test_lookup_and_membership(catalog):
    assert catalog.get(3).name == "Tarjeta personalizada"
    assert catalog.get(999) is None
    assert 1 in catalog
    assert 2 not in catalog
    assert len(catalog) == 3


def test_iteration_keeps_declaration_order(catalog):
    assert [p.id for p in catalog] == [1, 3, 8]


def test_duplicate_ids_rejected():
    with pytest.raises(CatalogError):
        Catalog([Product(id=1, name="A", price=1), Product(id=1, name="B", price=2)])


class TestSearch:

    def test_matches_name_case_insensitive(self, catalog):
        assert [p.id for p in catalog.search("TARJETA")] == [3]

    def test_matches_description(self, catalog):
        assert [p.id for p in catalog.search("artesanales")] == [1]

    def test_query_is_trimmed(self, catalog):
        assert [p.id for p in catalog.search("  nieve  ")] == [8]

    @pytest.mark.parametrize("query", [None, "", "   "])
    def test_empty_query_returns_everything(self, catalog, query):
        assert len(catalog.search(query)) == 3

    def test_no_match(self, catalog):
        assert catalog.search("bicicleta") == []


class TestSorted:

    def test_price_ascending(self, catalog):
        assert [p.price for p in catalog.sorted("price-asc")] == [6000, 12000, 30000]

    def test_price_descending(self, catalog):
        assert [p.price for p in catalog.sorted("price-desc")] == [30000, 12000, 6000]

    def test_unknown_order_keeps_catalog_order(self, catalog):
        assert [p.id for p in catalog.sorted("featured")] == [1, 3, 8]

    def test_sorting_a_search_result(self, catalog):
        found = catalog.search("a")
        assert [p.price for p in catalog.sorted("price-desc", found)] == sorted(
            (p.price for p in found), reverse=True
        )

    def test_does_not_mutate_catalog(self, catalog):
        catalog.sorted("price-desc")
        assert [p.id for p in catalog] == [1, 3, 8]


class TestLoadCatalog:

    def test_builtin_catalog(self):
        catalog = load_catalog()
        assert len(catalog) == 8
        assert catalog.get(1).price == 12000
        assert catalog.get(8).name == "Muñeco de nieve decorativo"

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([
            {"id": 10, "name": "Turrón", "price": 9000, "desc": "Turrón de almendra"},
            {"id": 11, "name": "Pesebre", "price": 80000},
        ]), encoding="utf-8")

        catalog = load_catalog(path)
        assert [p.id for p in catalog] == [10, 11]
        assert catalog.get(10).description == "Turrón de almendra"

    def test_invalid_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": 1, "name": "A", "price": -3}]', encoding="utf-8")
        with pytest.raises(CatalogError):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError):
            load_catalog(tmp_path / "missing.json")
