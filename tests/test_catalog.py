from __future__ import annotations

import json

import pytest

from bfi_core import catalog as catalog_mod
from bfi_core import config
from bfi_core.catalog import (
    Catalog,
    CatalogError,
    DuplicateItemNumber,
    FacetDomainMismatch,
    UnknownCategory,
    item_stats,
    load_catalog,
    normalize_items,
)
from bfi_core.categories import Domain, Facet
from tests.conftest import build_synthetic_raw


def test_packaged_catalog_has_sixty_balanced_items(packaged_catalog):
    assert packaged_catalog.total_items == 60
    assert packaged_catalog.numbers() == list(range(1, 61))
    assert all(n == 12 for n in packaged_catalog.stats.domain_counts.values())
    assert all(n == 4 for n in packaged_catalog.stats.facet_counts.values())
    assert sum(1 for it in packaged_catalog.items if it.reverse) == 30


def test_packaged_catalog_first_items(packaged_catalog):
    first = packaged_catalog.item_at(0)
    assert first.number == 1
    assert first.domain is Domain.EXTRAVERSION and first.facet is Facet.SOCIABILITY
    assert first.reverse is False
    third = packaged_catalog.item_at(2)
    assert third.facet is Facet.ORGANIZATION and third.reverse is True
    assert packaged_catalog.item_at(60) is None
    assert packaged_catalog.item_at(-1) is None


def test_unknown_domain_label_aborts_load():
    raw = build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=1)
    raw[0]["domain"] = "存在しない"

    with pytest.raises(UnknownCategory) as exc:
        Catalog.from_raw(raw)
    assert exc.value.kind == "domain"
    assert exc.value.label == "存在しない"
    assert isinstance(exc.value, CatalogError)


def test_unknown_facet_label_aborts_load():
    raw = build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=1)
    raw[0]["facet"] = "sociability"  # ids are not labels

    with pytest.raises(UnknownCategory) as exc:
        normalize_items(raw)
    assert exc.value.kind == "facet"


@pytest.mark.parametrize("field", ["domain", "facet"])
@pytest.mark.parametrize("label", [["外向性"], {"label": "社交性"}, 1, None])
def test_non_string_label_is_unknown_category(field, label):
    raw = build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=1)
    raw[0][field] = label

    with pytest.raises(UnknownCategory) as exc:
        normalize_items(raw)
    assert exc.value.kind == field
    assert exc.value.label == label


@pytest.mark.parametrize("flag", ["false", "true", 0, 1, None])
def test_non_bool_reverse_flag_aborts_load(flag):
    raw = build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=1)
    raw[0]["reverse"] = flag

    with pytest.raises(CatalogError, match="reverse must be true or false"):
        normalize_items(raw)


def test_labels_match_case_sensitively():
    raw = [{"number": 1, "text": "t", "domain": "Extraversion", "facet": "社交性", "reverse": False}]
    with pytest.raises(UnknownCategory):
        normalize_items(raw)


def test_duplicate_numbers_rejected():
    raw = build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=2)
    raw[1]["number"] = raw[0]["number"]
    with pytest.raises(DuplicateItemNumber):
        normalize_items(raw)


def test_facet_from_other_domain_rejected():
    raw = [{"number": 1, "text": "t", "domain": "外向性", "facet": "信用", "reverse": False}]
    with pytest.raises(FacetDomainMismatch):
        normalize_items(raw)


def test_missing_field_rejected():
    with pytest.raises(CatalogError, match="reverse"):
        normalize_items([{"number": 1, "text": "t", "domain": "外向性", "facet": "社交性"}])


def test_input_order_kept_without_renumbering():
    raw = build_synthetic_raw(facets=[Facet.ANXIETY, Facet.TRUST], items_per_facet=1)
    raw[0]["number"], raw[1]["number"] = 42, 7

    items = normalize_items(raw)
    assert [it.number for it in items] == [42, 7]
    assert [it.facet for it in items] == [Facet.ANXIETY, Facet.TRUST]


def test_stats_include_empty_categories():
    stats = item_stats(normalize_items(build_synthetic_raw(facets=[Facet.SOCIABILITY], items_per_facet=3)))
    assert stats.domain_counts[Domain.EXTRAVERSION] == 3
    assert stats.domain_counts[Domain.OPENNESS] == 0
    assert stats.facet_counts[Facet.SOCIABILITY] == 3
    assert stats.facet_counts[Facet.ASSERTIVENESS] == 0
    assert set(stats.facet_counts) == set(Facet)


def test_load_catalog_from_path_and_env_override(tmp_path, monkeypatch):
    path = tmp_path / "items.json"
    path.write_text(
        json.dumps(build_synthetic_raw(facets=[Facet.DEPRESSION], items_per_facet=2), ensure_ascii=False),
        encoding="utf-8",
    )

    assert load_catalog(path).total_items == 2

    monkeypatch.setattr(config, "BFI_ITEMS_PATH", str(path), raising=False)
    assert catalog_mod.load_catalog().total_items == 2


def test_non_list_source_rejected(tmp_path):
    path = tmp_path / "items.json"
    path.write_text('{"number": 1}', encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)
