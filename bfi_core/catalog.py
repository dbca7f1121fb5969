# bfi_core/catalog.py
from __future__ import annotations
import json, logging, importlib.resources as ir
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from . import config
from .categories import Domain, Facet, DOMAIN_BY_LABEL, FACET_BY_LABEL
from .types import Item

log = logging.getLogger(__name__)

_DEFAULT_SOURCE = "data/bfi_items.json"
_REQUIRED_FIELDS = ("number", "text", "domain", "facet", "reverse")


class CatalogError(ValueError):
    """The item catalog is malformed; raised at load time and never recovered."""


class UnknownCategory(CatalogError):
    def __init__(self, kind: str, label: Any, number: Any = None):
        self.kind = kind
        self.label = label
        self.number = number
        super().__init__(f"Unknown {kind} label: {label!r} (item {number})")


class DuplicateItemNumber(CatalogError):
    def __init__(self, number: int):
        self.number = number
        super().__init__(f"Duplicate item number: {number}")


class FacetDomainMismatch(CatalogError):
    def __init__(self, number: int, facet: Facet, domain: Domain):
        self.number = number
        self.facet = facet
        self.domain = domain
        super().__init__(
            f"Item {number}: facet {facet.label!r} belongs to {facet.domain.label!r}, not {domain.label!r}"
        )


@dataclass(frozen=True)
class ItemStats:
    domain_counts: Dict[Domain, int]
    facet_counts: Dict[Facet, int]


def item_stats(items: Iterable[Item]) -> ItemStats:
    """Count items per domain and facet; every category is present, zero included."""

    domain_counts = {d: 0 for d in Domain}
    facet_counts = {f: 0 for f in Facet}
    for it in items:
        domain_counts[it.domain] += 1
        facet_counts[it.facet] += 1
    return ItemStats(domain_counts=domain_counts, facet_counts=facet_counts)


def _resolve_domain(label: Any, number: Any) -> Domain:
    domain = DOMAIN_BY_LABEL.get(label) if isinstance(label, str) else None
    if domain is None:
        raise UnknownCategory("domain", label, number)
    return domain


def _resolve_facet(label: Any, number: Any) -> Facet:
    facet = FACET_BY_LABEL.get(label) if isinstance(label, str) else None
    if facet is None:
        raise UnknownCategory("facet", label, number)
    return facet


def normalize_items(raw_items: Iterable[Mapping[str, Any]]) -> List[Item]:
    """
    Map raw catalog records onto Items.

    Domain and facet labels are matched exactly (case-sensitive) against the
    fixed label tables.  Input order is kept and numbers are not rewritten;
    they only have to be unique.
    """
    normalized: List[Item] = []
    seen: set[int] = set()
    for raw in raw_items:
        missing = [k for k in _REQUIRED_FIELDS if k not in raw]
        if missing:
            raise CatalogError(f"Item record {dict(raw)!r} is missing {', '.join(missing)}")
        number = int(raw["number"])
        domain = _resolve_domain(raw["domain"], number)
        facet = _resolve_facet(raw["facet"], number)
        if facet.domain is not domain:
            raise FacetDomainMismatch(number, facet, domain)
        if number in seen:
            raise DuplicateItemNumber(number)
        if not isinstance(raw["reverse"], bool):
            raise CatalogError(f"Item {number}: reverse must be true or false, got {raw['reverse']!r}")
        seen.add(number)
        normalized.append(
            Item(
                number=number,
                text=str(raw["text"]),
                domain=domain,
                facet=facet,
                reverse=raw["reverse"],
            )
        )
    return normalized


@dataclass(frozen=True)
class Catalog:
    items: Tuple[Item, ...]
    stats: ItemStats

    @classmethod
    def from_items(cls, items: Sequence[Item]) -> "Catalog":
        return cls(items=tuple(items), stats=item_stats(items))

    @classmethod
    def from_raw(cls, raw_items: Iterable[Mapping[str, Any]]) -> "Catalog":
        return cls.from_items(normalize_items(raw_items))

    @property
    def total_items(self) -> int:
        return len(self.items)

    def item_at(self, index: int) -> Optional[Item]:
        if 0 <= index < len(self.items):
            return self.items[index]
        return None

    def numbers(self) -> List[int]:
        return [it.number for it in self.items]


def load_raw_items(path: str | Path | None = None) -> List[Dict[str, Any]]:
    source = path or config.BFI_ITEMS_PATH
    if source:
        text = Path(source).read_text(encoding="utf-8")
    else:
        text = ir.files(__package__).joinpath(_DEFAULT_SOURCE).read_text(encoding="utf-8")
    raw = json.loads(text)
    if not isinstance(raw, list):
        raise CatalogError(f"Catalog source must be a JSON list, got {type(raw).__name__}")
    return raw


def load_catalog(path: str | Path | None = None) -> Catalog:
    catalog = Catalog.from_raw(load_raw_items(path))
    log.info(
        "catalog loaded: %d items, %d reverse-keyed",
        catalog.total_items,
        sum(1 for it in catalog.items if it.reverse),
    )
    return catalog
