from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Iterable

from . import config
from .catalog import load_catalog
from .categories import Domain, Facet
from .types import Item


def _blank_counts() -> dict[str, int]:
    return {"items": 0, "reverse": 0}


def audit_items(items: Iterable[Item]) -> dict[str, object]:
    coverage: dict[str, dict[str, object]] = {
        d.value: {**_blank_counts(), "facets": {f.value: _blank_counts() for f in d.facets}}
        for d in Domain
    }
    totals = _blank_counts()

    for item in items:
        domain_data = coverage[item.domain.value]
        facet_data = domain_data["facets"][item.facet.value]  # type: ignore[index]
        for bucket in (totals, domain_data, facet_data):
            bucket["items"] += 1  # type: ignore[operator]
            if item.reverse:
                bucket["reverse"] += 1  # type: ignore[operator]

    warnings: list[str] = []
    for facet in Facet:
        data = coverage[facet.domain.value]["facets"][facet.value]  # type: ignore[index]
        n = data["items"]
        if n != config.ITEMS_PER_FACET:
            warnings.append(f"{facet.domain.label}/{facet.label} has {n} items (expected {config.ITEMS_PER_FACET})")
        if n and not data["reverse"]:
            warnings.append(f"{facet.domain.label}/{facet.label} has no reverse-keyed item")

    return {"coverage": coverage, "warnings": warnings, "totals": totals}


def print_report(summary: dict[str, object]) -> None:
    coverage: dict[str, dict] = summary["coverage"]  # type: ignore[assignment]
    print("=== Catalog Coverage ===")
    for domain in Domain:
        data = coverage[domain.value]
        print(f"\n{domain.label} ({domain.value}): items={data['items']:2d} reverse={data['reverse']:2d}")
        for facet in domain.facets:
            fd = data["facets"][facet.value]
            print(f"  {facet.label}: items={fd['items']:2d} reverse={fd['reverse']:2d}")

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")

    print("\nTotals:", summary["totals"])


def write_summary(summary: dict[str, object], path: Path) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True, ensure_ascii=False)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Audit BFI catalog coverage per domain and facet.")
    ap.add_argument("--catalog", default=None, help="catalog JSON (defaults to the packaged items)")
    ap.add_argument("--out", default=None, help="also write the summary JSON to this path")
    a = ap.parse_args(argv)

    summary = audit_items(load_catalog(a.catalog).items)
    print_report(summary)
    if a.out:
        write_summary(summary, Path(a.out))
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
