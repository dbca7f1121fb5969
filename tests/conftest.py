from __future__ import annotations

import pytest

from bfi_core.catalog import Catalog, load_catalog
from bfi_core.categories import Facet


def build_synthetic_raw(
    *,
    facets: list[Facet] | None = None,
    items_per_facet: int = 2,
    reverse_every: int = 2,
) -> list[dict]:
    """Create deterministic raw catalog records for tests.

    Every ``reverse_every``-th item within a facet is reverse-keyed
    (0 disables reverse keying).
    """

    raw: list[dict] = []
    number = 1
    for facet in list(Facet) if facets is None else facets:
        for idx in range(items_per_facet):
            raw.append(
                {
                    "number": number,
                    "text": f"{facet.label} #{idx}",
                    "domain": facet.domain.label,
                    "facet": facet.label,
                    "reverse": bool(reverse_every) and (idx + 1) % reverse_every == 0,
                }
            )
            number += 1
    return raw


def build_synthetic_catalog(**kwargs) -> Catalog:
    return Catalog.from_raw(build_synthetic_raw(**kwargs))


def answer_all(flow, rating_for=lambda item: 3) -> None:
    """Drive a started flow through every item with ``rating_for(item)``."""

    while flow.current_item is not None and flow.stage.value == "question":
        flow.select(rating_for(flow.current_item))
        flow.next()


@pytest.fixture
def synthetic_catalog() -> Catalog:
    return build_synthetic_catalog()


@pytest.fixture(scope="session")
def packaged_catalog() -> Catalog:
    return load_catalog()
