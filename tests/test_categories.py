from __future__ import annotations

from bfi_core.categories import (
    DOMAIN_BY_LABEL,
    DOMAIN_LABELS,
    FACET_BY_LABEL,
    FACET_DOMAINS,
    FACET_LABELS,
    Domain,
    Facet,
)


def test_five_domains_fifteen_facets_in_definition_order():
    assert [d.value for d in Domain] == [
        "extraversion",
        "agreeableness",
        "conscientiousness",
        "negativeEmotionality",
        "openness",
    ]
    assert len(list(Facet)) == 15
    assert list(Facet)[0] is Facet.SOCIABILITY
    assert list(Facet)[-1] is Facet.CREATIVE_IMAGINATION


def test_label_tables_are_bijections():
    assert set(DOMAIN_LABELS) == set(Domain)
    assert set(FACET_LABELS) == set(Facet)
    assert all(DOMAIN_BY_LABEL[label] is d for d, label in DOMAIN_LABELS.items())
    assert all(FACET_BY_LABEL[label] is f for f, label in FACET_LABELS.items())
    assert Domain.NEGATIVE_EMOTIONALITY.label == "否定的情動性"
    assert Facet.EMOTIONAL_VOLATILITY.label == "情緒不安定性"


def test_every_domain_owns_exactly_three_facets():
    assert set(FACET_DOMAINS) == set(Facet)
    for domain in Domain:
        assert len(domain.facets) == 3, domain
    assert Domain.EXTRAVERSION.facets == [Facet.SOCIABILITY, Facet.ASSERTIVENESS, Facet.ENERGY_LEVEL]
    assert Facet.TRUST.domain is Domain.AGREEABLENESS
