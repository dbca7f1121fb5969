"""Fixed BFI-2 domain and facet enumerations.

The five domains and fifteen facets are closed sets.  Each enum member
carries a stable id (its value) and a Japanese display label; the label
tables below are the only place where catalog labels are matched, so an
unknown label can never slip into scoring as an ad-hoc string key.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Domain(str, Enum):
    EXTRAVERSION = "extraversion"
    AGREEABLENESS = "agreeableness"
    CONSCIENTIOUSNESS = "conscientiousness"
    NEGATIVE_EMOTIONALITY = "negativeEmotionality"
    OPENNESS = "openness"

    @property
    def label(self) -> str:
        return DOMAIN_LABELS[self]

    @property
    def facets(self) -> List["Facet"]:
        return [f for f in Facet if FACET_DOMAINS[f] is self]


class Facet(str, Enum):
    SOCIABILITY = "sociability"
    ASSERTIVENESS = "assertiveness"
    ENERGY_LEVEL = "energyLevel"
    COMPASSION = "compassion"
    RESPECTFULNESS = "respectfulness"
    TRUST = "trust"
    ORGANIZATION = "organization"
    PRODUCTIVITY = "productivity"
    RESPONSIBILITY = "responsibility"
    ANXIETY = "anxiety"
    DEPRESSION = "depression"
    EMOTIONAL_VOLATILITY = "emotionalVolatility"
    INTELLECTUAL_CURIOSITY = "intellectualCuriosity"
    AESTHETIC_SENSITIVITY = "aestheticSensitivity"
    CREATIVE_IMAGINATION = "creativeImagination"

    @property
    def label(self) -> str:
        return FACET_LABELS[self]

    @property
    def domain(self) -> Domain:
        return FACET_DOMAINS[self]


DOMAIN_LABELS: Dict[Domain, str] = {
    Domain.EXTRAVERSION: "外向性",
    Domain.AGREEABLENESS: "協調性",
    Domain.CONSCIENTIOUSNESS: "勤勉性",
    Domain.NEGATIVE_EMOTIONALITY: "否定的情動性",
    Domain.OPENNESS: "開放性",
}

FACET_LABELS: Dict[Facet, str] = {
    Facet.SOCIABILITY: "社交性",
    Facet.ASSERTIVENESS: "自己主張性",
    Facet.ENERGY_LEVEL: "活力",
    Facet.COMPASSION: "思いやり",
    Facet.RESPECTFULNESS: "敬意",
    Facet.TRUST: "信用",
    Facet.ORGANIZATION: "秩序",
    Facet.PRODUCTIVITY: "生産性",
    Facet.RESPONSIBILITY: "責任感",
    Facet.ANXIETY: "不安",
    Facet.DEPRESSION: "抑うつ",
    Facet.EMOTIONAL_VOLATILITY: "情緒不安定性",
    Facet.INTELLECTUAL_CURIOSITY: "知的好奇心",
    Facet.AESTHETIC_SENSITIVITY: "美的感性",
    Facet.CREATIVE_IMAGINATION: "創造的想像力",
}

FACET_DOMAINS: Dict[Facet, Domain] = {
    Facet.SOCIABILITY: Domain.EXTRAVERSION,
    Facet.ASSERTIVENESS: Domain.EXTRAVERSION,
    Facet.ENERGY_LEVEL: Domain.EXTRAVERSION,
    Facet.COMPASSION: Domain.AGREEABLENESS,
    Facet.RESPECTFULNESS: Domain.AGREEABLENESS,
    Facet.TRUST: Domain.AGREEABLENESS,
    Facet.ORGANIZATION: Domain.CONSCIENTIOUSNESS,
    Facet.PRODUCTIVITY: Domain.CONSCIENTIOUSNESS,
    Facet.RESPONSIBILITY: Domain.CONSCIENTIOUSNESS,
    Facet.ANXIETY: Domain.NEGATIVE_EMOTIONALITY,
    Facet.DEPRESSION: Domain.NEGATIVE_EMOTIONALITY,
    Facet.EMOTIONAL_VOLATILITY: Domain.NEGATIVE_EMOTIONALITY,
    Facet.INTELLECTUAL_CURIOSITY: Domain.OPENNESS,
    Facet.AESTHETIC_SENSITIVITY: Domain.OPENNESS,
    Facet.CREATIVE_IMAGINATION: Domain.OPENNESS,
}


def _invert(labels: Dict) -> Dict:
    inverted = {label: member for member, label in labels.items()}
    if len(inverted) != len(labels):
        raise RuntimeError("category labels must be unique")
    return inverted


DOMAIN_BY_LABEL: Dict[str, Domain] = _invert(DOMAIN_LABELS)
FACET_BY_LABEL: Dict[str, Facet] = _invert(FACET_LABELS)

DOMAINS: List[Domain] = list(Domain)
FACETS: List[Facet] = list(Facet)
