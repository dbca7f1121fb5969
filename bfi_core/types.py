from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TypedDict
from .categories import Domain, Facet


class RawItem(TypedDict):
    number: int; text: str; domain: str; facet: str; reverse: bool


@dataclass(frozen=True)
class Item:
    number: int; text: str; domain: Domain; facet: Facet
    reverse: bool = False


Responses = Dict[int, int]


@dataclass(frozen=True)
class ScoreEntry:
    id: str
    label: str
    value: float


@dataclass
class ScoreSummary:
    domains: List[ScoreEntry] = field(default_factory=list)
    facets: List[ScoreEntry] = field(default_factory=list)

    def domain_value(self, domain: Domain) -> Optional[float]:
        return next((e.value for e in self.domains if e.id == domain.value), None)

    def facet_value(self, facet: Facet) -> Optional[float]:
        return next((e.value for e in self.facets if e.id == facet.value), None)
