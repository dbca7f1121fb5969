from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional
import logging

from . import config
from .catalog import ItemStats, item_stats
from .categories import Domain, Facet
from .types import Item, ScoreEntry, ScoreSummary

log = logging.getLogger(__name__)


class InvalidRating(ValueError):
    def __init__(self, rating: object):
        self.rating = rating
        super().__init__(
            f"Rating must be an integer in {config.RATING_MIN}..{config.RATING_MAX}, got {rating!r}"
        )


class IncompleteResponses(ValueError):
    def __init__(self, missing: Iterable[int]):
        self.missing = tuple(missing)
        super().__init__(f"No rating recorded for item(s): {', '.join(map(str, self.missing))}")


def check_rating(rating: object) -> int:
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise InvalidRating(rating)
    if not config.RATING_MIN <= rating <= config.RATING_MAX:
        raise InvalidRating(rating)
    return rating


def reverse_score(rating: int, rating_min: int | None = None, rating_max: int | None = None) -> int:
    if rating_min is None and rating_max is None:
        return config.REVERSE_BASE - int(rating)
    lo = config.RATING_MIN if rating_min is None else rating_min
    hi = config.RATING_MAX if rating_max is None else rating_max
    return (lo + hi) - int(rating)


def effective_score(item: Item, rating: int) -> int:
    return reverse_score(rating) if item.reverse else int(rating)


def calculate_average(total: float, count: int) -> float:
    return float(total) / count if count > 0 else 0.0


def format_score(value: float, decimals: int | None = None) -> str:
    places = config.SCORE_DECIMALS if decimals is None else decimals
    return f"{float(value):.{places}f}"


def missing_numbers(items: Iterable[Item], responses: Mapping[int, int]) -> List[int]:
    return [it.number for it in items if it.number not in responses]


def is_complete(items: Iterable[Item], responses: Mapping[int, int]) -> bool:
    return not missing_numbers(items, responses)


def score(
    items: Iterable[Item],
    responses: Mapping[int, int],
    stats: Optional[ItemStats] = None,
) -> ScoreSummary:
    """
    Reduce a complete response set to per-domain and per-facet means.

    Reverse-keyed items contribute ``min + max - rating``.  Each total is
    divided by the category's item count from ``stats`` (computed from
    ``items`` when omitted); an empty category scores 0.0.  Entries come
    back in enum definition order and are not rounded.

    Raises IncompleteResponses when any item has no rating and
    InvalidRating when a rating is outside the scale.  Responses keyed by
    numbers that are not in ``items`` are ignored.
    """
    items = list(items)
    missing = missing_numbers(items, responses)
    if missing:
        raise IncompleteResponses(missing)
    if stats is None:
        stats = item_stats(items)

    domain_totals: Dict[Domain, float] = {d: 0.0 for d in Domain}
    facet_totals: Dict[Facet, float] = {f: 0.0 for f in Facet}
    for it in items:
        value = effective_score(it, check_rating(responses[it.number]))
        domain_totals[it.domain] += value
        facet_totals[it.facet] += value

    domains = [
        ScoreEntry(id=d.value, label=d.label, value=calculate_average(domain_totals[d], stats.domain_counts[d]))
        for d in Domain
    ]
    facets = [
        ScoreEntry(id=f.value, label=f.label, value=calculate_average(facet_totals[f], stats.facet_counts[f]))
        for f in Facet
    ]
    if config.DEBUG_TRACE:
        log.info("trace scored %d items %s", len(items), " ".join(f"{e.id}={e.value:.3f}" for e in domains))
    return ScoreSummary(domains=domains, facets=facets)
