# bfi_core/flow.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Optional
import logging

from . import config
from .catalog import Catalog
from .scoring import check_rating, score
from .types import Item, ScoreSummary

log = logging.getLogger(__name__)


class Stage(str, Enum):
    INTRO = "intro"
    QUESTION = "question"
    RESULT = "result"


class AnsweringFlow:
    """
    intro -> question(i) -> result state machine over a fixed catalog.

    Owns the single response set.  Every action returns True when it changed
    state and False when it was ignored; navigation misuse is never an
    error.  The result stage is only reachable through ``next`` from the
    last item, so the response set is complete whenever it is scored.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.stage = Stage.INTRO
        self._index = 0
        self._responses: Dict[int, int] = {}
        self._summary: Optional[ScoreSummary] = None

    # ---- read surface ----
    @property
    def total_items(self) -> int:
        return self.catalog.total_items

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_item(self) -> Optional[Item]:
        return self.catalog.item_at(self._index)

    @property
    def selected_rating(self) -> Optional[int]:
        it = self.current_item
        return self._responses.get(it.number) if it else None

    @property
    def responses(self) -> Dict[int, int]:
        return dict(self._responses)

    @property
    def answered_count(self) -> int:
        return len(self._responses)

    @property
    def all_answered(self) -> bool:
        return self.answered_count == self.total_items

    @property
    def progress(self) -> str:
        return f"{self._index + 1} / {self.total_items}"

    def result(self) -> Optional[ScoreSummary]:
        return self._summary if self.stage is Stage.RESULT else None

    # ---- actions ----
    def start(self) -> bool:
        if self.stage is not Stage.INTRO:
            return self._ignored("start")
        self.stage = Stage.QUESTION
        self._index = 0
        self._trace("start")
        return True

    def select(self, rating: int) -> bool:
        it = self.current_item
        if self.stage is not Stage.QUESTION or it is None:
            return self._ignored("select")
        self._responses[it.number] = check_rating(rating)
        self._trace("select", rating=rating)
        return True

    def next(self) -> bool:
        it = self.current_item
        if self.stage is not Stage.QUESTION or it is None:
            return self._ignored("next")
        if it.number not in self._responses:
            return self._ignored("next", reason="no rating")
        if self._index + 1 >= self.total_items:
            self._summary = score(self.catalog.items, self._responses, self.catalog.stats)
            self.stage = Stage.RESULT
            log.info("questionnaire complete: %d responses scored", len(self._responses))
        else:
            self._index += 1
        self._trace("next")
        return True

    def previous(self) -> bool:
        if self.stage is not Stage.QUESTION or self._index == 0:
            return self._ignored("previous")
        self._index -= 1
        self._trace("previous")
        return True

    def restart(self) -> bool:
        if self.stage is Stage.INTRO and not self._responses:
            return self._ignored("restart")
        self.stage = Stage.INTRO
        self._index = 0
        self._responses = {}
        self._summary = None
        self._trace("restart")
        return True

    def to_dict(self) -> Dict[str, object]:
        """JSON-friendly view for rendering adapters."""

        it = self.current_item if self.stage is Stage.QUESTION else None
        return {
            "stage": self.stage.value,
            "index": self._index,
            "total_items": self.total_items,
            "progress": self.progress if it else None,
            "item": {"number": it.number, "text": it.text} if it else None,
            "selected_rating": self.selected_rating if it else None,
            "answered_count": self.answered_count,
            "can_previous": bool(it) and self._index > 0,
            "can_next": bool(it) and self.selected_rating is not None,
        }

    # ---- helpers ----
    def _ignored(self, action: str, reason: str = "") -> bool:
        log.debug("ignored %s at %s[%d] %s", action, self.stage.value, self._index, reason)
        return False

    def _trace(self, action: str, **values: object) -> None:
        if not config.DEBUG_TRACE:
            return
        extra = " ".join(f"{k}={v}" for k, v in values.items())
        log.info("trace %s stage=%s index=%d %s", action, self.stage.value, self._index, extra)
