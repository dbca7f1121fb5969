from __future__ import annotations
import os


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str | None) -> str | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


RATING_MIN: int = 1
RATING_MAX: int = 5

SCORE_DECIMALS: int = 2

# BFI-2 keys every facet with four items, two of them reverse-keyed.
ITEMS_PER_FACET: int = 4

BFI_ITEMS_PATH: str | None = None
REPORT_DIR: str = "reports"

DEBUG_TRACE: bool = False

# // env overrides for staging/ops; defaults match the packaged BFI-2-J catalog.
RATING_MIN = _env_int("BFI_RATING_MIN", RATING_MIN)
RATING_MAX = _env_int("BFI_RATING_MAX", RATING_MAX)
SCORE_DECIMALS = _env_int("BFI_SCORE_DECIMALS", SCORE_DECIMALS)
ITEMS_PER_FACET = _env_int("BFI_ITEMS_PER_FACET", ITEMS_PER_FACET)
BFI_ITEMS_PATH = _env_str("BFI_ITEMS_PATH", BFI_ITEMS_PATH)
REPORT_DIR = _env_str("BFI_REPORT_DIR", REPORT_DIR) or REPORT_DIR
DEBUG_TRACE = _env_bool("DEBUG_TRACE", DEBUG_TRACE)

# reverse(r) = min + max - r, i.e. 6 - r on the 1..5 scale.
REVERSE_BASE: int = RATING_MIN + RATING_MAX
