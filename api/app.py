from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import threading
import typing as t

# ---- Core imports ----
from bfi_core import config
from bfi_core.catalog import load_catalog
from bfi_core.flow import AnsweringFlow, Stage
from bfi_core.labels import CITATION, INSTRUCTION, INTRO_MESSAGE, TITLE, rating_choices
from bfi_core.reporting import render_html, summary_to_dict
from bfi_core.scoring import InvalidRating

# Catalog errors abort startup here, before the app exists.
CATALOG = load_catalog()
FLOW = AnsweringFlow(CATALOG)
# handlers run in a thread pool; FLOW is only touched while holding this
_LOCK = threading.Lock()

app = FastAPI(title="BFI-2-J Questionnaire API")

ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
class SelectReq(BaseModel):
    rating: int

# ---- Helpers ----
def _state(changed: bool | None = None) -> dict[str, t.Any]:
    out = FLOW.to_dict()
    if changed is not None:
        out["changed"] = changed
    return out

def _act(action: t.Callable[[], bool]) -> dict[str, t.Any]:
    # one action at a time; the state snapshot is taken under the same lock
    with _LOCK:
        return _state(action())

def _summary_or_409():
    with _LOCK:
        summary = FLOW.result()
        answered, total = FLOW.answered_count, FLOW.total_items
    if summary is None:
        raise HTTPException(409, f"questionnaire not finished ({answered}/{total} answered)")
    return summary

# ---- Health ----
@app.get("/")
def root():
    return {"status": "ok", "service": "bfi-questionnaire"}

@app.get("/health")
def health():
    with _LOCK:
        stage = FLOW.stage.value
    return {
        "total_items": CATALOG.total_items,
        "rating_scale": [config.RATING_MIN, config.RATING_MAX],
        "stage": stage,
    }

# ---- Catalog ----
@app.get("/catalog")
def catalog():
    return {
        "title": TITLE,
        "intro": INTRO_MESSAGE,
        "instruction": INSTRUCTION,
        "citation": CITATION,
        "ratings": [{"value": v, "label": label} for v, label in rating_choices()],
        "items": [{"number": it.number, "text": it.text} for it in CATALOG.items],
    }

# ---- Flow actions ----
@app.get("/state")
def state():
    with _LOCK:
        return _state()

@app.post("/start")
def start():
    return _act(FLOW.start)

@app.post("/select")
def select(req: SelectReq):
    try:
        return _act(lambda: FLOW.select(req.rating))
    except InvalidRating as e:
        raise HTTPException(422, str(e))

@app.post("/next")
def next_item():
    return _act(FLOW.next)

@app.post("/previous")
def previous_item():
    return _act(FLOW.previous)

@app.post("/restart")
def restart():
    return _act(FLOW.restart)

# ---- Result ----
@app.get("/result")
def result():
    summary = _summary_or_409()
    return {"stage": Stage.RESULT.value, **summary_to_dict(summary)}

@app.get("/result/html")
def result_html():
    return {"html": render_html(_summary_or_409())}
