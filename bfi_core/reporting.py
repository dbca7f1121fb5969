# bfi_core/reporting.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

from .labels import CITATION, DOMAIN_HEADING, FACET_HEADING, RESULT_HEADING, TITLE
from .scoring import format_score
from .types import ScoreEntry, ScoreSummary


def _entry(e: ScoreEntry) -> Dict[str, Any]:
    return {"id": e.id, "label": e.label, "value": e.value, "display": format_score(e.value)}


def summary_to_dict(summary: ScoreSummary) -> Dict[str, List[Dict[str, Any]]]:
    """JSON-safe form; ``value`` keeps full precision, ``display`` is for humans."""

    return {
        "domains": [_entry(e) for e in summary.domains],
        "facets": [_entry(e) for e in summary.facets],
    }


# -------- plain text for terminals ----------
def render_text(summary: ScoreSummary) -> str:
    entries = list(summary.domains) + list(summary.facets)
    width = max((len(e.label) for e in entries), default=0) + 2
    lines = [f"== {RESULT_HEADING} ==", "", f"[{DOMAIN_HEADING}]"]
    lines += [f"  {e.label:<{width}}{format_score(e.value)}" for e in summary.domains]
    lines += ["", f"[{FACET_HEADING}]"]
    lines += [f"  {e.label:<{width}}{format_score(e.value)}" for e in summary.facets]
    return "\n".join(lines)


# -------- minimal HTML rendering ----------
def _rows(entries: List[ScoreEntry]) -> str:
    return "".join(f"<tr><td>{e.label}</td><td>{format_score(e.value)}</td></tr>" for e in entries)


def render_html(summary: ScoreSummary, title: str = TITLE) -> str:
    def table(heading: str, entries: List[ScoreEntry]) -> str:
        return (
            f"<h3>{heading}</h3>"
            "<table border='1' cellpadding='6' cellspacing='0'>"
            "<thead><tr><th>カテゴリ</th><th>得点</th></tr></thead>"
            f"<tbody>{_rows(entries)}</tbody></table>"
        )

    return f"""<!doctype html>
<html lang="ja">
<head>
<meta charset="utf-8"/>
<title>{title}</title>
<style>
 body{{font-family:system-ui,-apple-system,'Hiragino Sans','Noto Sans JP',sans-serif}}
 .wrap{{max-width:720px;margin:40px auto;padding:0 16px}}
 table{{border-collapse:collapse;width:100%;margin-bottom:24px}}
 th,td{{text-align:left}}
 .citation{{font-size:.85rem;color:#555}}
</style>
</head>
<body>
<div class="wrap">
  <h1>{title}</h1>
  <h2>{RESULT_HEADING}</h2>
  {table(DOMAIN_HEADING, summary.domains)}
  {table(FACET_HEADING, summary.facets)}
  <p class="citation">{CITATION}</p>
</div>
</body>
</html>"""


def write_report(summary: ScoreSummary, out_path: str | Path, title: str = TITLE) -> str:
    """
    Writes the HTML report to out_path and a JSON sidecar next to it.
    Returns out_path.
    """
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_html(summary, title=title), encoding="utf-8")

    sidecar = out.with_suffix(".json")
    with sidecar.open("w", encoding="utf-8") as f:
        json.dump(summary_to_dict(summary), f, ensure_ascii=False, indent=2)

    return str(out)
