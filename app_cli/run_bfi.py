from __future__ import annotations
import argparse, datetime, logging, os
from bfi_core import config
from bfi_core.catalog import load_catalog
from bfi_core.flow import AnsweringFlow, Stage
from bfi_core.labels import CITATION, INSTRUCTION, INTRO_MESSAGE, TITLE, rating_choices
from bfi_core.reporting import render_text, write_report
from bfi_core.scoring import InvalidRating

HELP = "1-5: 回答して次へ  n/Enter: 次へ  p: もどる  q: 中断"


def show_question(flow: AnsweringFlow) -> None:
    it = flow.current_item
    selected = flow.selected_rating
    print(f"\n[{flow.progress}] {it.text}")
    for value, label in rating_choices():
        mark = "*" if value == selected else " "
        print(f" {mark}{value}: {label}")


def handle(flow: AnsweringFlow, cmd: str) -> None:
    if cmd == "p":
        if not flow.previous(): print("最初の質問です。")
    elif cmd in ("", "n"):
        if not flow.next(): print("回答を選択してください。")
    elif cmd.isdecimal():
        try:
            flow.select(int(cmd))
        except InvalidRating as e:
            print(e); return
        flow.next()
    else:
        print(HELP)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Answer the BFI-2-J questionnaire in the terminal.")
    ap.add_argument("--catalog", default=None, help="catalog JSON (defaults to the packaged items)")
    ap.add_argument("--report-dir", default=config.REPORT_DIR)
    ap.add_argument("--no-report", action="store_true", help="print scores without writing HTML/JSON")
    ap.add_argument("-v", "--verbose", action="store_true")
    a = ap.parse_args(argv)
    if a.verbose:
        logging.basicConfig(level=logging.DEBUG)

    flow = AnsweringFlow(load_catalog(a.catalog))
    if flow.total_items == 0:
        print("質問がありません。")
        return 1
    print(TITLE); print(INTRO_MESSAGE); print(INSTRUCTION); print(CITATION)
    try:
        input("\nEnterで開始します。")
        flow.start()
        print(HELP)
        while flow.stage is Stage.QUESTION:
            show_question(flow)
            cmd = input("> ").strip().lower()
            if cmd == "q":
                print("中断しました。")
                return 1
            handle(flow, cmd)
    except (KeyboardInterrupt, EOFError):
        print("\n中断しました。")
        return 1

    summary = flow.result()
    print("\n" + render_text(summary))
    if not a.no_report:
        ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        path = write_report(summary, os.path.join(a.report_dir, f"bfi_report_{ts}.html"))
        print(f"\nReport: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
