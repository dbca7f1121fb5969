from __future__ import annotations
from typing import Dict, List, Tuple
from . import config

TITLE = "日本語版Big Five Inventory-2"

INTRO_MESSAGE = (
    "これはBig Fiveパーソナリティの５つの特性を測定するための質問です。"
    "５つの特性（ドメイン）にはそれぞれ3つの下位概念（ファセット）が想定されています。"
    "出題は60問です。"
)

INSTRUCTION = (
    "正解・不正解はありません。最近の一時的な気分ではなく、ここ数年の一般的な傾向を思い浮かべて回答してください。"
    "思い出しにくい場面は考え込まず、第一印象で選んでかまいません。"
)

CITATION = (
    "Yoshino, S., Shimotsukasa, T., Oshio, A., Hashimoto, Y., Ueno, Y., Mieda, T., "
    "Migiwa, I., Sato, T., Kawamoto, S., Soto, C. J., & John, O. P. (2022). "
    "A validation of the Japanese adaptation of the Big Five Inventory-2 (BFI-2-J). "
    "Frontiers in Psychology, 13: 924351."
)

RATING_LABELS: Dict[int, str] = {
    1: "全くあてはまらない",
    2: "あてはまらない",
    3: "どちらともいえない",
    4: "あてはまる",
    5: "とてもよくあてはまる",
}

DOMAIN_HEADING = "ドメイン得点"
FACET_HEADING = "ファセット得点"
RESULT_HEADING = "結果"


def rating_choices() -> List[Tuple[int, str]]:
    return [(v, RATING_LABELS.get(v, str(v))) for v in range(config.RATING_MIN, config.RATING_MAX + 1)]
