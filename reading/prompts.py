"""Текст запроса к модели"""
import json
from typing import Any, Dict, Optional

from .models import Subject

# Модель заполняет только текстовые поля, числа уже посчитаны локально
PERSONAL_SHAPE = {
    "bazi": {"pillars": ["", "", "", ""], "analysis": "", "elements": ""},
    "humanDesign": {"type": "", "authority": "", "strategy": "", "profile": ""},
    "tzolkin": {"kin": "", "totem": "", "energy": ""},
    "numerology": {"analysis": ""},
    "nameGrid": {"analysis": ""},
}

RELATIONSHIP_SHAPE = {"syncScore": 0, "harmony": "", "advice": ""}

LUCKY_SHAPE = {"color": "", "number": "", "direction": ""}


def build_response_shape(with_partner: bool) -> Dict[str, Any]:
    """JSON-структура, которую должна вернуть модель"""
    shape: Dict[str, Any] = {"personal": PERSONAL_SHAPE}
    if with_partner:
        shape["relationship"] = RELATIONSHIP_SHAPE
    shape["dailyAdvice"] = ""
    shape["luckyIndicators"] = LUCKY_SHAPE
    return shape


def _facts_block(subject: Subject, facts: Dict[str, Any]) -> str:
    numerology = facts['numerology']
    name_grid = facts['nameGrid']
    grids = name_grid['fiveGrids']
    lines = '、'.join(numerology['lines']) or '無'
    return (
        f"姓名：{subject.name}，生日：{subject.birthday}\n"
        f"生命靈數：{numerology['lifeNum']}（九宮格：{numerology['grid'][1:]}，連線：{lines}）\n"
        f"姓名總筆劃：{name_grid['strokes']}，"
        f"天格 {grids['heaven']}、人格 {grids['man']}、地格 {grids['earth']}、"
        f"外格 {grids['out']}、總格 {grids['total']}（{name_grid['luck81']}），"
        f"三才：{name_grid['threeTalents']}"
    )


def build_prompt(
    subject: Subject,
    facts: Dict[str, Any],
    partner: Optional[Subject] = None,
    partner_facts: Optional[Dict[str, Any]] = None
) -> str:
    """Собирает prompt с уже вычисленными числами как фиксированными фактами"""
    with_partner = partner is not None and partner_facts is not None
    partner_block = ""
    if with_partner:
        partner_block = f"\n合盤對象：\n{_facts_block(partner, partner_facts)}\n"

    shape = json.dumps(build_response_shape(with_partner), ensure_ascii=False)

    return f"""你是一位精通東西方玄學的核心 AI Aetheris。
以下數字已由系統計算完成，視為固定事實，不得更改或重新計算：
{_facts_block(subject, facts)}
{partner_block}
要求：
1. 根據上述數字撰寫生命靈數與姓名學解讀，並補充八字、人類圖、卓爾金曆、今日宜忌與幸運指標。
2. 只填寫下列結構中的文字欄位，不要輸出任何數字欄位以外的計算結果。
3. 嚴格輸出 JSON 格式：
{shape}
Respond only with valid JSON. Do not include markdown or explanations."""
