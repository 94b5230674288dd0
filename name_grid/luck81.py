"""Таблица 81 靈動數"""
from typing import Dict

NEUTRAL_LABEL = '中性'

LUCK_81: Dict[int, str] = {
    1: '吉', 2: '凶', 3: '吉', 4: '凶', 5: '吉', 6: '吉', 7: '吉', 8: '吉', 9: '凶',
    10: '凶', 11: '吉', 12: '凶', 13: '吉', 14: '凶', 15: '吉', 16: '吉', 17: '吉',
    18: '吉', 19: '凶', 20: '凶', 21: '吉', 22: '凶', 23: '吉', 24: '吉', 25: '吉',
    26: '凶', 27: '凶', 28: '凶', 29: '吉', 30: '半吉', 31: '吉', 32: '吉', 33: '吉',
    34: '凶', 35: '吉', 36: '凶', 37: '吉', 38: '半吉', 39: '吉', 40: '凶', 41: '吉',
    42: '凶', 43: '凶', 44: '凶', 45: '吉', 46: '凶', 47: '吉', 48: '吉', 49: '半吉',
    50: '凶', 51: '半吉', 52: '吉', 53: '凶', 54: '凶', 55: '半吉', 56: '凶', 57: '吉',
    58: '半吉', 59: '凶', 60: '凶', 61: '吉', 62: '凶', 63: '吉', 64: '凶', 65: '吉',
    66: '凶', 67: '吉', 68: '吉', 69: '凶', 70: '凶', 71: '半吉', 72: '凶', 73: '吉',
    74: '凶', 75: '半吉', 76: '凶', 77: '半吉', 78: '半吉', 79: '凶', 80: '凶', 81: '吉',
}


def lookup_luck(total: int) -> str:
    """Возвращает метку для 總格; неизвестные числа - нейтральны"""
    if total > 81:
        total %= 81
    return LUCK_81.get(total, NEUTRAL_LABEL)
