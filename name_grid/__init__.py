"""Модуль расчета пяти решеток имени"""
from .calculator import NameGridCalculator
from .models import FiveGrids, NameGridResult
from .luck81 import LUCK_81, NEUTRAL_LABEL, lookup_luck
from .strokes import KANGXI_STROKES

__all__ = [
    'NameGridCalculator',
    'FiveGrids',
    'NameGridResult',
    'LUCK_81',
    'NEUTRAL_LABEL',
    'lookup_luck',
    'KANGXI_STROKES'
]
