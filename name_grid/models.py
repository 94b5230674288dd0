"""Модели данных для пяти решеток имени"""
from pydantic import BaseModel, ConfigDict
from typing import List


class FiveGrids(BaseModel):
    """Пять решеток (五格)"""
    model_config = ConfigDict(frozen=True)
    
    heaven: int  # 天格
    man: int     # 人格
    earth: int   # 地格
    out: int     # 外格
    total: int   # 總格


class NameGridResult(BaseModel):
    """Результат расчета пяти решеток"""
    model_config = ConfigDict(frozen=True)
    
    strokes: int
    five_grids: FiveGrids
    luck81: str
    three_talents: str  # 三才: стихии 天/人/地
    
    # Иероглифы, которых нет в словаре черт (считаются как 0)
    unknown_chars: List[str] = []
