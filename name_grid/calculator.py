"""Калькулятор пяти решеток имени (五格)"""
import logging
from typing import Dict, Mapping, Optional
from .models import FiveGrids, NameGridResult
from .strokes import KANGXI_STROKES
from .luck81 import lookup_luck

logger = logging.getLogger(__name__)


class NameGridCalculator:
    """Класс для расчета пяти решеток по числу черт"""
    
    # Стихия по последней цифре числа решетки
    ELEMENTS = {
        1: '木', 2: '木', 3: '火', 4: '火', 5: '土',
        6: '土', 7: '金', 8: '金', 9: '水', 0: '水'
    }
    
    def __init__(self, strokes: Optional[Mapping[str, int]] = None):
        # Словарь только читается, его можно разделять между запросами
        self.strokes = strokes if strokes is not None else KANGXI_STROKES
    
    def strokes_of(self, char: str) -> int:
        """Число черт иероглифа; неизвестный иероглиф дает 0"""
        return self.strokes.get(char, 0)
    
    def element_of(self, number: int) -> str:
        """Стихия числа"""
        return self.ELEMENTS[number % 10]
    
    def calculate(self, name: str) -> NameGridResult:
        """Основной метод расчета"""
        chars = [c for c in (name or '') if not c.isspace()]
        counts = [self.strokes_of(c) for c in chars]
        unknown = [c for c in chars if c not in self.strokes]
        if unknown:
            logger.debug(f"Нет в словаре черт: {''.join(unknown)}")
        
        total_strokes = sum(counts)
        first = counts[0] if counts else 0
        # Для имени из одного иероглифа второй считается как 0
        second = counts[1] if len(counts) > 1 else 0
        last = counts[-1] if counts else 0
        
        heaven = first + 1
        man = first + second
        earth = total_strokes - first
        out = last + 1
        total = heaven + man + earth - 1
        
        grids = FiveGrids(heaven=heaven, man=man, earth=earth, out=out, total=total)
        
        return NameGridResult(
            strokes=total_strokes,
            five_grids=grids,
            luck81=lookup_luck(total),
            three_talents=self._three_talents(grids),
            unknown_chars=unknown
        )
    
    def _three_talents(self, grids: FiveGrids) -> str:
        """三才: стихии небесной, человеческой и земной решеток"""
        return ''.join(self.element_of(n) for n in (grids.heaven, grids.man, grids.earth))
    
    def to_report(self, result: NameGridResult) -> Dict[str, object]:
        """Поля для итогового отчета"""
        return {
            'strokes': result.strokes,
            'fiveGrids': result.five_grids.model_dump(),
            'luck81': result.luck81,
            'threeTalents': result.three_talents,
            'unknownChars': list(result.unknown_chars),
        }
