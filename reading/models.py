"""Модели данных для полного прочтения"""
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional


class Subject(BaseModel):
    """Входные данные: имя и дата рождения"""
    model_config = ConfigDict(frozen=True)
    
    name: str
    birthday: str  # YYYY-MM-DD


class ReadingReport(BaseModel):
    """Итоговый отчет: локальные расчеты поверх текста модели"""
    model_config = ConfigDict(frozen=True)
    
    # numerology, nameGrid, bazi, humanDesign, tzolkin
    personal: Dict[str, Any]
    relationship: Optional[Dict[str, Any]] = None
    dailyAdvice: Any = None
    luckyIndicators: Any = None
