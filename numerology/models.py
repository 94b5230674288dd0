"""Модели данных для нумерологии"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List


class NumerologyResult(BaseModel):
    """Результат расчета числа жизненного пути"""
    model_config = ConfigDict(frozen=True)
    
    # 0 - пустая дата, иначе 1..9 или мастер-число 11, 22, 33
    life_path_number: int
    
    # Квадрат Ло Шу: индекс 0 не используется, 1..9 - сколько раз цифра встречается
    grid: List[int] = Field(min_length=10, max_length=10)
    
    # Названия заполненных линий квадрата
    lines: List[str]
