"""Калькулятор числа жизненного пути и квадрата Ло Шу"""
import re
from typing import Dict, List, Tuple
from .models import NumerologyResult


class NumerologyCalculator:
    """Класс для расчета числа жизненного пути"""
    
    MASTER_NUMBERS = (11, 22, 33)
    
    # Линии квадрата Ло Шу (生命靈數連線)
    LINES: Tuple[Tuple[Tuple[int, int, int], str], ...] = (
        ((1, 2, 3), '藝術線'),
        ((4, 5, 6), '組織線'),
        ((7, 8, 9), '權力線'),
        ((1, 4, 7), '物質線'),
        ((2, 5, 8), '感情線'),
        ((3, 6, 9), '智慧線'),
        ((1, 5, 9), '事業線'),
        ((3, 5, 7), '人緣線'),
    )
    
    def reduce_number(self, number: int) -> int:
        """Редуцирует число до однозначного (кроме мастер-чисел 11, 22, 33)"""
        while number > 9 and number not in self.MASTER_NUMBERS:
            number = sum(int(digit) for digit in str(number))
        return number
    
    def extract_digits(self, birthday: str) -> List[int]:
        """Оставляет только цифры даты"""
        return [int(d) for d in re.sub(r'\D', '', birthday or '')]
    
    def build_grid(self, digits: List[int]) -> List[int]:
        """Считает, сколько раз встречается каждая цифра 1..9"""
        grid = [0] * 10
        for digit in digits:
            # Ноль участвует в сумме, но не в квадрате
            if digit:
                grid[digit] += 1
        return grid
    
    def find_lines(self, grid: List[int]) -> List[str]:
        """Находит заполненные линии квадрата"""
        return [
            label for (a, b, c), label in self.LINES
            if grid[a] > 0 and grid[b] > 0 and grid[c] > 0
        ]
    
    def calculate(self, birthday: str) -> NumerologyResult:
        """Основной метод расчета"""
        digits = self.extract_digits(birthday)
        grid = self.build_grid(digits)
        
        # Пустая дата дает 0, цикл редукции не запускается
        life_path = self.reduce_number(sum(digits)) if digits else 0
        
        return NumerologyResult(
            life_path_number=life_path,
            grid=grid,
            lines=self.find_lines(grid)
        )
    
    def to_report(self, result: NumerologyResult) -> Dict[str, object]:
        """Поля для итогового отчета"""
        return {
            'lifeNum': result.life_path_number,
            'grid': list(result.grid),
            'lines': list(result.lines),
        }
