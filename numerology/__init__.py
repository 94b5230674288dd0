"""Модуль расчета числа жизненного пути"""
from .calculator import NumerologyCalculator
from .models import NumerologyResult

__all__ = ['NumerologyCalculator', 'NumerologyResult']
