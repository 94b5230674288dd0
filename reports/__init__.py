"""Генерация отчетов"""
from .generator import ReportGenerator

__all__ = ['ReportGenerator']
