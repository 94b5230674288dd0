"""Построение полного прочтения"""
import logging
import re
from datetime import date
from typing import Any, Dict, Optional

from generation import FailureKind, GenerationFailure, ResilientGenerativeClient
from name_grid import NameGridCalculator
from numerology import NumerologyCalculator

from .errors import (
    MalformedOutputError,
    ReadingError,
    SubjectValidationError,
    UpstreamRejectedError,
    UpstreamUnavailableError
)
from .models import ReadingReport, Subject
from .prompts import build_prompt

logger = logging.getLogger(__name__)

_BIRTHDAY_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Новый словарь: значения override побеждают, вложенные словари сливаются"""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_subject(subject: Subject, role: str = "subject") -> None:
    """Проверяет непустое имя и дату рождения YYYY-MM-DD"""
    if not subject.name or not subject.name.strip():
        raise SubjectValidationError(f"{role}: не указано имя")
    if not _BIRTHDAY_RE.match(subject.birthday or ''):
        raise SubjectValidationError(f"{role}: дата рождения должна быть в формате YYYY-MM-DD")
    try:
        date.fromisoformat(subject.birthday)
    except ValueError:
        raise SubjectValidationError(f"{role}: несуществующая дата {subject.birthday}")


class ReadingOrchestrator:
    """Считает числа локально и дополняет их текстом модели"""

    PERSONAL_SECTIONS = ('bazi', 'humanDesign', 'tzolkin')

    def __init__(
        self,
        client: ResilientGenerativeClient,
        numerology: Optional[NumerologyCalculator] = None,
        name_grid: Optional[NameGridCalculator] = None
    ):
        self.client = client
        self.numerology = numerology or NumerologyCalculator()
        self.name_grid = name_grid or NameGridCalculator()

    def validate_subject(self, subject: Subject, role: str = "subject") -> None:
        """Проверяет имя и дату рождения"""
        validate_subject(subject, role)

    def calculate(self, subject: Subject) -> Dict[str, Any]:
        """Локальные расчеты: нумерология и пять решеток"""
        numerology = self.numerology.calculate(subject.birthday)
        name_grid = self.name_grid.calculate(subject.name)
        if name_grid.unknown_chars:
            logger.warning(
                f"Иероглифы без числа черт в имени {subject.name!r}: "
                f"{''.join(name_grid.unknown_chars)} (считаются как 0)"
            )

        numerology_fields = self.numerology.to_report(numerology)
        # Совместимость со старой структурой numerology.name81
        numerology_fields['name81'] = {'strokes': name_grid.strokes, 'luck': name_grid.luck81}

        return {
            'numerology': numerology_fields,
            'nameGrid': self.name_grid.to_report(name_grid),
        }

    async def build_reading(self, subject: Subject, partner: Optional[Subject] = None) -> ReadingReport:
        """Основной метод: выбрасывает ReadingError, выдуманный отчет не возвращает"""
        self.validate_subject(subject, "subject")
        if partner is not None:
            self.validate_subject(partner, "partner")

        facts = self.calculate(subject)
        partner_facts = self.calculate(partner) if partner is not None else None

        prompt = build_prompt(subject, facts, partner, partner_facts)
        result = await self.client.generate(prompt)
        if not result.ok:
            raise self._to_error(result)

        deterministic: Dict[str, Any] = {'personal': facts}
        if partner_facts is not None:
            deterministic['relationship'] = {'partner': partner_facts}

        merged = deep_merge(result.payload, deterministic)
        return self._to_report(merged, with_partner=partner is not None)

    def _to_report(self, merged: Dict[str, Any], with_partner: bool) -> ReadingReport:
        """Собирает ReadingReport с фиксированными ключами"""
        personal = dict(merged['personal'])
        for section in self.PERSONAL_SECTIONS:
            personal.setdefault(section, None)

        relationship = merged.get('relationship') if with_partner else None
        if relationship is not None and not isinstance(relationship, dict):
            relationship = None

        return ReadingReport(
            personal=personal,
            relationship=relationship,
            dailyAdvice=merged.get('dailyAdvice'),
            luckyIndicators=merged.get('luckyIndicators')
        )

    def _to_error(self, failure: GenerationFailure) -> ReadingError:
        """Переводит GenerationFailure в ошибку прочтения"""
        if failure.kind == FailureKind.SAFETY_BLOCKED:
            return UpstreamRejectedError(failure.message)
        if failure.kind == FailureKind.MALFORMED_OUTPUT:
            # Исходный текст нужен для настройки prompt
            logger.warning(f"Неразбираемый ответ модели: {(failure.raw_text or '')[:500]}")
            return MalformedOutputError(failure.message, raw_text=failure.raw_text)
        return UpstreamUnavailableError(
            failure.message,
            timed_out=failure.kind == FailureKind.TIMEOUT
        )
