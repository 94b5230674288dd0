"""Порядок перебора моделей по умолчанию"""
from typing import List, Tuple
from .models import ApiVersion, GenerationCandidate

# Сначала самая новая и быстрая модель на v1beta, затем более консервативные
DEFAULT_CANDIDATES: Tuple[GenerationCandidate, ...] = (
    GenerationCandidate(api_version=ApiVersion.V1BETA, model_id='gemini-2.0-flash'),
    GenerationCandidate(api_version=ApiVersion.V1BETA, model_id='gemini-1.5-flash-latest'),
    GenerationCandidate(api_version=ApiVersion.V1, model_id='gemini-1.5-flash'),
    GenerationCandidate(api_version=ApiVersion.V1, model_id='gemini-1.5-pro'),
)

# Признаки блокировки по политике безопасности
SAFETY_FINISH_REASONS = {'SAFETY', 'BLOCKLIST', 'PROHIBITED_CONTENT', 'SPII'}
SAFETY_MARKERS = ('safety', 'blocked', 'prohibited', 'harm_category')


def parse_candidates(value: str) -> List[GenerationCandidate]:
    """Разбирает строку вида 'v1beta:gemini-2.0-flash,v1:gemini-1.5-pro'"""
    candidates = []
    for item in value.split(','):
        item = item.strip()
        if not item:
            continue
        version, sep, model_id = item.partition(':')
        if not sep or not model_id.strip():
            raise ValueError(f"Неверный формат модели: {item!r}, ожидается 'версия:модель'")
        candidates.append(GenerationCandidate(
            api_version=ApiVersion(version.strip().lower()),
            model_id=model_id.strip()
        ))
    if not candidates:
        raise ValueError("Список моделей пуст")
    return candidates
