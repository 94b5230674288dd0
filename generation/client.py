"""Клиент генеративной модели с перебором кандидатов"""
import asyncio
import json
import logging
from typing import Any, Dict, Iterable, List, Optional

from .config import DEFAULT_CANDIDATES, SAFETY_FINISH_REASONS, SAFETY_MARKERS
from .models import (
    FailureKind,
    GenerationCandidate,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    TransportResponse
)
from .sanitizer import ResponseParseError, ResponseSanitizer
from .transport import TextGenerationTransport, TransportError

logger = logging.getLogger(__name__)


class _AttemptFailed(Exception):
    """Попытка у одного кандидата не удалась"""

    def __init__(self, failure: GenerationFailure, retryable: bool = True):
        super().__init__(failure.message)
        self.failure = failure
        self.retryable = retryable


class ResilientGenerativeClient:
    """
    Последовательно перебирает модели, пока одна не ответит.

    Кандидаты опрашиваются строго по очереди: параллельные запросы
    тратили бы квоту у провайдера с жесткими лимитами.
    """

    def __init__(
        self,
        transport: TextGenerationTransport,
        candidates: Optional[Iterable[GenerationCandidate]] = None,
        timeout: float = 25.0,
        sanitizer: Optional[ResponseSanitizer] = None
    ):
        self.transport = transport
        self.candidates: List[GenerationCandidate] = list(
            candidates if candidates is not None else DEFAULT_CANDIDATES
        )
        self.timeout = timeout
        self.sanitizer = sanitizer or ResponseSanitizer()

    async def generate(
        self,
        prompt: str,
        candidates: Optional[Iterable[GenerationCandidate]] = None,
        timeout: Optional[float] = None
    ) -> GenerationResult:
        """Возвращает GenerationSuccess или GenerationFailure, не выбрасывает исключений"""
        candidates = list(candidates if candidates is not None else self.candidates)
        timeout = timeout if timeout is not None else self.timeout

        if not candidates:
            return GenerationFailure(kind=FailureKind.UNKNOWN, message="Список моделей пуст")

        failures: List[GenerationFailure] = []
        for index, candidate in enumerate(candidates, 1):
            logger.info(f"Генерация: модель {candidate} ({index}/{len(candidates)})")
            try:
                text = await self._attempt(candidate, prompt, timeout)
            except _AttemptFailed as e:
                if not e.retryable:
                    logger.error(f"Модель {candidate}: {e.failure.message}")
                    return e.failure
                logger.warning(f"Модель {candidate} недоступна: {e.failure.message}")
                failures.append(e.failure)
                continue

            # Транспорт отработал, поэтому кривой JSON не повод менять модель
            try:
                payload = self.sanitizer.extract_json(text)
            except ResponseParseError as e:
                logger.error(f"Модель {candidate} вернула неразбираемый ответ: {e}")
                logger.debug(f"Исходный ответ модели: {e.raw_text}")
                return GenerationFailure(
                    kind=FailureKind.MALFORMED_OUTPUT,
                    message=str(e),
                    candidate=candidate,
                    raw_text=e.raw_text
                )

            logger.info(f"Модель {candidate} ответила успешно")
            return GenerationSuccess(payload=payload, candidate=candidate, raw_text=text)

        return self._exhausted(failures)

    async def _attempt(self, candidate: GenerationCandidate, prompt: str, timeout: float) -> str:
        """Один вызов с жестким таймаутом; возвращает текст модели"""
        try:
            response = await asyncio.wait_for(
                self.transport.send(candidate, prompt),
                timeout=timeout
            )
        except asyncio.TimeoutError:
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.TIMEOUT,
                message=f"{candidate}: нет ответа за {timeout} с",
                candidate=candidate
            ))
        except TransportError as e:
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.UNKNOWN,
                message=str(e),
                candidate=candidate
            ))

        if 200 <= response.status < 300:
            return self._extract_text(candidate, response)
        raise self._status_failure(candidate, response)

    def _status_failure(self, candidate: GenerationCandidate, response: TransportResponse) -> _AttemptFailed:
        """Классифицирует ответ с кодом не 2xx"""
        status = response.status
        detail = f"{candidate}: HTTP {status} {self._error_message(response.body)}".rstrip()

        if status == 400 and self._mentions_safety(response.body):
            # Проблема во входных данных, другая модель не поможет
            return _AttemptFailed(GenerationFailure(
                kind=FailureKind.SAFETY_BLOCKED,
                message=detail,
                candidate=candidate
            ), retryable=False)

        if status == 404:
            kind = FailureKind.NOT_FOUND
        elif status == 429:
            kind = FailureKind.RATE_LIMITED
        else:
            kind = FailureKind.UNKNOWN
        return _AttemptFailed(GenerationFailure(kind=kind, message=detail, candidate=candidate))

    def _extract_text(self, candidate: GenerationCandidate, response: TransportResponse) -> str:
        """Достает текст из ответа generateContent"""
        try:
            data = json.loads(response.body)
        except json.JSONDecodeError:
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.UNKNOWN,
                message=f"{candidate}: тело ответа не JSON",
                candidate=candidate
            ))
        if not isinstance(data, dict):
            data = {}

        feedback = data.get('promptFeedback')
        block_reason = feedback.get('blockReason') if isinstance(feedback, dict) else None
        if block_reason:
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.SAFETY_BLOCKED,
                message=f"{candidate}: запрос заблокирован ({block_reason})",
                candidate=candidate
            ), retryable=False)

        candidates = data.get('candidates')
        if not isinstance(candidates, list):
            candidates = []
        first: Dict[str, Any] = candidates[0] if candidates and isinstance(candidates[0], dict) else {}

        finish_reason = str(first.get('finishReason') or '').upper()
        if finish_reason in SAFETY_FINISH_REASONS:
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.SAFETY_BLOCKED,
                message=f"{candidate}: ответ остановлен политикой безопасности ({finish_reason})",
                candidate=candidate
            ), retryable=False)

        content = first.get('content')
        parts = content.get('parts') if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []
        text = ''.join(
            part.get('text', '') for part in parts
            if isinstance(part, dict) and isinstance(part.get('text'), str)
        )
        if not text.strip():
            raise _AttemptFailed(GenerationFailure(
                kind=FailureKind.UNKNOWN,
                message=f"{candidate}: модель не вернула текст",
                candidate=candidate
            ))
        return text

    def _exhausted(self, failures: List[GenerationFailure]) -> GenerationFailure:
        """Итог, когда все кандидаты перебраны"""
        last = failures[-1]
        # Таймаут на последней модели сообщаем как есть
        if last.kind == FailureKind.TIMEOUT:
            return last
        return GenerationFailure(
            kind=FailureKind.UNKNOWN,
            message=f"Все модели недоступны ({len(failures)}), последняя ошибка: {last.message}",
            candidate=last.candidate
        )

    @staticmethod
    def _error_message(body: str) -> str:
        """Сообщение из тела ошибки Google API"""
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, TypeError):
            return (body or '')[:200]
        if isinstance(data, dict) and isinstance(data.get('error'), dict):
            return str(data['error'].get('message', ''))
        return ''

    @staticmethod
    def _mentions_safety(body: str) -> bool:
        body_lower = (body or '').lower()
        return any(marker in body_lower for marker in SAFETY_MARKERS)
