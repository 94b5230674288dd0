"""Модели данных для обращения к генеративной модели"""
from enum import Enum
from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, Optional, Union


class ApiVersion(str, Enum):
    """Версия REST API Gemini"""
    V1 = 'v1'
    V1BETA = 'v1beta'


class GenerationCandidate(BaseModel):
    """Одна пара (версия API, модель) в порядке перебора"""
    model_config = ConfigDict(frozen=True)
    
    api_version: ApiVersion
    model_id: str
    
    def __str__(self) -> str:
        return f"{self.api_version.value}:{self.model_id}"


class TransportResponse(BaseModel):
    """Ответ транспорта: HTTP статус и тело"""
    status: int
    body: str


class FailureKind(str, Enum):
    """Тип неудачи генерации"""
    NOT_FOUND = 'not_found'
    RATE_LIMITED = 'rate_limited'
    SAFETY_BLOCKED = 'safety_blocked'
    TIMEOUT = 'timeout'
    MALFORMED_OUTPUT = 'malformed_output'
    UNKNOWN = 'unknown'


class GenerationSuccess(BaseModel):
    """Успешная генерация: разобранный JSON"""
    payload: Dict[str, Any]
    candidate: GenerationCandidate
    raw_text: str = ''
    
    @property
    def ok(self) -> bool:
        return True


class GenerationFailure(BaseModel):
    """Неудачная генерация"""
    kind: FailureKind
    message: str
    candidate: Optional[GenerationCandidate] = None
    # Исходный текст модели, если он был получен
    raw_text: Optional[str] = None
    
    @property
    def ok(self) -> bool:
        return False


GenerationResult = Union[GenerationSuccess, GenerationFailure]
