"""Модуль обращения к генеративной модели"""
from .client import ResilientGenerativeClient
from .config import DEFAULT_CANDIDATES, parse_candidates
from .models import (
    ApiVersion,
    FailureKind,
    GenerationCandidate,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
    TransportResponse
)
from .sanitizer import ResponseParseError, ResponseSanitizer, extract_json
from .transport import GeminiTransport, TextGenerationTransport, TransportError

__all__ = [
    'ResilientGenerativeClient',
    'DEFAULT_CANDIDATES',
    'parse_candidates',
    'ApiVersion',
    'FailureKind',
    'GenerationCandidate',
    'GenerationFailure',
    'GenerationResult',
    'GenerationSuccess',
    'TransportResponse',
    'ResponseParseError',
    'ResponseSanitizer',
    'extract_json',
    'GeminiTransport',
    'TextGenerationTransport',
    'TransportError'
]
