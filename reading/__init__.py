"""Модуль построения полного прочтения"""
from .errors import (
    MalformedOutputError,
    ReadingError,
    SubjectValidationError,
    UpstreamRejectedError,
    UpstreamUnavailableError
)
from .models import ReadingReport, Subject
from .orchestrator import ReadingOrchestrator, deep_merge, validate_subject
from .prompts import build_prompt

__all__ = [
    'ReadingOrchestrator',
    'ReadingReport',
    'Subject',
    'ReadingError',
    'SubjectValidationError',
    'UpstreamUnavailableError',
    'UpstreamRejectedError',
    'MalformedOutputError',
    'deep_merge',
    'validate_subject',
    'build_prompt'
]
