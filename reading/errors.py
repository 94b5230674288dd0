"""Ошибки построения прочтения"""
from typing import Optional


class ReadingError(Exception):
    """Базовая ошибка; status_code - код для HTTP-обертки"""
    status_code = 500
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SubjectValidationError(ReadingError):
    """Неверные входные данные"""
    status_code = 400


class UpstreamUnavailableError(ReadingError):
    """Все модели недоступны, повторить позже"""
    status_code = 502
    
    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out
        if timed_out:
            self.status_code = 504


class UpstreamRejectedError(ReadingError):
    """Запрос заблокирован политикой безопасности"""
    status_code = 403


class MalformedOutputError(ReadingError):
    """Модель ответила, но JSON не разобрать"""
    status_code = 502
    
    def __init__(self, message: str, raw_text: Optional[str] = None):
        super().__init__(message)
        self.raw_text = raw_text
