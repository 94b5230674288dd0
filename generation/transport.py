"""Транспорт к REST API Gemini"""
import aiohttp
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .models import ApiVersion, GenerationCandidate, TransportResponse

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """Сетевая ошибка при обращении к модели"""


class TextGenerationTransport(ABC):
    """Один сетевой вызов к модели-кандидату"""
    
    @abstractmethod
    async def send(self, candidate: GenerationCandidate, prompt: str) -> TransportResponse:
        """Отправляет prompt и возвращает статус и тело ответа"""


class GeminiTransport(TextGenerationTransport):
    """Класс для вызова generateContent"""
    
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://generativelanguage.googleapis.com",
        temperature: float = 0.7,
        max_output_tokens: int = 2048,
        request_timeout: float = 60.0
    ):
        if not api_key:
            raise ValueError("GEMINI_API_KEY не задан")
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.request_timeout = request_timeout
        self.session: Optional[aiohttp.ClientSession] = None
        self.headers = {
            'Content-Type': 'application/json',
            # Ключ передаем заголовком, а не в URL
            'x-goog-api-key': api_key
        }
    
    async def __aenter__(self):
        """Асинхронный контекстный менеджер - вход"""
        await self.open()
        return self
    
    async def open(self):
        """Открывает HTTP-сессию"""
        if self.session is None:
            self.session = aiohttp.ClientSession(
                headers=self.headers,
                timeout=aiohttp.ClientTimeout(total=self.request_timeout)
            )
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Асинхронный контекстный менеджер - выход"""
        await self.close()
    
    async def close(self):
        """Закрывает HTTP-сессию"""
        if self.session:
            await self.session.close()
            self.session = None
    
    def build_url(self, candidate: GenerationCandidate) -> str:
        """URL с версией API и моделью в пути"""
        return f"{self.base_url}/{candidate.api_version.value}/models/{candidate.model_id}:generateContent"
    
    def build_payload(self, candidate: GenerationCandidate, prompt: str) -> Dict[str, Any]:
        """Тело запроса generateContent"""
        generation_config: Dict[str, Any] = {
            'temperature': self.temperature,
            'maxOutputTokens': self.max_output_tokens
        }
        # JSON-режим поддерживается только на v1beta
        if candidate.api_version == ApiVersion.V1BETA:
            generation_config['responseMimeType'] = 'application/json'
        
        return {
            'contents': [{'parts': [{'text': prompt}]}],
            'generationConfig': generation_config
        }
    
    async def send(self, candidate: GenerationCandidate, prompt: str) -> TransportResponse:
        """Отправляет запрос к модели"""
        if self.session is None:
            raise TransportError("Сессия не открыта, используйте 'async with GeminiTransport(...)'")
        
        url = self.build_url(candidate)
        logger.debug(f"POST {url}")
        try:
            async with self.session.post(url, json=self.build_payload(candidate, prompt)) as response:
                # Битая кодировка не должна прерывать перебор моделей
                body = await response.text(errors='replace')
                return TransportResponse(status=response.status, body=body)
        except aiohttp.ClientError as e:
            raise TransportError(f"{candidate}: {e}") from e
