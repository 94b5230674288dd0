"""Конфигурация приложения"""
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
import os


class Settings(BaseSettings):
    """Настройки приложения"""
    
    # Gemini
    gemini_api_key: str
    gemini_base_url: str = "https://generativelanguage.googleapis.com"
    
    # Порядок перебора моделей: "версия:модель" через запятую
    generation_candidates: str = (
        "v1beta:gemini-2.0-flash,"
        "v1beta:gemini-1.5-flash-latest,"
        "v1:gemini-1.5-flash,"
        "v1:gemini-1.5-pro"
    )
    generation_timeout: float = 25.0  # секунд на одну модель
    generation_temperature: float = 0.7
    generation_max_output_tokens: int = 2048
    
    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    
    # Application
    debug: bool = False
    
    # Railway/Production (Railway устанавливает это как строку 'production')
    railway_environment: Optional[str] = None
    
    @property
    def is_railway(self) -> bool:
        """Проверяет, запущено ли на Railway"""
        return self.railway_environment is not None or os.getenv("RAILWAY_ENVIRONMENT") is not None
    
    model_config = SettingsConfigDict(
        # Для Railway используем переменные окружения напрямую
        env_file=".env" if not os.getenv("RAILWAY_ENVIRONMENT") else None,
        case_sensitive=False,
        # Игнорируем неизвестные поля из окружения Railway
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Загружает настройки один раз при старте процесса"""
    return Settings()
