"""Извлечение JSON из свободного текста модели"""
import json
import re
from typing import Any, Dict


_FENCE_RE = re.compile(r'```(?:json)?', re.IGNORECASE)
# Голый тег языка в начале ответа: "json\n{...}"
_LANG_TAG_RE = re.compile(r'^json(?=\s|\{)', re.IGNORECASE)


class ResponseParseError(ValueError):
    """Текст модели не удалось разобрать как JSON-объект"""
    
    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.raw_text = raw_text


class ResponseSanitizer:
    """Класс для очистки и разбора ответа модели"""
    
    def strip_fences(self, text: str) -> str:
        """Удаляет markdown-ограничители кода и тег json"""
        text = _FENCE_RE.sub('', text).strip()
        return _LANG_TAG_RE.sub('', text).strip()
    
    def slice_object(self, text: str) -> str:
        """Вырезает текст от первой '{' до последней '}'"""
        start = text.find('{')
        if start == -1:
            return ''
        end = text.rfind('}')
        # Ответ обрезан до первой закрывающей скобки
        if end < start:
            return text[start:]
        return text[start:end + 1]
    
    def balance_braces(self, text: str) -> str:
        """Дописывает недостающие '}' в обрезанный ответ"""
        missing = text.count('{') - text.count('}')
        if missing > 0:
            return text + '}' * missing
        return text
    
    def extract_json(self, raw: str) -> Dict[str, Any]:
        """Основной метод: возвращает объект или выбрасывает ResponseParseError"""
        if not raw:
            raise ResponseParseError("Пустой ответ модели", raw or '')
        
        cleaned = self.slice_object(self.strip_fences(raw))
        if not cleaned:
            raise ResponseParseError("В ответе нет JSON-объекта", raw)
        
        cleaned = self.balance_braces(cleaned)
        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as e:
            raise ResponseParseError(f"Ошибка разбора JSON: {e}", raw) from e
        
        if not isinstance(parsed, dict):
            raise ResponseParseError("Ответ модели не является JSON-объектом", raw)
        return parsed


def extract_json(raw: str) -> Dict[str, Any]:
    """Сокращение для ResponseSanitizer().extract_json"""
    return ResponseSanitizer().extract_json(raw)
