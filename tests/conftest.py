"""
Общие fixtures для тестов

- FakeTransport: заранее заданные ответы вместо сети
- gemini_body: тело ответа generateContent
"""
import asyncio
import json
from typing import Any, Dict, List, Optional

import pytest

from generation import (
    ApiVersion,
    GenerationCandidate,
    TextGenerationTransport,
    TransportResponse
)

HANG = object()


def gemini_body(text: Optional[str] = None, finish_reason: str = "STOP", **extra: Any) -> str:
    """JSON-тело успешного ответа Gemini"""
    candidate: Dict[str, Any] = {"finishReason": finish_reason}
    if text is not None:
        candidate["content"] = {"parts": [{"text": text}], "role": "model"}
    body: Dict[str, Any] = {"candidates": [candidate]}
    body.update(extra)
    return json.dumps(body, ensure_ascii=False)


def ok(text: str) -> TransportResponse:
    return TransportResponse(status=200, body=gemini_body(text))


def error(status: int, message: str = "error") -> TransportResponse:
    return TransportResponse(status=status, body=json.dumps({"error": {"code": status, "message": message}}))


class FakeTransport(TextGenerationTransport):
    """Отдает ответы по порядку вызовов"""

    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.calls: List[GenerationCandidate] = []
        self.prompts: List[str] = []

    async def send(self, candidate: GenerationCandidate, prompt: str) -> TransportResponse:
        self.calls.append(candidate)
        self.prompts.append(prompt)
        action = self.responses[len(self.calls) - 1]
        if action is HANG:
            await asyncio.sleep(3600)
        if isinstance(action, Exception):
            raise action
        return action


@pytest.fixture
def candidates() -> List[GenerationCandidate]:
    return [
        GenerationCandidate(api_version=ApiVersion.V1BETA, model_id="gemini-2.0-flash"),
        GenerationCandidate(api_version=ApiVersion.V1BETA, model_id="gemini-1.5-flash-latest"),
        GenerationCandidate(api_version=ApiVersion.V1, model_id="gemini-1.5-flash"),
        GenerationCandidate(api_version=ApiVersion.V1, model_id="gemini-1.5-pro"),
    ]
