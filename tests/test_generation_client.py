"""ResilientGenerativeClient: перебор моделей и классификация ошибок"""
import json
import time

import pytest

from conftest import HANG, FakeTransport, error, gemini_body, ok
from generation import (
    FailureKind,
    GenerationFailure,
    GenerationSuccess,
    ResilientGenerativeClient,
    TransportError,
    TransportResponse
)

VALID = '{"dailyAdvice": "今日宜靜"}'


def make_client(responses, candidates, timeout=1.0):
    transport = FakeTransport(responses)
    return ResilientGenerativeClient(transport, candidates=candidates, timeout=timeout), transport


class TestFallback:
    @pytest.mark.asyncio
    async def test_third_candidate_succeeds_after_two_not_found(self, candidates):
        client, transport = make_client([error(404), error(404), ok(VALID)], candidates)

        result = await client.generate("prompt")

        assert isinstance(result, GenerationSuccess)
        assert result.ok
        assert result.payload == {"dailyAdvice": "今日宜靜"}
        assert result.candidate == candidates[2]
        # четвертая модель не вызывается
        assert transport.calls == candidates[:3]

    @pytest.mark.asyncio
    async def test_server_error_is_retried(self, candidates):
        client, transport = make_client([error(503, "overloaded"), ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.ok
        assert len(transport.calls) == 2

    @pytest.mark.asyncio
    async def test_transport_error_is_retried(self, candidates):
        client, transport = make_client([TransportError("connection reset"), ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.ok
        assert result.candidate == candidates[1]

    @pytest.mark.asyncio
    async def test_missing_content_is_retried(self, candidates):
        empty = TransportResponse(status=200, body=gemini_body(None))
        client, transport = make_client([empty, ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.ok
        assert len(transport.calls) == 2

    @pytest.mark.asyncio
    async def test_first_candidate_success_makes_one_call(self, candidates):
        client, transport = make_client([ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.ok
        assert transport.prompts == ["prompt"]

    @pytest.mark.asyncio
    async def test_parts_are_joined(self, candidates):
        body = json.dumps({"candidates": [{"content": {"parts": [{"text": '{"a":'}, {"text": ' 1}'}]}}]})
        client, _ = make_client([TransportResponse(status=200, body=body)], candidates)
        result = await client.generate("prompt")
        assert result.payload == {"a": 1}

    @pytest.mark.asyncio
    async def test_fenced_payload_is_sanitized(self, candidates):
        client, _ = make_client([ok("```json\n" + VALID + "\n```")], candidates)
        result = await client.generate("prompt")
        assert result.payload == {"dailyAdvice": "今日宜靜"}

    @pytest.mark.asyncio
    async def test_candidates_argument_overrides_default(self, candidates):
        client, transport = make_client([ok(VALID)], candidates)
        result = await client.generate("prompt", candidates=[candidates[3]])
        assert result.candidate == candidates[3]
        assert transport.calls == [candidates[3]]


class TestUnexpectedBody:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"promptFeedback": "blocked?", "candidates": []},
        {"candidates": [{"content": "plain text"}]},
        {"candidates": [{"content": {"parts": "plain text"}}]},
        {"candidates": {"0": {"content": {}}}},
        [1, 2, 3],
    ])
    async def test_odd_shapes_advance_to_next_candidate(self, candidates, body):
        odd = TransportResponse(status=200, body=json.dumps(body))
        client, transport = make_client([odd, ok(VALID)], candidates)

        result = await client.generate("prompt")

        assert result.ok
        assert len(transport.calls) == 2


class TestTimeout:
    @pytest.mark.asyncio
    async def test_all_candidates_time_out(self, candidates):
        client, transport = make_client([HANG] * 4, candidates, timeout=0.05)

        started = time.monotonic()
        result = await client.generate("prompt")
        elapsed = time.monotonic() - started

        assert isinstance(result, GenerationFailure)
        assert result.kind == FailureKind.TIMEOUT
        assert len(transport.calls) == 4
        assert elapsed < 0.05 * 4 + 1.0

    @pytest.mark.asyncio
    async def test_timeout_advances_to_next_candidate(self, candidates):
        client, _ = make_client([HANG, ok(VALID)], candidates, timeout=0.05)
        result = await client.generate("prompt")
        assert result.ok
        assert result.candidate == candidates[1]

    @pytest.mark.asyncio
    async def test_timeout_argument_overrides_default(self, candidates):
        client, _ = make_client([HANG], candidates, timeout=3600)
        result = await client.generate("prompt", candidates=candidates[:1], timeout=0.05)
        assert result.kind == FailureKind.TIMEOUT


class TestSafety:
    @pytest.mark.asyncio
    async def test_safety_400_is_not_retried(self, candidates):
        client, transport = make_client(
            [error(400, "Request blocked due to SAFETY"), ok(VALID)], candidates
        )
        result = await client.generate("prompt")
        assert result.kind == FailureKind.SAFETY_BLOCKED
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_safety_finish_reason_is_not_retried(self, candidates):
        blocked = TransportResponse(status=200, body=gemini_body(None, finish_reason="SAFETY"))
        client, transport = make_client([blocked, ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.kind == FailureKind.SAFETY_BLOCKED
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_prompt_block_reason(self, candidates):
        blocked = TransportResponse(
            status=200,
            body=json.dumps({"promptFeedback": {"blockReason": "OTHER"}})
        )
        client, transport = make_client([blocked, ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.kind == FailureKind.SAFETY_BLOCKED
        assert len(transport.calls) == 1

    @pytest.mark.asyncio
    async def test_plain_400_is_retried(self, candidates):
        client, transport = make_client(
            [error(400, "Invalid JSON payload received. Unknown name responseMimeType"), ok(VALID)],
            candidates
        )
        result = await client.generate("prompt")
        assert result.ok
        assert len(transport.calls) == 2


class TestMalformedOutput:
    @pytest.mark.asyncio
    async def test_malformed_output_is_not_retried(self, candidates):
        client, transport = make_client([ok("the stars are unclear"), ok(VALID)], candidates)
        result = await client.generate("prompt")
        assert result.kind == FailureKind.MALFORMED_OUTPUT
        assert result.raw_text == "the stars are unclear"
        assert result.candidate == candidates[0]
        assert len(transport.calls) == 1


class TestExhausted:
    @pytest.mark.asyncio
    async def test_all_not_found_is_unknown(self, candidates):
        client, transport = make_client([error(404)] * 4, candidates)
        result = await client.generate("prompt")
        assert result.kind == FailureKind.UNKNOWN
        assert "HTTP 404" in result.message
        assert len(transport.calls) == 4

    @pytest.mark.asyncio
    async def test_mixed_failures_are_unknown_with_last_message(self, candidates):
        client, _ = make_client(
            [error(500), error(404), error(503), error(404, "models/gemini-1.5-pro is not found")],
            candidates
        )
        result = await client.generate("prompt")
        assert result.kind == FailureKind.UNKNOWN
        assert "gemini-1.5-pro is not found" in result.message

    @pytest.mark.asyncio
    async def test_rate_limit_on_last_candidate_is_unknown(self, candidates):
        client, _ = make_client([error(404), error(429, "quota exceeded")], candidates[:2])
        result = await client.generate("prompt")
        assert result.kind == FailureKind.UNKNOWN
        assert "HTTP 429 quota exceeded" in result.message

    @pytest.mark.asyncio
    async def test_timeout_on_last_candidate_is_kept(self, candidates):
        client, _ = make_client([error(503), HANG], candidates[:2], timeout=0.05)
        result = await client.generate("prompt")
        assert result.kind == FailureKind.TIMEOUT
        assert result.candidate == candidates[1]

    @pytest.mark.asyncio
    async def test_empty_candidate_list(self, candidates):
        client, transport = make_client([], candidates)
        result = await client.generate("prompt", candidates=[])
        assert result.kind == FailureKind.UNKNOWN
        assert transport.calls == []
