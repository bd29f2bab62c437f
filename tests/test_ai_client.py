from typing import List

import pytest
from pydantic import BaseModel

from app.ai.base_provider import error_from_status
from app.ai.client import call_ai_json, parse_json_response, select_provider, strip_code_fences
from app.config import settings
from app.core.errors import AIAnalysisError
from app.models.ai_schemas import AIPriceRange

from conftest import FakeProvider


class Reply(BaseModel):
    items: List[int]


FAST = {"initial_delay": 0, "backoff": 1}


# ── Parsing ──


@pytest.mark.parametrize(
    "raw",
    [
        '{"items": [1]}',
        '```json\n{"items": [1]}\n```',
        '```\n{"items": [1]}\n```',
        '  {"items": [1]}  \n',
    ],
)
def test_strip_code_fences(raw):
    assert strip_code_fences(raw) == '{"items": [1]}'


def test_parse_json_response():
    assert parse_json_response('```json\n{"items": [1, 2]}\n```', Reply).items == [1, 2]


@pytest.mark.parametrize("raw", ["", "not json", '{"items": "nope"}'])
def test_parse_json_response_rejects_bad_output(raw):
    with pytest.raises(AIAnalysisError) as exc_info:
        parse_json_response(raw, Reply)
    assert exc_info.value.code == "ANALYSIS_INVALID_RESPONSE"
    assert exc_info.value.retryable is False


@pytest.mark.parametrize(
    "raw",
    [
        '{"min": 1, "max": 2, "average": NaN}',
        '{"min": -Infinity, "max": 2, "average": 1}',
        '{"min": 1, "max": 1e999, "average": 1}',
        '{"min": 1, "max": 2, "average": "nan"}',
    ],
)
def test_parse_json_response_rejects_non_finite_numbers(raw):
    with pytest.raises(AIAnalysisError) as exc_info:
        parse_json_response(raw, AIPriceRange)
    assert exc_info.value.code == "ANALYSIS_INVALID_RESPONSE"


# ── Retry policy ──


@pytest.mark.asyncio
async def test_retries_transient_errors_then_succeeds():
    provider = FakeProvider(
        reply='{"items": [3]}',
        errors=[
            AIAnalysisError("slow down", "AI_RATE_LIMITED", retryable=True),
            AIAnalysisError("boom", "AI_ERROR", retryable=True),
        ],
    )

    result = await call_ai_json(provider, "sys", "user", Reply, max_retries=2, **FAST)

    assert result.items == [3]
    assert provider.calls == 3


@pytest.mark.asyncio
async def test_gives_up_after_max_retries():
    provider = FakeProvider(
        errors=[AIAnalysisError("boom", "AI_ERROR", retryable=True) for _ in range(5)]
    )

    with pytest.raises(AIAnalysisError) as exc_info:
        await call_ai_json(provider, "sys", "user", Reply, max_retries=2, **FAST)

    assert exc_info.value.code == "AI_ERROR"
    assert provider.calls == 3


@pytest.mark.asyncio
async def test_does_not_retry_permanent_errors():
    provider = FakeProvider(errors=[AIAnalysisError("bad key", "AI_INVALID_KEY")])

    with pytest.raises(AIAnalysisError) as exc_info:
        await call_ai_json(provider, "sys", "user", Reply, max_retries=2, **FAST)

    assert exc_info.value.code == "AI_INVALID_KEY"
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_does_not_retry_invalid_output():
    provider = FakeProvider(reply="I cannot help with that")

    with pytest.raises(AIAnalysisError) as exc_info:
        await call_ai_json(provider, "sys", "user", Reply, max_retries=2, **FAST)

    assert exc_info.value.code == "ANALYSIS_INVALID_RESPONSE"
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_timeout_is_retryable():
    provider = FakeProvider(reply='{"items": []}', delay=0.5)

    with pytest.raises(AIAnalysisError) as exc_info:
        await call_ai_json(provider, "sys", "user", Reply, timeout=0.01, max_retries=1, **FAST)

    assert exc_info.value.code == "AI_TIMEOUT"
    assert exc_info.value.retryable is True
    assert provider.calls == 2


# ── Provider selection ──


@pytest.fixture
def no_keys(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", None)
    monkeypatch.setattr(settings, "anthropic_api_key", None)
    monkeypatch.setattr(settings, "sarvam_api_key", None)
    monkeypatch.setattr(settings, "default_ai_provider", "openai")


def test_select_provider_none_configured(no_keys):
    assert select_provider() is None


def test_select_provider_falls_through_to_configured(no_keys, monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "sk-ant-test")

    provider = select_provider()

    assert provider is not None
    assert provider.name == "claude"


def test_select_provider_prefers_default(no_keys, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
    monkeypatch.setattr(settings, "anthropic_api_key", "sk-ant-test")

    assert select_provider().name == "openai"
    assert select_provider("claude").name == "claude"


# ── HTTP status classification ──


@pytest.mark.parametrize(
    "status, code, retryable",
    [
        (429, "AI_RATE_LIMITED", True),
        (401, "AI_INVALID_KEY", False),
        (403, "AI_INVALID_KEY", False),
        (402, "AI_QUOTA_EXCEEDED", False),
        (503, "AI_ERROR", True),
        (400, "AI_ERROR", False),
    ],
)
def test_error_from_status(status, code, retryable):
    error = error_from_status("OpenAI", status, "message")
    assert error.code == code
    assert error.retryable is retryable
