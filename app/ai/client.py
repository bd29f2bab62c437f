"""SellScope — AI Call Policy.

Provider selection plus the single entry point the analyzers use to get
validated JSON out of a model: per-attempt timeout, exponential-backoff
retries for transient failures, code-fence stripping, ``json.loads`` and
pydantic validation. Every failure surfaces as ``AIAnalysisError``.
"""

import asyncio
import json
import time
from typing import Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.ai.base_provider import AIProvider
from app.ai.claude_provider import ClaudeProvider
from app.ai.openai_provider import OpenAIProvider
from app.ai.sarvam_provider import SarvamProvider
from app.config import settings
from app.core.errors import AIAnalysisError
from app.core.logging import get_logger

logger = get_logger("ai.client")

T = TypeVar("T", bound=BaseModel)

PROVIDERS: Dict[str, Type[AIProvider]] = {
    "openai": OpenAIProvider,
    "claude": ClaudeProvider,
    "sarvam": SarvamProvider,
}


def select_provider(preferred: Optional[str] = None) -> Optional[AIProvider]:
    """Return the first configured provider, or None when no key is set.

    Tries ``preferred`` (default: DEFAULT_AI_PROVIDER) first, then falls
    through the remaining providers.
    """
    default = preferred or settings.default_ai_provider
    if default in PROVIDERS:
        provider = PROVIDERS[default]()
        if provider.is_available():
            return provider
    for name, cls in PROVIDERS.items():
        if name == default:
            continue  # already tried
        provider = cls()
        if provider.is_available():
            return provider
    return None


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding markdown code fence (```json ... ```) if present."""
    clean = raw.strip()
    if clean.startswith("```"):
        clean = clean.split("\n", 1)[1] if "\n" in clean else clean[3:]
        if clean.rstrip().endswith("```"):
            clean = clean.rstrip()[:-3]
    return clean.strip()


def _reject_non_finite(token: str):
    # json.loads accepts NaN and Infinity, which cannot be rendered back out
    raise ValueError(f"non-finite number {token} in AI response")


def parse_json_response(raw: str, schema: Type[T]) -> T:
    clean = strip_code_fences(raw or "")
    if not clean:
        raise AIAnalysisError("AI response content is empty", "ANALYSIS_INVALID_RESPONSE")
    try:
        parsed = json.loads(clean, parse_constant=_reject_non_finite)
    except ValueError as e:
        logger.warning(f"Failed to parse AI JSON: {e}. Raw: {clean[:300]}")
        raise AIAnalysisError(
            "Failed to parse AI response as JSON", "ANALYSIS_INVALID_RESPONSE"
        ) from e
    try:
        return schema.model_validate(parsed)
    except ValidationError as e:
        logger.warning(f"AI response failed validation: {e.error_count()} errors")
        raise AIAnalysisError(
            "AI response validation failed", "ANALYSIS_INVALID_RESPONSE"
        ) from e


async def call_ai_json(
    provider: AIProvider,
    system_prompt: str,
    user_prompt: str,
    schema: Type[T],
    temperature: float = 0.3,
    max_tokens: int = 2000,
    timeout: Optional[float] = None,
    max_retries: Optional[int] = None,
    initial_delay: Optional[float] = None,
    backoff: Optional[float] = None,
) -> T:
    """Ask ``provider`` for JSON and validate it against ``schema``.

    Only transport failures marked retryable (rate limit, timeout,
    connection, server error) are retried. Invalid output is not: the same
    prompt is unlikely to fix it.
    """
    timeout = settings.ai_timeout_seconds if timeout is None else timeout
    max_retries = settings.ai_max_retries if max_retries is None else max_retries
    delay = settings.ai_retry_initial_delay if initial_delay is None else initial_delay
    backoff = settings.ai_retry_backoff if backoff is None else backoff

    start = time.perf_counter()
    raw = ""
    for attempt in range(max_retries + 1):
        try:
            raw = await asyncio.wait_for(
                provider.complete_json(
                    system_prompt, user_prompt, temperature=temperature, max_tokens=max_tokens
                ),
                timeout=timeout,
            )
            break
        except asyncio.TimeoutError:
            error = AIAnalysisError(
                f"AI call timed out after {timeout}s", "AI_TIMEOUT", retryable=True
            )
        except AIAnalysisError as e:
            error = e

        if not error.retryable or attempt == max_retries:
            raise error

        wait = delay * (backoff ** attempt)
        logger.warning(
            f"AI retry {attempt + 1}/{max_retries} after {wait:.1f}s: {error}",
            extra={"provider": provider.name, "error_code": error.code},
        )
        await asyncio.sleep(wait)

    result = parse_json_response(raw, schema)
    logger.info(
        "AI call succeeded",
        extra={
            "provider": provider.name,
            "duration_ms": round((time.perf_counter() - start) * 1000),
        },
    )
    return result
