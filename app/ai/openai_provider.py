"""SellScope — OpenAI Provider."""

import openai
from openai import AsyncOpenAI

from app.ai.base_provider import AIProvider, error_from_status
from app.config import settings
from app.core.errors import AIAnalysisError
from app.core.logging import get_logger

logger = get_logger("ai.openai")


class OpenAIProvider(AIProvider):
    """OpenAI chat completions in JSON mode."""

    name = "openai"

    def __init__(self):
        self.client = (
            AsyncOpenAI(api_key=settings.openai_api_key, max_retries=0)
            if settings.openai_api_key
            else None
        )

    def is_available(self) -> bool:
        return self.client is not None and bool(settings.openai_api_key)

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ) -> str:
        if not self.is_available():
            raise AIAnalysisError("OpenAI provider not configured", "AI_INVALID_KEY")

        try:
            response = await self.client.chat.completions.create(
                model=settings.openai_model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
            )
        except openai.RateLimitError as e:
            if e.code == "insufficient_quota":
                raise AIAnalysisError("OpenAI quota exceeded", "AI_QUOTA_EXCEEDED") from e
            raise AIAnalysisError("OpenAI rate limit exceeded", "AI_RATE_LIMITED", retryable=True) from e
        except openai.AuthenticationError as e:
            raise AIAnalysisError("OpenAI rejected the API key", "AI_INVALID_KEY") from e
        except openai.APITimeoutError as e:
            raise AIAnalysisError("OpenAI request timed out", "AI_TIMEOUT", retryable=True) from e
        except openai.APIConnectionError as e:
            raise AIAnalysisError(f"OpenAI connection error: {e}", "AI_ERROR", retryable=True) from e
        except openai.APIStatusError as e:
            raise error_from_status("OpenAI", e.status_code, e.message) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
