"""SellScope — Anthropic Claude Provider."""

import anthropic
from anthropic import AsyncAnthropic

from app.ai.base_provider import AIProvider, error_from_status
from app.config import settings
from app.core.errors import AIAnalysisError
from app.core.logging import get_logger

logger = get_logger("ai.claude")

JSON_ONLY_SUFFIX = "\n\nRespond with a single JSON object only. No markdown, no prose outside the JSON."


class ClaudeProvider(AIProvider):
    """Anthropic Claude messages API."""

    name = "claude"

    def __init__(self):
        self.client = (
            AsyncAnthropic(api_key=settings.anthropic_api_key, max_retries=0)
            if settings.anthropic_api_key
            else None
        )

    def is_available(self) -> bool:
        return self.client is not None and bool(settings.anthropic_api_key)

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ) -> str:
        if not self.is_available():
            raise AIAnalysisError("Claude provider not configured", "AI_INVALID_KEY")

        try:
            response = await self.client.messages.create(
                model=settings.claude_model,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt + JSON_ONLY_SUFFIX,
                messages=[
                    {"role": "user", "content": user_prompt},
                ],
            )
        except anthropic.RateLimitError as e:
            raise AIAnalysisError("Claude rate limit exceeded", "AI_RATE_LIMITED", retryable=True) from e
        except anthropic.AuthenticationError as e:
            raise AIAnalysisError("Claude rejected the API key", "AI_INVALID_KEY") from e
        except anthropic.APITimeoutError as e:
            raise AIAnalysisError("Claude request timed out", "AI_TIMEOUT", retryable=True) from e
        except anthropic.APIConnectionError as e:
            raise AIAnalysisError(f"Claude connection error: {e}", "AI_ERROR", retryable=True) from e
        except anthropic.APIStatusError as e:
            raise error_from_status("Claude", e.status_code, e.message) from e

        return response.content[0].text if response.content else ""
