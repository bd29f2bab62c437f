"""SellScope — Sarvam AI Provider."""

import httpx
from sarvamai import AsyncSarvamAI
from sarvamai.core.api_error import ApiError

from app.ai.base_provider import AIProvider, error_from_status
from app.config import settings
from app.core.errors import AIAnalysisError
from app.core.logging import get_logger

logger = get_logger("ai.sarvam")


class SarvamProvider(AIProvider):
    """Sarvam AI provider (model: sarvam-m).

    The Sarvam chat API has no JSON response mode, so replies may arrive
    wrapped in markdown fences; the client strips them before parsing.
    """

    name = "sarvam"

    def __init__(self):
        self.client = (
            AsyncSarvamAI(api_subscription_key=settings.sarvam_api_key)
            if settings.sarvam_api_key
            else None
        )

    def is_available(self) -> bool:
        return self.client is not None and bool(settings.sarvam_api_key)

    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ) -> str:
        if not self.is_available():
            raise AIAnalysisError("Sarvam provider not configured", "AI_INVALID_KEY")

        try:
            response = await self.client.chat.completions(
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except ApiError as e:
            raise error_from_status("Sarvam", e.status_code or 500, str(e.body)) from e
        except httpx.TimeoutException as e:
            raise AIAnalysisError("Sarvam request timed out", "AI_TIMEOUT", retryable=True) from e
        except httpx.TransportError as e:
            raise AIAnalysisError(f"Sarvam connection error: {e}", "AI_ERROR", retryable=True) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
