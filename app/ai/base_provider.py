"""SellScope — Abstract AI Provider."""

from abc import ABC, abstractmethod

from app.core.errors import AIAnalysisError


class AIProvider(ABC):
    """Abstract base for LLM-backed analysis.

    Providers only transport prompts and return the raw completion text.
    Parsing, validation, timeouts and retries live in ``app.ai.client``.
    SDK failures must be re-raised as ``AIAnalysisError`` so the retry loop
    can tell transient errors from permanent ones.
    """

    name: str = "base"

    @abstractmethod
    async def complete_json(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.3,
        max_tokens: int = 2000,
    ) -> str:
        """Return the model's reply, expected to be a single JSON object."""
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider is configured and ready."""
        ...


def error_from_status(provider: str, status_code: int, message: str) -> AIAnalysisError:
    """Classify an HTTP failure from a provider API."""
    if status_code == 429:
        return AIAnalysisError(f"{provider} rate limit exceeded", "AI_RATE_LIMITED", retryable=True)
    if status_code in (401, 403):
        return AIAnalysisError(f"{provider} rejected the API key", "AI_INVALID_KEY")
    if status_code == 402:
        return AIAnalysisError(f"{provider} quota exceeded", "AI_QUOTA_EXCEEDED")
    if status_code >= 500:
        return AIAnalysisError(f"{provider} server error: {message}", "AI_ERROR", retryable=True)
    return AIAnalysisError(f"{provider} request failed: {message}", "AI_ERROR")
