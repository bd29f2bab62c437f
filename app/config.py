"""SellScope — Central Configuration via Pydantic Settings."""

import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Data ──
    data_backend: str = "memory"  # memory | database
    database_url: str = ""
    mock_data_seed: int = 20250801

    # ── AI Providers ──
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    sarvam_api_key: Optional[str] = None
    default_ai_provider: str = "openai"  # openai | claude | sarvam
    openai_model: str = "gpt-4o"
    claude_model: str = "claude-sonnet-4-20250514"

    # ── AI Call Policy ──
    ai_timeout_seconds: float = 30.0
    ai_max_retries: int = 2
    ai_retry_initial_delay: float = 1.0
    ai_retry_backoff: float = 2.0

    # ── Cache ──
    analysis_cache_ttl_seconds: int = 300
    cache_purge_interval_minutes: int = 10

    # ── App ──
    log_level: str = "INFO"
    scheduler_enabled: bool = True

    # ── Analysis ──
    min_sales_for_analysis: int = 5
    default_match_limit: int = 10
    max_match_limit: int = 50
    strict_category_filter: bool = True
    currency: str = "KRW"

    @property
    def effective_database_url(self) -> str:
        """Return the configured database URL, otherwise fall back to SQLite."""
        if self.database_url:
            return self.database_url
        # Vercel has a read-only filesystem; use /tmp for SQLite
        if os.environ.get("VERCEL"):
            return "sqlite:////tmp/sellscope.db"
        return "sqlite:///./sellscope.db"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
