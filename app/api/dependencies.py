"""SellScope — FastAPI Dependencies.

Handlers receive the catalogue repository and the AI provider through
``Depends`` so tests can swap either via ``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Optional

from app.ai.base_provider import AIProvider
from app.ai.client import select_provider
from app.config import settings
from app.data.catalog import load_catalog
from app.repositories.base import CatalogRepository
from app.repositories.memory_repository import InMemoryCatalogRepository


@lru_cache
def _memory_repository() -> InMemoryCatalogRepository:
    return InMemoryCatalogRepository(*load_catalog())


@lru_cache
def _sql_repository() -> CatalogRepository:
    # Deferred so the memory backend never builds a DB engine
    from app.database import engine
    from app.repositories.sql_repository import SqlCatalogRepository

    return SqlCatalogRepository(engine)


def get_repository() -> CatalogRepository:
    """Dependency — the configured read-only catalogue (DATA_BACKEND)."""
    if settings.data_backend == "database":
        return _sql_repository()
    return _memory_repository()


def get_ai_provider() -> Optional[AIProvider]:
    """Dependency — the first configured AI provider, or None for fallback-only."""
    return select_provider()
