"""SellScope — Analysis Pipeline Orchestrator.

Runs the flow behind each analysis endpoint:
  resolve entity → check history → cache lookup → preprocess → AI → fallback

The AI path is optional. Any failure there (no provider configured, SDK
error, timeout, invalid output) is logged and replaced by the
deterministic fallback; it never reaches the caller. Only AI results are
cached.
"""

from typing import List, Optional, Tuple

from app.ai.base_provider import AIProvider
from app.analyzer.ai_matching import generate_ai_creator_matches, generate_ai_product_matches
from app.analyzer.cache import TTLCache, analysis_cache, cache_key
from app.analyzer.insight_engine import build_fallback_insight, generate_ai_insight
from app.analyzer.matching_engine import match_creators_fallback, match_products_fallback
from app.analyzer.preprocess import preprocess_creator_data
from app.config import settings
from app.core.errors import AIAnalysisError, InsufficientDataError, NotFoundError
from app.core.logging import get_logger
from app.models.analysis_models import CreatorInsight, CreatorMatch, PreprocessedData, ProductMatch
from app.models.catalog_models import Creator, Product, Sale
from app.repositories.base import CatalogRepository

logger = get_logger("analyzer.pipeline")


def _log_fallback(endpoint: str, provider: Optional[AIProvider], error: Optional[Exception], **ids):
    if provider is None or error is None:
        reason = "no AI provider configured" if provider is None else "nothing to send to the AI provider"
        logger.info(f"{endpoint}: {reason}, using fallback", extra={"endpoint": endpoint, **ids})
        return
    code = error.code if isinstance(error, AIAnalysisError) else type(error).__name__
    logger.warning(
        f"{endpoint}: AI analysis failed, using fallback: {error}",
        extra={"endpoint": endpoint, "provider": provider.name, "error_code": code, **ids},
    )


def load_creator_history(creator_id: str, repo: CatalogRepository) -> Tuple[Creator, List[Sale]]:
    """Resolve a creator and check it has enough sales history to analyze."""
    creator = repo.get_creator(creator_id)
    if creator is None:
        raise NotFoundError(f"Creator not found: {creator_id}")

    sales = repo.get_sales_by_creator(creator_id)
    if len(sales) < settings.min_sales_for_analysis:
        raise InsufficientDataError(
            f"At least {settings.min_sales_for_analysis} sales are required for analysis "
            f"({creator_id} has {len(sales)})."
        )
    return creator, sales


def eligible_creators(repo: CatalogRepository) -> List[Tuple[Creator, PreprocessedData]]:
    """Creators with enough history to be match candidates, with their aggregates."""
    candidates = []
    for creator in repo.list_creators():
        sales = repo.get_sales_by_creator(creator.id)
        if len(sales) < settings.min_sales_for_analysis:
            continue
        candidates.append((creator, preprocess_creator_data(creator, sales, repo.get_product)))
    return candidates


# ─────────────────────────────────────────────
# POST /analyze
# ─────────────────────────────────────────────


async def analyze_creator(
    creator_id: str,
    repo: CatalogRepository,
    provider: Optional[AIProvider],
    cache: TTLCache = analysis_cache,
) -> CreatorInsight:
    creator, sales = load_creator_history(creator_id, repo)

    key = cache_key("analyze", creator_id)
    cached = cache.get(key)
    if cached is not None:
        logger.info(f"Cache hit for {key}", extra={"creator_id": creator_id})
        return cached

    data = preprocess_creator_data(creator, sales, repo.get_product)

    error: Optional[Exception] = None
    if provider is not None:
        try:
            insight = await generate_ai_insight(provider, creator, data)
            cache.set(key, insight)
            return insight
        except Exception as e:
            error = e

    _log_fallback("/analyze", provider, error, creator_id=creator_id)
    return build_fallback_insight(creator, data)


# ─────────────────────────────────────────────
# POST /match
# ─────────────────────────────────────────────


async def match_products(
    creator_id: str,
    limit: int,
    repo: CatalogRepository,
    provider: Optional[AIProvider],
    cache: TTLCache = analysis_cache,
) -> List[ProductMatch]:
    creator, sales = load_creator_history(creator_id, repo)

    key = cache_key("match", creator_id, limit)
    cached = cache.get(key)
    if cached is not None:
        logger.info(f"Cache hit for {key}", extra={"creator_id": creator_id})
        return cached

    data = preprocess_creator_data(creator, sales, repo.get_product)
    products = repo.list_products()

    error: Optional[Exception] = None
    if provider is not None and products:
        try:
            matches = await generate_ai_product_matches(provider, data, products, limit)
            cache.set(key, matches)
            return matches
        except Exception as e:
            error = e

    _log_fallback("/match", provider, error, creator_id=creator_id)
    return match_products_fallback(creator, data, products, limit)


# ─────────────────────────────────────────────
# POST /match/creators
# ─────────────────────────────────────────────


async def match_creators(
    product_id: str,
    limit: int,
    repo: CatalogRepository,
    provider: Optional[AIProvider],
    cache: TTLCache = analysis_cache,
) -> List[CreatorMatch]:
    product: Optional[Product] = repo.get_product(product_id)
    if product is None:
        raise NotFoundError(f"Product not found: {product_id}")

    key = cache_key("match-creators", product_id, limit)
    cached = cache.get(key)
    if cached is not None:
        logger.info(f"Cache hit for {key}", extra={"product_id": product_id})
        return cached

    candidates = eligible_creators(repo)

    error: Optional[Exception] = None
    if provider is not None and candidates:
        try:
            matches = await generate_ai_creator_matches(provider, product, candidates, limit)
            cache.set(key, matches)
            return matches
        except Exception as e:
            error = e

    _log_fallback("/match/creators", provider, error, product_id=product_id)
    return match_creators_fallback(product, candidates, limit)
