"""SellScope — Analysis & Matching API Routes."""

from typing import Optional

from fastapi import APIRouter, Depends

from app.ai.base_provider import AIProvider
from app.analyzer.pipeline import analyze_creator, match_creators, match_products
from app.api.dependencies import get_ai_provider, get_repository
from app.api.responses import success_response
from app.core.errors import APIError, InternalError
from app.core.logging import get_logger
from app.models.api_models import AnalyzeRequest, MatchCreatorsRequest, MatchProductsRequest
from app.repositories.base import CatalogRepository

logger = get_logger("api.analysis")

router = APIRouter(tags=["Analysis"])


@router.post("/analyze")
async def analyze(
    request: AnalyzeRequest,
    repo: CatalogRepository = Depends(get_repository),
    provider: Optional[AIProvider] = Depends(get_ai_provider),
):
    """Narrative insight into a creator's selling profile.

    Uses the AI provider when one is configured, otherwise (or when it
    fails) a deterministic summary of the same aggregates.
    """
    try:
        insight = await analyze_creator(request.creator_id, repo, provider)
        return success_response(insight)
    except APIError:
        raise
    except Exception as e:
        logger.error(
            f"Analysis failed: {e}",
            exc_info=True,
            extra={"endpoint": "/analyze", "creator_id": request.creator_id},
        )
        raise InternalError()


@router.post("/match")
async def match(
    request: MatchProductsRequest,
    repo: CatalogRepository = Depends(get_repository),
    provider: Optional[AIProvider] = Depends(get_ai_provider),
):
    """Rank catalogue products for a creator."""
    try:
        matches = await match_products(request.creator_id, request.limit, repo, provider)
        return success_response(matches)
    except APIError:
        raise
    except Exception as e:
        logger.error(
            f"Product matching failed: {e}",
            exc_info=True,
            extra={"endpoint": "/match", "creator_id": request.creator_id},
        )
        raise InternalError()


@router.post("/match/creators")
async def match_creators_for_product(
    request: MatchCreatorsRequest,
    repo: CatalogRepository = Depends(get_repository),
    provider: Optional[AIProvider] = Depends(get_ai_provider),
):
    """Rank creators for a product."""
    try:
        matches = await match_creators(request.product_id, request.limit, repo, provider)
        return success_response(matches)
    except APIError:
        raise
    except Exception as e:
        logger.error(
            f"Creator matching failed: {e}",
            exc_info=True,
            extra={"endpoint": "/match/creators", "product_id": request.product_id},
        )
        raise InternalError()
