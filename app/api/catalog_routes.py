"""SellScope — Creator & Product Catalogue Routes."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.analyzer.stats import compute_catalog_stats, compute_creator_stats, compute_product_stats
from app.api.dependencies import get_repository
from app.api.listing import (
    CREATOR_SORT_ACCESSORS,
    PRODUCT_SORT_ACCESSORS,
    paginate,
    sort_items,
)
from app.api.responses import success_response
from app.core.errors import APIError, InternalError, NotFoundError
from app.core.logging import get_logger
from app.models.api_models import CreatorSortKey, ProductSortKey, SortOrder
from app.models.catalog_models import CreatorWithStats, ProductWithStats
from app.repositories.base import CatalogRepository

logger = get_logger("api.catalog")

router = APIRouter(tags=["Catalogue"])


def _internal_error(endpoint: str, e: Exception) -> InternalError:
    logger.error(f"{endpoint} failed: {e}", exc_info=True, extra={"endpoint": endpoint})
    return InternalError()


# ── Creators ──


@router.get("/creators")
async def list_creators(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    platform: Optional[str] = Query(None, description="Case-insensitive, e.g. instagram"),
    category: Optional[str] = Query(None, description="Creator affinity, case-insensitive"),
    search: Optional[str] = Query(None, description="Matches name or email"),
    sort: CreatorSortKey = Query(CreatorSortKey.NAME),
    order: SortOrder = Query(SortOrder.ASC),
    repo: CatalogRepository = Depends(get_repository),
):
    """Paginated creator list with filtering and sorting."""
    try:
        creators = repo.list_creators()

        if platform:
            wanted = platform.lower()
            creators = [c for c in creators if c.platform.value.lower() == wanted]
        if category:
            wanted = category.lower()
            creators = [c for c in creators if any(cat.lower() == wanted for cat in c.categories)]
        if search:
            needle = search.lower()
            creators = [
                c for c in creators
                if needle in c.name.lower() or needle in (c.email or "").lower()
            ]

        creators = sort_items(creators, CREATOR_SORT_ACCESSORS[sort], order)
        items, pagination = paginate(creators, page, limit)
        return success_response(items, pagination)
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("/creators", e)


@router.get("/creators/{creator_id}")
async def get_creator(
    creator_id: str,
    repo: CatalogRepository = Depends(get_repository),
):
    """Creator profile plus lifetime sales stats."""
    try:
        creator = repo.get_creator(creator_id)
        if creator is None:
            raise NotFoundError(f"Creator not found: {creator_id}")
        stats = compute_creator_stats(creator_id, repo)
        return success_response(CreatorWithStats(**creator.model_dump(), stats=stats))
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("/creators/{id}", e)


# ── Products ──


@router.get("/products")
async def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    category: Optional[str] = Query(None, description="Exact category, e.g. Beauty"),
    min_price: Optional[int] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[int] = Query(None, alias="maxPrice", ge=0),
    search: Optional[str] = Query(None, description="Matches name, brand or description"),
    sort: ProductSortKey = Query(ProductSortKey.NAME),
    order: SortOrder = Query(SortOrder.ASC),
    repo: CatalogRepository = Depends(get_repository),
):
    """Paginated product list with filtering and sorting."""
    try:
        products = repo.get_products_by_category(category) if category else repo.list_products()

        if min_price is not None:
            products = [p for p in products if p.price >= min_price]
        if max_price is not None:
            products = [p for p in products if p.price <= max_price]
        if search:
            needle = search.lower()
            products = [
                p for p in products
                if needle in p.name.lower()
                or needle in p.brand.lower()
                or needle in p.description.lower()
            ]

        products = sort_items(products, PRODUCT_SORT_ACCESSORS[sort], order)
        items, pagination = paginate(products, page, limit)
        return success_response(items, pagination)
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("/products", e)


# Declared before /products/{product_id} so "stats" is not taken as an id
@router.get("/products/stats")
async def get_products_stats(repo: CatalogRepository = Depends(get_repository)):
    """Catalogue-wide product stats."""
    try:
        return success_response(compute_catalog_stats(repo))
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("/products/stats", e)


@router.get("/products/{product_id}")
async def get_product(
    product_id: str,
    repo: CatalogRepository = Depends(get_repository),
):
    """Product detail plus its sales stats."""
    try:
        product = repo.get_product(product_id)
        if product is None:
            raise NotFoundError(f"Product not found: {product_id}")
        stats = compute_product_stats(product_id, repo)
        return success_response(ProductWithStats(**product.model_dump(), stats=stats))
    except APIError:
        raise
    except Exception as e:
        raise _internal_error("/products/{id}", e)
