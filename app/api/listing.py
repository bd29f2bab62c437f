"""SellScope — Listing Helpers (sorting & pagination)."""

import math
from typing import Any, Callable, Dict, List, Sequence, Tuple, TypeVar

from app.models.api_models import CreatorSortKey, Pagination, ProductSortKey, SortOrder
from app.models.catalog_models import Creator, Product

T = TypeVar("T")

CREATOR_SORT_ACCESSORS: Dict[CreatorSortKey, Callable[[Creator], Any]] = {
    CreatorSortKey.NAME: lambda c: c.name,
    CreatorSortKey.FOLLOWERS: lambda c: c.followers,
    CreatorSortKey.ENGAGEMENT: lambda c: c.engagement_rate,
    CreatorSortKey.CREATED_AT: lambda c: c.joined_at,
}

PRODUCT_SORT_ACCESSORS: Dict[ProductSortKey, Callable[[Product], Any]] = {
    ProductSortKey.NAME: lambda p: p.name,
    ProductSortKey.PRICE: lambda p: p.price,
    ProductSortKey.CATEGORY: lambda p: p.category,
}


def sort_items(items: Sequence[T], accessor: Callable[[T], Any], order: SortOrder) -> List[T]:
    return sorted(items, key=accessor, reverse=order == SortOrder.DESC)


def paginate(items: Sequence[T], page: int, limit: int) -> Tuple[List[T], Pagination]:
    """Slice one page out of ``items``. Pages past the end are empty."""
    total = len(items)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit
    return list(items[start:start + limit]), Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
    )
