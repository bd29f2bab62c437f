"""SellScope — Sales Preprocessing.

Aggregates one creator's sales history into the summary every downstream
consumer works from: category breakdown, price distribution, seasonal
pattern, top products and scalar totals.

A sale's category is not stored on the record; it is resolved through its
product. Sales whose product cannot be resolved still count toward every
total, but are left out of the category breakdown and reported as
``unattributed_revenue``.
"""

from collections import defaultdict
from typing import Callable, Dict, List, Optional

from app.core.category_registry import SEASON_ORDER, season_from_month
from app.models.catalog_models import Creator, Product, Sale
from app.models.analysis_models import (
    CategoryShare,
    CreatorSnapshot,
    PreprocessedData,
    PriceBucket,
    SalesSummary,
    SeasonalBucket,
    TopProduct,
)
from app.core.logging import get_logger

logger = get_logger("analyzer.preprocess")

PRICE_BUCKET_WIDTH = 10_000
TOP_PRODUCT_COUNT = 5

ProductResolver = Callable[[str], Optional[Product]]


def _average(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


# ── Category Breakdown ──


def _category_breakdown(
    sales: List[Sale], resolve: ProductResolver, total_revenue: int
) -> tuple[List[CategoryShare], int]:
    """Per-category revenue share, highest first. Ties keep first-seen order."""
    groups: Dict[str, dict] = {}
    unattributed = 0

    for sale in sales:
        product = resolve(sale.product_id)
        if product is None:
            unattributed += sale.revenue
            continue
        g = groups.setdefault(
            product.category, {"revenue": 0, "count": 0, "quantity": 0, "prices": []}
        )
        g["revenue"] += sale.revenue
        g["count"] += 1
        g["quantity"] += sale.quantity
        g["prices"].append(sale.price)

    shares = [
        CategoryShare(
            category=category,
            revenue=g["revenue"],
            sales_count=g["count"],
            quantity=g["quantity"],
            average_price=round(_average(g["prices"]), 2),
            revenue_share=(
                round(g["revenue"] / total_revenue * 100, 2) if total_revenue > 0 else 0.0
            ),
        )
        for category, g in groups.items()
    ]
    # sorted() is stable
    shares = sorted(shares, key=lambda s: s.revenue_share, reverse=True)
    return shares, unattributed


# ── Price Distribution ──


def price_bucket_bounds(price: int) -> tuple[int, int]:
    lower = (price // PRICE_BUCKET_WIDTH) * PRICE_BUCKET_WIDTH
    return lower, lower + PRICE_BUCKET_WIDTH


def _price_distribution(sales: List[Sale]) -> List[PriceBucket]:
    buckets: Dict[int, dict] = defaultdict(lambda: {"count": 0, "revenue": 0})
    for sale in sales:
        lower, _ = price_bucket_bounds(sale.price)
        buckets[lower]["count"] += 1
        buckets[lower]["revenue"] += sale.revenue

    return [
        PriceBucket(
            price_range=f"{lower}-{lower + PRICE_BUCKET_WIDTH}",
            lower_bound=lower,
            sales_count=b["count"],
            revenue=b["revenue"],
        )
        for lower, b in sorted(buckets.items())
    ]


# ── Seasonal Pattern ──


def _seasonal_pattern(sales: List[Sale]) -> List[SeasonalBucket]:
    """Seasons with at least one sale, in calendar order."""
    seasons: Dict[str, dict] = defaultdict(lambda: {"count": 0, "revenue": 0})
    for sale in sales:
        season = season_from_month(sale.sold_at.month)
        seasons[season.value]["count"] += 1
        seasons[season.value]["revenue"] += sale.revenue

    return [
        SeasonalBucket(
            season=s.value,
            sales_count=seasons[s.value]["count"],
            revenue=seasons[s.value]["revenue"],
        )
        for s in SEASON_ORDER
        if s.value in seasons
    ]


# ── Top Products ──


def _top_products(sales: List[Sale], resolve: ProductResolver) -> List[TopProduct]:
    groups: Dict[str, dict] = {}
    for sale in sales:
        g = groups.get(sale.product_id)
        if g is None:
            product = resolve(sale.product_id)
            g = groups[sale.product_id] = {
                "name": product.name if product else (sale.product_name or sale.product_id),
                "category": product.category if product else None,
                "price": sale.price,
                "quantity": 0,
                "revenue": 0,
            }
        g["quantity"] += sale.quantity
        g["revenue"] += sale.revenue

    ranked = sorted(groups.items(), key=lambda item: item[1]["revenue"], reverse=True)
    return [
        TopProduct(product_id=product_id, **g)
        for product_id, g in ranked[:TOP_PRODUCT_COUNT]
    ]


# ── Entry Point ──


def preprocess_creator_data(
    creator: Creator, sales: List[Sale], resolve_product: ProductResolver
) -> PreprocessedData:
    """Build the aggregated view of ``creator``'s sales history.

    Args:
        creator: The creator the sales belong to.
        sales: That creator's sale records (any order).
        resolve_product: Lookup from product id to Product, returning None
            for ids missing from the catalogue.
    """
    total_sales = len(sales)
    total_revenue = sum(s.revenue for s in sales)

    # Resolve each product once per call
    cache: Dict[str, Optional[Product]] = {}

    def resolve(product_id: str) -> Optional[Product]:
        if product_id not in cache:
            cache[product_id] = resolve_product(product_id)
        return cache[product_id]

    breakdown, unattributed = _category_breakdown(sales, resolve, total_revenue)
    if unattributed:
        logger.warning(
            f"{unattributed} revenue not attributable to a category",
            extra={"creator_id": creator.id},
        )

    summary = SalesSummary(
        total_sales=total_sales,
        total_quantity=sum(s.quantity for s in sales),
        total_revenue=total_revenue,
        average_order_value=round(total_revenue / total_sales, 2) if total_sales else 0.0,
        average_conversion_rate=round(_average([s.conversion_rate for s in sales]), 2),
        unattributed_revenue=unattributed,
    )

    return PreprocessedData(
        creator=CreatorSnapshot(
            id=creator.id,
            name=creator.name,
            platform=creator.platform.value,
            followers=creator.followers,
            engagement_rate=creator.engagement_rate,
            categories=list(creator.categories),
        ),
        summary=summary,
        category_breakdown=breakdown,
        price_distribution=_price_distribution(sales),
        seasonal_pattern=_seasonal_pattern(sales),
        top_products=_top_products(sales, resolve),
    )
