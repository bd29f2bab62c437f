"""SellScope — Catalogue Statistics.

Lifetime stats for a creator, per-product sales stats and catalogue-wide
product stats. Quantities here are units sold, not sale records.
"""

from collections import defaultdict
from typing import Dict, List, Optional

from app.models.catalog_models import (
    CatalogStats,
    CreatorStats,
    ProductSalesStats,
    Sale,
    TopProductRef,
)
from app.repositories.base import CatalogRepository


def _top_key(counts: Dict[str, int]) -> Optional[str]:
    """Key with the highest count; the first one seen wins a tie."""
    if not counts:
        return None
    return max(counts.items(), key=lambda item: item[1])[0]


def _avg_conversion(sales: List[Sale]) -> float:
    if not sales:
        return 0.0
    return round(sum(s.conversion_rate for s in sales) / len(sales), 2)


def compute_creator_stats(creator_id: str, repo: CatalogRepository) -> CreatorStats:
    sales = repo.get_sales_by_creator(creator_id)
    if not sales:
        return CreatorStats()

    category_units: Dict[str, int] = defaultdict(int)
    product_units: Dict[str, int] = defaultdict(int)
    for sale in sales:
        product = repo.get_product(sale.product_id)
        if product is not None:
            category_units[product.category] += sale.quantity
        product_units[sale.product_id] += sale.quantity

    top_product_id = _top_key(product_units)
    top_product = None
    if top_product_id is not None:
        product = repo.get_product(top_product_id)
        top_product = TopProductRef(
            id=top_product_id,
            name=product.name if product else "Unknown",
            sales_count=product_units[top_product_id],
        )

    return CreatorStats(
        total_sales=sum(s.quantity for s in sales),
        total_revenue=sum(s.revenue for s in sales),
        total_commission=sum(s.commission for s in sales),
        average_conversion_rate=_avg_conversion(sales),
        top_category=_top_key(category_units),
        top_product=top_product,
    )


def compute_product_stats(product_id: str, repo: CatalogRepository) -> ProductSalesStats:
    sales = repo.get_sales_by_product(product_id)
    return ProductSalesStats(
        total_quantity=sum(s.quantity for s in sales),
        total_revenue=sum(s.revenue for s in sales),
        total_commission=sum(s.commission for s in sales),
        creator_count=len({s.creator_id for s in sales}),
        average_conversion_rate=_avg_conversion(sales),
    )


def compute_catalog_stats(repo: CatalogRepository) -> CatalogStats:
    products = repo.list_products()
    if not products:
        return CatalogStats()

    category_of = {p.id: p.category for p in products}
    category_units: Dict[str, int] = defaultdict(int)
    for sale in repo.list_sales():
        category = category_of.get(sale.product_id)
        if category is not None:
            category_units[category] += sale.quantity

    return CatalogStats(
        total_products=len(products),
        avg_price=round(sum(p.price for p in products) / len(products), 2),
        most_popular_category=_top_key(category_units),
        avg_commission_rate=round(
            sum(p.avg_commission_rate for p in products) / len(products), 4
        ),
    )
