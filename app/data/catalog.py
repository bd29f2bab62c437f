"""SellScope — Reference Catalogue Loader."""

from collections import defaultdict
from functools import lru_cache
from typing import List, Tuple

from app.config import settings
from app.data.creators import CREATOR_SEED
from app.data.products import PRODUCT_SEED
from app.data.sales import generate_sales
from app.models.catalog_models import Creator, Product, Sale


def build_catalog(seed: int) -> Tuple[List[Creator], List[Product], List[Sale]]:
    """Materialize creators, products and sales for a given seed.

    Creator ``total_sales`` (units) and ``total_revenue`` are computed from
    the generated history so the two never disagree.
    """
    raw_sales = generate_sales(CREATOR_SEED, PRODUCT_SEED, seed)

    units: dict[str, int] = defaultdict(int)
    revenue: dict[str, int] = defaultdict(int)
    for s in raw_sales:
        units[s["creator_id"]] += s["quantity"]
        revenue[s["creator_id"]] += s["revenue"]

    creators = [
        Creator(
            **c,
            profile_image=f"https://images.sellscope.dev/creators/{c['id']}.jpg",
            total_sales=units[c["id"]],
            total_revenue=revenue[c["id"]],
        )
        for c in CREATOR_SEED
    ]
    products = [Product(**p) for p in PRODUCT_SEED]
    sales = [Sale(**s) for s in raw_sales]
    return creators, products, sales


@lru_cache
def load_catalog() -> Tuple[List[Creator], List[Product], List[Sale]]:
    """Reference catalogue for the configured ``MOCK_DATA_SEED`` (built once)."""
    return build_catalog(settings.mock_data_seed)
