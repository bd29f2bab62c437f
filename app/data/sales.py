"""SellScope — Reference Sales History Generator.

Builds 30-80 sale records per creator over the six months from
2025-08-01 to 2026-02-01. Generation is driven by a seeded ``random.Random``
so the same seed always produces the same history.

Per sale:
  conversion % = category base rate × price multiplier × seasonal weight
  quantity     = max(1, floor(clicks × conversion / 100))
  commission   = floor(revenue × category commission rate)
"""

import math
import random
from datetime import datetime, timedelta, timezone
from typing import List

from app.core.category_registry import get_profile, season_from_month, seasonal_weight

WINDOW_START = datetime(2025, 8, 1, tzinfo=timezone.utc)
WINDOW_END = datetime(2026, 2, 1, tzinfo=timezone.utc)

MIN_SALES_PER_CREATOR = 30
MAX_SALES_PER_CREATOR = 80


def price_conversion_multiplier(price: int) -> float:
    """Cheaper products convert better."""
    if price < 30000:
        return 1.5
    if price < 80000:
        return 1.0
    return 0.7


def _random_timestamp(rng: random.Random) -> datetime:
    span = (WINDOW_END - WINDOW_START).total_seconds()
    return (WINDOW_START + timedelta(seconds=rng.random() * span)).replace(microsecond=0)


def generate_sales(creators: List[dict], products: List[dict], seed: int) -> List[dict]:
    """Generate the sales history for every creator, sorted by ``sold_at``."""
    rng = random.Random(seed)
    sales: List[dict] = []
    counter = 1

    for creator in creators:
        sales_count = rng.randint(MIN_SALES_PER_CREATOR, MAX_SALES_PER_CREATOR)
        candidates = [p for p in products if p["category"] in creator["categories"]]
        if not candidates:
            candidates = products

        for _ in range(sales_count):
            product = rng.choice(candidates)
            sold_at = _random_timestamp(rng)
            profile = get_profile(product["category"])

            low, high = profile.conversion_range
            conversion = (
                rng.uniform(low, high)
                * price_conversion_multiplier(product["price"])
                * seasonal_weight(season_from_month(sold_at.month), product["category"])
            )

            clicks = rng.randint(100, 1000)
            quantity = max(1, math.floor(clicks * conversion / 100))
            revenue = quantity * product["price"]

            sales.append(
                {
                    "id": f"sale-{counter:05d}",
                    "creator_id": creator["id"],
                    "product_id": product["id"],
                    "product_name": product["name"],
                    "price": product["price"],
                    "quantity": quantity,
                    "revenue": revenue,
                    "commission": math.floor(revenue * profile.commission_rate),
                    "commission_rate": profile.commission_rate,
                    "click_count": clicks,
                    "conversion_rate": round(quantity / clicks * 100, 2),
                    "sold_at": sold_at,
                    "platform": creator["platform"],
                }
            )
            counter += 1

    sales.sort(key=lambda s: s["sold_at"])
    return sales
