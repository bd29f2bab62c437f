"""SellScope — Fallback Matching Engine.

Deterministic creator ↔ product scoring used whenever the AI path is
unavailable. Everything here is plain arithmetic over preprocessed
aggregates: the same creator, product and history always give the same
score, revenue band and confidence.

Score = round(0.4·categoryFit + 0.3·priceFit + 0.2·seasonFit + 0.1·audienceFit)

  categoryFit  92 top category · 75 affinity · 50 other
  priceFit     100 - min(|price - AOV| / AOV × 100, 50)
  seasonFit    80 (constant, no per-sale seasonal signal yet)
  audienceFit  85 (constant, no audience data yet)
"""

import hashlib
import math
from typing import List, Optional, Sequence, Tuple

from app.config import settings
from app.models.catalog_models import Creator, Product
from app.models.analysis_models import (
    CreatorMatch,
    MatchBreakdown,
    PreprocessedData,
    ProductMatch,
    RevenuePrediction,
)

# ─────────────────────────────────────────────
# SCORING CONSTANTS
# ─────────────────────────────────────────────

CATEGORY_FIT_TOP = 92
CATEGORY_FIT_AFFINITY = 75
CATEGORY_FIT_OTHER = 50

MAX_PRICE_PENALTY = 50.0
PRICE_FIT_NO_HISTORY = 50.0

SEASON_FIT_DEFAULT = 80
AUDIENCE_FIT_DEFAULT = 85

WEIGHTS = {
    "category_fit": 0.4,
    "price_fit": 0.3,
    "season_fit": 0.2,
    "audience_fit": 0.1,
}

# Revenue band
UNITS_MIN = 10
UNITS_MAX = 20
BAND_LOW = 0.7
BAND_HIGH = 1.3
COMMISSION_SHARE = 0.15

# Confidence
CONFIDENCE_MIN = 60
CONFIDENCE_MAX = 90


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# ── Sub-scores ──


def category_fit(category: str, top_category: Optional[str], affinities: Sequence[str]) -> int:
    if top_category is not None and category == top_category:
        return CATEGORY_FIT_TOP
    if category in affinities:
        return CATEGORY_FIT_AFFINITY
    return CATEGORY_FIT_OTHER


def price_fit(price: float, average_order_value: float) -> float:
    """Closeness of ``price`` to the creator's average order value."""
    if average_order_value <= 0:
        return PRICE_FIT_NO_HISTORY
    penalty = abs(price - average_order_value) / average_order_value * 100
    return 100 - min(penalty, MAX_PRICE_PENALTY)


def composite_score(
    category: float,
    price: float,
    season: float = SEASON_FIT_DEFAULT,
    audience: float = AUDIENCE_FIT_DEFAULT,
) -> int:
    raw = (
        category * WEIGHTS["category_fit"]
        + price * WEIGHTS["price_fit"]
        + season * WEIGHTS["season_fit"]
        + audience * WEIGHTS["audience_fit"]
    )
    return int(_clamp(round_half_up(raw), 0, 100))


def confidence_for(score: int) -> int:
    """Map a composite score onto the 60..90 confidence band."""
    raw = CONFIDENCE_MIN + round_half_up(30 * (score - 50) / 50)
    return int(_clamp(raw, CONFIDENCE_MIN, CONFIDENCE_MAX))


# ── Revenue Band ──


def estimate_units(creator_id: str, product_id: str) -> int:
    """Stable unit estimate in [UNITS_MIN, UNITS_MAX] for a creator/product pair."""
    digest = hashlib.sha256(f"{creator_id}:{product_id}".encode("utf-8")).hexdigest()
    span = UNITS_MAX - UNITS_MIN + 1
    return UNITS_MIN + int(digest[:8], 16) % span


def revenue_band(
    creator_id: str, product: Product, average_conversion_rate: float
) -> RevenuePrediction:
    units = estimate_units(creator_id, product.id)
    expected = round_half_up(product.price * units)
    return RevenuePrediction(
        minimum=round_half_up(expected * BAND_LOW),
        expected=expected,
        maximum=round_half_up(expected * BAND_HIGH),
        predicted_quantity=round_half_up(expected / product.price) if product.price else 0,
        predicted_commission=round_half_up(expected * COMMISSION_SHARE),
        basis=f"과거 평균 전환율 {average_conversion_rate:.1f}%",
    )


def _score_pair(
    product: Product, data: PreprocessedData
) -> Tuple[int, MatchBreakdown]:
    cat = category_fit(product.category, data.top_category, data.creator.categories)
    price = price_fit(product.price, data.summary.average_order_value)
    breakdown = MatchBreakdown(
        category_fit=cat,
        price_fit=round_half_up(price),
        season_fit=SEASON_FIT_DEFAULT,
        audience_fit=AUDIENCE_FIT_DEFAULT,
    )
    return composite_score(cat, price), breakdown


# ─────────────────────────────────────────────
# CREATOR → PRODUCTS
# ─────────────────────────────────────────────


def match_products_fallback(
    creator: Creator,
    data: PreprocessedData,
    products: List[Product],
    limit: int,
    strict: Optional[bool] = None,
) -> List[ProductMatch]:
    """Rank catalogue products for ``creator``.

    In strict mode only products in the creator's affinity categories are
    candidates; otherwise every product is scored and out-of-affinity ones
    fall back to the lowest category fit. Returns ``[]`` when nothing
    qualifies.
    """
    if strict is None:
        strict = settings.strict_category_filter

    candidates = [
        p for p in products if not strict or p.category in creator.categories
    ]

    scored = []
    for product in candidates:
        score, breakdown = _score_pair(product, data)
        scored.append((score, product, breakdown))
    scored.sort(key=lambda item: item[0], reverse=True)

    top_category = data.top_category or "N/A"
    matches = []
    for score, product, breakdown in scored[:limit]:
        matches.append(
            ProductMatch(
                product=product,
                match_score=score,
                match_breakdown=breakdown,
                predicted_revenue=revenue_band(
                    creator.id, product, data.summary.average_conversion_rate
                ),
                reasoning=(
                    f"{product.name}({product.category})은 {creator.name}님의 주력 카테고리인 "
                    f"{top_category}와 연관되며, 가격대가 평균 주문 가치와 비교해 적합합니다."
                ),
                confidence=confidence_for(score),
                source="fallback",
            )
        )
    return matches


# ─────────────────────────────────────────────
# PRODUCT → CREATORS
# ─────────────────────────────────────────────


def match_creators_fallback(
    product: Product,
    candidates: List[Tuple[Creator, PreprocessedData]],
    limit: int,
    strict: Optional[bool] = None,
) -> List[CreatorMatch]:
    """Rank creators for ``product``. Mirror of :func:`match_products_fallback`.

    ``candidates`` pairs each eligible creator with its preprocessed history;
    the caller has already dropped creators below the minimum history.
    """
    if strict is None:
        strict = settings.strict_category_filter

    scored = []
    for creator, data in candidates:
        if strict and product.category not in creator.categories:
            continue
        score, breakdown = _score_pair(product, data)
        scored.append((score, creator, data, breakdown))
    scored.sort(key=lambda item: item[0], reverse=True)

    matches = []
    for score, creator, data, breakdown in scored[:limit]:
        matches.append(
            CreatorMatch(
                creator=creator,
                match_score=score,
                match_breakdown=breakdown,
                predicted_revenue=revenue_band(
                    creator.id, product, data.summary.average_conversion_rate
                ),
                reasoning=(
                    f"{creator.name}님의 주력 카테고리는 {data.top_category or 'N/A'}이며, "
                    f"{product.name}({product.category})의 가격대가 평균 주문 가치와 잘 맞습니다."
                ),
                confidence=confidence_for(score),
                source="fallback",
            )
        )
    return matches
