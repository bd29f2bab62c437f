"""SellScope — AI Matching.

Prompts the AI provider for ranked creator ↔ product matches and maps the
reply back onto catalogue entities. The model's output is not trusted:
unknown or duplicate ids are dropped, scores are clamped to [0, 100],
revenue triplets are reordered so minimum ≤ expected ≤ maximum, and the
result is re-sorted and truncated to the requested limit.
"""

import json
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from app.ai.base_provider import AIProvider
from app.ai.client import call_ai_json
from app.analyzer.matching_engine import round_half_up
from app.config import settings
from app.core.category_registry import season_from_month
from app.models.ai_schemas import (
    AIRevenueRange,
    AIScoreBreakdown,
    CreatorMatchAIResponse,
    ProductMatchAIResponse,
)
from app.models.analysis_models import (
    CreatorMatch,
    MatchBreakdown,
    PreprocessedData,
    ProductMatch,
    RevenuePrediction,
)
from app.models.catalog_models import Creator, Product
from app.core.logging import get_logger

logger = get_logger("analyzer.ai_matching")

AI_BASIS = "AI 분석 (크리에이터 과거 판매 이력 기반)"
MIN_AI_SCORE = 70

SCORING_RULES = """SCORING (total 100):
1. categoryFit (40%): overlap between the creator's strongest categories and the product category
2. priceFit (30%): closeness of the product price to the creator's average order value
3. seasonFit (20%): fit between the current season and the product's seasonality
4. audienceFit (10%): overlap between the creator's audience and the product's target audience"""

PRODUCT_MATCH_SYSTEM_PROMPT = f"""You are a creator-product matching specialist for a Korean social-commerce platform.

ROLE:
- Match a creator's selling profile against a product catalogue and recommend the best products.
- Give each product a match score, a per-criterion breakdown, a revenue estimate and a concrete reason.

{SCORING_RULES}

RULES:
1. Only use product IDs from the catalogue provided.
2. Sort matches by matchScore, highest first.
3. Write reasoning in Korean.
4. Respond with a single valid JSON object and nothing else.
"""

CREATOR_MATCH_SYSTEM_PROMPT = f"""You are a creator-product matching specialist for a Korean social-commerce platform.

ROLE:
- Given one product and a list of creators with their sales profiles, recommend the creators most likely to sell it well.
- Give each creator a match score, a per-criterion breakdown, a revenue estimate and a concrete reason.

{SCORING_RULES}

RULES:
1. Only use creator IDs from the list provided.
2. Sort matches by matchScore, highest first.
3. Write reasoning in Korean.
4. Respond with a single valid JSON object and nothing else.
"""

MATCH_FIELDS_FORMAT = """"matchScore": 0-100,
      "scoreBreakdown": {"categoryFit": 0-100, "priceFit": 0-100, "seasonFit": 0-100, "audienceFit": 0-100},
      "predictedRevenue": {"min": 0, "max": 0, "average": 0, "predictedQuantity": 0, "predictedCommission": 0},
      "reasoning": "why this is a good match (100-200 characters)\""""


def _current_season() -> str:
    return season_from_month(datetime.now(timezone.utc).month).value


def _clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def _to_breakdown(ai: AIScoreBreakdown) -> MatchBreakdown:
    return MatchBreakdown(
        category_fit=_clamp_score(ai.category_fit),
        price_fit=_clamp_score(ai.price_fit),
        season_fit=_clamp_score(ai.season_fit),
        audience_fit=_clamp_score(ai.audience_fit),
    )


def normalize_revenue(ai: AIRevenueRange, product: Product) -> RevenuePrediction:
    """Order the AI's (min, average, max) and fill in missing quantity/commission."""
    minimum, expected, maximum = sorted(
        max(0, round_half_up(v)) for v in (ai.min, ai.average, ai.max)
    )
    if ai.predicted_quantity is not None:
        quantity = max(0, round_half_up(ai.predicted_quantity))
    else:
        quantity = round_half_up(expected / product.price) if product.price else 0
    if ai.predicted_commission is not None:
        commission = max(0, round_half_up(ai.predicted_commission))
    else:
        commission = round_half_up(expected * product.avg_commission_rate)
    return RevenuePrediction(
        minimum=minimum,
        expected=expected,
        maximum=maximum,
        predicted_quantity=quantity,
        predicted_commission=commission,
        basis=AI_BASIS,
    )


# ─────────────────────────────────────────────
# CREATOR → PRODUCTS
# ─────────────────────────────────────────────


def build_product_match_prompt(
    data: PreprocessedData, products: List[Product], limit: int
) -> str:
    profile = {
        "creator": data.creator.model_dump(by_alias=True),
        "averageOrderValue": data.summary.average_order_value,
        "averageConversionRate": data.summary.average_conversion_rate,
        "categories": [c.category for c in data.category_breakdown],
        "seasons": [
            {"season": s.season, "salesCount": s.sales_count} for s in data.seasonal_pattern
        ],
    }
    catalogue = [
        {
            "id": p.id,
            "name": p.name,
            "category": p.category,
            "price": p.price,
            "targetAudience": p.target_audience,
            "seasonality": p.seasonality,
        }
        for p in products
    ]
    return (
        f"Match products to this creator (currency: {settings.currency}).\n\n"
        f"Creator profile:\n{json.dumps(profile, ensure_ascii=False, indent=2)}\n\n"
        f"Current season: {_current_season()}\n\n"
        f"Product catalogue ({len(products)} items):\n"
        f"{json.dumps(catalogue, ensure_ascii=False, indent=2)}\n\n"
        f"Return JSON in exactly this shape:\n"
        f'{{\n  "matches": [\n    {{\n      "productId": "product-NNN",\n      {MATCH_FIELDS_FORMAT}\n    }}\n  ]\n}}\n\n'
        f"Only include products scoring {MIN_AI_SCORE} or higher, at most {limit} of them."
    )


def map_product_matches(
    response: ProductMatchAIResponse, products: List[Product], limit: int
) -> List[ProductMatch]:
    index: Dict[str, Product] = {p.id: p for p in products}
    seen = set()
    matches: List[ProductMatch] = []
    for m in response.matches:
        product = index.get(m.product_id)
        if product is None or m.product_id in seen:
            logger.warning(f"Dropping AI match for unknown or duplicate product {m.product_id}")
            continue
        seen.add(m.product_id)
        score = _clamp_score(m.match_score)
        matches.append(
            ProductMatch(
                product=product,
                match_score=score,
                match_breakdown=_to_breakdown(m.score_breakdown),
                predicted_revenue=normalize_revenue(m.predicted_revenue, product),
                reasoning=m.reasoning,
                confidence=score,
                source="ai",
            )
        )
    matches.sort(key=lambda x: x.match_score, reverse=True)
    return matches[:limit]


async def generate_ai_product_matches(
    provider: AIProvider,
    data: PreprocessedData,
    products: List[Product],
    limit: int,
) -> List[ProductMatch]:
    response = await call_ai_json(
        provider,
        PRODUCT_MATCH_SYSTEM_PROMPT,
        build_product_match_prompt(data, products, limit),
        ProductMatchAIResponse,
        temperature=0.2,
        max_tokens=3000,
    )
    return map_product_matches(response, products, limit)


# ─────────────────────────────────────────────
# PRODUCT → CREATORS
# ─────────────────────────────────────────────


def build_creator_match_prompt(
    product: Product, candidates: List[Tuple[Creator, PreprocessedData]], limit: int
) -> str:
    target = {
        "id": product.id,
        "name": product.name,
        "brand": product.brand,
        "category": product.category,
        "price": product.price,
        "targetAudience": product.target_audience,
        "seasonality": product.seasonality,
    }
    creators = [
        {
            "id": c.id,
            "name": c.name,
            "platform": c.platform.value,
            "followers": c.followers,
            "engagementRate": c.engagement_rate,
            "categories": c.categories,
            "topCategory": d.top_category,
            "averageOrderValue": d.summary.average_order_value,
            "averageConversionRate": d.summary.average_conversion_rate,
        }
        for c, d in candidates
    ]
    return (
        f"Match creators to this product (currency: {settings.currency}).\n\n"
        f"Product:\n{json.dumps(target, ensure_ascii=False, indent=2)}\n\n"
        f"Current season: {_current_season()}\n\n"
        f"Creators ({len(creators)}):\n{json.dumps(creators, ensure_ascii=False, indent=2)}\n\n"
        f"Return JSON in exactly this shape:\n"
        f'{{\n  "matches": [\n    {{\n      "creatorId": "creator-NNN",\n      {MATCH_FIELDS_FORMAT}\n    }}\n  ]\n}}\n\n'
        f"Return at most {limit} creators."
    )


def map_creator_matches(
    response: CreatorMatchAIResponse,
    product: Product,
    creators: List[Creator],
    limit: int,
) -> List[CreatorMatch]:
    index: Dict[str, Creator] = {c.id: c for c in creators}
    seen = set()
    matches: List[CreatorMatch] = []
    for m in response.matches:
        creator: Optional[Creator] = index.get(m.creator_id)
        if creator is None or m.creator_id in seen:
            logger.warning(f"Dropping AI match for unknown or duplicate creator {m.creator_id}")
            continue
        seen.add(m.creator_id)
        score = _clamp_score(m.match_score)
        matches.append(
            CreatorMatch(
                creator=creator,
                match_score=score,
                match_breakdown=_to_breakdown(m.score_breakdown),
                predicted_revenue=normalize_revenue(m.predicted_revenue, product),
                reasoning=m.reasoning,
                confidence=score,
                source="ai",
            )
        )
    matches.sort(key=lambda x: x.match_score, reverse=True)
    return matches[:limit]


async def generate_ai_creator_matches(
    provider: AIProvider,
    product: Product,
    candidates: List[Tuple[Creator, PreprocessedData]],
    limit: int,
) -> List[CreatorMatch]:
    response = await call_ai_json(
        provider,
        CREATOR_MATCH_SYSTEM_PROMPT,
        build_creator_match_prompt(product, candidates, limit),
        CreatorMatchAIResponse,
        temperature=0.2,
        max_tokens=3000,
    )
    return map_creator_matches(response, product, [c for c, _ in candidates], limit)
