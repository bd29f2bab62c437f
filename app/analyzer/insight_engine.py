"""SellScope — Creator Insight Engine.

Produces the narrative ``CreatorInsight`` for POST /analyze, either from
the AI provider (source="ai") or deterministically from the preprocessed
aggregates (source="fallback").
"""

import json
import uuid
from datetime import datetime, timezone

from app.ai.base_provider import AIProvider
from app.ai.client import call_ai_json
from app.analyzer.preprocess import PRICE_BUCKET_WIDTH
from app.config import settings
from app.models.ai_schemas import InsightAIResponse
from app.models.analysis_models import (
    CategoryPercentage,
    CreatorInsight,
    PreprocessedData,
    PriceRange,
    SeasonalTrend,
)
from app.models.catalog_models import Creator

FALLBACK_CONFIDENCE = 0.75

INSIGHT_SYSTEM_PROMPT = """You are a sales-data analyst for a Korean social-commerce platform.

ROLE:
- Read a creator's pre-aggregated sales history and describe their selling profile and strengths.
- Recommend the product categories and price bands that fit them best.
- Give concrete, actionable advice.

RULES:
1. Ground every statement in the numbers provided. Do NOT invent metrics.
2. Look at revenue share, conversion, price bands and seasonality together.
3. State strengths clearly; frame weaknesses constructively.
4. Round numbers to at most 2 decimal places.
5. Write all text fields in Korean.
6. Respond with a single valid JSON object and nothing else.
"""

INSIGHT_RESPONSE_FORMAT = """{
  "summary": "overall selling profile (200-300 characters)",
  "strengths": ["data-backed strength 1", "strength 2", "strength 3"],
  "topCategories": [{"category": "Beauty", "percentage": 45.2}],
  "priceRange": {"min": 10000, "max": 60000, "average": 35000},
  "seasonalTrends": [{"season": "Spring", "salesCount": 12, "revenue": 540000}],
  "recommendations": ["actionable recommendation 1", "recommendation 2", "recommendation 3"],
  "confidence": 0.0
}"""


def _new_insight_id() -> str:
    return f"insight-{uuid.uuid4().hex[:12]}"


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def build_insight_prompt(data: PreprocessedData) -> str:
    """User prompt: the preprocessed aggregates plus the expected JSON shape."""
    data_block = json.dumps(
        data.model_dump(by_alias=True, mode="json"), ensure_ascii=False, indent=2
    )
    return (
        f"Analyze this creator's sales data (currency: {settings.currency}).\n\n"
        f"Data:\n{data_block}\n\n"
        f"Return JSON in exactly this shape. confidence is between 0.0 and 1.0:\n"
        f"{INSIGHT_RESPONSE_FORMAT}"
    )


async def generate_ai_insight(
    provider: AIProvider, creator: Creator, data: PreprocessedData
) -> CreatorInsight:
    """Primary path. Raises ``AIAnalysisError`` on any provider or output failure."""
    response = await call_ai_json(
        provider,
        INSIGHT_SYSTEM_PROMPT,
        build_insight_prompt(data),
        InsightAIResponse,
        temperature=0.3,
        max_tokens=2000,
    )
    return CreatorInsight(
        id=_new_insight_id(),
        creator_id=creator.id,
        analyzed_at=_now_iso(),
        summary=response.summary,
        strengths=response.strengths,
        top_categories=[
            CategoryPercentage(category=c.category, percentage=c.percentage)
            for c in response.top_categories
        ],
        price_range=PriceRange(
            min=response.price_range.min,
            max=response.price_range.max,
            average=response.price_range.average,
        ),
        seasonal_trends=[
            SeasonalTrend(season=s.season, sales_count=int(s.sales_count), revenue=s.revenue)
            for s in response.seasonal_trends
        ],
        recommendations=response.recommendations,
        confidence=response.confidence,
        source="ai",
    )


def build_fallback_insight(creator: Creator, data: PreprocessedData) -> CreatorInsight:
    """Deterministic insight from the aggregates alone. Never raises."""
    summary = data.summary
    top = data.category_breakdown[0] if data.category_breakdown else None
    top_name = top.category if top else "N/A"
    top_share = top.revenue_share if top else 0.0
    aov = round(summary.average_order_value)

    buckets = data.price_distribution
    if buckets:
        price_range = PriceRange(
            min=min(b.lower_bound for b in buckets),
            max=max(b.lower_bound for b in buckets) + PRICE_BUCKET_WIDTH,
            average=summary.average_order_value,
        )
        # max() keeps the first of equal counts, i.e. the cheapest band
        best_bucket = max(buckets, key=lambda b: b.sales_count).price_range
    else:
        price_range = PriceRange(min=0, max=0, average=0)
        best_bucket = "N/A"

    best_season = (
        max(data.seasonal_pattern, key=lambda s: s.revenue).season
        if data.seasonal_pattern
        else "N/A"
    )

    return CreatorInsight(
        id=_new_insight_id(),
        creator_id=creator.id,
        analyzed_at=_now_iso(),
        summary=(
            f"{creator.name}님은 {top_name} 카테고리에서 강점을 보이며, "
            f"평균 주문 가치는 {aov:,}원입니다. "
            f"총 {summary.total_sales}건의 판매를 통해 {summary.total_revenue:,}원의 매출을 기록했습니다."
        ),
        strengths=[
            f"{top_name} 카테고리 강세 ({top_share:.1f}%)",
            f"안정적인 판매량 (총 {summary.total_sales}건, {summary.total_quantity}개)",
            f"평균 주문 가치 {aov:,}원, 평균 전환율 {summary.average_conversion_rate:.2f}%",
        ],
        top_categories=[
            CategoryPercentage(category=c.category.value, percentage=c.revenue_share)
            for c in data.category_breakdown[:3]
        ],
        price_range=price_range,
        seasonal_trends=[
            SeasonalTrend(season=s.season, sales_count=s.sales_count, revenue=s.revenue)
            for s in data.seasonal_pattern
        ],
        recommendations=[
            f"{top_name} 카테고리 제품 확대 추천",
            f"{best_bucket}원 가격대 제품 집중 판매",
            f"{best_season} 시즌 마케팅 강화",
        ],
        confidence=FALLBACK_CONFIDENCE,
        source="fallback",
    )
