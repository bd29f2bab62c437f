"""SellScope — Schemas the AI provider's JSON output must satisfy."""

from typing import Optional, List
from pydantic import ConfigDict, Field

from app.models.catalog_models import CamelModel


class AIModel(CamelModel):
    """Base for model output: non-finite floats are rejected."""

    model_config = ConfigDict(allow_inf_nan=False)


class AICategoryPercentage(AIModel):
    category: str
    percentage: float


class AIPriceRange(AIModel):
    min: float
    max: float
    average: float


class AISeasonalTrend(AIModel):
    season: str
    sales_count: float
    revenue: float


class InsightAIResponse(AIModel):
    """Creator insight as returned by the model."""

    summary: str
    strengths: List[str]
    top_categories: List[AICategoryPercentage]
    price_range: AIPriceRange
    seasonal_trends: List[AISeasonalTrend]
    recommendations: List[str]
    confidence: float = Field(ge=0, le=1)


class AIScoreBreakdown(AIModel):
    category_fit: float
    price_fit: float
    season_fit: float
    audience_fit: float


class AIRevenueRange(AIModel):
    min: float
    max: float
    average: float
    predicted_quantity: Optional[float] = None
    predicted_commission: Optional[float] = None


class AIProductMatch(AIModel):
    product_id: str
    match_score: float
    score_breakdown: AIScoreBreakdown
    predicted_revenue: AIRevenueRange
    reasoning: str


class ProductMatchAIResponse(AIModel):
    matches: List[AIProductMatch]


class AICreatorMatch(AIModel):
    creator_id: str
    match_score: float
    score_breakdown: AIScoreBreakdown
    predicted_revenue: AIRevenueRange
    reasoning: str


class CreatorMatchAIResponse(AIModel):
    matches: List[AICreatorMatch]
