"""SellScope — Analysis Output Models."""

from typing import Optional, List
from pydantic import Field

from app.core.category_registry import Category
from app.models.catalog_models import CamelModel, Creator, Product


# ─────────────────────────────────────────────
# PREPROCESSED SUMMARY — derived per request, never stored
# ─────────────────────────────────────────────


class CreatorSnapshot(CamelModel):
    id: str
    name: str
    platform: str
    followers: int
    engagement_rate: float
    categories: List[Category] = []


class SalesSummary(CamelModel):
    total_sales: int = 0  # sale records
    total_quantity: int = 0  # units
    total_revenue: int = 0
    average_order_value: float = 0.0
    average_conversion_rate: float = 0.0
    unattributed_revenue: int = 0  # sales whose product could not be resolved


class CategoryShare(CamelModel):
    category: Category
    revenue: int
    sales_count: int
    quantity: int
    average_price: float
    revenue_share: float


class PriceBucket(CamelModel):
    price_range: str  # "30000-40000"
    lower_bound: int
    sales_count: int
    revenue: int


class SeasonalBucket(CamelModel):
    season: str
    sales_count: int
    revenue: int


class TopProduct(CamelModel):
    product_id: str
    name: str
    category: Optional[Category] = None
    price: int
    quantity: int
    revenue: int


class PreprocessedData(CamelModel):
    """Aggregated view of one creator's sales history."""

    creator: CreatorSnapshot
    summary: SalesSummary
    category_breakdown: List[CategoryShare] = []
    price_distribution: List[PriceBucket] = []
    seasonal_pattern: List[SeasonalBucket] = []
    top_products: List[TopProduct] = []

    @property
    def top_category(self) -> Optional[Category]:
        return self.category_breakdown[0].category if self.category_breakdown else None


# ─────────────────────────────────────────────
# CREATOR INSIGHT
# ─────────────────────────────────────────────


class CategoryPercentage(CamelModel):
    category: str
    percentage: float


class PriceRange(CamelModel):
    min: float
    max: float
    average: float


class SeasonalTrend(CamelModel):
    season: str
    sales_count: int
    revenue: float


class CreatorInsight(CamelModel):
    """Narrative insight for a creator — from the AI provider or the fallback."""

    id: str
    creator_id: str
    analyzed_at: str
    summary: str
    strengths: List[str] = []
    top_categories: List[CategoryPercentage] = []
    price_range: PriceRange
    seasonal_trends: List[SeasonalTrend] = []
    recommendations: List[str] = []
    confidence: float = Field(ge=0, le=1)
    source: str = "ai"  # "ai" | "fallback"


# ─────────────────────────────────────────────
# MATCH RESULTS
# ─────────────────────────────────────────────


class MatchBreakdown(CamelModel):
    """Sub-scores, each normalized to [0, 100]."""

    category_fit: int
    price_fit: int
    season_fit: int
    audience_fit: int


class RevenuePrediction(CamelModel):
    """Predicted revenue band. Invariant: minimum <= expected <= maximum."""

    minimum: int
    expected: int
    maximum: int
    predicted_quantity: int
    predicted_commission: int
    basis: str = ""


class ProductMatch(CamelModel):
    product: Product
    match_score: int = Field(ge=0, le=100)
    match_breakdown: MatchBreakdown
    predicted_revenue: RevenuePrediction
    reasoning: str
    confidence: int = Field(ge=0, le=100)
    source: str = "ai"


class CreatorMatch(CamelModel):
    creator: Creator
    match_score: int = Field(ge=0, le=100)
    match_breakdown: MatchBreakdown
    predicted_revenue: RevenuePrediction
    reasoning: str
    confidence: int = Field(ge=0, le=100)
    source: str = "ai"
