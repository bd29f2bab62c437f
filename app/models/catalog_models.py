"""SellScope — Catalogue Models (Read-only Reference Data)."""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from app.core.category_registry import Category, Platform


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ─────────────────────────────────────────────
# REFERENCE ENTITIES
# ─────────────────────────────────────────────


class Creator(CamelModel):
    """A social-commerce creator."""

    id: str
    name: str
    profile_image: str = ""
    platform: Platform
    followers: int
    engagement_rate: float = Field(description="Percent, e.g. 4.2")
    categories: List[Category] = Field(description="Category affinities")
    email: Optional[str] = None
    joined_at: datetime
    total_sales: int = 0
    total_revenue: int = 0


class Product(CamelModel):
    """A product available for creators to sell."""

    id: str
    name: str
    brand: str
    category: Category
    subcategory: str = ""
    price: int
    original_price: int
    description: str = ""
    image_url: str = ""
    tags: List[str] = []
    target_audience: List[str] = []
    seasonality: List[str] = []
    avg_commission_rate: float


class Sale(CamelModel):
    """A historical creator × product transaction. Never modified."""

    id: str
    creator_id: str
    product_id: str
    product_name: str = ""
    price: int
    quantity: int
    revenue: int
    commission: int
    commission_rate: float = 0.0
    click_count: int = 0
    conversion_rate: float = Field(description="Percent of clicks that converted")
    sold_at: datetime
    platform: str = ""


# ─────────────────────────────────────────────
# COMPUTED STATS
# ─────────────────────────────────────────────


class TopProductRef(CamelModel):
    id: str
    name: str
    sales_count: int


class CreatorStats(CamelModel):
    """Lifetime sales statistics for one creator."""

    total_sales: int = 0
    total_revenue: int = 0
    total_commission: int = 0
    average_conversion_rate: float = 0.0
    top_category: Optional[Category] = None
    top_product: Optional[TopProductRef] = None


class CreatorWithStats(Creator):
    stats: CreatorStats = CreatorStats()


class ProductSalesStats(CamelModel):
    """Sales statistics for one product."""

    total_quantity: int = 0
    total_revenue: int = 0
    total_commission: int = 0
    creator_count: int = 0
    average_conversion_rate: float = 0.0


class ProductWithStats(Product):
    stats: ProductSalesStats = ProductSalesStats()


class CatalogStats(CamelModel):
    """Catalogue-wide product statistics."""

    total_products: int = 0
    avg_price: float = 0.0
    most_popular_category: Optional[Category] = None
    avg_commission_rate: float = 0.0
