"""SellScope — Catalogue Tables (database backend).

Mirror of the reference entities in ``catalog_models``. List-valued fields
are stored as JSON columns so the row maps 1:1 onto the domain model.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import JSON, Column
from sqlmodel import SQLModel, Field


class CreatorRecord(SQLModel, table=True):
    __tablename__ = "creators"

    id: str = Field(primary_key=True, description="creator-NNN")
    name: str
    profile_image: str = ""
    platform: str = Field(index=True)
    followers: int
    engagement_rate: float
    categories: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    email: Optional[str] = None
    joined_at: datetime
    total_sales: int = 0
    total_revenue: int = 0


class ProductRecord(SQLModel, table=True):
    __tablename__ = "products"

    id: str = Field(primary_key=True, description="product-NNN")
    name: str
    brand: str
    category: str = Field(index=True)
    subcategory: str = ""
    price: int
    original_price: int
    description: str = ""
    image_url: str = ""
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    target_audience: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    seasonality: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    avg_commission_rate: float


class SaleRecord(SQLModel, table=True):
    """Immutable sale fact."""

    __tablename__ = "sales"

    id: str = Field(primary_key=True, description="sale-NNNNN")
    creator_id: str = Field(index=True, foreign_key="creators.id")
    product_id: str = Field(index=True)
    product_name: str = ""
    price: int
    quantity: int
    revenue: int
    commission: int
    commission_rate: float = 0.0
    click_count: int = 0
    conversion_rate: float
    sold_at: datetime = Field(index=True)
    platform: str = ""
