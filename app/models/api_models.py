"""SellScope — Request / Response Envelope Models."""

from enum import Enum
from pydantic import Field

from app.config import settings
from app.models.catalog_models import CamelModel

CREATOR_ID_PATTERN = r"^creator-\d{3}$"
PRODUCT_ID_PATTERN = r"^product-\d{3}$"


# ── Request Bodies ──


class AnalyzeRequest(CamelModel):
    """Request body for POST /analyze."""

    creator_id: str = Field(pattern=CREATOR_ID_PATTERN)

    model_config = {
        "json_schema_extra": {"examples": [{"creatorId": "creator-001"}]},
    }


class MatchProductsRequest(CamelModel):
    """Request body for POST /match."""

    creator_id: str = Field(pattern=CREATOR_ID_PATTERN)
    limit: int = Field(default=settings.default_match_limit, ge=1, le=settings.max_match_limit)

    model_config = {
        "json_schema_extra": {"examples": [{"creatorId": "creator-001", "limit": 5}]},
    }


class MatchCreatorsRequest(CamelModel):
    """Request body for POST /match/creators."""

    product_id: str = Field(pattern=PRODUCT_ID_PATTERN)
    limit: int = Field(default=settings.default_match_limit, ge=1, le=settings.max_match_limit)

    model_config = {
        "json_schema_extra": {"examples": [{"productId": "product-001", "limit": 5}]},
    }


# ── Listing Query Enums ──


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CreatorSortKey(str, Enum):
    NAME = "name"
    FOLLOWERS = "followers"
    ENGAGEMENT = "engagement"
    CREATED_AT = "createdAt"


class ProductSortKey(str, Enum):
    NAME = "name"
    PRICE = "price"
    CATEGORY = "category"


# ── Envelopes ──


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
