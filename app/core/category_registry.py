"""SellScope — Category, Platform & Season Registry.

Defines the closed vocabularies the catalogue is built on and the
per-category commerce parameters used when generating reference sales.
Adding a category means registering it here so every engine treats it
uniformly.
"""

from enum import Enum
from typing import Dict, Tuple


class Label(str, Enum):
    """String enum that formats as its wire value."""

    def __str__(self) -> str:
        return self.value


class Platform(Label):
    """Social platform a creator publishes on."""

    INSTAGRAM = "Instagram"
    YOUTUBE = "YouTube"
    TIKTOK = "TikTok"
    BLOG = "Blog"


class Category(Label):
    """Product category / creator affinity label."""

    BEAUTY = "Beauty"
    FASHION = "Fashion"
    LIFESTYLE = "Lifestyle"
    FOOD = "Food"
    TECH = "Tech"
    HOME_LIVING = "HomeLiving"
    HEALTH = "Health"
    BABY_KIDS = "BabyKids"
    PET = "Pet"
    STATIONERY = "Stationery"


class Season(Label):
    """Calendar season used for seasonal sales patterns."""

    SPRING = "Spring"
    SUMMER = "Summer"
    FALL = "Fall"
    WINTER = "Winter"


SEASON_ORDER = [Season.SPRING, Season.SUMMER, Season.FALL, Season.WINTER]


class CategoryProfile:
    """Commerce parameters for a single category."""

    def __init__(
        self,
        category: Category,
        conversion_range: Tuple[float, float],
        commission_rate: float,
    ):
        self.category = category
        self.conversion_range = conversion_range
        self.commission_rate = commission_rate

    def __repr__(self) -> str:
        return f"<Category {self.category.value} ({self.commission_rate:.0%})>"


# ─────────────────────────────────────────────
# CATEGORY PROFILES — conversion % range, commission rate
# ─────────────────────────────────────────────

CATEGORY_PROFILES: Dict[Category, CategoryProfile] = {
    Category.BEAUTY: CategoryProfile(Category.BEAUTY, (3.0, 5.0), 0.15),
    Category.FASHION: CategoryProfile(Category.FASHION, (2.0, 4.0), 0.12),
    Category.LIFESTYLE: CategoryProfile(Category.LIFESTYLE, (2.5, 4.5), 0.13),
    Category.FOOD: CategoryProfile(Category.FOOD, (4.0, 6.0), 0.18),
    Category.TECH: CategoryProfile(Category.TECH, (1.0, 3.0), 0.10),
    Category.HOME_LIVING: CategoryProfile(Category.HOME_LIVING, (2.0, 3.5), 0.14),
    Category.HEALTH: CategoryProfile(Category.HEALTH, (2.5, 4.0), 0.16),
    Category.BABY_KIDS: CategoryProfile(Category.BABY_KIDS, (3.0, 5.0), 0.17),
    Category.PET: CategoryProfile(Category.PET, (3.5, 5.5), 0.15),
    Category.STATIONERY: CategoryProfile(Category.STATIONERY, (2.0, 3.5), 0.12),
}


# ─────────────────────────────────────────────
# SEASONAL DEMAND — multiplier per (season, category), default 1.0
# ─────────────────────────────────────────────

SEASONAL_WEIGHTS: Dict[Season, Dict[Category, float]] = {
    Season.SPRING: {
        Category.BEAUTY: 1.3,
        Category.FASHION: 1.2,
        Category.LIFESTYLE: 1.0,
        Category.FOOD: 0.9,
    },
    Season.SUMMER: {
        Category.LIFESTYLE: 1.3,
        Category.FOOD: 1.2,
        Category.HEALTH: 1.1,
        Category.PET: 1.1,
    },
    Season.FALL: {
        Category.HOME_LIVING: 1.3,
        Category.HEALTH: 1.2,
        Category.FASHION: 1.1,
        Category.STATIONERY: 1.1,
    },
    Season.WINTER: {
        Category.TECH: 1.3,
        Category.BABY_KIDS: 1.2,
        Category.PET: 1.1,
        Category.HOME_LIVING: 1.1,
    },
}


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────


def season_from_month(month: int) -> Season:
    """Map a calendar month (1-12) to its season."""
    if 3 <= month <= 5:
        return Season.SPRING
    if 6 <= month <= 8:
        return Season.SUMMER
    if 9 <= month <= 11:
        return Season.FALL
    return Season.WINTER


def get_profile(category: str) -> CategoryProfile | None:
    """Look up a category profile by label."""
    try:
        return CATEGORY_PROFILES[Category(category)]
    except ValueError:
        return None


def seasonal_weight(season: Season, category: str) -> float:
    """Demand multiplier for a category in a season."""
    try:
        return SEASONAL_WEIGHTS[season].get(Category(category), 1.0)
    except ValueError:
        return 1.0
