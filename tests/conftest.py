import asyncio
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.ai.base_provider import AIProvider
from app.analyzer.cache import analysis_cache
from app.analyzer.preprocess import preprocess_creator_data
from app.api.dependencies import get_ai_provider, get_repository
from app.main import app
from app.models.catalog_models import Creator, Product, Sale
from app.repositories.memory_repository import InMemoryCatalogRepository


def ts(year, month, day):
    return datetime(year, month, day, 12, 0, tzinfo=timezone.utc)


def make_creator(creator_id, name, platform, followers, engagement, categories, joined):
    return Creator(
        id=creator_id,
        name=name,
        platform=platform,
        followers=followers,
        engagement_rate=engagement,
        categories=categories,
        email=f"{creator_id}@example.com",
        joined_at=joined,
    )


def make_product(product_id, name, brand, category, price, description=""):
    return Product(
        id=product_id,
        name=name,
        brand=brand,
        category=category,
        price=price,
        original_price=int(price * 1.2),
        description=description,
        avg_commission_rate=0.15,
    )


def make_sale(n, creator_id, product_id, price, quantity, sold_at):
    revenue = price * quantity
    return Sale(
        id=f"sale-{n:05d}",
        creator_id=creator_id,
        product_id=product_id,
        price=price,
        quantity=quantity,
        revenue=revenue,
        commission=int(revenue * 0.1),
        commission_rate=0.1,
        click_count=100,
        conversion_rate=float(quantity),
        sold_at=sold_at,
    )


# ── Small handcrafted catalogue ──
#
# creator-001  7 sales  Beauty 255,000 / Fashion 258,000 (Fashion tops revenue, Beauty tops units)
# creator-002  4 sales  below the analysis minimum
# creator-003  6 sales  Beauty 195,000 / Lifestyle 168,000
# creator-004  no sales


@pytest.fixture
def creators():
    return [
        make_creator("creator-001", "김지은", "Instagram", 250000, 4.2, ["Beauty", "Fashion"], ts(2025, 1, 15)),
        make_creator("creator-002", "박준호", "YouTube", 580000, 3.1, ["Tech"], ts(2024, 11, 20)),
        make_creator("creator-003", "송하늘", "TikTok", 34000, 5.3, ["Beauty", "Lifestyle"], ts(2024, 9, 25)),
        make_creator("creator-004", "안지훈", "Blog", 12000, 7.0, ["Food"], ts(2025, 4, 12)),
    ]


@pytest.fixture
def products():
    return [
        make_product("product-001", "글로우 세럼", "GlowCo", "Beauty", 45000, "Vitamin C serum"),
        make_product("product-002", "벨벳 립 틴트", "ColorPop", "Beauty", 15000, "Velvet lip tint"),
        make_product("product-003", "오버핏 트렌치코트", "UrbanMood", "Fashion", 129000, "Oversized trench coat"),
        make_product("product-004", "무선 이어버드", "SoundCore", "Tech", 89000, "ANC wireless earbuds"),
        make_product("product-005", "텀블러 500ml", "EcoCup", "Lifestyle", 28000, "Stainless tumbler"),
        make_product("product-006", "저당 그래놀라", "GoodMorning", "Food", 18000, "Low-sugar granola"),
        make_product("product-007", "쿠션 파운데이션", "SkinFit", "Beauty", 32000, "Semi-matte cushion"),
    ]


@pytest.fixture
def sales():
    return [
        # creator-001
        make_sale(1, "creator-001", "product-001", 45000, 2, ts(2025, 3, 10)),
        make_sale(2, "creator-001", "product-001", 45000, 1, ts(2025, 4, 12)),
        make_sale(3, "creator-001", "product-002", 15000, 3, ts(2025, 6, 5)),
        make_sale(4, "creator-001", "product-003", 129000, 1, ts(2025, 9, 20)),
        make_sale(5, "creator-001", "product-002", 15000, 2, ts(2025, 12, 1)),
        make_sale(6, "creator-001", "product-001", 45000, 1, ts(2026, 1, 15)),
        make_sale(7, "creator-001", "product-003", 129000, 1, ts(2025, 10, 3)),
        # creator-002
        make_sale(8, "creator-002", "product-004", 89000, 1, ts(2025, 9, 1)),
        make_sale(9, "creator-002", "product-004", 89000, 1, ts(2025, 10, 1)),
        make_sale(10, "creator-002", "product-004", 89000, 1, ts(2025, 11, 1)),
        make_sale(11, "creator-002", "product-004", 89000, 1, ts(2025, 12, 1)),
        # creator-003
        make_sale(12, "creator-003", "product-005", 28000, 2, ts(2025, 5, 2)),
        make_sale(13, "creator-003", "product-005", 28000, 1, ts(2025, 7, 7)),
        make_sale(14, "creator-003", "product-001", 45000, 1, ts(2025, 8, 8)),
        make_sale(15, "creator-003", "product-002", 15000, 4, ts(2026, 2, 2)),
        make_sale(16, "creator-003", "product-005", 28000, 3, ts(2025, 11, 11)),
        make_sale(17, "creator-003", "product-001", 45000, 2, ts(2025, 3, 3)),
    ]


@pytest.fixture
def repo(creators, products, sales):
    return InMemoryCatalogRepository(creators, products, sales)


@pytest.fixture
def preprocessed(repo):
    """Preprocess a creator from the fixture catalogue by id."""

    def _preprocess(creator_id):
        creator = repo.get_creator(creator_id)
        return creator, preprocess_creator_data(
            creator, repo.get_sales_by_creator(creator_id), repo.get_product
        )

    return _preprocess


# ── Fake AI providers ──


class FakeProvider(AIProvider):
    """Scripted provider: raises queued errors first, then returns ``reply``."""

    name = "fake"

    def __init__(self, reply="", errors=None, delay=0.0):
        self.reply = reply
        self.errors = list(errors or [])
        self.delay = delay
        self.calls = 0
        self.prompts = []

    def is_available(self) -> bool:
        return True

    async def complete_json(self, system_prompt, user_prompt, temperature=0.3, max_tokens=2000):
        self.calls += 1
        self.prompts.append(user_prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.errors:
            raise self.errors.pop(0)
        return self.reply


@pytest.fixture(autouse=True)
def clear_analysis_cache():
    analysis_cache.clear()
    yield
    analysis_cache.clear()


@pytest.fixture
def client_factory(repo):
    def _factory(provider=None, repository=None):
        app.dependency_overrides[get_repository] = lambda: repository or repo
        app.dependency_overrides[get_ai_provider] = lambda: provider
        return TestClient(app)

    yield _factory
    app.dependency_overrides.clear()


@pytest.fixture
def client(client_factory):
    return client_factory()
