import json

import pytest

from app.analyzer.ai_matching import (
    build_creator_match_prompt,
    build_product_match_prompt,
    generate_ai_creator_matches,
    generate_ai_product_matches,
    map_product_matches,
    normalize_revenue,
)
from app.models.ai_schemas import AIRevenueRange, ProductMatchAIResponse

from conftest import FakeProvider

BREAKDOWN = {"categoryFit": 90, "priceFit": 80, "seasonFit": 70, "audienceFit": 60}


def ai_match(key, ident, score, low=100000, mid=200000, high=300000, **revenue):
    return {
        key: ident,
        "matchScore": score,
        "scoreBreakdown": BREAKDOWN,
        "predictedRevenue": {"min": low, "max": high, "average": mid, **revenue},
        "reasoning": "테스트",
    }


def test_normalize_revenue_orders_triplet(products):
    band = normalize_revenue(AIRevenueRange(min=300000, max=100000, average=200000), products[0])

    assert (band.minimum, band.expected, band.maximum) == (100000, 200000, 300000)
    # missing quantity/commission derived from the product
    assert band.predicted_quantity == 4
    assert band.predicted_commission == 30000


def test_normalize_revenue_keeps_reported_quantity(products):
    band = normalize_revenue(
        AIRevenueRange(min=1, max=3, average=2, predicted_quantity=7.4, predicted_commission=-5),
        products[0],
    )

    assert band.predicted_quantity == 7
    assert band.predicted_commission == 0


def test_map_product_matches_sanitizes_output(products):
    response = ProductMatchAIResponse.model_validate(
        {
            "matches": [
                ai_match("productId", "product-002", 71),
                ai_match("productId", "product-999", 99),
                ai_match("productId", "product-001", 140),
                ai_match("productId", "product-001", 80),
                ai_match("productId", "product-003", -3),
            ]
        }
    )

    matches = map_product_matches(response, products, limit=10)

    assert [m.product.id for m in matches] == ["product-001", "product-002", "product-003"]
    assert [m.match_score for m in matches] == [100, 71, 0]
    assert all(m.confidence == m.match_score for m in matches)
    assert all(m.source == "ai" for m in matches)


def test_map_product_matches_truncates(products):
    response = ProductMatchAIResponse.model_validate(
        {"matches": [ai_match("productId", p.id, 70 + i) for i, p in enumerate(products)]}
    )

    matches = map_product_matches(response, products, limit=3)

    assert [m.match_score for m in matches] == [76, 75, 74]


def test_prompts_list_candidates(preprocessed, products):
    creator, data = preprocessed("creator-001")

    product_prompt = build_product_match_prompt(data, products, limit=5)
    creator_prompt = build_creator_match_prompt(products[0], [(creator, data)], limit=5)

    assert "product-007" in product_prompt
    assert "at most 5" in product_prompt
    assert "creator-001" in creator_prompt
    assert "GlowCo" in creator_prompt


@pytest.mark.asyncio
async def test_generate_ai_product_matches(preprocessed, products):
    creator, data = preprocessed("creator-001")
    reply = {"matches": [ai_match("productId", "product-003", 88), ai_match("productId", "product-001", 92)]}
    provider = FakeProvider(reply=json.dumps(reply))

    matches = await generate_ai_product_matches(provider, data, products, limit=10)

    assert [m.product.id for m in matches] == ["product-001", "product-003"]
    assert matches[0].match_breakdown.category_fit == 90


@pytest.mark.asyncio
async def test_generate_ai_creator_matches(preprocessed, products):
    candidates = [preprocessed("creator-001"), preprocessed("creator-003")]
    reply = {
        "matches": [
            ai_match("creatorId", "creator-001", 75),
            ai_match("creatorId", "creator-004", 95),
            ai_match("creatorId", "creator-003", 85, low=500000, mid=100000, high=200000),
        ]
    }
    provider = FakeProvider(reply=json.dumps(reply))

    matches = await generate_ai_creator_matches(provider, products[0], candidates, limit=10)

    # creator-004 was not offered as a candidate
    assert [m.creator.id for m in matches] == ["creator-003", "creator-001"]
    band = matches[0].predicted_revenue
    assert band.minimum <= band.expected <= band.maximum
