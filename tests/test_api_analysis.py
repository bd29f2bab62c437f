import json

import pytest

from app.config import settings
from app.core.errors import AIAnalysisError
from app.repositories.memory_repository import InMemoryCatalogRepository

from conftest import FakeProvider
from test_insight_engine import AI_INSIGHT


class BrokenRepository(InMemoryCatalogRepository):
    def get_sales_by_creator(self, creator_id):
        raise RuntimeError("connection reset by peer at 10.0.0.3")


def assert_error(response, status, code):
    assert response.status_code == status
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == code
    return body["error"]


# ── POST /analyze ──


def test_analyze_fallback(client):
    response = client.post("/analyze", json={"creatorId": "creator-001"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    insight = body["data"]
    assert insight["creatorId"] == "creator-001"
    assert insight["source"] == "fallback"
    assert insight["confidence"] == 0.75
    assert insight["topCategories"][0]["category"] == "Fashion"
    assert {"priceRange", "seasonalTrends", "recommendations", "analyzedAt"} <= insight.keys()


def test_analyze_insufficient_history(client):
    error = assert_error(client.post("/analyze", json={"creatorId": "creator-002"}), 400, "INSUFFICIENT_DATA")
    assert "creator-002" in error["message"]


def test_analyze_unknown_creator(client):
    assert_error(client.post("/analyze", json={"creatorId": "creator-999"}), 404, "NOT_FOUND")


@pytest.mark.parametrize("body", [{}, {"creatorId": "jieun"}, {"creatorId": 1}])
def test_analyze_invalid_body(client, body):
    error = assert_error(client.post("/analyze", json=body), 400, "INVALID_REQUEST")
    assert error["details"]


def test_analyze_ai_failure_falls_back(client_factory):
    provider = FakeProvider(errors=[AIAnalysisError("bad key", "AI_INVALID_KEY")])
    client = client_factory(provider=provider)

    response = client.post("/analyze", json={"creatorId": "creator-001"})

    assert response.status_code == 200
    assert response.json()["data"]["source"] == "fallback"
    assert provider.calls == 1


def test_analyze_ai_success_is_cached(client_factory):
    provider = FakeProvider(reply=json.dumps(AI_INSIGHT, ensure_ascii=False))
    client = client_factory(provider=provider)

    first = client.post("/analyze", json={"creatorId": "creator-001"}).json()["data"]
    second = client.post("/analyze", json={"creatorId": "creator-001"}).json()["data"]

    assert first["source"] == "ai"
    assert first["summary"] == AI_INSIGHT["summary"]
    assert second["id"] == first["id"]
    assert provider.calls == 1


def test_analyze_fallback_is_not_cached(client_factory):
    provider = FakeProvider(reply="not json")
    client = client_factory(provider=provider)

    client.post("/analyze", json={"creatorId": "creator-001"})
    client.post("/analyze", json={"creatorId": "creator-001"})

    assert provider.calls == 2


def test_analyze_non_finite_ai_numbers_fall_back_uncached(client_factory):
    reply = json.dumps(AI_INSIGHT, ensure_ascii=False).replace("73285.71", "NaN")
    provider = FakeProvider(reply=reply)
    client = client_factory(provider=provider)

    first = client.post("/analyze", json={"creatorId": "creator-001"})
    second = client.post("/analyze", json={"creatorId": "creator-001"})

    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["data"]["source"] == "fallback"
    assert second.json()["data"]["source"] == "fallback"
    assert provider.calls == 2


def test_analyze_ai_timeout_falls_back(client_factory, monkeypatch):
    monkeypatch.setattr(settings, "ai_timeout_seconds", 0.05)
    monkeypatch.setattr(settings, "ai_max_retries", 0)
    provider = FakeProvider(reply=json.dumps(AI_INSIGHT), delay=1.0)
    client = client_factory(provider=provider)

    response = client.post("/analyze", json={"creatorId": "creator-001"})

    assert response.status_code == 200
    assert response.json()["data"]["source"] == "fallback"


def test_analyze_internal_error_hides_detail(client_factory, creators, products, sales):
    client = client_factory(repository=BrokenRepository(creators, products, sales))

    error = assert_error(client.post("/analyze", json={"creatorId": "creator-001"}), 500, "INTERNAL_ERROR")
    assert "10.0.0.3" not in error["message"]
    assert "details" not in error


# ── POST /match ──


def test_match_products_fallback(client):
    response = client.post("/match", json={"creatorId": "creator-001", "limit": 3})

    assert response.status_code == 200
    matches = response.json()["data"]
    assert len(matches) == 3
    assert matches[0]["product"]["id"] == "product-003"
    assert matches[0]["matchScore"] == 76
    scores = [m["matchScore"] for m in matches]
    assert scores == sorted(scores, reverse=True)
    for m in matches:
        band = m["predictedRevenue"]
        assert band["minimum"] <= band["expected"] <= band["maximum"]
        assert set(m["matchBreakdown"]) == {"categoryFit", "priceFit", "seasonFit", "audienceFit"}


def test_match_default_limit(client):
    response = client.post("/match", json={"creatorId": "creator-001"})

    # only four products share creator-001's categories
    assert len(response.json()["data"]) == 4


@pytest.mark.parametrize("limit", [0, 51, -1])
def test_match_limit_bounds(client, limit):
    assert_error(client.post("/match", json={"creatorId": "creator-001", "limit": limit}), 400, "INVALID_REQUEST")


def test_match_insufficient_history(client):
    assert_error(client.post("/match", json={"creatorId": "creator-004"}), 400, "INSUFFICIENT_DATA")


def test_match_ai_unknown_products_dropped(client_factory):
    reply = {
        "matches": [
            {
                "productId": pid,
                "matchScore": score,
                "scoreBreakdown": {"categoryFit": 90, "priceFit": 80, "seasonFit": 80, "audienceFit": 80},
                "predictedRevenue": {"min": 100, "max": 300, "average": 200},
                "reasoning": "좋은 매칭",
            }
            for pid, score in [("product-777", 99), ("product-001", 88)]
        ]
    }
    provider = FakeProvider(reply=json.dumps(reply, ensure_ascii=False))
    client = client_factory(provider=provider)

    matches = client.post("/match", json={"creatorId": "creator-001", "limit": 5}).json()["data"]

    assert [m["product"]["id"] for m in matches] == ["product-001"]
    assert matches[0]["source"] == "ai"
    assert matches[0]["confidence"] == 88


# ── POST /match/creators ──


def test_match_creators_fallback(client):
    response = client.post("/match/creators", json={"productId": "product-001"})

    assert response.status_code == 200
    matches = response.json()["data"]
    assert [m["creator"]["id"] for m in matches] == ["creator-003", "creator-001"]
    assert matches[0]["matchScore"] == 84


def test_match_creators_without_sales_history_is_allowed(client):
    response = client.post("/match/creators", json={"productId": "product-007"})

    assert response.status_code == 200
    assert len(response.json()["data"]) == 2


def test_match_creators_no_candidates(client):
    response = client.post("/match/creators", json={"productId": "product-006"})

    assert response.status_code == 200
    assert response.json()["data"] == []


def test_match_creators_unknown_product(client):
    assert_error(client.post("/match/creators", json={"productId": "product-999"}), 404, "NOT_FOUND")
    assert_error(client.post("/match/creators", json={"productId": "creator-001"}), 400, "INVALID_REQUEST")


# ── Routing ──


def test_unknown_route(client):
    assert_error(client.get("/nope"), 404, "NOT_FOUND")


def test_wrong_method(client):
    assert_error(client.get("/analyze"), 405, "INVALID_REQUEST")
