import pytest


def ids(response):
    return [item["id"] for item in response.json()["data"]]


# ── GET /creators ──


def test_list_creators_default(client):
    response = client.get("/creators")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert ids(response) == ["creator-001", "creator-002", "creator-003", "creator-004"]
    assert body["pagination"] == {
        "page": 1,
        "limit": 20,
        "total": 4,
        "totalPages": 1,
        "hasNext": False,
        "hasPrev": False,
    }
    assert body["data"][0]["engagementRate"] == 4.2


def test_list_creators_pagination(client):
    body = client.get("/creators", params={"page": 2, "limit": 3}).json()

    assert [c["id"] for c in body["data"]] == ["creator-004"]
    assert body["pagination"]["totalPages"] == 2
    assert body["pagination"]["hasNext"] is False
    assert body["pagination"]["hasPrev"] is True


def test_list_creators_page_past_end(client):
    body = client.get("/creators", params={"page": 9}).json()

    assert body["data"] == []
    assert body["pagination"]["total"] == 4


@pytest.mark.parametrize(
    "params, expected",
    [
        ({"platform": "instagram"}, ["creator-001"]),
        ({"platform": "TIKTOK"}, ["creator-003"]),
        ({"category": "beauty"}, ["creator-001", "creator-003"]),
        ({"search": "지"}, ["creator-001", "creator-004"]),
        ({"search": "CREATOR-002@"}, ["creator-002"]),
        ({"platform": "Instagram", "category": "Tech"}, []),
    ],
)
def test_list_creators_filters(client, params, expected):
    assert ids(client.get("/creators", params=params)) == expected


def test_list_creators_sorting(client):
    by_followers = client.get("/creators", params={"sort": "followers", "order": "desc"}).json()["data"]
    followers = [c["followers"] for c in by_followers]

    assert followers == sorted(followers, reverse=True)
    assert by_followers[0]["id"] == "creator-002"
    assert ids(client.get("/creators", params={"sort": "createdAt"}))[0] == "creator-003"


@pytest.mark.parametrize(
    "params",
    [{"page": 0}, {"limit": 0}, {"limit": 101}, {"sort": "revenue"}, {"order": "up"}],
)
def test_list_creators_rejects_bad_query(client, params):
    response = client.get("/creators", params=params)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"


def test_get_creator_with_stats(client):
    response = client.get("/creators/creator-001")

    assert response.status_code == 200
    creator = response.json()["data"]
    assert creator["name"] == "김지은"
    assert creator["stats"]["totalSales"] == 11
    assert creator["stats"]["totalRevenue"] == 513000
    assert creator["stats"]["topCategory"] == "Beauty"
    assert creator["stats"]["topProduct"] == {"id": "product-002", "name": "벨벳 립 틴트", "salesCount": 5}


def test_get_creator_without_sales(client):
    stats = client.get("/creators/creator-004").json()["data"]["stats"]

    assert stats["totalSales"] == 0
    assert stats["topProduct"] is None


def test_get_creator_not_found(client):
    response = client.get("/creators/creator-999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


# ── GET /products ──


def test_list_products_default(client):
    body = client.get("/products").json()

    assert body["pagination"]["total"] == 7
    assert body["data"][0]["avgCommissionRate"] == 0.15


def test_list_products_price_window(client):
    response = client.get(
        "/products", params={"category": "Beauty", "minPrice": 30000, "maxPrice": 80000}
    )

    assert ids(response) == ["product-001", "product-007"]


def test_list_products_category_is_exact(client):
    assert ids(client.get("/products", params={"category": "beauty"})) == []


def test_list_products_search(client):
    assert ids(client.get("/products", params={"search": "glow"})) == ["product-001"]
    assert ids(client.get("/products", params={"search": "TRENCH"})) == ["product-003"]


def test_list_products_sorted_by_price(client):
    data = client.get("/products", params={"sort": "price", "order": "desc"}).json()["data"]
    prices = [p["price"] for p in data]

    assert prices == sorted(prices, reverse=True)
    assert data[0]["id"] == "product-003"


@pytest.mark.parametrize("params", [{"minPrice": -1}, {"maxPrice": "cheap"}, {"sort": "brand"}])
def test_list_products_rejects_bad_query(client, params):
    response = client.get("/products", params=params)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_REQUEST"


def test_products_stats(client):
    response = client.get("/products/stats")

    assert response.status_code == 200
    assert response.json()["data"] == {
        "totalProducts": 7,
        "avgPrice": 50857.14,
        "mostPopularCategory": "Beauty",
        "avgCommissionRate": 0.15,
    }


def test_get_product_with_stats(client):
    product = client.get("/products/product-001").json()["data"]

    assert product["brand"] == "GlowCo"
    assert product["stats"]["totalQuantity"] == 7
    assert product["stats"]["totalRevenue"] == 315000
    assert product["stats"]["creatorCount"] == 2


def test_get_product_not_found(client):
    response = client.get("/products/product-999")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


# ── GET /health ──


def test_health(client):
    body = client.get("/health").json()

    assert body["success"] is True
    assert body["data"]["status"] == "healthy"
    assert body["data"]["service"] == "sellscope"
