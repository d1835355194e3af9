# tests/test_routes/test_api_routes.py
from app.core.enums import RiskLevel


def _first_product(test_client):
    return test_client.get("/api/products").json()[0]


def test_list_products_uses_camel_case(test_client):
    response = test_client.get("/api/products")

    assert response.status_code == 200
    products = response.json()
    assert len(products) == 120
    first = products[0]
    assert first["id"] == "prod_000000"
    for key in ("currentStock", "reorderPoint", "maxStock", "avgDailySales", "last7DaySales",
                "last30DaySales", "daysOfStockLeft", "lastUpdated", "reviewCount", "version"):
        assert key in first
    assert len(first["last7DaySales"]) == 7


def test_get_product(test_client):
    response = test_client.get("/api/products/prod_000005")

    assert response.status_code == 200
    assert response.json()["id"] == "prod_000005"


def test_get_unknown_product_is_404_without_side_effects(test_client, seeded_inventory):
    before = [(p.current_stock, p.version) for p in seeded_inventory.catalog.list_products()]

    response = test_client.get("/api/products/prod_999999")

    assert response.status_code == 404
    assert response.json() == {"message": "Product not found"}
    assert [(p.current_stock, p.version) for p in seeded_inventory.catalog.list_products()] == before


def test_stats_and_sales(test_client):
    stats = test_client.get("/api/stats").json()
    assert stats["totalProducts"] == 120
    assert stats["totalConflicts"] == 0
    assert set(stats) == {
        "totalProducts", "totalValue", "lowStockCount", "outOfStockCount",
        "avgDaysOfStock", "totalConflicts", "resolvedConflicts", "salesVelocity",
    }

    sales = test_client.get("/api/sales").json()
    assert len(sales) == 30
    assert set(sales[0]) == {"date", "sales", "revenue", "orders"}


def test_stock_update_with_current_version(test_client):
    product = _first_product(test_client)

    response = test_client.post("/api/stock-update", json={
        "productId": product["id"],
        "vendorId": "vendor_a",
        "newStock": 0,
        "version": product["version"],
    })

    assert response.status_code == 200
    assert response.json() == {"success": True, "conflict": False}
    updated = test_client.get(f"/api/products/{product['id']}").json()
    assert updated["currentStock"] == 0
    assert updated["status"] == "Out of Stock"
    assert updated["daysOfStockLeft"] == 0
    assert updated["version"] == product["version"] + 1


def test_stock_update_with_stale_version_is_resolved(test_client):
    product = _first_product(test_client)
    payload = {"productId": product["id"], "vendorId": "vendor_a", "newStock": 5, "version": product["version"]}
    test_client.post("/api/stock-update", json=payload)

    response = test_client.post("/api/stock-update", json={**payload, "vendorId": "vendor_b", "newStock": 9})

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["conflict"] is True
    resolution = body["resolution"]
    assert resolution["productId"] == product["id"]
    assert resolution["resolvedStock"] == 9
    assert resolution["strategy"] in ("last-write-wins", "highest-stock", "average")
    assert resolution["updates"][0]["vendorId"] == "vendor_b"

    events = test_client.get("/api/herd-events").json()
    assert len(events) == 1
    assert events[0]["productsAffected"] == 1
    assert test_client.get("/api/stats").json()["totalConflicts"] == 1


def test_invalid_stock_update_is_400(test_client):
    response = test_client.post("/api/stock-update", json={"productId": "prod_000000", "newStock": -5, "version": 1})

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid stock update"
    fields = {tuple(err["loc"])[-1] for err in body["errors"]}
    assert {"vendorId", "newStock"} <= fields


def test_oversized_stock_update_is_400_and_leaves_product_unchanged(test_client):
    product = _first_product(test_client)

    response = test_client.post("/api/stock-update", json={
        "productId": product["id"], "vendorId": "vendor_a", "newStock": 10 ** 400, "version": product["version"],
    })

    assert response.status_code == 400
    body = response.json()
    assert body["message"] == "Invalid stock update"
    assert "newStock" in {tuple(err["loc"])[-1] for err in body["errors"]}

    after = test_client.get(f"/api/products/{product['id']}").json()
    assert after["version"] == product["version"]
    assert after["currentStock"] == product["currentStock"]
    assert test_client.get("/api/stats").status_code == 200


def test_stock_update_for_unknown_product_is_404(test_client):
    response = test_client.post("/api/stock-update", json={
        "productId": "prod_999999", "vendorId": "vendor_a", "newStock": 5, "version": 1,
    })

    assert response.status_code == 404
    assert response.json()["message"] == "Product not found"
    assert test_client.get("/api/herd-events").json() == []


def test_simulate_herd(test_client):
    response = test_client.post("/api/simulate-herd")

    assert response.status_code == 200
    event = response.json()
    assert 2 <= event["vendorCount"] <= 9
    assert 5 <= event["productsAffected"] <= 54
    assert event["conflictsDetected"] == event["productsAffected"]
    assert event["resolved"] is True

    events = test_client.get("/api/herd-events").json()
    assert events[0]["id"] == event["id"]

    stats = test_client.get("/api/stats").json()
    assert stats["totalConflicts"] == event["conflictsDetected"]
    assert stats["resolvedConflicts"] == event["conflictsDetected"]


def test_velocity_endpoints(test_client):
    critical = test_client.get("/api/velocity", params={"risk": "critical"}).json()
    assert all(p["risk"] == RiskLevel.CRITICAL.value for p in critical)

    by_velocity = test_client.get("/api/velocity", params={"sortBy": "velocity"}).json()
    velocities = [p["avgDailySales"] for p in by_velocity]
    assert velocities == sorted(velocities, reverse=True)
    assert {"risk", "projectedRevenueLoss", "reorderQty", "salesTrend"} <= set(by_velocity[0])

    summary = test_client.get("/api/velocity/summary").json()
    assert summary["critical"] + summary["warning"] + summary["healthy"] + summary["overstock"] == 120
    assert summary["critical"] == len(critical)


def test_bad_query_param_is_400(test_client):
    response = test_client.get("/api/velocity", params={"sortBy": "price"})
    assert response.status_code == 400


def test_health(test_client):
    assert test_client.get("/health").json() == {
        "status": "healthy",
        "service": "Herd Inventory Dashboard",
        "products": 120,
    }
