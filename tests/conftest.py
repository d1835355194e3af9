# tests/conftest.py
import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.enums import ProductCategory, FulfillmentType
from app.dependencies import get_inventory
from app.main import app
from app.models.product import Product
from app.services.catalog_service import ProductCatalog
from app.services.setup import build_services, setup_inventory
from app.services.status_service import derive_status


@pytest.fixture
def settings():
    """Provide test settings: a small, reproducible catalog"""
    return Settings(SEED_PRODUCT_COUNT=120, SEED_SALES_DAYS=30, RANDOM_SEED=1234)


@pytest.fixture
def rng():
    return random.Random(42)


def make_product(
    product_id: str = "prod_000001",
    current_stock: int = 100,
    reorder_point: int = 30,
    max_stock: int = 200,
    avg_daily_sales: float = 10.0,
    price: float = 20.0,
    **overrides
) -> Product:
    """Build a product with derived fields consistent with its stock"""
    status, days_left = derive_status(current_stock, reorder_point, max_stock, avg_daily_sales)
    fields = dict(
        id=product_id,
        asin="B0TEST0001",
        sku=f"ELE-{product_id[-6:]}",
        title="Smart Power Bank",
        category=ProductCategory.ELECTRONICS,
        price=price,
        cost=round(price * 0.5, 2),
        current_stock=current_stock,
        reorder_point=reorder_point,
        max_stock=max_stock,
        fulfillment=FulfillmentType.FBA,
        avg_daily_sales=avg_daily_sales,
        last_7_day_sales=[10, 9, 11, 10, 12, 8, 10],
        last_30_day_sales=300,
        status=status,
        days_of_stock_left=days_left,
        vendor="Pacific Trade Group",
        last_updated=datetime(2024, 1, 1, tzinfo=timezone.utc),
        version=1,
        rating=4.5,
        review_count=120,
    )
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def catalog():
    """A hand-built three product catalog"""
    return ProductCatalog(products=[
        make_product("prod_000000", current_stock=100),
        make_product("prod_000001", current_stock=0),
        make_product("prod_000002", current_stock=190, title="Classic Yoga Mat", sku="SPO-000002"),
    ])


@pytest.fixture
def services(catalog, rng):
    return build_services(catalog, rng)


@pytest.fixture
def seeded_inventory(settings):
    """Services around a seeded 120 product catalog"""
    return setup_inventory(settings)


@pytest.fixture
def test_client(seeded_inventory):
    """Provide a test client backed by the seeded test catalog"""
    app.dependency_overrides[get_inventory] = lambda: seeded_inventory
    app.state.inventory = seeded_inventory
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
    app.state.inventory = None
