"""
Models for the inventory dashboard's core functionality.

The catalog is held in memory, so a Product is a plain mutable record rather
than a mapped table. Derived fields (status, days_of_stock_left) and the OCC
version counter are written only by ProductCatalog.apply_stock() and at
creation time; everything else is seed data.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from app.core.enums import ProductCategory, FulfillmentType, StockStatus


@dataclass
class Product:
    # Identity
    id: str
    asin: str
    sku: str
    title: str
    category: ProductCategory

    # Pricing
    price: float
    cost: float

    # Stock levels
    current_stock: int
    reorder_point: int
    max_stock: int
    fulfillment: FulfillmentType

    # Velocity
    avg_daily_sales: float
    last_7_day_sales: List[int] = field(default_factory=lambda: [0] * 7)
    last_30_day_sales: int = 0

    # Derived; see app.services.status_service.derive_status
    status: StockStatus = StockStatus.OUT_OF_STOCK
    days_of_stock_left: float = 0.0

    vendor: str = ""
    last_updated: datetime = None
    version: int = 1

    # Marketplace
    rating: float = 0.0
    review_count: int = 0

    @property
    def stock_value(self) -> float:
        return self.price * self.current_stock
