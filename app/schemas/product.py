"""
Schemas for product-related API endpoints.
"""

from typing import List
from datetime import datetime
from pydantic import Field

from app.core.enums import ProductCategory, FulfillmentType, StockStatus
from app.schemas.base import BaseSchema


class ProductRead(BaseSchema):
    """Full catalog record as served by /api/products"""
    id: str
    asin: str
    sku: str
    title: str
    category: ProductCategory
    price: float
    cost: float
    current_stock: int
    reorder_point: int
    max_stock: int
    fulfillment: FulfillmentType
    status: StockStatus
    avg_daily_sales: float
    last_7_day_sales: List[int] = Field(alias="last7DaySales", min_length=7, max_length=7)
    last_30_day_sales: int = Field(alias="last30DaySales")
    days_of_stock_left: float
    vendor: str
    last_updated: datetime
    version: int
    rating: float
    review_count: int


class SalesDataPoint(BaseSchema):
    date: str
    sales: int
    revenue: float
    orders: int
