"""
Schemas for stock updates, conflict resolutions and thundering herd events.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import Field, field_validator

from app.core.enums import ResolutionStrategy
from app.schemas.base import BaseSchema, FrozenSchema

# Upper bound for a proposed stock level; keeps stock value and days-of-stock in float range
MAX_STOCK_LEVEL = 1_000_000_000


class StockUpdate(FrozenSchema):
    """A vendor's intent to set a product's stock, carrying the version it last saw"""
    product_id: str = Field(min_length=1)
    vendor_id: str = Field(min_length=1)
    new_stock: int = Field(ge=0, le=MAX_STOCK_LEVEL)
    version: int = Field(ge=1)

    @field_validator('product_id', 'vendor_id', mode='before')
    @classmethod
    def strip_identifiers(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v


class ConflictResolution(FrozenSchema):
    product_id: str
    updates: List[StockUpdate]
    resolved_stock: int
    strategy: ResolutionStrategy
    timestamp: datetime


class StockUpdateResult(BaseSchema):
    success: bool
    conflict: bool
    resolution: Optional[ConflictResolution] = None


class ThunderingHerdEvent(FrozenSchema):
    id: str
    timestamp: datetime
    vendor_count: int
    products_affected: int
    conflicts_detected: int
    resolved: bool
    strategy: ResolutionStrategy
    duration: int = Field(description="Milliseconds")
