"""
Schemas for dashboard aggregates and the velocity predictor.
"""

from app.core.enums import RiskLevel
from app.schemas.base import BaseSchema
from app.schemas.product import ProductRead


class DashboardStats(BaseSchema):
    total_products: int
    total_value: int
    low_stock_count: int
    out_of_stock_count: int
    avg_days_of_stock: float
    total_conflicts: int
    resolved_conflicts: int
    sales_velocity: int


class VelocityInsight(ProductRead):
    """A product annotated with stock-out risk and reorder guidance"""
    risk: RiskLevel
    projected_revenue_loss: float
    reorder_qty: int
    sales_trend: float


class VelocitySummary(BaseSchema):
    critical: int
    warning: int
    healthy: int
    overstock: int
    total_revenue_loss: float
