# app/services/analytics_service.py
"""
Inventory Analytics Service

Computes the dashboard aggregates and the velocity predictor (stock-out risk,
projected revenue loss, reorder quantities). Everything is a projection over
the current catalog and herd log; nothing here is stored.
"""

import math
from typing import List, Optional

from app.core.enums import RiskLevel, StockStatus, VelocitySort
from app.core.utils import round_half_up
from app.models.product import Product
from app.schemas.analytics import DashboardStats, VelocityInsight, VelocitySummary
from app.schemas.product import ProductRead
from app.services.catalog_service import ProductCatalog

CRITICAL_DAYS = 7
WARNING_DAYS = 14
REORDER_COVER_DAYS = 30


def risk_level(product: Product) -> RiskLevel:
    if product.status == StockStatus.OUT_OF_STOCK or product.days_of_stock_left == 0:
        return RiskLevel.CRITICAL
    if product.days_of_stock_left <= CRITICAL_DAYS:
        return RiskLevel.CRITICAL
    if product.days_of_stock_left <= WARNING_DAYS:
        return RiskLevel.WARNING
    if product.status == StockStatus.OVERSTOCK:
        return RiskLevel.OVERSTOCK
    return RiskLevel.HEALTHY


def projected_revenue_loss(product: Product) -> float:
    """Revenue lost over the next week if the product is, or will be, out of stock"""
    daily_revenue = product.avg_daily_sales * product.price
    if product.status == StockStatus.OUT_OF_STOCK:
        return daily_revenue * CRITICAL_DAYS
    if product.days_of_stock_left <= CRITICAL_DAYS:
        return daily_revenue * (CRITICAL_DAYS - product.days_of_stock_left)
    return 0.0


def reorder_quantity(product: Product) -> int:
    return max(0, math.ceil(product.avg_daily_sales * REORDER_COVER_DAYS - product.current_stock))


def sales_trend(product: Product) -> float:
    """Week-over-week change in percent, first day vs last day of the 7-day window"""
    sales = product.last_7_day_sales
    if len(sales) < 2:
        return 0.0
    return (sales[-1] - sales[0]) / max(sales[0], 1) * 100


class InventoryAnalyticsService:
    """
    Service for computing and retrieving inventory analytics.

    Key features:
    - Dashboard stats (stock value, low / out of stock counts, conflict totals)
    - Velocity predictor with risk levels and reorder guidance
    """

    def __init__(self, catalog: ProductCatalog):
        self.catalog = catalog

    # =========================================================================
    # DASHBOARD STATS
    # =========================================================================

    def get_dashboard_stats(self) -> DashboardStats:
        products = self.catalog.list_products()
        events = self.catalog.list_herd_events()

        total_products = len(products)
        total_value = sum(p.stock_value for p in products)
        avg_days = (
            sum(p.days_of_stock_left for p in products) / total_products
            if total_products else 0.0
        )

        return DashboardStats(
            total_products=total_products,
            total_value=int(round_half_up(total_value)),
            low_stock_count=sum(1 for p in products if p.status == StockStatus.LOW_STOCK),
            out_of_stock_count=sum(1 for p in products if p.status == StockStatus.OUT_OF_STOCK),
            avg_days_of_stock=round_half_up(avg_days, 1),
            total_conflicts=sum(e.conflicts_detected for e in events),
            resolved_conflicts=sum(e.conflicts_detected for e in events if e.resolved),
            sales_velocity=int(round_half_up(sum(p.avg_daily_sales for p in products))),
        )

    # =========================================================================
    # VELOCITY PREDICTOR
    # =========================================================================

    def get_velocity_insights(
        self,
        search: Optional[str] = None,
        risk: Optional[RiskLevel] = None,
        sort_by: VelocitySort = VelocitySort.DAYS_LEFT
    ) -> List[VelocityInsight]:
        """
        Annotate products with risk and reorder guidance.

        Args:
            search: Case-insensitive match against title or SKU
            risk: Only return products at this risk level
            sort_by: daysLeft (ascending), velocity or revenue (descending)
        """
        products = self.catalog.list_products()

        if search:
            needle = search.lower()
            products = [p for p in products if needle in p.title.lower() or needle in p.sku.lower()]

        insights = [
            VelocityInsight(
                **ProductRead.from_model(p).model_dump(),
                risk=risk_level(p),
                projected_revenue_loss=projected_revenue_loss(p),
                reorder_qty=reorder_quantity(p),
                sales_trend=sales_trend(p),
            )
            for p in products
        ]

        if risk is not None:
            insights = [i for i in insights if i.risk == risk]

        if sort_by == VelocitySort.VELOCITY:
            insights.sort(key=lambda i: i.avg_daily_sales, reverse=True)
        elif sort_by == VelocitySort.REVENUE:
            insights.sort(key=lambda i: i.projected_revenue_loss, reverse=True)
        else:
            insights.sort(key=lambda i: i.days_of_stock_left)

        return insights

    def get_velocity_summary(self) -> VelocitySummary:
        products = self.catalog.list_products()
        levels = [risk_level(p) for p in products]
        return VelocitySummary(
            critical=levels.count(RiskLevel.CRITICAL),
            warning=levels.count(RiskLevel.WARNING),
            healthy=levels.count(RiskLevel.HEALTHY),
            overstock=levels.count(RiskLevel.OVERSTOCK),
            total_revenue_loss=sum(
                p.avg_daily_sales * p.price * CRITICAL_DAYS
                for p in products if p.status == StockStatus.OUT_OF_STOCK
            ),
        )
