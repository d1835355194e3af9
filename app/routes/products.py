from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.core.enums import RiskLevel, VelocitySort
from app.core.utils import models_to_schemas, model_to_schema
from app.dependencies import get_inventory
from app.schemas.analytics import DashboardStats, VelocityInsight, VelocitySummary
from app.schemas.product import ProductRead, SalesDataPoint
from app.services.setup import InventoryServices

router = APIRouter(prefix="/api", tags=["products"])


@router.get("/products", response_model=List[ProductRead])
async def list_products(inventory: InventoryServices = Depends(get_inventory)):
    """Full catalog snapshot, in seed order"""
    return models_to_schemas(inventory.catalog.list_products(), ProductRead)


@router.get("/products/{product_id}", response_model=ProductRead)
async def get_product(product_id: str, inventory: InventoryServices = Depends(get_inventory)):
    # ProductNotFoundError is turned into a 404 by the app-level handler
    return model_to_schema(inventory.catalog.get_product(product_id), ProductRead)


@router.get("/stats", response_model=DashboardStats)
async def get_stats(inventory: InventoryServices = Depends(get_inventory)):
    return inventory.analytics.get_dashboard_stats()


@router.get("/sales", response_model=List[SalesDataPoint])
async def get_sales(inventory: InventoryServices = Depends(get_inventory)):
    return inventory.catalog.list_sales_data()


@router.get("/velocity", response_model=List[VelocityInsight])
async def get_velocity(
    search: Optional[str] = None,
    risk: Optional[RiskLevel] = None,
    sort_by: VelocitySort = Query(VelocitySort.DAYS_LEFT, alias="sortBy"),
    inventory: InventoryServices = Depends(get_inventory)
):
    """Stock-out risk per product with reorder guidance"""
    return inventory.analytics.get_velocity_insights(search=search, risk=risk, sort_by=sort_by)


@router.get("/velocity/summary", response_model=VelocitySummary)
async def get_velocity_summary(inventory: InventoryServices = Depends(get_inventory)):
    return inventory.analytics.get_velocity_summary()
