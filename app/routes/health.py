from fastapi import APIRouter, Depends

from app.dependencies import get_inventory
from app.services.setup import InventoryServices

router = APIRouter(tags=["health"])

@router.get("/health")
async def health_check(inventory: InventoryServices = Depends(get_inventory)):
    """Basic health check"""
    return {
        "status": "healthy",
        "service": "Herd Inventory Dashboard",
        "products": len(inventory.catalog)
    }
