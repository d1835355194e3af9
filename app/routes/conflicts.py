import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_inventory
from app.schemas.stock import StockUpdate, StockUpdateResult, ThunderingHerdEvent
from app.services.setup import InventoryServices

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["conflicts"])


@router.get("/herd-events", response_model=List[ThunderingHerdEvent])
async def list_herd_events(inventory: InventoryServices = Depends(get_inventory)):
    """Thundering herd log, newest first"""
    return inventory.catalog.list_herd_events()


@router.post(
    "/stock-update",
    response_model=StockUpdateResult,
    response_model_exclude_none=True,
    responses={404: {"description": "Product not found"}, 400: {"description": "Invalid stock update"}}
)
async def stock_update(update: StockUpdate, inventory: InventoryServices = Depends(get_inventory)):
    """Apply a vendor stock update under optimistic concurrency control"""
    result = inventory.processor.apply_update(update)
    if not result.success:
        return JSONResponse(
            status_code=404,
            content={"message": "Product not found", "success": False, "conflict": False}
        )
    return result


@router.post("/simulate-herd", response_model=ThunderingHerdEvent)
async def simulate_herd(inventory: InventoryServices = Depends(get_inventory)):
    """Run one simulated thundering herd episode"""
    return inventory.simulator.simulate()
