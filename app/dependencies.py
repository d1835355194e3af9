from fastapi import Request

from app.services.setup import InventoryServices


def get_inventory(request: Request) -> InventoryServices:
    """Dependency for the inventory services built at startup."""
    return request.app.state.inventory
