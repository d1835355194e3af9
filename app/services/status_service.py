"""
Stock status derivation.

derive_status() is the only place status and days-of-stock are computed. It is
called after every stock mutation (direct update, conflict resolution, herd
simulation) and at seed time, never lazily on read.
"""

from typing import Tuple

from app.core.enums import StockStatus
from app.core.utils import round_half_up

OVERSTOCK_RATIO = 0.9

# Reported when a product has stock but no sales velocity to deplete it.
UNBOUNDED_DAYS_OF_STOCK = 9999.0


def derive_status(
    current_stock: int,
    reorder_point: int,
    max_stock: int,
    avg_daily_sales: float
) -> Tuple[StockStatus, float]:
    """
    Compute (status, days_of_stock_left) for a product.

    Precedence: Out of Stock, then Low Stock, then Overstock, then In Stock.
    Days of stock is rounded half-up to one decimal.
    """
    if current_stock == 0:
        return StockStatus.OUT_OF_STOCK, 0.0

    if current_stock <= reorder_point:
        status = StockStatus.LOW_STOCK
    elif current_stock >= OVERSTOCK_RATIO * max_stock:
        status = StockStatus.OVERSTOCK
    else:
        status = StockStatus.IN_STOCK

    if avg_daily_sales <= 0:
        return status, UNBOUNDED_DAYS_OF_STOCK

    days_left = round_half_up(current_stock / avg_daily_sales, 1)
    return status, min(days_left, UNBOUNDED_DAYS_OF_STOCK)
