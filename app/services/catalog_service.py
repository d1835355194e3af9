"""
Purpose: The in-memory product catalog, the single source of truth for stock levels.

Role: Owns the ordered id -> Product mapping, the per-product pending update buffers
used while accumulating a conflict, the thundering herd event log and the seeded
sales series.

apply_stock() is the only mutation path for a Product. Callers that need the
version check and the write to be one step (StockUpdateProcessor) hold
catalog.lock around both; the lock is re-entrant so apply_stock can take it again.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from app.core.exceptions import ProductNotFoundError
from app.core.utils import utc_now
from app.models.product import Product
from app.schemas.product import SalesDataPoint
from app.schemas.stock import StockUpdate, ThunderingHerdEvent
from app.services.status_service import derive_status

logger = logging.getLogger(__name__)


class ProductCatalog:
    def __init__(
        self,
        products: Iterable[Product] = (),
        sales_data: Iterable[SalesDataPoint] = ()
    ):
        # dicts keep insertion order, which is the seed order served by list_products()
        self._products: Dict[str, Product] = {p.id: p for p in products}
        self._sales_data: List[SalesDataPoint] = list(sales_data)
        self._herd_events: List[ThunderingHerdEvent] = []
        self._pending: Dict[str, List[StockUpdate]] = {}
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._products)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        return list(self._products.values())

    def find_product(self, product_id: str) -> Optional[Product]:
        return self._products.get(product_id)

    def get_product(self, product_id: str) -> Product:
        """
        Retrieves a product by ID.

        Raises:
            ProductNotFoundError: If product not found
        """
        product = self._products.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def list_sales_data(self) -> List[SalesDataPoint]:
        return list(self._sales_data)

    def list_herd_events(self) -> List[ThunderingHerdEvent]:
        """Herd events, most recent first"""
        return list(self._herd_events)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_stock(self, product_id: str, new_stock: int, now: Optional[datetime] = None) -> Product:
        """
        Set a product's stock as one versioned mutation.

        Bumps version by exactly one, stamps last_updated and re-derives
        status / days_of_stock_left from the new stock level.
        """
        with self.lock:
            product = self.get_product(product_id)
            stock = max(0, int(new_stock))
            # derive first so a failure leaves the product untouched
            status, days_left = derive_status(
                stock,
                product.reorder_point,
                product.max_stock,
                product.avg_daily_sales
            )
            product.current_stock = stock
            product.status, product.days_of_stock_left = status, days_left
            product.version += 1
            product.last_updated = now or utc_now()
            logger.debug(
                f"{product_id}: stock={product.current_stock} version={product.version} status={product.status.value}"
            )
            return product

    # ------------------------------------------------------------------
    # Pending update buffers (FIFO per product)
    # ------------------------------------------------------------------

    def add_pending(self, update: StockUpdate) -> List[StockUpdate]:
        """Append an update to its product's buffer and return a snapshot of the buffer"""
        with self.lock:
            buffer = self._pending.setdefault(update.product_id, [])
            buffer.append(update)
            return list(buffer)

    def pending_updates(self, product_id: str) -> List[StockUpdate]:
        return list(self._pending.get(product_id, []))

    def clear_pending(self, product_id: str) -> None:
        with self.lock:
            self._pending.pop(product_id, None)

    # ------------------------------------------------------------------
    # Herd event log
    # ------------------------------------------------------------------

    def next_herd_event_id(self) -> str:
        return f"herd_{len(self._herd_events)}"

    def record_herd_event(self, event: ThunderingHerdEvent) -> None:
        with self.lock:
            self._herd_events.insert(0, event)
