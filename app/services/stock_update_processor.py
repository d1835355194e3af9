"""
Purpose: Applies vendor stock updates under optimistic concurrency control.

An update carries the version its vendor last saw. If that still matches the
product's version the stock is written directly. Otherwise the update joins the
product's pending buffer and the whole buffer is resolved on the spot; the
episode is logged as a single-product thundering herd event. No update is
dropped: each one either applies or is accounted for in a resolution.
"""

import logging
import random
from typing import Optional

from app.core.enums import ResolutionStrategy
from app.core.utils import utc_now
from app.schemas.stock import StockUpdate, StockUpdateResult, ThunderingHerdEvent
from app.services.catalog_service import ProductCatalog
from app.services.conflict_resolver import ConflictResolver

logger = logging.getLogger(__name__)

# Synthetic latency reported for a single-product conflict, in ms
MIN_CONFLICT_DURATION_MS = 10
MAX_CONFLICT_DURATION_MS = 209


class StockUpdateProcessor:
    def __init__(
        self,
        catalog: ProductCatalog,
        resolver: ConflictResolver,
        rng: Optional[random.Random] = None
    ):
        self.catalog = catalog
        self.resolver = resolver
        self.rng = rng or random.Random()

    def apply_update(
        self,
        update: StockUpdate,
        strategy: Optional[ResolutionStrategy] = None
    ) -> StockUpdateResult:
        """
        Apply one vendor update.

        Returns:
            success=False, conflict=False      product does not exist
            success=True,  conflict=False      version matched, stock written
            success=True,  conflict=True, resolution   version mismatch, resolved
        """
        with self.catalog.lock:
            product = self.catalog.find_product(update.product_id)
            if product is None:
                logger.warning(f"Stock update from {update.vendor_id} for unknown product {update.product_id}")
                return StockUpdateResult(success=False, conflict=False)

            if product.version == update.version:
                self.catalog.apply_stock(update.product_id, update.new_stock)
                logger.debug(f"Applied stock update from {update.vendor_id} to {update.product_id}")
                return StockUpdateResult(success=True, conflict=False)

            logger.info(
                f"Version conflict on {update.product_id}: {update.vendor_id} sent v{update.version}, "
                f"current is v{product.version}"
            )
            pending = self.catalog.add_pending(update)
            resolution = self.resolver.resolve(update.product_id, pending, strategy=strategy)

            event = ThunderingHerdEvent(
                id=self.catalog.next_herd_event_id(),
                timestamp=utc_now(),
                vendor_count=len(pending),
                products_affected=1,
                conflicts_detected=1,
                resolved=True,
                strategy=resolution.strategy,
                duration=self.rng.randint(MIN_CONFLICT_DURATION_MS, MAX_CONFLICT_DURATION_MS),
            )
            self.catalog.record_herd_event(event)

        return StockUpdateResult(success=True, conflict=True, resolution=resolution)
