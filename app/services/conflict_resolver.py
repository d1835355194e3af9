"""
Conflict resolution for stock updates that lost the optimistic version check.

Strategies:
- last-write-wins: newest update in buffer (arrival) order
- highest-stock:   max proposed stock
- average:         arithmetic mean, rounded half-up
- reject:          keep the current stock

Automatic selection only draws from the first three; "reject" can be passed
explicitly but is never chosen on its own.
"""

import logging
import random
from typing import List, Optional, Sequence

from app.core.enums import ResolutionStrategy, AUTOMATIC_STRATEGIES
from app.core.exceptions import ConflictResolutionError
from app.core.utils import round_half_up, utc_now
from app.schemas.stock import ConflictResolution, StockUpdate
from app.services.catalog_service import ProductCatalog

logger = logging.getLogger(__name__)


def choose_strategy(rng: random.Random) -> ResolutionStrategy:
    return rng.choice(AUTOMATIC_STRATEGIES)


def resolve_stock(
    strategy: ResolutionStrategy,
    updates: Sequence[StockUpdate],
    current_stock: int
) -> int:
    """Pick the winning stock value for a set of conflicting updates"""
    if not updates:
        raise ConflictResolutionError("Cannot resolve an empty set of updates")

    if strategy == ResolutionStrategy.LAST_WRITE_WINS:
        return updates[-1].new_stock
    if strategy == ResolutionStrategy.HIGHEST_STOCK:
        return max(u.new_stock for u in updates)
    if strategy == ResolutionStrategy.AVERAGE:
        return int(round_half_up(sum(u.new_stock for u in updates) / len(updates)))
    if strategy == ResolutionStrategy.REJECT:
        return current_stock

    raise ConflictResolutionError(f"Unknown resolution strategy: {strategy}")


class ConflictResolver:
    def __init__(self, catalog: ProductCatalog, rng: Optional[random.Random] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def resolve(
        self,
        product_id: str,
        pending_updates: List[StockUpdate],
        strategy: Optional[ResolutionStrategy] = None
    ) -> ConflictResolution:
        """
        Resolve a product's pending updates into one stock value and apply it.

        The winning value goes through ProductCatalog.apply_stock like any other
        write (version + 1, status re-derived). The product's pending buffer is
        consumed. Recording a herd event is left to the caller.

        Raises:
            ProductNotFoundError: If product not found
            ConflictResolutionError: If there is nothing to resolve
        """
        strategy = strategy or choose_strategy(self.rng)

        with self.catalog.lock:
            product = self.catalog.get_product(product_id)
            resolved_stock = resolve_stock(strategy, pending_updates, product.current_stock)
            now = utc_now()
            self.catalog.apply_stock(product_id, resolved_stock, now=now)
            self.catalog.clear_pending(product_id)

        logger.info(
            f"Resolved {len(pending_updates)} conflicting updates for {product_id} "
            f"with {strategy.value}: stock={resolved_stock}"
        )

        return ConflictResolution(
            product_id=product_id,
            updates=list(pending_updates),
            resolved_stock=resolved_stock,
            strategy=strategy,
            timestamp=now,
        )
