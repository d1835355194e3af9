"""
Thundering herd simulation.

One episode has several vendors push stock for many products at once, all
against the same (current) version, so every sampled product ends up in
conflict. A single strategy is drawn for the whole episode and each product's
updates are resolved with it.
"""

import logging
import random
import time
from typing import List, Optional

from app.core.enums import ResolutionStrategy
from app.core.utils import utc_now
from app.models.product import Product
from app.schemas.stock import StockUpdate, ThunderingHerdEvent
from app.services.catalog_service import ProductCatalog
from app.services.conflict_resolver import choose_strategy, resolve_stock

logger = logging.getLogger(__name__)

MIN_VENDORS = 2
MAX_VENDORS = 9
MIN_PRODUCTS = 5
MAX_PRODUCTS = 54
MAX_JITTER_MS = 499


class HerdSimulator:
    def __init__(self, catalog: ProductCatalog, rng: Optional[random.Random] = None):
        self.catalog = catalog
        self.rng = rng or random.Random()

    def _concurrent_updates(self, product: Product, vendor_count: int) -> List[StockUpdate]:
        # Every vendor read the same version, so all but one would lose the OCC check
        return [
            StockUpdate(
                product_id=product.id,
                vendor_id=f"vendor_{v}",
                new_stock=self.rng.randrange(product.max_stock) if product.max_stock > 0 else 0,
                version=product.version,
            )
            for v in range(vendor_count)
        ]

    def simulate(self) -> ThunderingHerdEvent:
        """Run one herd episode against the catalog and log it"""
        vendor_count = self.rng.randint(MIN_VENDORS, MAX_VENDORS)
        products_affected = self.rng.randint(MIN_PRODUCTS, MAX_PRODUCTS)
        strategy: ResolutionStrategy = choose_strategy(self.rng)

        products = self.catalog.list_products()
        products_affected = min(products_affected, len(products))
        targets = self.rng.sample(products, products_affected)

        start = time.perf_counter()
        conflicts_detected = 0

        for product in targets:
            updates = self._concurrent_updates(product, vendor_count)
            with self.catalog.lock:
                resolved_stock = resolve_stock(strategy, updates, product.current_stock)
                self.catalog.apply_stock(product.id, resolved_stock)
            conflicts_detected += 1

        elapsed_ms = int((time.perf_counter() - start) * 1000)

        with self.catalog.lock:
            event = ThunderingHerdEvent(
                id=self.catalog.next_herd_event_id(),
                timestamp=utc_now(),
                vendor_count=vendor_count,
                products_affected=products_affected,
                conflicts_detected=conflicts_detected,
                resolved=True,
                strategy=strategy,
                duration=elapsed_ms + self.rng.randint(0, MAX_JITTER_MS),
            )
            self.catalog.record_herd_event(event)

        logger.info(
            f"Herd {event.id}: {vendor_count} vendors x {products_affected} products, "
            f"{conflicts_detected} conflicts resolved with {strategy.value} in {event.duration}ms"
        )
        return event
