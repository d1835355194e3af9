"""
Purpose: Builds the inventory service graph at application startup.

Contents:
InventoryServices: the catalog plus the services that read and write it, passed to
request handlers through app.state / FastAPI dependencies instead of module globals.
setup_inventory: seeds a catalog from Settings and wires the services around it,
sharing a single random.Random so RANDOM_SEED makes a whole run reproducible.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from app.core.config import Settings, get_settings
from app.services.analytics_service import InventoryAnalyticsService
from app.services.catalog_service import ProductCatalog
from app.services.conflict_resolver import ConflictResolver
from app.services.herd_simulator import HerdSimulator
from app.services.seed_service import generate_products, generate_sales_data
from app.services.stock_update_processor import StockUpdateProcessor

logger = logging.getLogger(__name__)


@dataclass
class InventoryServices:
    catalog: ProductCatalog
    resolver: ConflictResolver
    processor: StockUpdateProcessor
    simulator: HerdSimulator
    analytics: InventoryAnalyticsService


def build_services(catalog: ProductCatalog, rng: Optional[random.Random] = None) -> InventoryServices:
    """Wire services around an existing catalog"""
    rng = rng or random.Random()
    resolver = ConflictResolver(catalog, rng=rng)
    return InventoryServices(
        catalog=catalog,
        resolver=resolver,
        processor=StockUpdateProcessor(catalog, resolver, rng=rng),
        simulator=HerdSimulator(catalog, rng=rng),
        analytics=InventoryAnalyticsService(catalog),
    )


def setup_inventory(settings: Optional[Settings] = None) -> InventoryServices:
    """
    Seed the in-memory catalog and wire the inventory services.
    """
    settings = settings or get_settings()
    rng = random.Random(settings.RANDOM_SEED)

    if settings.RANDOM_SEED is not None:
        logger.info(f"Using fixed random seed {settings.RANDOM_SEED}")

    catalog = ProductCatalog(
        products=generate_products(settings.SEED_PRODUCT_COUNT, rng),
        sales_data=generate_sales_data(settings.SEED_SALES_DAYS, rng),
    )
    logger.info(f"Catalog ready: {len(catalog)} products, {settings.SEED_SALES_DAYS} days of sales")

    return build_services(catalog, rng)
