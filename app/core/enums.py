"""
Shared enums and constants used across the application.
"""

from enum import Enum


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    HOME_KITCHEN = "Home & Kitchen"
    CLOTHING = "Clothing"
    BOOKS = "Books"
    TOYS_GAMES = "Toys & Games"
    SPORTS_OUTDOORS = "Sports & Outdoors"
    BEAUTY = "Beauty & Personal Care"
    HEALTH_HOUSEHOLD = "Health & Household"
    AUTOMOTIVE = "Automotive"
    PET_SUPPLIES = "Pet Supplies"
    OFFICE_PRODUCTS = "Office Products"
    TOOLS_HOME_IMPROVEMENT = "Tools & Home Improvement"
    GROCERY = "Grocery & Gourmet"
    BABY_PRODUCTS = "Baby Products"
    GARDEN_OUTDOOR = "Garden & Outdoor"

    @property
    def sku_prefix(self):
        # "Home & Kitchen" -> "HOM"
        return self.value[:3].upper()


class FulfillmentType(str, Enum):
    FBA = "FBA"
    FBM = "FBM"
    SFP = "SFP"


class StockStatus(str, Enum):
    """Derived stock status; only ever set by derive_status()"""
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"
    OVERSTOCK = "Overstock"


class ResolutionStrategy(str, Enum):
    LAST_WRITE_WINS = "last-write-wins"
    HIGHEST_STOCK = "highest-stock"
    AVERAGE = "average"
    REJECT = "reject"


# REJECT is part of the wire schema but never picked automatically.
AUTOMATIC_STRATEGIES = (
    ResolutionStrategy.LAST_WRITE_WINS,
    ResolutionStrategy.HIGHEST_STOCK,
    ResolutionStrategy.AVERAGE,
)


class RiskLevel(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    HEALTHY = "healthy"
    OVERSTOCK = "overstock"


class VelocitySort(str, Enum):
    DAYS_LEFT = "daysLeft"
    VELOCITY = "velocity"
    REVENUE = "revenue"
