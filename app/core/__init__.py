"""
Core module exports.
"""
from .enums import (
    ProductCategory,
    FulfillmentType,
    StockStatus,
    ResolutionStrategy,
    AUTOMATIC_STRATEGIES,
    RiskLevel,
    VelocitySort
)

from .exceptions import (
    BaseServiceError,
    ProductServiceError,
    ProductNotFoundError,
    ConflictResolutionError
)

from .utils import (
    round_half_up,
    utc_now
)
