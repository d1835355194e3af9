"""
Schema exports for the application.
"""

# Base schemas
from .base import BaseSchema, FrozenSchema

# Product schemas
from .product import ProductRead, SalesDataPoint

# Stock update / conflict schemas
from .stock import StockUpdate, StockUpdateResult, ConflictResolution, ThunderingHerdEvent

# Analytics schemas
from .analytics import DashboardStats, VelocityInsight, VelocitySummary
