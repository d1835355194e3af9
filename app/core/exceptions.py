class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class ProductServiceError(BaseServiceError):
    """Base exception for product catalog errors."""
    pass

class ProductNotFoundError(ProductServiceError):
    """Raised when product is not found."""

    def __init__(self, product_id: str):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")

class ConflictResolutionError(BaseServiceError):
    """Raised when a set of conflicting updates cannot be resolved."""
    pass
