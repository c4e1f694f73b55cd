"""
Custom exceptions for the Product API.
"""


class ProductApiError(Exception):
    """Base class for errors raised by the repository and service layers."""
    pass


class ProductNotFoundError(ProductApiError):
    """No product row exists for the requested id."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")
