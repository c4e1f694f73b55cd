"""
Core Services Module

Provides basic CRUD services for fundamental business operations.
"""

from .product_service import ProductService

__all__ = ["ProductService"]
