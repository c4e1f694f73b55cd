"""
Services Layer

Business logic sitting between the HTTP endpoints and the repositories.
"""

from .core import ProductService

__all__ = ["ProductService"]
