"""
API Dependencies

Provides dependency injection for the repository, the service and database
sessions. Every request gets its own session and a freshly wired service.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from product_api.db.session import get_db
from product_api.repositories.product_repository import ProductRepository
from product_api.services import ProductService


def get_product_repository(db: Session = Depends(get_db)) -> ProductRepository:
    """
    Get Product Repository instance with database session

    Returns:
        ProductRepository: Repository bound to the request session
    """
    return ProductRepository(db=db)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    """
    Get Product Service instance

    Returns:
        ProductService: Configured product service
    """
    return ProductService(repository=repository)
