import logging
from typing import List, Optional

from product_api.infrastructure.exceptions import ProductNotFoundError
from product_api.models.product import Product
from product_api.repositories.product_repository import ProductRepository
from product_api.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self.repository = repository

    def get_all_products(self) -> List[Product]:
        logger.info("Fetching all products")
        return self.repository.find_all()

    def get_product_by_id(self, product_id: int) -> Optional[Product]:
        logger.info(f"Fetching product {product_id}")
        return self.repository.find_by_id(product_id)

    def create_product(self, product_data: ProductCreate) -> Product:
        """
        创建商品

        A payload carrying the id of an existing product overwrites it.
        """
        product = Product(
            id=product_data.id,
            name=product_data.name,
            price=product_data.price,
        )
        saved = self.repository.save(product)
        logger.info(f"Saved product {saved.id}")
        return saved

    def update_product(self, product_id: int, updated: ProductUpdate) -> Product:
        """
        更新商品

        Only name and price are copied onto the stored record; its id never
        changes.

        Raises:
            ProductNotFoundError: no product has this id
        """
        product = self.repository.find_by_id(product_id)
        if product is None:
            logger.warning(f"Cannot update product {product_id}: not found")
            raise ProductNotFoundError(product_id)

        product.name = updated.name
        product.price = updated.price
        saved = self.repository.save(product)
        logger.info(f"Updated product {saved.id}")
        return saved

    def delete_product(self, product_id: int) -> None:
        self.repository.delete_by_id(product_id)
        logger.info(f"Deleted product {product_id}")
