"""
商品数据访问层

Thin wrapper around the SQLAlchemy session. Each mutating call runs in its
own transaction: commit on success, rollback and re-raise on failure.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from product_api.infrastructure.exceptions import ProductNotFoundError
from product_api.models.product import Product

logger = logging.getLogger(__name__)


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def save(self, product: Product) -> Product:
        """
        保存商品（upsert）

        - id 为空: 插入，由数据库分配 id
        - id 存在且对应已有记录: 覆盖该记录
        - id 存在但没有对应记录: 以新生成的 id 插入
        """
        try:
            if product.id is None:
                self.db.add(product)
            elif self.db.get(Product, product.id) is None:
                logger.info(f"Product {product.id} does not exist, inserting under a new id")
                product.id = None
                self.db.add(product)
            else:
                product = self.db.merge(product)
            self.db.commit()
            self.db.refresh(product)
            return product
        except Exception as e:
            self.db.rollback()
            raise e

    def delete_by_id(self, product_id: int) -> None:
        product = self.db.get(Product, product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        try:
            self.db.delete(product)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            raise e
