from typing import Any, Dict

from sqlalchemy import Column, Float, Integer, VARCHAR

from product_api.db.base import Base


class Product(Base):
    """
    商品数据库模型

    The id is generated by the database. AUTOINCREMENT keeps SQLite from
    handing out the id of a deleted row again.
    """
    __tablename__ = "products"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(VARCHAR(255), nullable=False)
    price = Column(Float, nullable=False, default=0.0)

    def to_dict(self) -> Dict[str, Any]:
        """将商品转换为字典表示形式"""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
        }

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
