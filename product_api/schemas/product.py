from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# SQLite INTEGER 的取值范围
MIN_PRODUCT_ID = -(2 ** 63)
MAX_PRODUCT_ID = 2 ** 63 - 1


class ProductBase(BaseModel):
    """
    商品请求体公共字段

    Missing fields are not rejected here: an absent price defaults to 0.0,
    an absent name is left to the NOT NULL constraint of the table. A price
    of inf or nan is rejected since it cannot be written back as JSON.
    """
    name: Optional[str] = None
    price: float = Field(0.0, allow_inf_nan=False)


class ProductCreate(ProductBase):
    """
    商品创建请求模型

    A supplied id turns the create into an overwrite of that record.
    """
    id: Optional[int] = Field(None, ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID)


class ProductUpdate(ProductBase):
    """商品更新请求模型，只复制 name 和 price"""
    pass


class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: float
