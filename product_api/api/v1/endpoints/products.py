"""
商品相关API接口模块

Route handlers only deserialize, delegate to ProductService and serialize.
Errors are translated to HTTP responses by the exception handlers registered
in product_api.main. Handlers are plain functions so each request runs on a
worker thread.
"""
import logging
from typing import List

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse, PlainTextResponse

from product_api.api.dependencies import get_product_service
from product_api.infrastructure.response import not_found_response
from product_api.schemas.product import (
    MAX_PRODUCT_ID,
    MIN_PRODUCT_ID,
    ProductCreate,
    ProductOut,
    ProductUpdate,
)
from product_api.services import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()

DELETE_CONFIRMATION = "Product deleted successfully"


def _product_id_path():
    # ids outside the INTEGER range can never be stored
    return Path(..., ge=MIN_PRODUCT_ID, le=MAX_PRODUCT_ID)


@router.get("", response_model=List[ProductOut])
def get_all_products(service: ProductService = Depends(get_product_service)):
    """获取全部商品，按id排序"""
    return [product.to_dict() for product in service.get_all_products()]


@router.get("/{product_id}", response_model=ProductOut)
def get_product_by_id(
        product_id: int = _product_id_path(),
        service: ProductService = Depends(get_product_service),
):
    """
    根据ID获取商品

    Returns 404 with a structured body when the id is unknown.
    """
    product = service.get_product_by_id(product_id)
    if product is None:
        logger.warning(f"Product {product_id} not found")
        return JSONResponse(status_code=404, content=not_found_response(entity="Product"))
    return product.to_dict()


@router.post("", response_model=ProductOut)
def create_product(
        product_data: ProductCreate,
        service: ProductService = Depends(get_product_service),
):
    """
    创建商品

    Body: {"name": str, "price": float, "id": optional int}. A known id
    overwrites that product instead of inserting a new one.
    """
    return service.create_product(product_data).to_dict()


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
        product_data: ProductUpdate,
        product_id: int = _product_id_path(),
        service: ProductService = Depends(get_product_service),
):
    """
    更新商品

    只覆盖 name 和 price，id 保持不变；商品不存在时返回404
    """
    return service.update_product(product_id, product_data).to_dict()


@router.delete("/{product_id}", response_class=PlainTextResponse)
def delete_product(
        product_id: int = _product_id_path(),
        service: ProductService = Depends(get_product_service),
):
    """删除商品，返回纯文本确认信息；商品不存在时返回404"""
    service.delete_product(product_id)
    return DELETE_CONFIRMATION
