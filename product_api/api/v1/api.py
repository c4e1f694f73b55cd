from fastapi import APIRouter

from product_api.api.v1.endpoints import products


api_router = APIRouter()

# 包含各模块的路由
api_router.include_router(products.router, prefix="/products", tags=["商品"])
