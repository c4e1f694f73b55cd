import logging
import sys
import traceback

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from product_api.api.v1.api import api_router
from product_api.core.config import settings
from product_api.db.base import init_db
from product_api.infrastructure.exceptions import ProductNotFoundError
from product_api.infrastructure.response import standard_response, error_response

# 降低watchfiles日志级别，避免频繁输出
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

# 配置日志
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


async def product_not_found_handler(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=404, content=error_response(msg=str(exc), code=404))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: invalid request")
    # the rejected input is left out, it may be a value JSON cannot carry (inf, nan)
    errors = [
        {"loc": error.get("loc"), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=error_response(msg="Invalid request", code=400, data=jsonable_encoder(errors)),
    )


async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path}: constraint violation: {exc.orig}")
    return JSONResponse(
        status_code=400,
        content=error_response(msg=f"Constraint violation: {exc.orig}", code=400),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"{request.method} {request.url.path}: {str(exc)}")
    logger.error(traceback.format_exc())
    return JSONResponse(status_code=500, content=error_response(msg="Internal server error", code=500))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Product CRUD API",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(IntegrityError, integrity_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # 包含API路由
    app.include_router(api_router, prefix=settings.API_V1_STR)

    @app.on_event("startup")
    def startup_db_client():
        """
        应用启动时初始化数据库
        """
        logger.info("正在初始化数据库...")
        try:
            init_db()
            logger.info("数据库初始化成功")
        except Exception as e:
            logger.error(f"数据库初始化失败: {str(e)}")
            logger.error(traceback.format_exc())
            raise

    @app.get("/")
    def root():
        """健康检查接口"""
        return standard_response(
            data={
                "status": "online",
                "version": settings.VERSION,
            },
            msg=f"{settings.PROJECT_NAME} is running"
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("product_api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
