import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool

from product_api.core.config import settings

logger = logging.getLogger(__name__)

# 等待内存数据库连接的最长秒数
IN_MEMORY_POOL_TIMEOUT = 30


def _engine_options() -> dict:
    """
    根据数据库类型构造引擎参数

    An in-memory database exists only on the connection that created it, so
    the pool holds exactly that one connection and never closes it. Request
    threads check it out one at a time: a transaction owns the connection
    from its first statement until commit, rollback or close, and other
    threads wait in the pool instead of interleaving statements on it.
    """
    options = {"echo": settings.DB_ECHO}
    if settings.IS_SQLITE:
        options["connect_args"] = {"check_same_thread": False}
        if settings.IS_IN_MEMORY:
            options["poolclass"] = QueuePool
            options["pool_size"] = 1
            options["max_overflow"] = 0
            options["pool_timeout"] = IN_MEMORY_POOL_TIMEOUT
    else:
        options["pool_pre_ping"] = True
    return options


# 创建数据库引擎
engine = create_engine(settings.SQLALCHEMY_DATABASE_URI, **_engine_options())

# 创建数据库会话
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# 创建基本模型类
Base = declarative_base()


def init_db():
    """
    初始化数据库，如果表不存在则创建
    """
    if not settings.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # models must be imported so their tables are registered on Base.metadata
    from product_api.models import product  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("所有表已创建或已存在")
