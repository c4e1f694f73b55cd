#!/usr/bin/env python3
import uvicorn
import logging
import os
from datetime import datetime
from product_api.core.config import settings

# 配置日志
logger = logging.getLogger()
logger.setLevel(settings.LOG_LEVEL)

formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

console_handler = logging.StreamHandler()
console_handler.setLevel(settings.LOG_LEVEL)
console_handler.setFormatter(formatter)

# 清除可能已存在的处理器，然后添加新的处理器
logger.handlers = []
logger.addHandler(console_handler)

log_filename = None
if settings.LOG_TO_FILE:
    # 按启动时间生成日志文件
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_filename = os.path.join(settings.LOG_DIR, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(settings.LOG_LEVEL)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)


if __name__ == "__main__":
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    if log_filename:
        logger.info(f"日志文件路径: {log_filename}")
    if settings.IS_IN_MEMORY:
        logger.warning("Using an in-memory database: all products are lost when the process exits")
    uvicorn.run("product_api.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
