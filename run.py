#!/usr/bin/env python3
import logging

import uvicorn

from app.core.config import settings
from app.core.logging_config import setup_logging

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    log_filename = setup_logging(log_to_file=True)

    # 启动FastAPI应用
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"日志文件路径: {log_filename}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)
